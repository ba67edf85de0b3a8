"""Command line: interactive portfolio, or HTTP and SSH servers."""

from __future__ import annotations

import argparse
import logging
import os
import sys
import threading
from typing import Mapping, Sequence

from .server import DEFAULT_ADDR, run_server
from .ssh_server import run_ssh_server
from .terminal import run_tui

log = logging.getLogger(__name__)

_USAGE = (
    "usage: termfolio           # interactive TUI\n"
    "        termfolio -serve   # HTTP résumé for curl (or: termfolio serve)"
)


def resolve_http_addr(addr: str = "", environ: Mapping[str, str] | None = None) -> str:
    """The HTTP listen address: ``addr``, else ``0.0.0.0:$PORT``, else ``:8080``."""
    if addr:
        return addr
    port = (os.environ if environ is None else environ).get("PORT", "")
    return "0.0.0.0:" + port.strip() if port else DEFAULT_ADDR


def _serve_http(addr: str) -> None:
    try:
        run_server(addr)
    except (OSError, ValueError) as exc:
        log.critical("http server: %s", exc)
        logging.shutdown()
        os._exit(1)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the portfolio; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="termfolio", description="Terminal portfolio.")
    parser.add_argument(
        "-serve", "--serve", action="store_true", help="HTTP server for curl /terminal (plain text)."
    )
    parser.add_argument(
        "-ssh", "--ssh", default="",
        help="SSH listen address (e.g. :2222); empty uses $SSH_PORT or :2222",
    )
    parser.add_argument(
        "-addr", "--addr", default="",
        help="listen address when -serve (e.g. :8080); empty uses $PORT or :8080",
    )
    parser.add_argument("args", nargs="*", help=argparse.SUPPRESS)
    args = parser.parse_args(argv)
    rest: list[str] = args.args

    run_serve = args.serve or (len(rest) == 1 and rest[0].strip().casefold() == "serve")
    if run_serve or args.ssh:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
        if run_serve:
            threading.Thread(
                target=_serve_http, args=(resolve_http_addr(args.addr),), daemon=True
            ).start()
        run_ssh_server(args.ssh)
        return 0

    if rest:
        print("unknown arguments:", " ".join(rest), file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        return 2

    try:
        run_tui()
    except Exception as exc:  # report any terminal failure and exit non-zero
        print(exc, file=sys.stderr)
        return 1
    return 0