"""SSH server that runs the interactive portfolio for each connecting terminal."""

from __future__ import annotations

import logging
import os
import signal
import socket
import threading
import time
from collections import deque
from pathlib import Path
from typing import Mapping

import paramiko
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, NoEncryption, PrivateFormat

from .server import parse_addr
from .terminal import Event, decode_keys, run_session
from .tui import Model

log = logging.getLogger(__name__)

DEFAULT_SSH_PORT = "2222"
HOST_KEY_PATH = ".ssh/term_ed25519"
_TIMEOUT = 30.0
_POLL_SECONDS = 0.1


def resolve_ssh_addr(addr: str = "", environ: Mapping[str, str] | None = None) -> str:
    """The SSH listen address: ``addr``, else ``:$SSH_PORT``, else ``:2222``."""
    if addr:
        return addr
    environ = os.environ if environ is None else environ
    return ":" + (environ.get("SSH_PORT") or DEFAULT_SSH_PORT)


def ensure_host_key(path: str | os.PathLike[str] = HOST_KEY_PATH) -> paramiko.PKey:
    """Load the Ed25519 host key at ``path``, generating it first if missing."""
    path = Path(path)
    if not path.exists():
        path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        log.info("Generating new SSH host key path=%s", path)
        pem = Ed25519PrivateKey.generate().private_bytes(
            Encoding.PEM, PrivateFormat.OpenSSH, NoEncryption()
        )
        with os.fdopen(os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600), "wb") as fh:
            fh.write(pem)
    return paramiko.Ed25519Key.from_private_key_file(str(path))


class SessionInterface(paramiko.ServerInterface):
    """Accepts any user and one interactive shell, recording terminal size."""

    def __init__(self) -> None:
        self.shell_requested = threading.Event()
        self.pty_size: tuple[int, int] | None = None
        self.resizes: deque[tuple[int, int]] = deque()

    def check_channel_request(self, kind: str, chanid: int) -> int:
        if kind == "session":
            return paramiko.OPEN_SUCCEEDED
        return paramiko.OPEN_FAILED_ADMINISTRATIVELY_PROHIBITED

    def check_auth_none(self, username: str) -> int:
        return paramiko.AUTH_SUCCESSFUL

    def check_channel_pty_request(
        self, channel, term, width, height, pixelwidth, pixelheight, modes
    ) -> bool:
        self.pty_size = (width, height)
        return True

    def check_channel_shell_request(self, channel) -> bool:
        self.shell_requested.set()
        return True

    def check_channel_window_change_request(
        self, channel, width, height, pixelwidth, pixelheight
    ) -> bool:
        self.resizes.append((width, height))
        return True


class _ChannelInput:
    """Key reader over an SSH channel, also reporting window changes."""

    def __init__(self, channel: paramiko.Channel, iface: SessionInterface) -> None:
        self._channel = channel
        self._iface = iface
        self._pending: deque[str] = deque()

    def __call__(self, timeout: float | None) -> Event:
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            if self._iface.resizes:
                return self._iface.resizes.popleft()
            if self._pending:
                return self._pending.popleft()
            wait = _POLL_SECONDS
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return None
                wait = min(wait, remaining)
            self._channel.settimeout(wait)
            try:
                data = self._channel.recv(1024)
            except socket.timeout:
                continue
            if not data:
                raise EOFError
            self._pending.extend(decode_keys(data))


def _handle_connection(
    conn: socket.socket, peer: object, host_key: paramiko.PKey, transports: set
) -> None:
    transport = paramiko.Transport(conn)
    transports.add(transport)
    try:
        transport.add_server_key(host_key)
        iface = SessionInterface()
        transport.start_server(server=iface)
        channel = transport.accept(_TIMEOUT)
        if channel is None:
            return
        started = time.monotonic()
        user = transport.get_username()
        log.info("%s connect %s", user, peer)
        if not iface.shell_requested.wait(_TIMEOUT):
            channel.close()
            return
        if iface.pty_size is None:
            channel.sendall_stderr(b"no terminal detected\n")
            channel.send_exit_status(1)
            channel.close()
            return
        run_session(
            Model(*iface.pty_size),
            _ChannelInput(channel, iface),
            lambda text: channel.sendall(text.encode("utf-8")),
        )
        channel.send_exit_status(0)
        channel.close()
        log.info("%s disconnect %.1fs", user, time.monotonic() - started)
    except (paramiko.SSHException, OSError, EOFError) as exc:
        log.debug("connection from %s ended: %s", peer, exc)
    finally:
        transport.close()
        transports.discard(transport)


def run_ssh_server(addr: str = "") -> None:
    """Serve the portfolio over SSH until SIGINT or SIGTERM."""
    addr = resolve_ssh_addr(addr)
    try:
        host_key = ensure_host_key(HOST_KEY_PATH)
        host, port = parse_addr(addr)
        family = socket.AF_INET6 if ":" in host else socket.AF_INET
        listener = socket.create_server((host, port), family=family)
    except (OSError, ValueError, paramiko.SSHException) as exc:
        log.error("Could not start server err=%s", exc)
        return

    done = threading.Event()
    previous = {}
    if threading.current_thread() is threading.main_thread():
        for sig in (signal.SIGINT, signal.SIGTERM):
            previous[sig] = signal.signal(sig, lambda signum, frame: done.set())

    transports: set = set()
    workers: list[threading.Thread] = []

    def accept_loop() -> None:
        while not done.is_set():
            try:
                conn, peer = listener.accept()
            except OSError as exc:
                if not done.is_set():
                    log.error("Could not start server err=%s", exc)
                    done.set()
                return
            worker = threading.Thread(
                target=_handle_connection, args=(conn, peer, host_key, transports), daemon=True
            )
            workers.append(worker)
            worker.start()

    log.info("Starting SSH server address=%s", addr)
    threading.Thread(target=accept_loop, daemon=True).start()
    try:
        while not done.wait(0.5):
            pass
    finally:
        log.info("Stopping SSH server")
        done.set()
        listener.close()
        for transport in list(transports):
            transport.close()
        deadline = time.monotonic() + _TIMEOUT
        for worker in workers:
            worker.join(max(deadline - time.monotonic(), 0))
        for sig, handler in previous.items():
            signal.signal(sig, handler)