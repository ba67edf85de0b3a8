"""HTTP server that returns the ANSI résumé page to curl."""

from __future__ import annotations

import errno
import logging
import socket
import sys
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from .ansi import curl_page

log = logging.getLogger(__name__)

DEFAULT_ADDR = ":8080"
_FALLBACK_PORTS = range(8081, 8100)
_WSAEADDRINUSE = 10048
_PLAIN = "text/plain; charset=utf-8"


class ResumeHandler(BaseHTTPRequestHandler):
    """Serves the résumé at ``/`` and ``/terminal``; GET only."""

    server_version = "termfolio"

    def _send(self, status: HTTPStatus, body: str, content_type: str, **headers: str) -> None:
        data = body.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(data)))
        for name, value in headers.items():
            self.send_header(name.replace("_", "-"), value)
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(data)

    def _error(self, status: HTTPStatus, message: str) -> None:
        self._send(status, message + "\n", _PLAIN, X_Content_Type_Options="nosniff")

    def do_GET(self) -> None:
        path = urlsplit(self.path).path
        if path == "/terminal/":
            self._send(
                HTTPStatus.MOVED_PERMANENTLY,
                '<a href="/terminal">Moved Permanently</a>.\n\n',
                "text/html; charset=utf-8",
                Location="/terminal",
            )
        elif path in ("/", "/terminal"):
            self._send(HTTPStatus.OK, curl_page(), _PLAIN)
        else:
            self._error(HTTPStatus.NOT_FOUND, "404 page not found")

    def _method_not_allowed(self) -> None:
        self._error(HTTPStatus.METHOD_NOT_ALLOWED, "method not allowed")

    do_HEAD = do_POST = do_PUT = do_DELETE = do_PATCH = do_OPTIONS = _method_not_allowed

    def log_message(self, format: str, *args: object) -> None:
        log.debug("%s " + format, self.address_string(), *args)


def parse_addr(addr: str) -> tuple[str, int]:
    """Split ``host:port`` (host may be empty or bracketed IPv6) into its parts."""
    host, sep, port = addr.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {addr!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"too many colons in address {addr!r}")
    try:
        number = int(port)
    except ValueError:
        raise ValueError(f"invalid port {port!r} in address {addr!r}") from None
    if not 0 <= number <= 65535:
        raise ValueError(f"port out of range in address {addr!r}")
    return host, number


def is_addr_in_use(err: BaseException | None) -> bool:
    """Whether ``err`` reports that the address is already bound."""
    if err is None:
        return False
    if isinstance(err, OSError) and err.errno in (errno.EADDRINUSE, _WSAEADDRINUSE):
        return True
    message = str(err).lower()
    return (
        "only one usage of each socket address" in message
        or "address already in use" in message
    )


def _bind(addr: str) -> socket.socket:
    host, port = parse_addr(addr)
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    return socket.create_server((host, port), family=family)


def listen_tcp(preferred_addr: str) -> tuple[socket.socket, str]:
    """Bind ``preferred_addr``; if that is ``:8080`` and busy, try ``:8081`` to ``:8099``."""
    candidates = [preferred_addr]
    if preferred_addr == DEFAULT_ADDR:
        candidates += [f":{port}" for port in _FALLBACK_PORTS]

    first_error: OSError | None = None
    for addr in candidates:
        try:
            return _bind(addr), addr
        except OSError as exc:
            if first_error is None:
                first_error = exc
            if preferred_addr != DEFAULT_ADDR or not is_addr_in_use(exc):
                break
    assert first_error is not None
    raise OSError(
        first_error.errno,
        f"{first_error.strerror or first_error} "
        "(if you need a specific port, use e.g. -addr :3000)",
    ) from first_error


def run_server(preferred_addr: str) -> None:
    """Serve the résumé over HTTP until the process ends."""
    sock, bound = listen_tcp(preferred_addr)
    port = sock.getsockname()[1]
    curl_base = f"http://127.0.0.1:{port}"

    log.info("listening on %s", bound)
    if bound != preferred_addr:
        log.info("(%s was busy; using %s instead)", preferred_addr, bound)
    if sys.platform == "win32":
        print("resume (PowerShell: use curl.exe): curl.exe -s " + curl_base + "/", flush=True)
        print("same at /terminal: curl.exe -s " + curl_base + "/terminal", flush=True)
    else:
        print("resume: curl -s " + curl_base + "/", flush=True)
        print("same at /terminal: curl -s " + curl_base + "/terminal", flush=True)

    httpd = ThreadingHTTPServer(sock.getsockname()[:2], ResumeHandler, bind_and_activate=False)
    httpd.socket.close()
    httpd.socket = sock
    with httpd:
        httpd.serve_forever()