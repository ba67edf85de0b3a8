"""Open a URL in the user's default browser."""

from __future__ import annotations

import subprocess
import sys


def browser_command(url: str, platform: str | None = None) -> list[str]:
    """The command line that opens ``url`` on ``platform`` (defaults to this one)."""
    platform = platform or sys.platform
    if platform in ("win32", "windows"):
        return ["rundll32", "url.dll,FileProtocolHandler", url]
    return ["open" if platform == "darwin" else "xdg-open", url]


def open_url(url: str) -> subprocess.Popen:
    """Start the platform opener for ``url`` without waiting for it."""
    return subprocess.Popen(browser_command(url))