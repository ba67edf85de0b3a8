"""Run a portfolio session on a terminal: key decoding and the event loop."""

from __future__ import annotations

import re
import sys
import time
from typing import Callable, Union

import blessed

from .tetris import TICK_SECONDS
from .tui import Command, Model

ENTER_ALT_SCREEN = "\x1b[?1049h\x1b[?25l"
LEAVE_ALT_SCREEN = "\x1b[?25h\x1b[?1049l"
CLEAR_SCREEN = "\x1b[H\x1b[2J"

Event = Union[str, "tuple[int, int]", None]
ReadKey = Callable[[Union[float, None]], Event]

_POLL_SECONDS = 0.1

_TOKEN_RE = re.compile(r"\r\n|\x1b\[[0-9;]*[A-Za-z~]|\x1bO[A-Za-z]|.", re.DOTALL)

_SEQUENCES = {
    "\x1b[A": "up",
    "\x1bOA": "up",
    "\x1b[B": "down",
    "\x1bOB": "down",
    "\x1b[C": "right",
    "\x1bOC": "right",
    "\x1b[D": "left",
    "\x1bOD": "left",
    "\r": "enter",
    "\n": "enter",
    "\r\n": "enter",
    "\x1b": "esc",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
}

_BLESSED_NAMES = {
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_ENTER": "enter",
    "KEY_ESCAPE": "esc",
    "KEY_TAB": "tab",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "backspace",
}


def _token_name(token: str) -> str | None:
    if token in _SEQUENCES:
        return _SEQUENCES[token]
    if token.startswith("\x1b"):
        return None
    code = ord(token)
    if 1 <= code <= 26:
        return "ctrl+" + chr(code + 96)
    if code < 32:
        return None
    return token


def decode_keys(data: bytes | str) -> list[str]:
    """Turn raw terminal input into key names such as ``"up"`` or ``"q"``."""
    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    return [
        name
        for name in (_token_name(token) for token in _TOKEN_RE.findall(text))
        if name is not None
    ]


def _frame(model: Model) -> str:
    return CLEAR_SCREEN + model.view().replace("\n", "\r\n")


def run_session(model: Model, read_key: ReadKey, write: Callable[[str], object]) -> None:
    """Drive ``model`` until it quits or input ends.

    ``read_key(timeout)`` returns a key name, a ``(width, height)`` resize, or
    ``None`` once ``timeout`` seconds passed without input; it raises
    ``EOFError`` when input is closed.
    """
    write(ENTER_ALT_SCREEN)
    try:
        write(_frame(model))
        deadline: float | None = None
        while True:
            timeout = None if deadline is None else max(deadline - time.monotonic(), 0.0)
            try:
                event = read_key(timeout)
            except EOFError:
                return
            if event is None:
                if deadline is None:
                    continue
                deadline = None
                command = model.tick()
            elif isinstance(event, tuple):
                model.resize(*event)
                command = None
            else:
                command = model.key(event)
            if command is Command.QUIT:
                return
            if command is Command.TICK:
                deadline = time.monotonic() + TICK_SECONDS
            write(_frame(model))
    finally:
        write(LEAVE_ALT_SCREEN)


class _BlessedInput:
    """Key reader over a blessed terminal that also reports size changes."""

    def __init__(self, term: blessed.Terminal) -> None:
        self._term = term
        self._size = (term.width, term.height)

    def __call__(self, timeout: float | None) -> Event:
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            size = (self._term.width, self._term.height)
            if size != self._size:
                self._size = size
                return size
            if deadline is None:
                wait = _POLL_SECONDS
            else:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return None
                wait = min(_POLL_SECONDS, remaining)
            keystroke = self._term.inkey(timeout=wait)
            if not keystroke:
                continue
            if keystroke.is_sequence:
                name = _BLESSED_NAMES.get(keystroke.name or "")
                if name is not None:
                    return name
                continue
            keys = decode_keys(str(keystroke))
            if keys:
                return keys[0]


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def run_tui() -> None:
    """Run the interactive portfolio on the local terminal."""
    term = blessed.Terminal()
    model = Model(term.width, term.height)
    with term.raw():
        run_session(model, _BlessedInput(term), _write_stdout)