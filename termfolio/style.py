"""Minimal terminal styling: colours, borders, padding, wrapping and block joins."""

from __future__ import annotations

import re
from dataclasses import dataclass

from wcwidth import wcswidth, wcwidth

_ANSI_RE = re.compile(
    r"\x1b\[[0-9;?]*[ -/]*[@-~]"  # CSI sequences (SGR and friends)
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"  # OSC sequences
)

_ROUNDED = {
    "top_left": "╭",
    "top_right": "╮",
    "bottom_left": "╰",
    "bottom_right": "╯",
    "horizontal": "─",
    "vertical": "│",
}

_RESET = "\x1b[0m"


def _strip_ansi(s: str) -> str:
    return _ANSI_RE.sub("", s)


def _line_width(line: str) -> int:
    plain = _strip_ansi(line)
    width = wcswidth(plain)
    if width >= 0:
        return width
    return sum(max(wcwidth(ch), 0) for ch in plain)


def visible_width(s: str) -> int:
    """Display width of the widest line of ``s``, ignoring escape sequences."""
    return max((_line_width(line) for line in s.split("\n")), default=0)


def _pad_right(line: str, width: int) -> str:
    return line + " " * max(width - _line_width(line), 0)


def _hard_break(word: str, width: int) -> list[str]:
    if "\x1b" in word or _line_width(word) <= width:
        return [word]
    chunks: list[str] = []
    current = ""
    for ch in word:
        if current and _line_width(current + ch) > width:
            chunks.append(current)
            current = ch
        else:
            current += ch
    if current:
        chunks.append(current)
    return chunks


def _wrap(line: str, width: int) -> list[str]:
    if _line_width(line) <= width:
        return [line]
    out: list[str] = []
    current = ""
    for word in line.split(" "):
        candidate = word if not current else f"{current} {word}"
        if not current or _line_width(candidate) <= width:
            current = candidate
        else:
            out.append(current)
            current = word
    out.append(current)
    return [piece for part in out for piece in _hard_break(part, width)]


def _color_params(color: str, base: int) -> str:
    value = color.lstrip("#")
    r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    return f"{base};2;{r};{g};{b}"


def _sgr(line: str, params: list[str]) -> str:
    if not params or not line:
        return line
    return f"\x1b[{';'.join(params)}m{line}{_RESET}"


@dataclass(frozen=True)
class Style:
    """How a block of text is drawn: colours, weight, padding, width and border."""

    bold: bool = False
    foreground: str | None = None
    background: str | None = None
    border: bool = False
    border_foreground: str | None = None
    padding: tuple[int, int] = (0, 0)
    width: int | None = None

    def _text_params(self) -> list[str]:
        params: list[str] = []
        if self.bold:
            params.append("1")
        if self.foreground:
            params.append(_color_params(self.foreground, 38))
        if self.background:
            params.append(_color_params(self.background, 48))
        return params

    def render(self, text: str) -> str:
        """Draw ``text`` with this style and return the resulting block."""
        pad_v, pad_h = self.padding
        lines = text.split("\n")
        if self.width is not None:
            inner = max(self.width - 2 * pad_h, 1)
            lines = [wrapped for line in lines for wrapped in _wrap(line, inner)]
        content_w = max(_line_width(line) for line in lines)
        if self.width is not None:
            content_w = max(content_w, self.width - 2 * pad_h)

        params = self._text_params()
        side = " " * pad_h
        body = [
            side + _pad_right(_sgr(line, params), content_w) + side for line in lines
        ]
        blank = " " * (content_w + 2 * pad_h)
        body = [blank] * pad_v + body + [blank] * pad_v

        if self.border:
            border_params = (
                [_color_params(self.border_foreground, 38)]
                if self.border_foreground
                else []
            )
            inner_w = content_w + 2 * pad_h
            top = _sgr(
                _ROUNDED["top_left"] + _ROUNDED["horizontal"] * inner_w + _ROUNDED["top_right"],
                border_params,
            )
            bottom = _sgr(
                _ROUNDED["bottom_left"]
                + _ROUNDED["horizontal"] * inner_w
                + _ROUNDED["bottom_right"],
                border_params,
            )
            edge = _sgr(_ROUNDED["vertical"], border_params)
            body = [top] + [edge + line + edge for line in body] + [bottom]

        return "\n".join(body)


def join_vertical(*args: str) -> str:
    """Stack blocks top to bottom, left-aligned and padded to the widest line."""
    lines = [line for block in args for line in block.split("\n")]
    if not lines:
        return ""
    width = max(_line_width(line) for line in lines)
    return "\n".join(_pad_right(line, width) for line in lines)


def join_horizontal(*args: str) -> str:
    """Place blocks side by side, aligned to their top edges."""
    if not args:
        return ""
    blocks = [block.split("\n") for block in args]
    widths = [max(_line_width(line) for line in block) for block in blocks]
    height = max(len(block) for block in blocks)
    rows = []
    for row in range(height):
        rows.append(
            "".join(
                _pad_right(block[row] if row < len(block) else "", width)
                for block, width in zip(blocks, widths)
            )
        )
    return "\n".join(rows)