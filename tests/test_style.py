import re

import pytest

from termfolio.style import Style, join_horizontal, join_vertical, visible_width

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(s):
    return ANSI.sub("", s)


def test_visible_width_ignores_sgr():
    assert visible_width("\x1b[1;38;5;45mhello\x1b[0m") == len("hello")


def test_visible_width_ignores_osc8():
    link = "\x1b]8;;https://example.com\x1b\\site\x1b]8;;\x1b\\"
    assert visible_width(link) == len("site")


def test_visible_width_wide_chars():
    assert visible_width("日本") == 4


def test_visible_width_multiline_takes_widest():
    assert visible_width("ab\nabcdef\nabc") == len("abcdef")


def test_plain_style_returns_text_unchanged():
    assert Style().render("   ") == "   "
    assert Style().render("hello") == "hello"


def test_foreground_emits_truecolor():
    out = Style(foreground="#ff0000").render("x")
    assert out == "\x1b[38;2;255;0;0mx\x1b[0m"


def test_bold_and_background_keep_text():
    out = Style(bold=True, background="#89dceb").render("  ")
    assert plain(out) == "  "
    assert "48;2;137;220;235" in out


def test_border_wraps_block_with_consistent_widths():
    out = Style(border=True, padding=(0, 1)).render("ab\nabcd")
    lines = out.split("\n")
    assert len(lines) == 4
    widths = {visible_width(line) for line in lines}
    assert widths == {len("abcd") + 4}
    assert lines[0].startswith("╭") and lines[-1].endswith("╯")
    assert plain(lines[1]) == "│ ab   │"


def test_vertical_padding_adds_blank_rows():
    out = Style(padding=(1, 0)).render("hi")
    assert out.split("\n") == ["  ", "hi", "  "]


def test_width_wraps_and_pads_lines():
    text = "one two three four five six seven eight"
    out = Style(width=12).render(text)
    lines = out.split("\n")
    assert len(lines) > 1
    assert all(visible_width(line) == 12 for line in lines)
    assert " ".join(plain(line).strip() for line in lines) == text


def test_width_breaks_long_words():
    out = Style(width=4).render("abcdefghij")
    assert "".join(line.strip() for line in out.split("\n")) == "abcdefghij"
    assert all(visible_width(line) == 4 for line in out.split("\n"))


def test_join_vertical_pads_to_widest():
    out = join_vertical("a", "", "abc")
    assert out.split("\n") == ["a  ", "   ", "abc"]


def test_join_vertical_empty():
    assert join_vertical() == ""


def test_join_horizontal_top_aligned():
    out = join_horizontal("a\nb\nc", "  ", "xy")
    assert out.split("\n") == ["a  xy", "b    ", "c    "]


@pytest.mark.parametrize("blocks", [("ab", "c\nd"), ("x\ny\nz", "long line")])
def test_join_horizontal_width_is_sum(blocks):
    out = join_horizontal(*blocks)
    assert visible_width(out) == sum(visible_width(b) for b in blocks)
    assert len(out.split("\n")) == max(len(b.split("\n")) for b in blocks)