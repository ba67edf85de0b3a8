"""ANSI-coloured résumé page for curl and escape-aware terminals."""

from __future__ import annotations

from itertools import zip_longest

from . import content
from .content import split_lines

ANSI_RESET = "\x1b[0m"
ANSI_ST = "\x1b\\"  # string terminator for OSC sequences

_HERO_PALETTE = (45, 39, 38, 37, 43, 214, 220, 214, 208, 202, 196, 160)
_NAME_COLUMN = 65
_EMPTY_NAME_PAD = 55
_SECTION_WIDTH = 56


def ansi256(fg: int, s: str) -> str:
    """Colour ``s`` with 256-colour foreground ``fg``."""
    return f"\x1b[38;5;{fg}m{s}{ANSI_RESET}"


def ansi_bold256(fg: int, s: str) -> str:
    """Bold ``s`` in 256-colour foreground ``fg``."""
    return f"\x1b[1;38;5;{fg}m{s}{ANSI_RESET}"


def osc8(url: str, text: str) -> str:
    """Wrap ``text`` as an OSC 8 hyperlink to ``url``."""
    return "\x1b]8;;" + url + ANSI_ST + text + "\x1b]8;;" + ANSI_ST


def hr_color(width: int, label: str, label_fg: int) -> str:
    """A horizontal rule with a bold label centred in it."""
    if width < 8:
        width = 52
    inner = max(width - len(label.encode("utf-8")) - 2, 4)
    left = inner // 2
    right = inner - left
    return (
        ansi256(109, "─" * left)
        + ansi_bold256(label_fg, f" {label} ")
        + ansi256(109, "─" * right)
    )


def resume_hero() -> str:
    """Large name banner beside the logo, followed by the tagline."""
    name_lines = split_lines(content.NAME_TOP) + split_lines(content.NAME_BOTTOM)
    logo_lines = split_lines(content.BATMAN_LOGO)

    parts: list[str] = []
    for i, (name, logo) in enumerate(zip_longest(name_lines, logo_lines)):
        if name is not None:
            colour = _HERO_PALETTE[i % len(_HERO_PALETTE)]
            parts.append(ansi_bold256(colour, name))
            padding = _NAME_COLUMN - len(name)
            if padding > 0:
                parts.append(" " * padding)
        else:
            parts.append(" " * _EMPTY_NAME_PAD)
        if logo is not None:
            parts.append(ansi_bold256(226, logo))
        parts.append("\n")

    parts.append("\n")
    parts.append(ansi256(246, "  "))
    parts.append(ansi_bold256(86, "Software engineer"))
    parts.append(ansi256(246, "  ·  "))
    parts.append(ansi_bold256(86, "Systems designer"))
    parts.append("\n")
    return "".join(parts)


def prefixed_lines(prefix: str, fg: int, text: str) -> str:
    """Colour each line of ``text`` with ``prefix`` prepended, one per output line."""
    return "".join(
        ansi256(fg, prefix + line) + "\n" for line in text.rstrip("\n").split("\n")
    )


def _section(label: str, label_fg: int, body: str) -> str:
    return (
        hr_color(_SECTION_WIDTH, label, label_fg)
        + "\n"
        + prefixed_lines("     ", 252, body)
        + "\n"
    )


def curl_page() -> str:
    """The full résumé page served to curl."""
    parts = [resume_hero(), "\n"]

    parts.append(ansi_bold256(213, "  ✦  " + content.WELCOME_TITLE))
    parts.append("\n")
    parts.extend(
        ansi256(252, "     " + line) + "\n" for line in content.WELCOME_BODY.split("\n")
    )
    parts.append("\n")

    parts.append(_section("Introduction", 117, content.INTRO_BLURB))
    parts.append(_section("Education", 75, content.EDUCATION_BLOCK))
    parts.append(_section("Technical skills", 141, content.SKILLS_BLOCK))
    parts.append(_section("Experience", 114, content.EXPERIENCE_BLOCK))
    parts.append(_section("Projects", 220, content.PROJECTS_BLOCK))

    parts += [
        ansi256(246, "     "),
        ansi_bold256(220, "Links  "),
        ansi_bold256(117, osc8(content.GOCHESS_DEMO_URL, "GoChess (demo / repo)")),
        ansi256(240, "   "),
        ansi_bold256(117, osc8(content.PYGIT_URL, "PyGit")),
        ansi256(240, "   "),
        ansi_bold256(117, osc8(content.PACMAN_RL_URL, "Pacman RL")),
        "\n\n",
    ]

    parts += [
        hr_color(_SECTION_WIDTH, "Contact", 86),
        "\n",
        ansi256(252, "     "),
        ansi_bold256(117, osc8(content.GMAIL_URL, "Email")),
        ansi256(252, "  .  "),
        ansi_bold256(84, osc8(content.GITHUB_URL, "GitHub")),
        ansi256(240, "  ·  "),
        ansi_bold256(33, osc8(content.LINKEDIN_URL, "LinkedIn")),
        ansi256(240, "  ·  "),
        ansi_bold256(117, osc8(content.TWITTER_URL, "X / Twitter")),
        "\n",
        ansi256(252, "     "),
        ansi256(240, "Tip: clickable links need a terminal that supports OSC 8 hyperlinks."),
        "\n\n",
    ]
    return "".join(parts)