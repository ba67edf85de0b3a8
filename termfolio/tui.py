"""The interactive portfolio: home menu, about page, contacts and Tetris."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from . import content
from .browser import open_url
from .style import Style, join_horizontal, join_vertical
from .tetris import PieceKind, TetrisGame

COL_ROSE = "#f5c2e7"
COL_SKY = "#89dceb"
COL_BLUE = "#89b4fa"
COL_TEXT = "#cdd6f4"
COL_SUBTEXT = "#a6adc8"
COL_GREEN = "#a6e3a1"
COL_PEACH = "#fab387"
COL_MAUVE = "#cba6f7"

HOME_MENU = ("About", "Contacts", "Tetris", "Quit")
CONTACT_MENU = ("GitHub", "LinkedIn", "Twitter", "« Back to main menu")

_CONTACT_LINKS = (
    (content.GITHUB_URL, "Opened GitHub in your browser."),
    (content.LINKEDIN_URL, "Opened LinkedIn in your browser."),
    (content.TWITTER_URL, "Opened Twitter / X in your browser."),
)

_PIECE_COLOURS = {
    PieceKind.I: COL_SKY,
    PieceKind.O: COL_PEACH,
    PieceKind.T: COL_MAUVE,
    PieceKind.S: COL_GREEN,
    PieceKind.Z: COL_ROSE,
    PieceKind.J: COL_BLUE,
    PieceKind.L: COL_TEXT,
}

_SUBTEXT = Style(foreground=COL_SUBTEXT)
_TEXT = Style(foreground=COL_TEXT)
_SELECTED = Style(foreground=COL_GREEN, bold=True)
_HEADING = Style(bold=True, foreground=COL_PEACH)


def _boxed(colour: str, text: str, **extra: object) -> str:
    return Style(border=True, border_foreground=colour, padding=(0, 1), **extra).render(text)


class Pane(Enum):
    """Which screen is showing."""

    HOME = "home"
    ABOUT = "about"
    TETRIS = "tetris"
    CONTACT = "contact"


class Command(Enum):
    """What the caller should do after an update."""

    QUIT = "quit"
    TICK = "tick"  # schedule a gravity tick after the Tetris interval


class Model:
    """State of one portfolio session and its key handling and rendering."""

    def __init__(
        self, width: int = 0, height: int = 0, opener: Callable[[str], object] | None = None
    ) -> None:
        self.pane = Pane.HOME
        self.cursor = 0
        self.contact_cursor = 0
        self.width = width
        self.height = height
        self.status = ""
        self.tetris: TetrisGame | None = None
        self._opener = opener or open_url

    def resize(self, width: int, height: int) -> None:
        """Record a new terminal size, rebuilding the well if Tetris is showing."""
        self.width, self.height = width, height
        if self.pane is Pane.TETRIS and self.tetris is not None:
            self.tetris.resize(width, height)

    def tick(self) -> Command | None:
        """Apply one gravity step; returns TICK while the game should keep running."""
        if self.pane is not Pane.TETRIS or self.tetris is None or self.tetris.game_over():
            return None
        self.tetris.tick_gravity()
        return Command.TICK

    def key(self, key: str) -> Command | None:
        """Handle a key name such as ``"up"``, ``"enter"`` or ``"q"``."""
        if self.pane is Pane.HOME:
            return self._key_home(key)
        if self.pane is Pane.TETRIS:
            return self._key_tetris(key)
        if self.pane is Pane.CONTACT:
            return self._key_contact(key)
        if key in ("b", "esc"):
            self._go_home()
        return None

    def _go_home(self) -> None:
        self.pane = Pane.HOME
        self.status = ""

    def _key_home(self, key: str) -> Command | None:
        if key in ("ctrl+c", "q"):
            return Command.QUIT
        if key in ("up", "k"):
            self.cursor = max(self.cursor - 1, 0)
        elif key in ("down", "j"):
            self.cursor = min(self.cursor + 1, len(HOME_MENU) - 1)
        elif key == "enter":
            if self.cursor == 0:
                self.pane = Pane.ABOUT
            elif self.cursor == 1:
                self.pane, self.contact_cursor, self.status = Pane.CONTACT, 0, ""
            elif self.cursor == 2:
                self.pane, self.status = Pane.TETRIS, ""
                self.tetris = TetrisGame(self.width, self.height)
                return Command.TICK
            else:
                return Command.QUIT
        return None

    def _key_tetris(self, key: str) -> Command | None:
        if key in ("b", "esc"):
            self._go_home()
            return None
        if key in ("ctrl+c", "q"):
            return Command.QUIT
        game = self.tetris
        if game is None:
            return None
        if key == "left":
            game.move_left()
        elif key == "right":
            game.move_right()
        elif key in ("a", "s"):
            game.rotate_cw()
        elif key in ("down", "j"):
            game.soft_drop()
        elif key in ("r", "enter") and game.game_over():
            game.retry(self.width, self.height)
            return Command.TICK
        return None

    def _key_contact(self, key: str) -> Command | None:
        if key in ("ctrl+c", "q"):
            return Command.QUIT
        if key in ("up", "k"):
            self.contact_cursor = max(self.contact_cursor - 1, 0)
        elif key in ("down", "j"):
            self.contact_cursor = min(self.contact_cursor + 1, len(CONTACT_MENU) - 1)
        elif key == "enter" and self.contact_cursor < len(_CONTACT_LINKS):
            url, self.status = _CONTACT_LINKS[self.contact_cursor]
            try:
                self._opener(url)
            except OSError:
                pass
        elif key in ("enter", "b", "esc"):
            self._go_home()
        return None

    def view(self) -> str:
        """Render the current screen."""
        title = Style(bold=True, foreground=COL_ROSE).render(content.SITE_DOMAIN)
        sub = _SUBTEXT.render("terminal portfolio")
        render = {
            Pane.ABOUT: self._view_about,
            Pane.CONTACT: self._view_contact,
            Pane.TETRIS: self._view_tetris,
        }.get(self.pane, self._view_home)
        return render(title, sub)

    def _hero_block(self) -> str:
        left = Style(foreground=COL_SKY).render(content.ASCII_LEFT_PANEL)
        world_cat = join_vertical(
            Style(bold=True, foreground=COL_MAUVE).render(content.ASCII_HELLO_LETTERS.strip()),
            Style(foreground=COL_GREEN).render(content.ASCII_WORLD_LINE.strip()),
            "",
            Style(foreground=COL_PEACH).render(content.CAT_ASCII.strip()),
        )
        if self.width >= 74:
            return join_horizontal(left, "   ", world_cat)
        return join_vertical(left, "", world_cat)

    @staticmethod
    def _menu_rows(items: tuple[str, ...], selected: int) -> list[str]:
        return [
            _SELECTED.render("› " + item) if i == selected else _TEXT.render("  " + item)
            for i, item in enumerate(items)
        ]

    def _view_home(self, title: str, sub: str) -> str:
        hello_box = _boxed(
            COL_BLUE,
            Style(bold=True, foreground=COL_MAUVE).render("✦ " + content.WELCOME_TITLE)
            + "\n"
            + Style(foreground=COL_TEXT, width=max(20, self.width - 8)).render(
                content.WELCOME_BODY
            ),
        )
        parts = [
            join_vertical(title, sub, ""),
            join_vertical(_boxed(COL_SKY, self._hero_block()), "", hello_box, ""),
            Style(foreground=COL_PEACH, bold=True).render("Menu"),
            "\n".join(self._menu_rows(HOME_MENU, self.cursor)),
        ]
        if self.status:
            parts += ["", Style(foreground=COL_PEACH).render(self.status)]
        parts += ["", _SUBTEXT.render("↑/↓ or j/k · Enter · q quit")]
        return join_vertical(*parts)

    def _view_about(self, title: str, sub: str) -> str:
        box = _boxed(
            COL_MAUVE, content.ABOUT_TEXT, width=max(20, self.width - 4), foreground=COL_TEXT
        )
        return join_vertical(
            title, sub, "", _HEADING.render("About"), "", box, "",
            _SUBTEXT.render("b or esc — back"),
        )

    def _view_contact(self, title: str, sub: str) -> str:
        rows = self._menu_rows(CONTACT_MENU, self.contact_cursor)
        for i, (url, _) in enumerate(_CONTACT_LINKS):
            rows[i] = join_horizontal(rows[i], _SUBTEXT.render("   " + url))
        extra = "\n" + Style(foreground=COL_SKY).render(self.status) if self.status else ""
        return join_vertical(
            title, sub, "", _HEADING.render("Contacts"), "",
            _TEXT.render("Choose a platform — Enter opens in your browser."), "",
            "\n".join(rows), extra, "", _SUBTEXT.render("b or esc — back · q quit"),
        )

    def _view_tetris(self, title: str, sub: str) -> str:
        game = self.tetris
        if game is None:
            return join_vertical(
                title, sub, "", _SUBTEXT.render("Choose Tetris from the main menu."), "",
                _SUBTEXT.render("b or esc — back"),
            )

        empty_cell = _SUBTEXT.render("· ")
        empty_preview = _SUBTEXT.render("  ")

        def cell(kind: PieceKind) -> str:
            colour = _PIECE_COLOURS.get(kind)
            return Style(background=colour).render("  ") if colour else empty_cell

        def mini_cell(kind: PieceKind) -> str:
            return empty_preview if kind == PieceKind.NONE else cell(kind)

        side_body = join_vertical(
            Style(bold=True, foreground=COL_SKY).render("Next"),
            "\n".join(game.next_preview_lines(mini_cell)),
            "",
            _TEXT.render(f"Score {game.score}"),
            _TEXT.render(f"Lines {game.lines}"),
            "",
            _SUBTEXT.render(f"Well {game.cols}×{game.rows}"),
        )
        if game.game_over():
            side_body = join_vertical(
                side_body, "", Style(bold=True, foreground=COL_ROSE).render("Game over"),
                _SUBTEXT.render("r or Enter — retry"),
            )
        row = join_horizontal(
            _boxed(COL_GREEN, "\n".join(game.render_lines(cell))),
            "  ",
            _boxed(COL_BLUE, side_body, width=22),
        )
        head = join_vertical(title, sub, "", _HEADING.render("Tetris"), "")
        help_line = _SUBTEXT.render(
            "←/→ move · a/s rotate · ↓/j soft drop · b/esc menu · q quit · r retry (when over)"
        )
        return join_vertical(head, row, "", help_line)