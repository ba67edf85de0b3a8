"""A small Tetris game: seven-bag randomiser, SRS-style wall kicks and line scoring."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Callable, Protocol, Sequence

TICK_SECONDS = 0.6
"""Interval between gravity steps while a game is on screen."""

STANDARD_COLS = 10
STANDARD_ROWS = 20
_CHROME_LINES = 9
_MIN_ROWS = 16

Shape = tuple[tuple[bool, ...], ...]
Cell = Callable[["PieceKind"], str]


class PieceKind(IntEnum):
    """The seven tetrominoes, plus NONE for an empty cell."""

    NONE = 0
    I = 1  # noqa: E741
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


# 4x4 matrices per piece; rotation 0 is the spawn state and each further
# entry is one clockwise rotation.
_PIECE_DEFS: dict[PieceKind, tuple[tuple[str, str, str, str], ...]] = {
    PieceKind.I: (
        ("....", "####", "....", "...."),
        ("..#.", "..#.", "..#.", "..#."),
        ("....", "....", "####", "...."),
        (".#..", ".#..", ".#..", ".#.."),
    ),
    PieceKind.O: (
        (".##.", ".##.", "....", "...."),
        (".##.", ".##.", "....", "...."),
        (".##.", ".##.", "....", "...."),
        (".##.", ".##.", "....", "...."),
    ),
    PieceKind.T: (
        (".#..", "###.", "....", "...."),
        (".#..", ".##.", ".#..", "...."),
        ("....", "###.", ".#..", "...."),
        (".#..", "##..", ".#..", "...."),
    ),
    PieceKind.S: (
        (".##.", "##..", "....", "...."),
        (".#..", ".##.", "..#.", "...."),
        ("....", ".##.", "##..", "...."),
        ("..#.", ".##.", ".#..", "...."),
    ),
    PieceKind.Z: (
        ("##..", ".##.", "....", "...."),
        ("..#.", ".##.", ".#..", "...."),
        ("....", "##..", ".##.", "...."),
        (".#..", "##..", ".#..", "...."),
    ),
    PieceKind.J: (
        ("#...", "###.", "....", "...."),
        (".##.", ".#..", ".#..", "...."),
        ("....", "###.", "..#.", "...."),
        (".#..", ".#..", "##..", "...."),
    ),
    PieceKind.L: (
        ("..#.", "###.", "....", "...."),
        (".#..", ".#..", ".##.", "...."),
        ("....", "###.", "#...", "...."),
        ("##..", ".#..", ".#..", "...."),
    ),
}

_EMPTY_SHAPE: Shape = tuple((False,) * 4 for _ in range(4))

# Clockwise kick offsets (dx, dy), indexed by the rotation being left.
_JLSTZ_KICKS_CW = (
    ((0, 0), (-1, 0), (-1, -1), (0, 2), (-1, 2)),
    ((0, 0), (1, 0), (1, 1), (0, -2), (1, -2)),
    ((0, 0), (1, 0), (1, -1), (0, 2), (1, 2)),
    ((0, 0), (-1, 0), (-1, 1), (0, -2), (-1, -2)),
)

_I_KICKS_CW = (
    ((0, 0), (-2, 0), (1, 0), (-2, -1), (1, 2)),
    ((0, 0), (-1, 0), (2, 0), (-1, 2), (2, -1)),
    ((0, 0), (2, 0), (-1, 0), (2, 1), (-1, -2)),
    ((0, 0), (1, 0), (-2, 0), (1, -2), (-2, 1)),
)

_LINE_SCORES = {1: 100, 2: 300, 3: 500}
_MULTI_LINE_SCORE = 800


def _parse_grid(lines: Sequence[str]) -> Shape:
    return tuple(
        tuple(ch == "#" for ch in row[:4].ljust(4, ".")) for row in lines[:4]
    )


def piece_shape(kind: PieceKind, rot: int) -> Shape:
    """The 4x4 occupancy matrix of ``kind`` in rotation ``rot``."""
    defs = _PIECE_DEFS.get(PieceKind(kind)) if kind in PieceKind._value2member_map_ else None
    if defs is None:
        return _EMPTY_SHAPE
    return _parse_grid(defs[rot % 4])


def board_size_from_terminal(term_w: int, term_h: int) -> tuple[int, int]:
    """Well size (cols, rows) that fits a terminal of the given size."""
    cols, rows = STANDARD_COLS, STANDARD_ROWS
    if 0 < term_h < _CHROME_LINES + STANDARD_ROWS:
        rows = max(term_h - _CHROME_LINES, _MIN_ROWS)
    return cols, rows


def preview_lines(kind: PieceKind, cell: Cell) -> list[str]:
    """Render ``kind`` at spawn rotation in a 4x4 preview grid."""
    return [
        "".join(cell(kind) if filled else cell(PieceKind.NONE) for filled in row)
        for row in piece_shape(kind, 0)
    ]


class _Shuffler(Protocol):
    def shuffle(self, x: list) -> None: ...


class TetrisGame:
    """State of one Tetris game in a well sized to the terminal."""

    def __init__(
        self, term_w: int = 0, term_h: int = 0, rng: _Shuffler | None = None
    ) -> None:
        self._rng: _Shuffler = rng if rng is not None else random.Random()
        self.cols = STANDARD_COLS
        self.rows = STANDARD_ROWS
        self.board: list[list[PieceKind]] = []
        self.active = PieceKind.NONE
        self.next_piece = PieceKind.NONE
        self.rotation = 0
        self.x = 0
        self.y = 0
        self.score = 0
        self.lines = 0
        self._game_over = False
        self._bag: list[PieceKind] = []
        self.retry(term_w, term_h)

    # -- setup -------------------------------------------------------------

    def retry(self, term_w: int, term_h: int) -> None:
        """Clear the well, score and lines, and deal a fresh bag."""
        self.cols, self.rows = board_size_from_terminal(term_w, term_h)
        self._game_over = False
        self.score = 0
        self.lines = 0
        self.board = self._empty_board()
        self._bag = []
        self._refill_bag()
        self.active = self._draw_from_bag()
        self.next_piece = self._draw_from_bag()
        self._spawn()

    def resize(self, term_w: int, term_h: int) -> None:
        """Rebuild the well if the terminal size calls for a different one."""
        size = board_size_from_terminal(term_w, term_h)
        if size == (self.cols, self.rows) and len(self.board) == self.rows:
            return
        self.retry(term_w, term_h)

    def _empty_board(self) -> list[list[PieceKind]]:
        return [[PieceKind.NONE] * self.cols for _ in range(self.rows)]

    def _refill_bag(self) -> None:
        self._bag = [
            PieceKind.I,
            PieceKind.O,
            PieceKind.T,
            PieceKind.S,
            PieceKind.Z,
            PieceKind.J,
            PieceKind.L,
        ]
        self._rng.shuffle(self._bag)

    def _draw_from_bag(self) -> PieceKind:
        if not self._bag:
            self._refill_bag()
        return self._bag.pop(0)

    def _spawn(self) -> None:
        self.rotation = 0
        self.x = max((self.cols - 4) // 2, 0)
        self.y = 0
        if self._collides(self.active, self.x, self.y, self.rotation):
            self._game_over = True

    # -- geometry ----------------------------------------------------------

    @staticmethod
    def _cells(kind: PieceKind, rot: int, px: int, py: int) -> list[tuple[int, int]]:
        return [
            (px + x, py + y)
            for y, row in enumerate(piece_shape(kind, rot))
            for x, filled in enumerate(row)
            if filled
        ]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def _collides(self, kind: PieceKind, px: int, py: int, rot: int) -> bool:
        return any(
            not self._in_bounds(x, y) or self.board[y][x] != PieceKind.NONE
            for x, y in self._cells(kind, rot, px, py)
        )

    def _try_move(self, dx: int, dy: int) -> bool:
        if self._game_over:
            return False
        if self._collides(self.active, self.x + dx, self.y + dy, self.rotation):
            return False
        self.x += dx
        self.y += dy
        return True

    # -- player actions ----------------------------------------------------

    def move_left(self) -> bool:
        """Shift the active piece one column left; True if it moved."""
        return self._try_move(-1, 0)

    def move_right(self) -> bool:
        """Shift the active piece one column right; True if it moved."""
        return self._try_move(1, 0)

    def soft_drop(self) -> bool:
        """Move the active piece one row down; True if it moved."""
        return self._try_move(0, 1)

    def rotate_cw(self) -> bool:
        """Rotate clockwise, trying wall kicks in order; True if it rotated."""
        if self._game_over or self.active == PieceKind.O:
            return False
        next_rot = (self.rotation + 1) % 4
        table = _I_KICKS_CW if self.active == PieceKind.I else _JLSTZ_KICKS_CW
        for dx, dy in table[self.rotation % 4]:
            nx, ny = self.x + dx, self.y + dy
            if not self._collides(self.active, nx, ny, next_rot):
                self.x, self.y, self.rotation = nx, ny, next_rot
                return True
        return False

    def tick_gravity(self) -> None:
        """Advance one gravity step, locking and spawning when the piece lands."""
        if self._game_over or self.soft_drop():
            return
        self._lock_piece()
        self._clear_lines_and_score()
        self.active = self.next_piece
        self.next_piece = self._draw_from_bag()
        self._spawn()

    def _lock_piece(self) -> None:
        for x, y in self._cells(self.active, self.rotation, self.x, self.y):
            if self._in_bounds(x, y):
                self.board[y][x] = self.active

    def _clear_lines_and_score(self) -> None:
        kept = [row for row in self.board if PieceKind.NONE in row]
        cleared = self.rows - len(kept)
        self.board = [[PieceKind.NONE] * self.cols for _ in range(cleared)] + kept
        if cleared == 0:
            return
        self.lines += cleared
        self.score += _LINE_SCORES.get(cleared, _MULTI_LINE_SCORE)

    # -- views -------------------------------------------------------------

    def game_over(self) -> bool:
        """Whether the last spawned piece had no room."""
        return self._game_over

    def grid(self) -> list[list[PieceKind]]:
        """A copy of the well with the active piece drawn in."""
        out = [list(row) for row in self.board]
        if not self._game_over:
            for x, y in self._cells(self.active, self.rotation, self.x, self.y):
                if self._in_bounds(x, y):
                    out[y][x] = self.active
        return out

    def render_lines(self, cell: Cell) -> list[str]:
        """One string per well row, each cell rendered by ``cell``."""
        return ["".join(cell(kind) for kind in row) for row in self.grid()]

    def next_preview_lines(self, cell: Cell) -> list[str]:
        """The next piece rendered in a 4x4 preview grid."""
        return preview_lines(self.next_piece, cell)