import random

import pytest

from termfolio.tetris import (
    STANDARD_COLS,
    STANDARD_ROWS,
    PieceKind,
    TetrisGame,
    board_size_from_terminal,
    piece_shape,
    preview_lines,
)


class _FixedOrder:
    """An rng whose shuffle leaves the bag in its natural order."""

    def shuffle(self, seq):
        return None


def _char(kind):
    return "." if kind == PieceKind.NONE else "#"


def _occupied(game):
    return [
        (x, y)
        for y, row in enumerate(game.grid())
        for x, kind in enumerate(row)
        if kind != PieceKind.NONE
    ]


def _drop_and_lock(game):
    while game.soft_drop():
        pass
    game.tick_gravity()


@pytest.mark.parametrize("kind", [k for k in PieceKind if k != PieceKind.NONE])
@pytest.mark.parametrize("rot", range(4))
def test_every_shape_has_four_cells(kind, rot):
    shape = piece_shape(kind, rot)
    assert sum(cell for row in shape for cell in row) == 4
    assert piece_shape(kind, rot + 4) == shape


def test_i_spawn_shape_is_second_row():
    shape = piece_shape(PieceKind.I, 0)
    assert shape[1] == (True, True, True, True)
    assert not any(shape[0]) and not any(shape[2]) and not any(shape[3])


def test_none_shape_is_empty():
    assert not any(cell for row in piece_shape(PieceKind.NONE, 0) for cell in row)


def test_preview_lines_match_definition():
    assert preview_lines(PieceKind.T, _char) == [".#..", "###.", "....", "...."]
    assert preview_lines(PieceKind.L, _char) == ["..#.", "###.", "....", "...."]


def test_board_size_standard_and_unknown():
    assert board_size_from_terminal(80, 40) == (STANDARD_COLS, STANDARD_ROWS)
    assert board_size_from_terminal(0, 0) == (STANDARD_COLS, STANDARD_ROWS)


def test_board_size_short_terminal_clamped():
    assert board_size_from_terminal(80, 20) == (STANDARD_COLS, 16)
    assert board_size_from_terminal(80, 27) == (STANDARD_COLS, 18)


def test_new_game_dimensions_follow_terminal():
    game = TetrisGame(80, 20, rng=random.Random(1))
    assert (game.cols, game.rows) == board_size_from_terminal(80, 20)
    assert len(game.grid()) == game.rows
    assert all(len(row) == game.cols for row in game.grid())


def test_bag_order_and_first_pieces():
    game = TetrisGame(rng=_FixedOrder())
    assert game.active == PieceKind.I
    assert game.next_piece == PieceKind.O
    assert game.next_preview_lines(_char) == [".##.", ".##.", "....", "...."]
    _drop_and_lock(game)
    assert game.active == PieceKind.O
    assert game.next_piece == PieceKind.T


def test_seeded_bag_deals_seven_distinct_pieces():
    game = TetrisGame(rng=random.Random(42))
    seen = [game.active]
    for _ in range(6):
        _drop_and_lock(game)
        seen.append(game.active)
    assert sorted(seen) == sorted(k for k in PieceKind if k != PieceKind.NONE)


def test_spawn_has_four_cells_and_is_centred():
    game = TetrisGame(rng=random.Random(3))
    cells = _occupied(game)
    assert len(cells) == 4
    assert game.x == (game.cols - 4) // 2
    assert game.y == 0 and game.rotation == 0


def test_move_left_stops_at_wall():
    game = TetrisGame(rng=random.Random(5))
    while game.move_left():
        pass
    assert min(x for x, _ in _occupied(game)) == 0
    assert game.move_left() is False


def test_move_right_stops_at_wall():
    game = TetrisGame(rng=random.Random(5))
    while game.move_right():
        pass
    assert max(x for x, _ in _occupied(game)) == game.cols - 1
    assert game.move_right() is False


def test_soft_drop_reaches_floor():
    game = TetrisGame(rng=random.Random(9))
    while game.soft_drop():
        pass
    assert max(y for _, y in _occupied(game)) == game.rows - 1
    assert game.soft_drop() is False


def test_o_piece_does_not_rotate():
    game = TetrisGame(rng=_FixedOrder())
    _drop_and_lock(game)
    assert game.active == PieceKind.O
    assert game.rotate_cw() is False
    assert game.rotation == 0


def test_four_rotations_return_to_start():
    game = TetrisGame(rng=_FixedOrder())
    _drop_and_lock(game)
    _drop_and_lock(game)
    assert game.active == PieceKind.T
    game.soft_drop()
    game.soft_drop()
    before = _occupied(game)
    for _ in range(4):
        assert game.rotate_cw() is True
    assert game.rotation == 0
    assert _occupied(game) == before


def test_i_rotation_kicks_off_left_wall():
    game = TetrisGame(rng=_FixedOrder())
    game.rotation, game.x, game.y = 3, -1, 5
    assert min(x for x, _ in _occupied(game)) == 0
    assert game.rotate_cw() is True
    assert game.rotation == 0
    assert game.x == 0
    assert min(x for x, _ in _occupied(game)) == 0


@pytest.mark.parametrize(
    "count, points", [(1, 100), (2, 300), (3, 500), (4, 800)]
)
def test_line_clear_scoring(count, points):
    game = TetrisGame(rng=_FixedOrder())
    for y in range(game.rows - count, game.rows):
        for x in range(1, game.cols):
            game.board[y][x] = PieceKind.O
    game.rotation, game.x, game.y = 3, -1, 0
    _drop_and_lock(game)
    assert game.lines == count
    assert game.score == points
    assert all(PieceKind.NONE in row for row in game.board)


def test_tetris_clears_the_well():
    game = TetrisGame(rng=_FixedOrder())
    for y in range(game.rows - 4, game.rows):
        for x in range(1, game.cols):
            game.board[y][x] = PieceKind.Z
    game.rotation, game.x, game.y = 3, -1, 0
    _drop_and_lock(game)
    assert all(kind == PieceKind.NONE for row in game.board for kind in row)
    assert len(_occupied(game)) == 4


def test_single_line_clear_with_horizontal_i():
    game = TetrisGame(rng=_FixedOrder())
    bottom = game.rows - 1
    for x in range(game.cols):
        if not 3 <= x <= 6:
            game.board[bottom][x] = PieceKind.J
    _drop_and_lock(game)
    assert game.lines == 1
    assert game.score == 100
    assert all(kind == PieceKind.NONE for kind in game.board[bottom])


def _blocked_game():
    game = TetrisGame(rng=_FixedOrder())
    for x in range(game.cols - 1):
        game.board[2][x] = PieceKind.O
    game.tick_gravity()
    return game


def test_game_over_when_spawn_blocked():
    game = _blocked_game()
    assert game.game_over() is True
    assert game.move_left() is False
    assert game.move_right() is False
    assert game.soft_drop() is False
    assert game.rotate_cw() is False
    assert all(kind == PieceKind.NONE for kind in game.grid()[0])


def test_tick_does_nothing_after_game_over():
    game = _blocked_game()
    before = game.grid()
    game.tick_gravity()
    assert game.grid() == before
    assert game.game_over() is True


def test_retry_resets_state():
    game = _blocked_game()
    game.score = 300
    game.lines = 2
    game.retry(80, 40)
    assert game.game_over() is False
    assert game.score == 0 and game.lines == 0
    assert all(kind == PieceKind.NONE for row in game.board for kind in row)
    assert len(_occupied(game)) == 4


def test_resize_same_size_keeps_state():
    game = TetrisGame(80, 40, rng=random.Random(2))
    game.score = 500
    game.soft_drop()
    y = game.y
    game.resize(120, 50)
    assert game.score == 500
    assert game.y == y


def test_resize_new_size_restarts():
    game = TetrisGame(80, 40, rng=random.Random(2))
    game.score = 500
    game.resize(80, 20)
    assert game.rows == board_size_from_terminal(80, 20)[1]
    assert game.score == 0
    assert len(game.board) == game.rows


def test_render_lines_shape_and_content():
    game = TetrisGame(rng=_FixedOrder())
    lines = game.render_lines(_char)
    assert len(lines) == game.rows
    assert all(len(line) == game.cols for line in lines)
    assert lines[1] == "...####..."
    assert "".join(lines).count("#") == 4


def test_grid_is_a_copy():
    game = TetrisGame(rng=random.Random(4))
    grid = game.grid()
    grid[game.rows - 1][0] = PieceKind.L
    assert game.board[game.rows - 1][0] == PieceKind.NONE