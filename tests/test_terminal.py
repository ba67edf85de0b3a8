import pytest

from termfolio import content
from termfolio.terminal import (
    CLEAR_SCREEN,
    ENTER_ALT_SCREEN,
    LEAVE_ALT_SCREEN,
    decode_keys,
    run_session,
)
from termfolio.tetris import TICK_SECONDS
from termfolio.tui import Model, Pane


def _scripted(events):
    it = iter(events)
    timeouts = []

    def read_key(timeout):
        timeouts.append(timeout)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_key, timeouts


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x1b[A\x1b[B", ["up", "down"]),
        ("\x1b[C\x1b[D", ["right", "left"]),
        ("\x1bOC", ["right"]),
        (b"\r", ["enter"]),
        ("\r\n", ["enter"]),
        ("\x03", ["ctrl+c"]),
        ("\x1b", ["esc"]),
        ("qjk", ["q", "j", "k"]),
        ("\x1b[5~q", ["q"]),
    ],
)
def test_decode_keys(data, expected):
    assert decode_keys(data) == expected


def test_decode_keys_round_trips_printable_text():
    text = "abc rs"
    assert "".join(decode_keys(text)) == text


def test_quit_stops_before_later_keys():
    model = Model(80, 40, opener=lambda url: None)
    read_key, _ = _scripted(["q", "down"])
    writes = []
    run_session(model, read_key, writes.append)
    assert model.cursor == 0
    assert writes[0] == ENTER_ALT_SCREEN
    assert writes[-1] == LEAVE_ALT_SCREEN


def test_frames_are_crlf_and_match_view():
    model = Model(80, 40, opener=lambda url: None)
    read_key, _ = _scripted(["down", "q"])
    writes = []
    run_session(model, read_key, writes.append)
    frames = writes[1:-1]
    assert all(frame.startswith(CLEAR_SCREEN) for frame in frames)
    assert all("\n" not in frame.replace("\r\n", "") for frame in frames)
    assert frames[-1] == CLEAR_SCREEN + model.view().replace("\n", "\r\n")


def test_navigation_reaches_about_and_back():
    model = Model(80, 40, opener=lambda url: None)
    read_key, _ = _scripted(["enter", "b"])
    writes = []
    run_session(model, read_key, writes.append)
    assert model.pane is Pane.HOME
    assert len(writes) == 5


def test_ticks_apply_gravity_and_set_timeouts():
    model = Model(80, 40, opener=lambda url: None)
    read_key, timeouts = _scripted(["down", "down", "enter", None, None, "q"])
    run_session(model, read_key, lambda s: None)
    assert model.pane is Pane.TETRIS
    assert model.tetris.y == 2
    assert timeouts[0] is None
    assert 0 <= timeouts[3] <= TICK_SECONDS
    assert 0 <= timeouts[4] <= TICK_SECONDS


def test_timeout_without_pending_tick_is_ignored():
    model = Model(80, 40, opener=lambda url: None)
    read_key, _ = _scripted([None, "q"])
    writes = []
    run_session(model, read_key, writes.append)
    assert len(writes) == 3


def test_resize_event_updates_model():
    model = Model(80, 40, opener=lambda url: None)
    read_key, _ = _scripted([(120, 50)])
    run_session(model, read_key, lambda s: None)
    assert (model.width, model.height) == (120, 50)


def test_contact_enter_uses_opener():
    opened = []
    model = Model(80, 40, opener=opened.append)
    read_key, _ = _scripted(["down", "enter", "enter"])
    run_session(model, read_key, lambda s: None)
    assert opened == [content.GITHUB_URL]
    assert model.status == "Opened GitHub in your browser."


def test_end_of_input_leaves_alt_screen():
    read_key, _ = _scripted([])
    writes = []
    run_session(Model(80, 40, opener=lambda url: None), read_key, writes.append)
    assert writes[-1] == LEAVE_ALT_SCREEN