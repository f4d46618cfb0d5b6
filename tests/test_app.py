import pytest

from wallequest.app import build_game, main
from wallequest.gamestate import ScreenStatus
from wallequest.graphics import HeadlessBackend, Key


def test_build_game_returns_initialised_game():
    backend = HeadlessBackend()
    game = build_game(backend)
    assert game.backend is backend
    assert len(game.levels) == 2
    assert game.player is not None and game.player.pos_x == -7.0
    assert game.status is ScreenStatus.START
    assert backend.music.endswith("musicPressSpaceToStart.wav")


def test_built_game_runs_frames():
    backend = HeadlessBackend()
    game = build_game(backend)
    backend.press(Key.SPACE)
    game.update(17.0)
    backend.release(Key.SPACE)
    start_y = game.player.pos_y
    game.update(17.0)
    game.draw()
    assert game.status is ScreenStatus.PLAYING
    assert game.player.pos_y != start_y or game.player.vy == 0.0
    assert any(entry[3] == "Energy" for entry in backend.texts)


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "Wall-E's Quest for the Last Plant" in capsys.readouterr().out


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2