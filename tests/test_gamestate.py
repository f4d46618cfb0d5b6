import pytest

from wallequest.gamestate import GameState, ScreenStatus
from wallequest.graphics import HeadlessBackend, Key


@pytest.fixture
def backend():
    return HeadlessBackend()


@pytest.fixture
def game(backend):
    state = GameState(backend, asset_dir="data/")
    state.init()
    return state


def test_full_asset_path_joins_directory_and_name(backend):
    state = GameState(backend, asset_dir="somewhere/")
    assert state.full_asset_path("thing.png") == "somewhere/thing.png"


def test_init_starts_title_music(game, backend):
    assert backend.music == "data/musicPressSpaceToStart.wav"
    assert backend.music_volume == 0.3


def test_init_builds_levels_and_player(game):
    assert [level.name for level in game.levels] == ["1.lvl", "2.lvl"]
    assert game.current_level is game.levels[0]
    assert game.levels[0].blocks
    assert game.levels[1].blocks == []
    assert (game.player.pos_x, game.player.pos_y) == (-7.0, 6.0)
    assert game.status is ScreenStatus.START


def test_current_level_is_none_before_init(backend):
    assert GameState(backend).current_level is None


def test_add_score_accumulates(game):
    game.add_score(5)
    game.add_score(35)
    assert game.score == 40


def test_space_on_start_screen_starts_playing(game, backend):
    backend.press(Key.SPACE)
    game.update(16.0)
    assert game.status is ScreenStatus.PLAYING
    assert backend.music is None


def test_h_on_start_screen_opens_help(game, backend):
    backend.press(Key.H)
    game.update(16.0)
    assert game.status is ScreenStatus.HELP
    assert backend.sleeps == [1000.0]


def test_h_on_help_screen_returns_to_start(game, backend):
    game.status = ScreenStatus.HELP
    backend.press(Key.H)
    game.update(16.0)
    assert game.status is ScreenStatus.START


def test_space_on_help_screen_starts_playing(game, backend):
    game.status = ScreenStatus.HELP
    backend.press(Key.SPACE)
    game.update(16.0)
    assert game.status is ScreenStatus.PLAYING
    assert backend.music is None


def test_start_screen_without_keys_stays(game, backend):
    game.update(16.0)
    assert game.status is ScreenStatus.START
    assert backend.sleeps == []


def test_draw_start_screen(game, backend):
    game.draw()
    assert backend.rects[0][4].texture == "data/start.png"
    texts = [entry[3] for entry in backend.texts]
    assert "Press SPACE to start" in texts
    assert "H: Help" in texts


def test_draw_help_screen(game, backend):
    game.status = ScreenStatus.HELP
    game.draw()
    assert len(backend.rects) == 1
    assert backend.rects[0][4].texture == "data/help.png"
    assert backend.texts == []


def test_draw_playing_shows_level_hud(game, backend):
    game.status = ScreenStatus.PLAYING
    game.draw()
    texts = [entry[3] for entry in backend.texts]
    assert "Energy" in texts
    assert "Score: 0" in texts


def test_long_frame_is_skipped(game, backend):
    game.status = ScreenStatus.PLAYING
    before = (game.player.pos_x, game.player.pos_y)
    game.update(600.0)
    assert (game.player.pos_x, game.player.pos_y) == before
    assert backend.sleeps == []


def test_short_frame_sleeps_and_moves_player(game, backend):
    game.status = ScreenStatus.PLAYING
    before_y = game.player.pos_y
    game.update(10.0)
    assert backend.sleeps == [pytest.approx(7.0)]
    assert game.player.pos_y > before_y


def test_zero_key_turns_on_debugging(game, backend):
    game.status = ScreenStatus.PLAYING
    backend.press(Key.ZERO)
    game.update(17.0)
    assert game.debugging is True
    backend.release(Key.ZERO)
    game.update(17.0)
    assert game.debugging is False


def test_switch_to_next_level(game):
    game.add_score(40)
    game.player.drain_life(0.5)
    game.switch_to_next_level()
    assert game.current_level_index == 1
    assert game.current_level.name == "2.lvl"
    assert game.current_level.blocks
    assert game.score == 0
    assert game.player.life == 1.0
    assert (game.player.pos_x, game.player.pos_y) == (-6.0, 7.0)


def test_switch_past_last_level_does_nothing(game):
    game.switch_to_next_level()
    blocks = len(game.current_level.blocks)
    game.add_score(5)
    game.switch_to_next_level()
    assert game.current_level_index == 1
    assert game.score == 5
    assert len(game.current_level.blocks) == blocks