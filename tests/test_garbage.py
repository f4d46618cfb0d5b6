import pytest

from wallequest.box import Box
from wallequest.garbage import EnergyGarbage, Garbage, ScoreGarbage
from wallequest.graphics import HeadlessBackend


class _State:
    def __init__(self):
        self.backend = HeadlessBackend()
        self.global_offset_x = 0.0
        self.global_offset_y = 0.0
        self.debugging = False

    def full_asset_path(self, asset):
        return "assets/" + asset


@pytest.fixture
def state():
    return _State()


def test_init_narrows_collision_width(state):
    garbage = Garbage(state, "good1", -4.0, 5.0)
    assert garbage.width == 1.0
    garbage.init()
    assert garbage.width == 0.5
    assert garbage.height == 1.0
    assert isinstance(garbage, Box)


def test_plain_garbage_has_no_texture(state):
    garbage = Garbage(state, "good1", 0.0, 0.0)
    garbage.init()
    garbage.draw()
    assert state.backend.rects[0][4].texture == ""


@pytest.mark.parametrize("cls", [ScoreGarbage, EnergyGarbage])
@pytest.mark.parametrize("name", ["plant", "good3", "toxic2", "energy"])
def test_textured_garbage_uses_its_name(state, cls, name):
    garbage = cls(state, name, 0.0, 0.0)
    garbage.init()
    garbage.draw()
    brush = state.backend.rects[0][4]
    assert brush.texture == "assets/" + name + ".png"
    assert brush.outline_opacity == 0.0
    assert garbage.width == 0.5


def test_draw_applies_camera_offset(state):
    state.global_offset_x = 2.0
    state.global_offset_y = 0.5
    garbage = ScoreGarbage(state, "good2", 1.0, 2.0)
    garbage.init()
    garbage.draw()
    x, y, w, h, _ = state.backend.rects[0]
    assert x == garbage.pos_x + state.global_offset_x
    assert y == garbage.pos_y + state.global_offset_y
    assert (w, h) == (Garbage.SIZE, Garbage.SIZE)


def test_debug_outline_is_smaller_than_item(state):
    state.debugging = True
    garbage = EnergyGarbage(state, "toxic1", 0.0, 7.0)
    garbage.init()
    garbage.draw()
    assert len(state.backend.rects) == 2
    _, _, w, h, brush = state.backend.rects[1]
    assert w == pytest.approx(0.6)
    assert h == pytest.approx(0.8)
    assert brush.fill_opacity == pytest.approx(0.1)


def test_update_keeps_item_in_place(state):
    garbage = ScoreGarbage(state, "good4", 11.0, 5.0)
    garbage.update(17.0)
    assert (garbage.pos_x, garbage.pos_y, garbage.active) == (11.0, 5.0, True)