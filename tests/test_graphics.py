import pytest

from wallequest.graphics import Backend, Brush, HeadlessBackend, Key


def test_brush_defaults_are_opaque_untextured():
    brush = Brush()
    assert brush.fill_opacity == 1.0
    assert brush.outline_opacity == 1.0
    assert brush.texture == ""
    assert brush.gradient is False


def test_backend_is_abstract():
    with pytest.raises(TypeError):
        Backend()


def test_press_and_release_keys():
    backend = HeadlessBackend()
    assert not backend.is_key_pressed(Key.SPACE)
    backend.press(Key.SPACE)
    assert backend.is_key_pressed(Key.SPACE)
    assert not backend.is_key_pressed(Key.H)
    backend.release(Key.SPACE)
    assert not backend.is_key_pressed(Key.SPACE)


def test_release_of_unpressed_key_is_harmless():
    backend = HeadlessBackend()
    backend.release(Key.W)
    assert not backend.is_key_pressed(Key.W)


def test_draw_rect_records_a_snapshot_of_the_brush():
    backend = HeadlessBackend()
    brush = Brush(texture="assets/block.png")
    backend.draw_rect(1.0, 2.0, 3.0, 4.0, brush)
    brush.texture = "assets/other.png"
    x, y, w, h, recorded = backend.rects[0]
    assert (x, y, w, h) == (1.0, 2.0, 3.0, 4.0)
    assert recorded.texture == "assets/block.png"


def test_draw_text_is_recorded():
    backend = HeadlessBackend()
    backend.draw_text(0.5, 0.5, 0.25, "Energy", Brush())
    assert [entry[3] for entry in backend.texts] == ["Energy"]


def test_sounds_are_recorded_in_order():
    backend = HeadlessBackend()
    backend.play_sound("jump.wav", 1.0)
    backend.play_sound("musicWon.wav", 0.1)
    assert backend.sounds == [("jump.wav", 1.0), ("musicWon.wav", 0.1)]


def test_music_plays_and_stops():
    backend = HeadlessBackend()
    backend.play_music("musicPressSpaceToStart.wav", 0.3)
    assert backend.music == "musicPressSpaceToStart.wav"
    assert backend.music_volume == 0.3
    backend.stop_music()
    assert backend.music is None


def test_sleep_advances_clock():
    backend = HeadlessBackend()
    start = backend.global_time()
    backend.sleep(17.0)
    assert backend.global_time() == start + 17.0
    assert backend.sleeps == [17.0]