"""Drawing, input and audio backends, plus the brush used to paint shapes."""

from __future__ import annotations

import abc
import dataclasses
import enum
import time
from collections.abc import Callable
from dataclasses import dataclass, field

Color = tuple[float, float, float]


@dataclass
class Brush:
    """How a rectangle or a piece of text is painted."""

    fill_color: Color = (1.0, 1.0, 1.0)
    fill_secondary_color: Color = (1.0, 1.0, 1.0)
    fill_opacity: float = 1.0
    outline_color: Color = (1.0, 1.0, 1.0)
    outline_opacity: float = 1.0
    texture: str = ""
    gradient: bool = False
    gradient_dir_u: float = 0.0
    gradient_dir_v: float = 1.0


class Key(enum.Enum):
    """Keys the game reacts to."""

    SPACE = "space"
    H = "h"
    A = "a"
    D = "d"
    W = "w"
    ZERO = "0"


class Backend(abc.ABC):
    """Everything the game needs from a window, keyboard, clock and speakers.

    Coordinates are in canvas units; rectangles are given by their centre.
    """

    @abc.abstractmethod
    def draw_rect(self, x: float, y: float, width: float, height: float, brush: Brush) -> None:
        """Paint a rectangle centred on (x, y)."""

    @abc.abstractmethod
    def draw_text(self, x: float, y: float, size: float, text: str, brush: Brush) -> None:
        """Paint text whose baseline starts at (x, y)."""

    @abc.abstractmethod
    def is_key_pressed(self, key: Key) -> bool:
        """Return True while ``key`` is held down."""

    @abc.abstractmethod
    def play_sound(self, path: str, volume: float) -> None:
        """Play a sound effect once."""

    @abc.abstractmethod
    def play_music(self, path: str, volume: float) -> None:
        """Start looping background music."""

    @abc.abstractmethod
    def stop_music(self) -> None:
        """Stop the background music."""

    @abc.abstractmethod
    def global_time(self) -> float:
        """Milliseconds since the backend started."""

    @abc.abstractmethod
    def sleep(self, milliseconds: float) -> None:
        """Block for the given number of milliseconds."""


class HeadlessBackend(Backend):
    """A backend with no window that records what the game asks of it."""

    def __init__(self) -> None:
        self.rects: list[tuple[float, float, float, float, Brush]] = []
        self.texts: list[tuple[float, float, float, str, Brush]] = []
        self.sounds: list[tuple[str, float]] = []
        self.music: str | None = None
        self.music_volume = 0.0
        self.sleeps: list[float] = []
        self.time = 0.0
        self._pressed: set[Key] = set()

    def press(self, key: Key) -> None:
        """Hold ``key`` down."""
        self._pressed.add(key)

    def release(self, key: Key) -> None:
        """Let go of ``key``."""
        self._pressed.discard(key)

    def draw_rect(self, x, y, width, height, brush):
        self.rects.append((x, y, width, height, dataclasses.replace(brush)))

    def draw_text(self, x, y, size, text, brush):
        self.texts.append((x, y, size, text, dataclasses.replace(brush)))

    def is_key_pressed(self, key):
        return key in self._pressed

    def play_sound(self, path, volume):
        self.sounds.append((path, volume))

    def play_music(self, path, volume):
        self.music = path
        self.music_volume = volume

    def stop_music(self):
        self.music = None

    def global_time(self):
        return self.time

    def sleep(self, milliseconds):
        self.sleeps.append(milliseconds)
        self.time += milliseconds


def _to_rgb(color: Color) -> tuple[int, int, int]:
    return tuple(max(0, min(255, round(c * 255))) for c in color)  # type: ignore[return-value]


def _to_alpha(opacity: float) -> int:
    return max(0, min(255, round(opacity * 255)))


@dataclass
class _Viewport:
    scale: float
    left: float
    top: float


class PygameBackend(Backend):
    """A windowed backend; the canvas is scaled to fit the window."""

    def __init__(
        self,
        width: int = 1000,
        height: int = 600,
        title: str = "",
        canvas_width: float = 10.0,
        canvas_height: float = 6.0,
        font_path: str | None = None,
    ) -> None:
        import pygame

        self._pg = pygame
        pygame.init()
        pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.font_path = font_path
        try:
            pygame.mixer.init()
            self._audio = True
        except pygame.error:
            self._audio = False
        self._images: dict[str, object] = {}
        self._scaled: dict[tuple[str, int, int], object] = {}
        self._sounds: dict[str, object] = {}
        self._fonts: dict[tuple[str | None, int], object] = {}
        self._keys = {
            Key.SPACE: pygame.K_SPACE,
            Key.H: pygame.K_h,
            Key.A: pygame.K_a,
            Key.D: pygame.K_d,
            Key.W: pygame.K_w,
            Key.ZERO: pygame.K_0,
        }

    def _viewport(self) -> _Viewport:
        screen = self._pg.display.get_surface()
        win_w, win_h = screen.get_size()
        scale = min(win_w / self.canvas_width, win_h / self.canvas_height)
        return _Viewport(
            scale,
            (win_w - self.canvas_width * scale) / 2.0,
            (win_h - self.canvas_height * scale) / 2.0,
        )

    def _image(self, path: str):
        if path not in self._images:
            try:
                self._images[path] = self._pg.image.load(path).convert_alpha()
            except (self._pg.error, FileNotFoundError):
                self._images[path] = None
        return self._images[path]

    def _texture(self, path: str, w: int, h: int):
        key = (path, w, h)
        if key not in self._scaled:
            image = self._image(path)
            self._scaled[key] = (
                None if image is None else self._pg.transform.smoothscale(image, (w, h))
            )
        return self._scaled[key]

    def _fill_surface(self, brush: Brush, w: int, h: int):
        pg = self._pg
        if brush.texture:
            texture = self._texture(brush.texture, w, h)
            if texture is not None:
                surface = texture.copy()
                surface.set_alpha(_to_alpha(brush.fill_opacity))
                return surface
        surface = pg.Surface((w, h), pg.SRCALPHA)
        alpha = _to_alpha(brush.fill_opacity)
        if not brush.gradient:
            surface.fill((*_to_rgb(brush.fill_color), alpha))
            return surface
        horizontal = abs(brush.gradient_dir_u) >= abs(brush.gradient_dir_v)
        steps = w if horizontal else h
        for step in range(steps):
            t = step / max(1, steps - 1)
            color = tuple(
                a + (b - a) * t
                for a, b in zip(brush.fill_color, brush.fill_secondary_color)
            )
            rgba = (*_to_rgb(color), alpha)
            if horizontal:
                pg.draw.line(surface, rgba, (step, 0), (step, h - 1))
            else:
                pg.draw.line(surface, rgba, (0, step), (w - 1, step))
        return surface

    def draw_rect(self, x, y, width, height, brush):
        pg = self._pg
        view = self._viewport()
        w = round(abs(width) * view.scale)
        h = round(abs(height) * view.scale)
        if w <= 0 or h <= 0:
            return
        left = round(view.left + (x - abs(width) / 2.0) * view.scale)
        top = round(view.top + (y - abs(height) / 2.0) * view.scale)
        screen = pg.display.get_surface()
        if brush.fill_opacity > 0.0:
            screen.blit(self._fill_surface(brush, w, h), (left, top))
        if brush.outline_opacity > 0.0:
            outline = pg.Surface((w, h), pg.SRCALPHA)
            color = (*_to_rgb(brush.outline_color), _to_alpha(brush.outline_opacity))
            pg.draw.rect(outline, color, outline.get_rect(), 1)
            screen.blit(outline, (left, top))

    def _font(self, pixels: int):
        key = (self.font_path, pixels)
        if key not in self._fonts:
            try:
                self._fonts[key] = self._pg.font.Font(self.font_path, pixels)
            except (self._pg.error, FileNotFoundError, OSError):
                self._fonts[key] = self._pg.font.Font(None, pixels)
        return self._fonts[key]

    def draw_text(self, x, y, size, text, brush):
        view = self._viewport()
        pixels = max(1, round(size * view.scale))
        font = self._font(pixels)
        rendered = font.render(text, True, _to_rgb(brush.fill_color))
        rendered.set_alpha(_to_alpha(brush.fill_opacity))
        left = round(view.left + x * view.scale)
        top = round(view.top + y * view.scale) - font.get_ascent()
        self._pg.display.get_surface().blit(rendered, (left, top))

    def is_key_pressed(self, key):
        return bool(self._pg.key.get_pressed()[self._keys[key]])

    def play_sound(self, path, volume):
        if not self._audio:
            return
        if path not in self._sounds:
            try:
                self._sounds[path] = self._pg.mixer.Sound(path)
            except (self._pg.error, FileNotFoundError):
                self._sounds[path] = None
        sound = self._sounds[path]
        if sound is not None:
            sound.set_volume(volume)
            sound.play()

    def play_music(self, path, volume):
        if not self._audio:
            return
        try:
            self._pg.mixer.music.load(path)
        except (self._pg.error, FileNotFoundError):
            return
        self._pg.mixer.music.set_volume(volume)
        self._pg.mixer.music.play(-1)

    def stop_music(self):
        if self._audio:
            self._pg.mixer.music.stop()

    def global_time(self):
        return float(self._pg.time.get_ticks())

    def sleep(self, milliseconds):
        if milliseconds > 0:
            time.sleep(milliseconds / 1000.0)

    def run(self, update: Callable[[float], None], draw: Callable[[], None]) -> None:
        """Run the frame loop until the window is closed."""
        pg = self._pg
        clock = pg.time.Clock()
        clock.tick()
        try:
            while True:
                if any(event.type == pg.QUIT for event in pg.event.get()):
                    break
                update(float(clock.tick()))
                screen = pg.display.get_surface()
                screen.fill((0, 0, 0))
                view = self._viewport()
                screen.set_clip(
                    pg.Rect(
                        round(view.left),
                        round(view.top),
                        round(self.canvas_width * view.scale),
                        round(self.canvas_height * view.scale),
                    )
                )
                draw()
                screen.set_clip(None)
                pg.display.flip()
        finally:
            pg.quit()