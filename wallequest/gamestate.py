"""The game as a whole: title and help screens, levels and the player."""

from __future__ import annotations

import enum
import math

from .graphics import Backend, Brush, Key
from .level import Level
from .player import Player

_LEVEL_NAMES = ("1.lvl", "2.lvl")
_MAX_FRAME_MS = 500.0
_MIN_FRAME_MS = 17.0
_KEY_PAUSE_MS = 1000.0


class ScreenStatus(enum.Enum):
    """Which screen the game is showing."""

    START = enum.auto()
    PLAYING = enum.auto()
    HELP = enum.auto()


class GameState:
    """Holds the levels, the player, the score and the camera offsets.

    Every game object is handed this state; it reaches the drawing
    backend, the asset paths and the shared values through it.
    """

    CANVAS_WIDTH = 10.0
    CANVAS_HEIGHT = 6.0

    def __init__(self, backend: Backend, asset_dir: str = "assets/") -> None:
        self.backend = backend
        self.asset_dir = asset_dir
        self.canvas_width = self.CANVAS_WIDTH
        self.canvas_height = self.CANVAS_HEIGHT
        self.levels: list[Level] = []
        self.current_level_index = 0
        self.player: Player | None = None
        self.status = ScreenStatus.START
        self.global_offset_x = 0.0
        self.global_offset_y = 0.0
        self.debugging = False
        self.score = 0

    @property
    def current_level(self) -> Level | None:
        """The level being played, or None before ``init``."""
        if not self.levels:
            return None
        return self.levels[self.current_level_index]

    def full_asset_path(self, asset: str) -> str:
        """Path of the named asset inside the asset directory."""
        return self.asset_dir + asset

    def add_score(self, amount: int) -> None:
        """Add ``amount`` to the score."""
        self.score += amount

    def init(self) -> None:
        """Start the title music and build the levels and the player."""
        self.backend.play_music(
            self.full_asset_path("musicPressSpaceToStart.wav"), 0.3
        )
        self.levels = [Level(self, name) for name in _LEVEL_NAMES]
        self.current_level_index = 0
        self.levels[0].init()
        self.player = Player(self, "Player")
        self.player.init()

    def switch_to_next_level(self) -> None:
        """Move on to the next level, if there is one."""
        if self.current_level_index >= len(self.levels) - 1:
            return
        self.current_level_index += 1
        self.score = 0
        self.player.fill_life()
        self.player.pos_x = -6.0
        self.player.pos_y = 7.0
        self.levels[self.current_level_index].init()

    def _draw_backdrop(self, asset: str) -> None:
        w = self.canvas_width
        h = self.canvas_height
        brush = Brush(outline_opacity=0.0, texture=self.full_asset_path(asset))
        self.backend.draw_rect(w / 2, h / 2, w, h, brush)

    def _draw_start_screen(self) -> None:
        self._draw_backdrop("start.png")
        w = self.canvas_width
        h = self.canvas_height
        backend = self.backend

        p = 0.5 + abs(math.cos(backend.global_time() / 500.0))
        shade = p - 0.9
        brush = Brush(outline_opacity=0.0, fill_color=(shade, shade, shade))
        backend.draw_text(w / 2 - 1.2, h / 2 - 1.9, 0.3, "Press SPACE to start", brush)

        brush = Brush(outline_opacity=0.0, fill_color=(0.0, 0.0, 0.0))
        backend.draw_text(
            w / 2 - 1.9, h / 2 - 1.5, 0.18,
            "Goal: successfully deliver the last plant on earth to eve.", brush,
        )
        backend.draw_text(
            w / 2 - 3, h / 2 - 1.2, 0.18,
            "Collect recyclable waste, avoid toxic barrels and collect "
            "batteries to regain energy.",
            brush,
        )

        brush = Brush(outline_opacity=0.0, fill_color=(1.0, 1.0, 1.0))
        backend.draw_text(w / 2 + 3.4, h / 2 + 2.60, 0.35, "H: Help", brush)

    def draw(self) -> None:
        """Paint the current screen."""
        if self.status is ScreenStatus.START:
            self._draw_start_screen()
        elif self.status is ScreenStatus.HELP:
            self._draw_backdrop("help.png")
        else:
            level = self.current_level
            if level is not None:
                level.draw()

    def _update_menu(self, toggle_to: ScreenStatus) -> None:
        backend = self.backend
        if backend.is_key_pressed(Key.SPACE):
            self.status = ScreenStatus.PLAYING
            backend.stop_music()
        if backend.is_key_pressed(Key.H):
            self.status = toggle_to
            backend.sleep(_KEY_PAUSE_MS)

    def update(self, dt: float) -> None:
        """Advance the game by ``dt`` milliseconds."""
        if self.status is ScreenStatus.START:
            self._update_menu(ScreenStatus.HELP)
            return
        if self.status is ScreenStatus.HELP:
            self._update_menu(ScreenStatus.START)
            return

        # A long stall would break the collision simulation; skip the frame.
        if dt > _MAX_FRAME_MS:
            return

        sleep_time = max(_MIN_FRAME_MS - dt, 0.0)
        if sleep_time > 0.0:
            self.backend.sleep(sleep_time)

        level = self.current_level
        if level is None:
            return
        level.update(dt)

        self.debugging = self.backend.is_key_pressed(Key.ZERO)