"""The robot the player steers through the level."""

from __future__ import annotations

import math
from typing import Any

from .box import Box
from .gameobject import GameObject
from .graphics import Brush, Key

_WALK_SPRITES = ("walle1.png", "walle2.png")
_LEFT_SPRITES = ("walle1left.png", "walle2left.png")
_JUMP_SPRITES = tuple(
    "jump.png" if n == 1 else f"jump{n}.png" for n in range(1, 9)
)


class Player(Box, GameObject):
    """The player character, with simple acceleration, friction and gravity.

    Velocities are in canvas units per second; ``life`` runs from 0 to 1.
    """

    ACCEL_HORIZONTAL = 35.0
    ACCEL_VERTICAL = 300.1
    MAX_VELOCITY = 5.0
    GRAVITY = 10.0

    def __init__(self, state: Any, name: str = "Player") -> None:
        Box.__init__(self)
        GameObject.__init__(self, state, name)
        self.sprites: list[str] = []
        self.sprites_left: list[str] = []
        self.sprites_jump: list[str] = []
        self.brush = Brush()
        self.life = 1.0
        self.vx = 0.0
        self.vy = 0.0

    def _follow_camera(self) -> None:
        self.state.global_offset_x = self.state.canvas_width / 2.0 - self.pos_x
        self.state.global_offset_y = self.state.canvas_height / 2.0 - self.pos_y

    def update(self, dt: float) -> None:
        self.move_player(dt)
        self._follow_camera()
        GameObject.update(self, dt)

    def draw(self) -> None:
        index = int(math.fmod(100.0 - self.pos_x * 3.0, len(self.sprites)))
        texture = self.sprites[index]
        if self.vx < 0 and self.vy == 0:
            index = int(math.fmod(100.0 - self.pos_x * 3.0, len(self.sprites_left)))
            texture = self.sprites_left[index]
        if self.vy != 0:
            index = int(math.fmod(100.0 - self.pos_y * 3.0, len(self.sprites_jump)))
            texture = self.sprites_jump[index]
        self.brush.texture = texture
        self.state.backend.draw_rect(
            self.state.canvas_width * 0.5,
            self.state.canvas_height * 0.5,
            1.0,
            1.0,
            self.brush,
        )
        if self.state.debugging:
            self.debug_draw()

    def init(self) -> None:
        self.pos_x = -7.0
        self.pos_y = 6.0
        self._follow_camera()
        self.brush.fill_opacity = 1.0
        self.brush.outline_opacity = 0.0
        asset = self.state.full_asset_path
        self.sprites = [asset(name) for name in _WALK_SPRITES]
        self.sprites_left = [asset(name) for name in _LEFT_SPRITES]
        self.sprites_jump = [asset(name) for name in _JUMP_SPRITES]
        # Narrower than the picture for finer collision detection.
        self.width = 0.5

    def debug_draw(self) -> None:
        """Paint the collision box and the current position."""
        cx = self.state.canvas_width * 0.5
        cy = self.state.canvas_height * 0.5
        brush = Brush(
            fill_color=(1.0, 0.3, 0.0),
            outline_color=(1.0, 0.1, 0.0),
            fill_opacity=0.1,
            outline_opacity=1.0,
        )
        self.state.backend.draw_rect(cx, cy, self.width, self.height, brush)
        text_brush = Brush(
            fill_color=(1.0, 0.0, 0.0),
            outline_color=(1.0, 0.1, 0.0),
            fill_opacity=1.0,
            outline_opacity=1.0,
        )
        self.state.backend.draw_text(
            cx - 0.4,
            cy - 0.6,
            0.15,
            f"({self.pos_x:5.2f}, {self.pos_y:5.2f})",
            text_brush,
        )

    def move_player(self, dt: float) -> None:
        """Apply keyboard input, friction and gravity for ``dt`` milliseconds."""
        delta_time = dt / 1000.0
        backend = self.state.backend

        move = 0.0
        if backend.is_key_pressed(Key.A):
            move -= 1.0
        if backend.is_key_pressed(Key.D):
            move = 1.0

        self.vx = min(self.MAX_VELOCITY, self.vx + delta_time * move * self.ACCEL_HORIZONTAL)
        self.vx = max(-self.MAX_VELOCITY, self.vx)

        self.vx -= 0.2 * self.vx / (0.1 + abs(self.vx))
        if abs(self.vx) < 0.01:
            self.vx = 0.0

        self.pos_x += self.vx * delta_time

        # A jump is a single burst, only possible while not already in flight.
        if self.vy == 0.0 and backend.is_key_pressed(Key.W):
            self.vy -= self.ACCEL_VERTICAL * 0.02

        self.vy += delta_time * self.GRAVITY
        self.pos_y += self.vy * delta_time

    def drain_life(self, amount: float) -> None:
        """Lose ``amount`` of life, never going below zero."""
        self.life = max(0.0, self.life - amount)

    def add_life(self, amount: float) -> None:
        """Gain ``amount`` of life, never going above one."""
        self.life = min(1.0, self.life + amount)

    def fill_life(self) -> None:
        """Restore life to full."""
        self.life = 1.0