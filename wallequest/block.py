"""Solid blocks, blocks that slide back and forth, and the lever."""

from __future__ import annotations

from typing import Any

from .box import Box
from .gameobject import GameObject
from .graphics import Brush

_TEXTURES = {
    "eve": "eve.png",
    "bridge": "bridge.png",
    "bridge2": "bridge2.png",
}


class Block(Box, GameObject):
    """A one-unit square the player stands on or bumps into."""

    SIZE = 1.0

    def __init__(self, state: Any, name: str, x: float, y: float) -> None:
        Box.__init__(self, x, y)
        GameObject.__init__(self, state, name)
        self.brush = Brush()
        self.debug_brush = Brush()

    def _screen_position(self) -> tuple[float, float]:
        return (
            self.pos_x + self.state.global_offset_x,
            self.pos_y + self.state.global_offset_y,
        )

    def update(self, dt: float) -> None:
        GameObject.update(self, dt)

    def draw(self) -> None:
        x, y = self._screen_position()
        self.brush.texture = self.state.full_asset_path(
            _TEXTURES.get(self.name, "block.png")
        )
        self.state.backend.draw_rect(x, y, self.SIZE, self.SIZE, self.brush)
        if self.state.debugging:
            self.debug_draw()

    def init(self) -> None:
        self.brush.outline_opacity = 0.0
        self.debug_brush.fill_opacity = 0.1
        self.debug_brush.fill_color = (0.1, 1.0, 0.1)
        self.debug_brush.outline_color = (0.3, 1.0, 0.2)

    def debug_draw(self) -> None:
        """Paint the translucent collision outline."""
        x, y = self._screen_position()
        self.state.backend.draw_rect(x, y, self.SIZE, self.SIZE, self.debug_brush)


class MovingBlock(Block):
    """A block that slides horizontally between ``min_x`` and ``max_x``."""

    def __init__(
        self, state: Any, name: str, x: float, y: float, min_x: float, max_x: float
    ) -> None:
        super().__init__(state, name, x, y)
        self.min_x = min_x
        self.max_x = max_x
        self.velocity_x = 10.0

    def update(self, dt: float) -> None:
        super().update(dt)
        self.pos_x += (dt / 1000.0 * self.velocity_x) / 10.0
        if self.pos_x > self.max_x:
            self.pos_x = self.max_x
            self.velocity_x = -self.velocity_x
        elif self.pos_x < self.min_x:
            self.pos_x = self.min_x
            self.velocity_x = -self.velocity_x

    def draw(self) -> None:
        x, y = self._screen_position()
        brush = Brush(
            outline_opacity=0.0,
            texture=self.state.full_asset_path("block.png"),
        )
        self.state.backend.draw_rect(x, y, 1.0, 1.0, brush)


class Lever(Block):
    """A switch whose picture shows whether it has been pulled."""

    def draw(self) -> None:
        x, y = self._screen_position()
        texture = "lever.png" if self.active else "lever2.png"
        brush = Brush(
            outline_opacity=0.0,
            texture=self.state.full_asset_path(texture),
        )
        self.state.backend.draw_rect(x, y, 1.0, 1.0, brush)