"""Collectable items: recyclable rubbish, batteries and toxic barrels."""

from __future__ import annotations

from typing import Any

from .box import Box
from .gameobject import GameObject
from .graphics import Brush


class Garbage(Box, GameObject):
    """An item lying in the world that the player can pick up."""

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
        self.state.backend.draw_rect(x, y, self.SIZE, self.SIZE, self.brush)
        if self.state.debugging:
            self.debug_draw()

    def init(self) -> None:
        self.brush.fill_opacity = 1.0
        self.brush.outline_opacity = 0.0
        # Narrower than the picture for finer collision detection.
        self.width = 0.5

    def debug_draw(self) -> None:
        """Paint the translucent collision outline."""
        self.debug_brush.fill_opacity = 0.1
        self.debug_brush.fill_color = (0.1, 1.0, 0.1)
        self.debug_brush.outline_color = (0.3, 1.0, 0.2)
        x, y = self._screen_position()
        self.state.backend.draw_rect(
            x, y, self.SIZE * 0.6, self.SIZE * 0.8, self.debug_brush
        )


class _TexturedGarbage(Garbage):
    def init(self) -> None:
        super().init()
        self.brush.texture = self.state.full_asset_path(self.name + ".png")


class ScoreGarbage(_TexturedGarbage):
    """Rubbish that adds to the score when collected."""


class EnergyGarbage(_TexturedGarbage):
    """A battery or toxic barrel that changes the player's energy."""