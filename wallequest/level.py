"""A level: its blocks, items and lever, collisions, and the end screens."""

from __future__ import annotations

import enum
from typing import Any

from .block import Block, Lever, MovingBlock
from .garbage import EnergyGarbage, Garbage, ScoreGarbage
from .gameobject import GameObject
from .graphics import Brush

Spec = tuple[str, float, float]


def _row(name: str, xs, y: float) -> list[Spec]:
    return [(name, float(x), y) for x in xs]


_LEVEL_ONE_SCORE: list[Spec] = [
    ("plant", 5.0, 6.0), ("good1", -4.0, 5.0), ("good2", 1.0, 2.0),
    ("good3", -5.5, -1.0), ("good4", 11.0, 5.0), ("good1", 17.5, 6.0),
    ("good3", 24.0, 0.0),
]
_LEVEL_ONE_ENERGY: list[Spec] = [
    ("toxic1", 0.0, 7.0), ("toxic2", -4.5, -1.0), ("toxic3", 13.0, 4.0),
    ("toxic2", 14.0, 4.0), ("toxic1", 10.0, 7.0), ("energy", 12.0, 4.0),
]
_LEVEL_ONE_BLOCKS: list[Spec] = [
    ("eve", 24.0, 7.0),
    ("bridge", 3.0, 8.0), ("bridge2", 7.0, 8.0),
    ("bridge", 16.0, 8.0), ("bridge2", 19.0, 8.0),
    *_row("block", range(-9, 3), 8.0),
    *_row("block", range(8, 16), 8.0),
    *_row("block", range(20, 25), 8.0),
    ("block", -4.0, 6.0), ("block", -1.0, 6.0), ("block", 1.0, 4.0),
    ("block", -2.0, 2.0), ("block", 14.0, 5.0), ("block", 12.0, 5.0),
    ("block", 13.0, 5.0), ("block", 21.0, 6.0), ("block", 24.0, 5.0),
    ("block", 21.0, 3.0), ("block", 24.0, 1.0),
    ("block", -5.5, 0.0), ("block", -5.0, 0.0), ("block", -4.5, 0.0),
    ("block", -4.0, 0.0), ("block", -3.5, 0.0), ("block", 11.0, 6.0),
]
_LEVEL_ONE_GAMEOVER: list[Spec] = [
    *_row("block", range(2, 9), 11.0),
    *_row("block", range(15, 21), 11.0),
    *_row("block", range(-10, -17, -1), 11.0),
    *_row("block", range(25, 29), 11.0),
]

_LEVEL_TWO_SCORE: list[Spec] = [
    ("good1", -3.0, 5.0), ("good2", 0.0, 5.0), ("good3", -3.0, 1.0),
    ("good4", 1.0, 1.0), ("good3", 5.0, 0.0), ("good1", 3.0, 1.0),
    ("good2", 4.0, 4.0), ("good3", 5.0, 7.0), ("good4", 20.0, 6.0),
]
_LEVEL_TWO_ENERGY: list[Spec] = [
    ("toxic1", 4.0, 1.0), ("toxic2", 3.0, 4.0), ("toxic3", 17.0, 7.0),
]
_LEVEL_TWO_BLOCKS: list[Spec] = [
    ("eve", 24.0, 7.0),
    ("bridge", 2.0, 8.0), ("bridge2", 7.0, 8.0),
    ("bridge", 14.0, 8.0), ("bridge2", 21.0, 8.0),
    ("block", -6.0, 6.0), ("block", -2.0, 6.0), ("block", -1.0, 6.0),
    ("block", 0.0, 6.0), ("block", -3.0, 2.0), ("block", -2.0, 3.0),
    ("block", -1.0, 4.0),
    *[("block", 1.0, float(y)) for y in range(6, 0, -1)],
    *_row("block", range(-9, 2), 8.0),
    *_row("block", range(8, 14), 8.0),
    *_row("block", range(22, 26), 8.0),
    *[("block", 25.0, float(y)) for y in range(-8, 1)],
]
_LEVEL_TWO_GAMEOVER: list[Spec] = [
    *_row("block", range(1, 9), 11.0),
    *_row("block", range(13, 23), 11.0),
    *_row("block", range(26, 30), 11.0),
    *_row("block", range(-10, -14, -1), 11.0),
]
# (x, y, min_x, max_x)
_LEVEL_TWO_MOVING: list[tuple[float, float, float, float]] = [
    (-5.0, 6.0, -5.0, -3.0),
    (2.0, 2.0, 2.0, 6.0),
    (5.0, 5.0, 2.0, 6.0),
    (3.0, 8.0, 3.0, 6.0),
]

_LAYOUTS = {
    "1.lvl": (_LEVEL_ONE_SCORE, _LEVEL_ONE_ENERGY, _LEVEL_ONE_BLOCKS, _LEVEL_ONE_GAMEOVER),
    "2.lvl": (_LEVEL_TWO_SCORE, _LEVEL_TWO_ENERGY, _LEVEL_TWO_BLOCKS, _LEVEL_TWO_GAMEOVER),
}

_LEVEL_TWO = "2.lvl"
_EVE_SCORE = 35


class LevelStatus(enum.Enum):
    """What a level is currently showing."""

    PLAY = enum.auto()
    FINISH = enum.auto()
    GAMEOVER = enum.auto()


class Level(GameObject):
    """One playable level, identified by its name ("1.lvl" or "2.lvl")."""

    def __init__(self, state: Any, name: str = "Level0") -> None:
        super().__init__(state, name)
        self.status = LevelStatus.PLAY
        self.background_brush = Brush(
            outline_opacity=0.0,
            texture=state.full_asset_path("background.png"),
        )
        self.blocks: list[Block] = []
        self.gameover_blocks: list[Block] = []
        self.moving_blocks: list[MovingBlock] = []
        self.garbages: list[Garbage] = []
        self.levers: list[Lever] = []

    def _sound(self, asset: str, volume: float) -> None:
        self.state.backend.play_sound(self.state.full_asset_path(asset), volume)

    def _land_on(self, blocks, sound: str) -> None:
        player = self.state.player
        for block in blocks:
            offset = player.intersect_down(block)
            if offset:
                player.pos_y += offset
                if player.vy > 1.0:
                    self._sound(sound, 1.0)
                player.vy = 0.0
                return

    def _bump_head(self, blocks) -> None:
        player = self.state.player
        for block in blocks:
            offset = block.intersect_down(player)
            if offset:
                player.pos_y -= offset
                player.vx = 0.0
                return

    def _collect(self, garbage: Garbage) -> None:
        player = self.state.player
        garbage.active = False
        if isinstance(garbage, ScoreGarbage):
            if garbage.name == "plant":
                self.state.add_score(35)
                self._sound("collectedScorePlant.wav", 0.2)
            else:
                self.state.add_score(5)
                self._sound("collectedScore.wav", 0.5)
        elif isinstance(garbage, EnergyGarbage):
            if garbage.name == "energy":
                player.add_life(0.3)
                self._sound("collectedEnergy.wav", 0.2)
            else:
                player.drain_life(0.5)
                self._sound("collectedToxicEnergy.wav", 0.3)

    def _pull_lever(self) -> None:
        for x, y in ((12.0, 6.0), (14.0, 4.0)):
            block = Block(self.state, "block", x, y)
            block.init()
            self.blocks.append(block)
        plant = ScoreGarbage(self.state, "plant", 14.0, 3.0)
        plant.init()
        self.garbages.append(plant)

    def check_collisions(self) -> None:
        """Resolve the player's collisions with everything in the level."""
        player = self.state.player

        self._land_on(self.blocks, "jump.wav")

        for block in self.blocks:
            offset = player.intersect_sideways(block)
            if offset:
                if block.name == "eve" and self.state.score >= _EVE_SCORE:
                    self._sound("collideWeve2.wav", 0.3)
                    self.state.backend.sleep(4000)
                    self.status = LevelStatus.FINISH
                player.pos_x += offset
                player.vx = 0.0
                break

        self._bump_head(self.blocks)

        for garbage in self.garbages:
            if garbage.active and (
                player.intersect_down(garbage) or player.intersect_sideways(garbage)
            ):
                self._collect(garbage)
                break

        if any(player.intersect_down(block) for block in self.gameover_blocks):
            self.status = LevelStatus.GAMEOVER

        if self.name != _LEVEL_TWO:
            return

        self._land_on(self.moving_blocks, "jump.mp3")

        for block in self.moving_blocks:
            offset = player.intersect_sideways(block)
            if offset:
                player.pos_x += offset
                player.vx = 0.0
                break

        self._bump_head(self.moving_blocks)

        for lever in self.levers:
            if player.intersect_down(lever) or player.intersect_sideways(lever):
                if not lever.active:
                    self._pull_lever()
                    lever.active = True
                break

    def update(self, dt: float) -> None:
        if self.status is LevelStatus.GAMEOVER:
            super().update(dt)
            self._sound("musicFailedWalleSigh.wav", 0.1)
            return
        if self.status is LevelStatus.FINISH:
            super().update(dt)
            self.state.switch_to_next_level()
            self._sound("musicWon.wav", 0.1)
            return

        player = self.state.player
        if player.active:
            player.update(dt)
        if player.life <= 0.0:
            self.status = LevelStatus.GAMEOVER

        self.check_collisions()

        if self.name == _LEVEL_TWO:
            for block in self.moving_blocks:
                block.update(dt)
            for lever in self.levers:
                lever.update(dt)

        super().update(dt)

    def _draw_full_screen(self, asset: str) -> None:
        w = self.state.canvas_width
        h = self.state.canvas_height
        brush = Brush(outline_opacity=0.0, texture=self.state.full_asset_path(asset))
        self.state.backend.draw_rect(w / 2, h / 2, w, h, brush)

    def _draw_hud(self) -> None:
        backend = self.state.backend
        w = self.state.canvas_width
        h = self.state.canvas_height
        player = self.state.player
        life = player.life if player is not None else 0.0

        bar = Brush(
            outline_opacity=0.0,
            fill_color=(1.0, 0.0, 0.0),
            texture="",
            fill_secondary_color=(0.0, 1.0 * (1.0 - life) + life * 0.7, 0.0),
            gradient=True,
            gradient_dir_u=1.0,
            gradient_dir_v=0.0,
        )
        backend.draw_rect(w / 2 + 4 - (1.0 - life) / 2, h / 2 - 2.3, life, 0.5, bar)

        bar.outline_opacity = 1.0
        bar.gradient = False
        bar.fill_opacity = 0.0
        backend.draw_rect(w / 2 + 4, h / 2 - 2.3, 1.0, 0.5, bar)

        text = Brush(outline_opacity=0.0, fill_color=(1.0, 1.0, 1.0))
        backend.draw_text(w / 2 + 3.60, h / 2 - 2.25, 0.25, "Energy", text)
        backend.draw_text(
            w / 2 + 3.53, h / 2 - 2.65, 0.25, f"Score: {self.state.score}", text
        )

    def draw(self) -> None:
        backend = self.state.backend
        w = self.state.canvas_width
        h = self.state.canvas_height

        if self.status is LevelStatus.GAMEOVER:
            self._draw_full_screen("gameover.png")
            backend.draw_text(
                w / 2 - 2.70, h / 2 + 2.3, 1.0, "Game Over",
                Brush(outline_opacity=0.0, fill_color=(1.0, 1.0, 1.0)),
            )
            return
        if self.status is LevelStatus.FINISH:
            self._draw_full_screen("finish.png")
            return

        offset_x = self.state.global_offset_x / 2.0 + w / 2.0
        offset_y = self.state.global_offset_y / 2.0 + h / 2.0
        backend.draw_rect(offset_x, offset_y, 3.0 * w, 1.5 * w, self.background_brush)

        player = self.state.player
        if player is not None and player.active:
            player.draw()

        for item in (*self.garbages, *self.blocks, *self.gameover_blocks):
            if item.active:
                item.draw()

        if self.name == _LEVEL_TWO:
            for block in self.moving_blocks:
                if block.active:
                    block.draw()
            for lever in self.levers:
                lever.draw()

        self._draw_hud()

    def _spawn(self, cls, specs: list[Spec], active: bool = True) -> list:
        made = []
        for name, x, y in specs:
            obj = cls(self.state, name, x, y)
            obj.init()
            obj.active = active
            made.append(obj)
        return made

    def init(self) -> None:
        layout = _LAYOUTS.get(self.name)
        if layout is None:
            return
        score, energy, blocks, gameover = layout
        self.garbages += self._spawn(ScoreGarbage, score)
        self.garbages += self._spawn(EnergyGarbage, energy)
        self.blocks += self._spawn(Block, blocks)
        self.gameover_blocks += self._spawn(Block, gameover, active=False)

        if self.name == _LEVEL_TWO:
            for x, y, min_x, max_x in _LEVEL_TWO_MOVING:
                block = MovingBlock(self.state, "block", x, y, min_x, max_x)
                block.init()
                self.moving_blocks.append(block)
            lever = Lever(self.state, "lever", 10.0, 7.0)
            lever.active = False
            lever.init()
            self.levers.append(lever)