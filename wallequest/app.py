"""Command-line entry point that opens the game window."""

from __future__ import annotations

import argparse

from .gamestate import GameState
from .graphics import Backend, PygameBackend

TITLE = "Wall-E's Quest for the Last Plant"
WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 600


def build_game(backend: Backend) -> GameState:
    """Create a game on ``backend`` and prepare it for its first frame."""
    game = GameState(backend)
    game.init()
    return game


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="wallequest", description=TITLE)
    parser.parse_args(argv)

    backend = PygameBackend(
        width=WINDOW_WIDTH,
        height=WINDOW_HEIGHT,
        title=TITLE,
        canvas_width=GameState.CANVAS_WIDTH,
        canvas_height=GameState.CANVAS_HEIGHT,
    )
    game = build_game(backend)
    backend.font_path = game.full_asset_path("OpenSans-Bold.ttf")
    backend.run(game.update, game.draw)
    return 0