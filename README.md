# wallequest

A small side-scrolling platformer. You steer a cleanup robot across two
levels, collecting recyclable waste, dodging toxic barrels, picking up
batteries to regain energy, and finally delivering the last plant on Earth
to its friend waiting at the end of the level.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window and plays the sounds.

## Playing

```
wallequest
```

The command takes no options besides `--help`. It opens a 1000×600
resizable window; the 10×6 canvas is scaled to fit it.

The game looks for its images, sounds and font in an `assets/` directory
relative to the directory you start it from (for example
`assets/background.png`, `assets/jump.wav`, `assets/OpenSans-Bold.ttf`).

Controls:

| Key     | Action                                            |
|---------|---------------------------------------------------|
| `SPACE` | start playing from the title or help screen       |
| `H`     | switch between the title screen and the help screen |
| `A`     | move left                                         |
| `D`     | move right                                        |
| `W`     | jump                                              |
| `0`     | hold to show collision boxes                      |

Rules:

- Recyclable waste is worth 5 points; the plant is worth 35.
- A battery restores 0.3 of your energy; a toxic barrel drains 0.5.
- Run out of energy, or fall off a bridge, and the game is over.
- Touch the goal at the end of the level with at least 35 points to finish
  it. Finishing the first level moves you to the second with your score
  reset and your energy full; after the second, the finish screen stays.
- In the second level, platforms slide back and forth, and a lever makes
  new blocks and the plant appear.

## What it does not include

The package ships no images, sounds or font. Without an `assets/`
directory the game still runs: rectangles whose picture is missing are
painted in their plain fill colour, missing sounds and music are silently
skipped, and text falls back to pygame's default font. There is no saving,
no high-score table and no level editor; the two levels are built in.

## Using it as a library

The game logic does not depend on a window. `wallequest.graphics` provides
a `Backend` interface with two implementations: `PygameBackend`, which
opens a window and runs the frame loop with `run(update, draw)`, and
`HeadlessBackend`, which records drawing calls, sounds, music and sleeps
(in its `rects`, `texts`, `sounds`, `music` and `sleeps` attributes) and
lets you hold keys down with `press` and `release`.
`wallequest.app.build_game` wires a `GameState` to any backend:

```python
from wallequest.app import build_game
from wallequest.graphics import HeadlessBackend, Key

backend = HeadlessBackend()
game = build_game(backend)

backend.press(Key.SPACE)
game.update(16.0)
backend.release(Key.SPACE)

backend.press(Key.D)
for _ in range(60):
    game.update(16.0)
game.draw()

print(game.score, game.player.pos_x, game.current_level.status)
```

`GameState.update(dt)` takes the elapsed time in milliseconds; frames longer
than 500 ms are skipped, and frames shorter than 17 ms ask the backend to
sleep for the rest.

Collision geometry lives in `wallequest.box.Box`, whose `intersect`,
`intersect_down` and `intersect_sideways` methods return whether two boxes
overlap or by how much one must move to separate them.

## Running the tests

```
pip install ".[test]"
pytest
```