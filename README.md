# arcadekit

A collection of small arcade games that advance one frame at a time. Each
game keeps its own state, reads input from an `Inputs` object and records
what it would draw on a `Canvas`. Drawing produces a list of `DrawCommand`
values that you can inspect, test against or hand to a renderer of your own.

The package has no dependencies beyond the standard library.

## Games

| Module | Game |
| --- | --- |
| `arcadekit.life` | Conway's Game of Life on a wrapping grid, 32×32 by default (`Life`, `count_alive_neighbours`) |
| `arcadekit.pong` | Two-player Pong (`Pong`, `Paddle`, `Ball`) |
| `arcadekit.pancake` | Catch falling pancakes with a cat (`PancakeCat`, `Pancake`) |
| `arcadekit.dino` | Jump over trees in an endless runner (`DinoRunner`) |
| `arcadekit.platformer` | Tile platformer with variable-height jumps and coyote time (`Platformer`, `Player`, `Tile`, `check_collision`, `default_tiles`) |
| `arcadekit.rectrunner` | Fly through gaps and collect coins for extra lives (`RectRunner`, `Obstacle`, `Coin`) |
| `arcadekit.bork_game` | Balloon-borne dog that borks at enemies (`BorkRunner`, `format_clock`, `energy_color`); its entities live in `arcadekit.bork_entities` |
| `arcadekit.dreamland_game` | Fill vials with sand to put a town to sleep over seven nights (`Dreamland`, `PlayState`, `round_config`) |

Dreamland is split over several modules: `dreamland_feelings` (feelings,
buttons, floating text, `hit_test`, `nine_slice`), `dreamland_vials` (`Vial`,
`VialSource`, `SandTap`), `dreamland_actors` (`Dreamer`, `Clock`,
`PlayerArea`, `GameUI`, `Tween`) and `dreamland_menu` (`MenuUI`,
`score_dots`).

## The engine

`arcadekit.engine` holds the pieces every game shares:

- `Button` tracks one button across frames: `pressed()`, `just_pressed()`
  and `just_released()`; `press()` and `release()` change it and `advance()`
  closes the frame.
- `Gamepad` (up, down, left, right, a, b, x, y, start, select) and `Mouse`
  (left, right, `position`) group buttons. `Inputs(players=4)` holds the
  gamepads and one mouse; `Inputs.gamepad(index)` returns a player's gamepad
  and raises `IndexError` for an unknown index; `Inputs.advance()` advances
  every button.
- `Canvas(width=256, height=144)` records `clear`, `rect`, `circ`, `sprite`
  and `text` calls as `DrawCommand` values in `commands`. `commands_of(kind)`
  filters them, `set_camera(x, y)` stores the view offset in `camera` and
  `reset()` empties the list for a new frame.
- `Rng(seed=None, values=None)` returns unsigned 32-bit numbers from
  `next()`. Given `values`, it replays them in a loop, which makes games
  deterministic in tests.

Every game takes an optional `rng` where it needs randomness.

## A frame loop

```python
from arcadekit.engine import Canvas, Inputs
from arcadekit.pong import Pong

game = Pong()
inputs = Inputs()
canvas = Canvas()

for _ in range(120):
    canvas.reset()
    game.update(inputs, canvas)
    inputs.advance()

print(len(canvas.commands_of("rect")))  # the two paddles
```

Press a button before calling `update` to play:

```python
inputs.gamepad(0).up.press()
game.update(inputs, canvas)
inputs.advance()
```

Every game follows the same pattern: build it, then call
`update(inputs, canvas)` once per frame. Dreamland reads only the mouse.
The platformer centres the camera using the canvas size, so give it a
`Canvas` of the size you render at.

## What it does not do

- It opens no window, plays no sound and draws no pixels: sprites are
  recorded by name only, and no image files are loaded.
- It reads no keyboard, controller or mouse itself; your code presses and
  releases the buttons of `Inputs`.
- It runs no frame timer and installs no command; you drive the frame loop.
- It keeps no state between runs: scores and high scores live only in the
  game objects.