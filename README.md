# busdodge

A tiny game for the terminal, meant to pass the time while waiting for the bus.

You steer a red square around a 20×20 board drawn with ANSI colours. Five blue
squares are placed at random when the game starts, and a new cyan square
appears at a random spot (never on top of you) every time you press a steering
key. When you run into another square, the game is over.

## Installing

```
pip install .
```

The game needs a POSIX terminal (it uses `termios` to read keys without
waiting for Enter) that understands ANSI escape sequences.

## Playing

```
busdodge
busdodge --id 42
```

`--id` sets the player id printed at the end (default: `anonymous`).

Controls:

| Key       | Action                |
|-----------|-----------------------|
| `w` / `W` | move up               |
| `a` / `A` | move left             |
| `s` / `S` | move down             |
| `d` / `D` | move right            |
| `Esc`     | quit                  |

The board advances one frame per second. Your square keeps moving in the last
direction you chose and stops at the edge of the board; the other squares stay
where they are. If you share a square with another piece at the start of a
frame, the game ends and prints "Serious one lose."; quitting with `Esc` prints
"You lose but gwaen-chanh-ayo". Either way the id is printed after it, all in a
bright, blinking yellow-on-red banner.

## Using the pieces

The building blocks can be used on their own:

- `busdodge.unit` holds `Color`, `Direction`, the `Vec2` pair (also named
  `Position` and `Size`) and the board dimensions.
- `busdodge.ansi.ansi_print(text, fg, bg, hi, blinking)` and
  `busdodge.ansi.ansi_plain(text, hi, blinking)` wrap text in ANSI formatting
  codes; empty text gives an empty string.
- `busdodge.icon.solid_icon(size, color)` builds a grid of blank `Cell`s of one
  colour, and `icon_width` / `icon_height` measure it.
- `busdodge.game_object.GameObject` is a piece on the board with an `icon`,
  `position` and `direction`; `update()` moves it one step, clamped to the
  board. `player_object`, `random_object` and `random_object_avoiding` create
  pieces at random positions, optionally from a given `random.Random`.
- `busdodge.view.View(out)` keeps the board buffers: `reset_latest()` blanks
  the frame, `draw(obj)` paints a piece, `compose_frame()` returns the bordered
  frame text and `render()` writes it to `out` only when it changed, returning
  whether it did. `display_width(text)` gives the terminal width of a string.
- `busdodge.controller.Controller(view, rng)` holds the game state in
  `objects` and `status`; `step(key)` advances one frame for a key code (or
  `None`) and returns `False` when the game ends, which makes it easy to drive
  without a terminal. `run()` plays in the real terminal using `raw_terminal()`
  and `read_input()`.
- `busdodge.cli.main(argv)` is the command above; `banner(text)` formats the
  closing messages.

## Running the tests

```
pip install .[test]
pytest
```