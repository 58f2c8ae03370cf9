# honkpet

A small virtual goose pet built around a 128×128 one-bit canvas. The
package holds the pet's sprites, its save record, the things it says,
and four mini-games. Each game advances one frame at a time. Input is
passed in as arguments, and each game draws onto a `Canvas`, so you can
drive it from a terminal, a GUI or a test.

## Install

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Modules

### `honkpet.canvas`

`Canvas(width=128, height=128)` is a monochrome framebuffer, and drawing
outside it is clipped. Its methods:

- `clear()`
- `draw_pixel` and `get_pixel`
- `draw_hline`, `draw_vline` and `draw_line`
- `draw_rect`, `fill_rect` and `draw_round_rect`
- `draw_circle` and `fill_circle`
- `draw_bitmap`, which takes row-major, MSB-first packed data and draws only the set bits

`lit_count()` counts the pixels that are on. `to_text(on="#", off=".")`
renders the canvas as lines of text. `Color` has the values `BLACK`,
`WHITE` and `INVERSE`.

### `honkpet.bitmaps`

`BITMAPS` is the full sprite table, in index order. It holds goose poses
and their masks, furniture, interface icons, food, a gravestone and
scenery. A `Bitmap` has these fields:

- `index`
- `name`
- `display_name`
- `width` and `height`
- `data`, the packed bytes

A `Bitmap` provides these methods:

- `pixel(x, y)`
- `rows()`
- `to_text(on, off)`
- `draw(canvas, x, y, color)`

`bitmap(index)` looks a sprite up by index and raises `IndexError` when
the index is out of range. `find_bitmaps(display_name)` returns every
sprite with that display name, such as `"goose"` or `"tree"`.

### `honkpet.savegame`

`SaveGame` is the fixed-size save record. It holds needs, money, pong XP
and level, inventory, placed furniture with its positions, food
inventory and a save version. Every value is a single byte, and values
that are not bytes raise `ValueError`. `to_bytes()` and
`SaveGame.from_bytes(data)` convert it to and from its packed layout.
`SaveGame.SIZE` gives that layout's length.

`EepromStore(path, size=4096)` keeps a byte-addressed memory image in a
file:

- Bytes that were never written read back as `0xFF`.
- Addresses wrap around the memory size.
- `write_save(addr, save)` stores a record and `read_save(addr)` loads one.

### `honkpet.petlines`

`Mood` lists the pet's moods: idle, carried, hungry, bored, tired,
shaken and fireplace. `lines_for(mood)` returns that mood's canned
lines. `random_line(mood, rng=None)` picks one of them.
`generate_sentence(rng=None)` fills a random sentence template with
nouns, adjectives, verbs and adverbs. Every occurrence of a token in the
template gets the same word.

### `honkpet.flappybird`

`FlappyBird(rng=None)` is a flappy bird game with two recycled pipes and
gravity.

- Scoring: a point is scored each time a pipe spawns.
- `step(jump_held, quit_held=False)` advances one frame. A jump happens
  only on a fresh press.
- After each step, `crashed` and `finished` give the outcome.
- `rewards()` returns `(fun, money)`. Fun is the score capped at 20, and
  money is half the score.
- `END_MESSAGE` holds the pet's parting line.

### `honkpet.particlesim`

`ParticleSim(rng=None, count=125)` scatters particles that fall with the
tilt angles and push apart on contact. It uses a spatial grid for the
contact checks. Particles bounce off the screen edges.

- `update(angle_x, angle_y)` runs one physics frame.
- `step(left_held, angle_x, angle_y)` does the same, and releasing the
  left button toggles zero gravity.
- `draw(canvas)` renders each particle as a ring.

### `honkpet.pong`

`Pong(level=1, rng=None)` is a match against the pet, whose paddle AI
gets faster and more reactive with its pong level.

- `step(tilt_y, left_held=False, right_held=False)` moves the player
  paddle toward `tilt_y`. Holding left recentres the target, and holding
  right ends the match. A match also ends when either side reaches 5
  points.
- `message` holds the pet's reaction once the match is over.
- `rewards()` returns `(fun, money)`.
- `gained_xp()` gives the pong XP earned.
- `level_up(beginning_xp, gained_xp, beginning_level)` returns the new
  `(xp, level)`. Each level needs `level * 5` XP.

### `honkpet.veridium`

`Veridium(rng=None, clock=None)` is a top-down arena shooter. The arena
has fixed walls (`WALLS`), five enemies that chase the player, up to 50
bullets, and a 50-round magazine.

- `clock` returns milliseconds and drives the two-second reload. It
  defaults to a monotonic clock.
- `step(aim_x, aim_y, left_held=False, middle_held=False, right_held=False)`
  advances one frame:
  - Right walks toward the aim point. With the aim inside the quit box
    in the top-right corner, right quits.
  - Middle fires.
  - Left recentres the aim.
- After each step, `finished` and `game_over` report the outcome.
- `hud_text` and `hud_position` describe the ammo readout.
- `angle_between(x1, y1, x2, y2)` gives the angle between two points,
  with screen y pointing down.

## Example

```python
import random

from honkpet.canvas import Canvas
from honkpet.flappybird import FlappyBird

canvas = Canvas(128, 128)
game = FlappyBird(random.Random(1))
for frame in range(200):
    jump = frame % 12 == 0
    if not game.step(jump, False):
        break
    game.draw(canvas)

print(game.rewards())
print(canvas.to_text("#", "."))
```

Every game takes a `random.Random` instance, so a seeded run repeats
exactly. `step(...)` advances one frame and returns whether the game is
still running. `draw(canvas)` clears the canvas and renders the current
frame.

## What it does not do

- No command, main loop or device driver. You read buttons and tilt
  yourself, call `step` at your own frame rate, and show the canvas
  however you like.
- No pet room, needs simulation or menus. `SaveGame` only stores their
  values.
- The canvas has no text rendering. The games do not draw scores, the
  ammo count or end-of-game banners. Use the games' attributes instead:
  `score`, `hud_text`, `message` and the rest.
- No level-up screen. `level_up` only does the arithmetic.