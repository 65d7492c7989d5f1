# penguinrun

The rules of a small top-down arcade game, as plain Python objects and
numbers. A penguin walks around a stage built from walls, picks up
money, touches check points and is hit by bouncing enemies. This
package decides what happens each frame; drawing the result is left to
whatever renderer you pair it with.

## What is inside

- `penguinrun.element`: the base `Element` (position, size, tags,
  type, `kill()`), `ElementType` and `Tag`, `Sprite` for an image
  handle with its size, `Root` (a plain box), and `ElementWithImages`
  with `ImagePlacement` for elements drawn from several image pieces.
- `penguinrun.collision`: `collide(source, other)` lists which edges
  (`Side`) of `source` lie on `other`, with the contact length of each
  and its percentage of the total; `max_collisions(source, other)`
  keeps only the longest contacts.
- `penguinrun.timer`: a pausable `Timer` driven by a clock callable
  that returns milliseconds (a monotonic clock by default).
- `penguinrun.handler`: `Handler` turns held `Key` values (`UP`,
  `DOWN`, `LEFT`, `RIGHT`) into player movement and keeps lives,
  energy and money; `format_money(amount)` gives the short money label
  such as `"2.5 $"`, `"12.3 k"` or `"50 c"`.
- `penguinrun.walls`: `Wall` (with `classic_wall_horizontal` and
  `classic_wall_vertical`), `Background`, and `Tecnowall`, a wall made
  of perpendicular `AdvancedWall` segments joined by `Corner` pieces;
  `Tecnowall.wall_boxes()` gives a bounding box per segment.
- `penguinrun.items`: `Money`, which bobs up and down and whose picture
  name comes from `money_tier(value)`, and `CheckPoint`, which spells
  out "checkpoint" from the letter sprites you give it once touched.
- `penguinrun.player`: `Player`, which stops at walls, collects money,
  ticks check points and blinks for a while after `lose_life()`;
  `PlayerAnimations` holds its walking frames.
- `penguinrun.enemy`: `Enemy`, `ClassicEnemy` (bounces off walls,
  hurts a player it touches and plays its explosion frames) and
  `SequentialEnemy` (keeps its heading and tracks the distance to its
  current waypoint).
- `penguinrun.stage`: `Stage` holds elements by type together with the
  players' handlers and updates them each frame; `GraphicStage` adds a
  camera that follows one player, a zoom factor kept between 0.1 and 2,
  and `drawable()`, the visible elements in layer order.
- `penguinrun.intro`: the title-screen `ParticleField` of `Point`
  particles and a `Menu` of centred `MenuButton`s with `hover()`.
- `penguinrun.runner`: `TestRunner`, which runs named checks returning
  0 (or `None`) on success and an error count otherwise, prints
  progress and a summary, and returns a `RunReport`.

## A short example

```python
from penguinrun.handler import Handler, Key
from penguinrun.stage import GraphicStage

stage = GraphicStage()
controller = Handler("Tux Kernel")
stage.add_player(400, 400, controller)
stage.set_focus_player(0)

controller.give_money(2.5)
print(controller.money_label())   # 2.5 $

controller.keydown(Key.RIGHT)
for _ in range(60):
    stage.update()
    stage.update_camera()
controller.keyup(Key.RIGHT)

left, right, bottom, top = stage.view_bounds()
```

Each call to `Stage.update()` advances every live element by one frame
and then lets each player's `Handler` move it in the held directions.
Moving up increases `y`.

## Timing

`Timer` takes a callable that returns the current time in milliseconds,
which makes it easy to drive from a game loop or from a test:

```python
from penguinrun.timer import Timer

now = 0
timer = Timer(lambda: now)
timer.start()
now = 250
timer.pause()
assert timer.ticks() == 250
```

## What it does not do

There is no window, rendering, font or texture handling, and no
keyboard or mouse input: images are whatever handles you store in
`Sprite` or pass as frames, and key presses must be fed in as `Key`
values. There is no command to run, no level file format and no saved
games. The title screen pieces cover only the particle field and the
menu layout.

## Requirements

Python 3.10 or newer. The package has no third-party dependencies; the
test suite uses pytest (`pip install .[test]`).