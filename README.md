# underescape

The game logic of a small side-scrolling stealth game. The player sneaks
past patrolling enemies, hides behind walls and throws an item to make a
noise. This package holds the simulation: vectors and rectangles, keyboard
and mouse state, resource bookkeeping, frame timing and the game objects
themselves. Drawing goes through a canvas object that you supply.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `underescape.geometry`: `Vector2` (length, `normalized`, `dot`, `cross`,
  `rotated`, and the `+`, `-` and `*` operators), `Point`, and `Rect` with
  its `width` and `height` properties.
- `underescape.input`: `KeyId` and `MouseButton`, and `Keyboard` and `Mouse`,
  which keep the state of the current and the previous frame. Call `update`
  once per frame; `button`, `trigger` and `released` then tell you whether an
  input is held, was just pressed or was just let go. `analog_stick` maps raw
  stick axes to -1..1 with the Y axis flipped, and `trigger_value` maps a raw
  trigger reading to 0..1.
- `underescape.resources`: `ResourceRegistry` loads each key once through a
  loader function you give it and caches the handle; a loader that returns
  -1 makes it raise `ResourceError`. `EffectPlayList` keeps started effects
  and, in `draw_all`, draws those still playing and drops the rest.
  `BlendMode` lists the blend modes, and `split_color` splits a 0xAARRGGBB
  colour into `(alpha, red, green, blue)`.
- `underescape.clock`: `FrameClock`. Call `tick(now)` with a millisecond
  timestamp at the start of each frame; it tracks the delta time (capped at
  0.16 s), an FPS figure averaged over 60 frames, and `wait_time(now)` tells
  you how many milliseconds to sleep to hold the frame rate.
- `underescape.character`: `Character`, the player: walking, running and
  dashing, jumping and falling, landing on the ground, staying inside the
  window, hiding behind a wall, being seen by an enemy's sight circle, the
  discovery gauge, and picking up (F), throwing (C) and putting down (R) an
  item.
- `underescape.enemy`: `Enemy` and `EnemyStatus`. An enemy patrols between
  two bounds, becomes surprised when it hears a sound (`sound_sensor`),
  chases the sound's source, stays watchful for a while, and jumps under
  gravity.
- `underescape.gameobject`: `GameObject` and `ItemState`, the item the player
  can carry, throw towards the mouse cursor, or put down.
- `underescape.timer`: `Timer`, a stage countdown kept in frames and shown as
  hundreds, tens and ones of seconds.

## Example

```python
from underescape.geometry import Vector2
from underescape.input import Keyboard, KeyId
from underescape.character import Character

ground = Vector2(0.0, 900.0)
player = Character()
player.initialize(ground)

keyboard = Keyboard()
for _ in range(30):
    keyboard.update({KeyId.D})
    player.update(keyboard)
    player.round_hit(ground)

print(player.pos)
```

## Drawing

The `draw` methods take a canvas object. It needs a
`draw_texture(file_name, position, color, rect, anchor=..., scale=...)`
method, where everything after `position` is optional, and, for
`Character`, a `draw_text(size, text, position)` method. Texture names are
relative paths such as `data/ball.png`.

## What this package does not do

There is no window, renderer, sound playback or game loop, and no command
to start a game. You supply the canvas to draw on, read the keyboard and
mouse yourself and pass their state in each frame, and drive the objects'
`update` and `draw` methods from your own loop.