# mikekit

`mikekit` is a set of small gameplay building blocks for character and world
logic. It does not depend on any game engine and uses only the standard
library.

## Modules

- `mikekit.geometry` holds the immutable `Vector` and `Rotator` types.
  - `Vector` supports `+`, `-`, negation and scaling. Its methods are `dot`,
    `length`, `safe_normal`, `abs_max` and `flattened`.
  - `normalize_axis` wraps an angle in degrees into (-180, 180].
  - `clamp_angle` clamps an angle to an arc. An angle outside the arc snaps to
    the nearer bound.
- `mikekit.mathlib` holds stateless helpers:
  - `is_nearly_equal`
  - `angle_radians` and `angle_degrees`
  - `linear_conversion` and `fast_linear_conversion`
  - `inverse_interpolation` and `fast_inverse_interpolation`
  - `incremental_value`
  - `max_absolute_element`
  - `clamp_angles`
  - `circular_clamp`
  - `exclusive_random_in_range`, which returns a `(found, value)` pair
  - `is_moving_forward` and `is_moving_forward_xy`, which return a
    `MovementCheck`

  The `fast_` variants raise `ZeroDivisionError` when the range is empty. The
  variants without `fast_` handle an empty range instead:
  `linear_conversion` returns the value unchanged, and `inverse_interpolation`
  returns 0.
- `mikekit.events` holds `Event`, a multicast callback list. Its methods are
  `add`, `remove`, `broadcast` and `clear`.
- `mikekit.settings` holds `GlobalSettings`, a dataclass with the following
  members:
  - the fields `debug_enabled`, `pathfinding_3d_enabled` and `near_clip_plane`
  - `reset`
  - the angle conversion factors `radians_to_degrees_multiplier` and
    `degrees_to_radians_multiplier`
- `mikekit.timers` holds `TimerManager`, which runs one-shot timers on
  simulated time.
  - `set_timer` returns a `TimerHandle` and raises `ValueError` for a delay that
    is not positive.
  - `state` returns a `TimerState` snapshot. It reports -1 times for a timer
    that does not exist.
  - Time moves only when you call `advance`. Due timers fire in order of
    expiry.
- `mikekit.health` holds `HealthComponent`, which tracks current and maximum
  health. Maximum health is never below `MIN_MAX_HEALTH`.
  - It broadcasts `on_death`, `on_revive` and `on_damage`.
  - You can pass it an `Event` as its damage source. It binds to that event in
    `begin_play` and unbinds in `destroy`.
- `mikekit.reordering` holds `ReorderingComponent`, which teleports a
  `SceneTarget` back to a saved `Transform` after a cooldown and a delay.
  - A target whose `Mobility` is not `MOVABLE` is not moved. In that case the
    component broadcasts `on_reorder_failed` instead.
  - The component needs a `TimerManager` to schedule the cooldown and the
    delay.
- `mikekit.sprint` holds `SprintComponent`, which raises the walk speed and
  acceleration of a `CharacterMovement`.
  - Call `tick` to apply the boost. Each tick scales the boost by how closely
    the velocity follows the facing direction.
  - When the character is outside the forward tolerance, the component restores
    the saved stats.
- `mikekit.perception` holds `PerceptionComponent`, which has a `SightConfig`
  and a `HearingConfig` that you can change at run time.
  - `set_sight_range` keeps the gap between the sight radius and the lose-sight
    radius.
  - Every change broadcasts `on_senses_updated`.
  - Using a sense that is not configured raises `LookupError`.
- `mikekit.sound` holds `PlaySoundData`, a settings record for playing a sound
  and reporting a noise. Use `to_dict` and `from_dict` to convert it to and from
  a plain dictionary. `from_dict` rejects unknown keys with `ValueError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from mikekit.health import HealthComponent

health = HealthComponent()
health.on_death.add(lambda: print("down"))
health.begin_play()
health.take_damage(None, 150.0, None, None, None)  # prints "down"
```

```python
from mikekit.reordering import ReorderingComponent, SceneTarget
from mikekit.timers import TimerManager

timers = TimerManager()
reorder = ReorderingComponent(timers)
crate = SceneTarget()
reorder.begin_play(crate)   # saves the crate's transform, starts the cooldown
timers.advance(15.0)        # 10 s cooldown + 5 s delay: the crate is moved back
```

## What it does not do

`mikekit` models gameplay state only. It has no rendering, physics,
collision queries or line traces, and it does not play audio. `PlaySoundData`
only describes a sound, and `PerceptionComponent` only holds sense settings and
does not detect anything. There is no game loop, no real-time clock and no
command-line tool. You drive the components yourself by calling `tick`,
`take_damage` and `TimerManager.advance`.