# jankbits

A small 2D arcade game built around a splash screen, a title menu, a few
playable screens with pausing, and a firework launcher. The game logic is
plain Python; `pygame` is used only to open the window, read input and draw.

## Installing

```
pip install .
```

## Playing

```
jankbits
jankbits --dev
```

`--dev` turns on development tools: the backquote key (`` ` ``) toggles a
debug-UI flag on the game.

The game opens on a short splash screen (Escape skips it), then shows the
title menu with **Play**, **Settings**, **Credits** and **Exit**.

- **Play** goes to the workshop screen once all resources are ready, or to a
  loading screen that moves on to the gameplay screen when they are.
- On the gameplay screen, `W`/`A`/`S`/`D` or the arrow keys move the player,
  who wraps around the edges of the window.
- `P` or Escape on the workshop, gameplay or launchpad screen pauses the game
  and opens the pause menu (**Continue**, **Settings**, **Quit to title**);
  `P` or Escape closes it again.
- In **Settings**, `-` and `+` change the master volume in steps of 10%,
  between 0% and 300%. **Back** or Escape returns to the title menu or the
  pause menu, depending on where settings was opened from.
- In **Credits**, **Back** or Escape returns to the title menu.

## Using the pieces

Everything can be driven without a window:

```python
from jankbits.animation import PlayerAnimation, PlayerAnimationState
from jankbits.movement import Vec2, MovementController, apply_movement, screen_wrap
from jankbits.settings import raise_global_volume, volume_label

anim = PlayerAnimation()
anim.update_state(PlayerAnimationState.WALKING)
anim.update_timer(0.05)
print(anim.atlas_index())            # 7

position = apply_movement(Vec2(0.0, 0.0), MovementController(intent=Vec2(1.0, 0.0)), 0.5)
print(screen_wrap(position, Vec2(800.0, 600.0)))   # Vec2(x=200.0, y=0.0)

print(volume_label(raise_global_volume(1.0)))      # 110%
```

The modules:

- `jankbits.states` – `Screen`, `Menu`, `AppSystems` and `Key`.
- `jankbits.assets` – `ResourceHandles`, a queue of resources inserted once
  their assets report loaded.
- `jankbits.audio` – `AudioPlayer`, `music`, `sound_effect` and
  `apply_global_volume`.
- `jankbits.animation` – `Timer`, `PlayerAnimation` and `UapAnimation`.
- `jankbits.movement` – `Vec2`, `MovementController`, `apply_movement`,
  `screen_wrap`, `player_intent` and `uap_intent`.
- `jankbits.launcher` – `Launcher`, `Projectile`, `cleanup_projectiles`,
  `spawn_firework`, `Firework` and `Launchpad` (rotate with `A`/Left and
  `D`/Right within ±1.2 radians, fire with Space; projectiles explode into
  fireworks after travelling 500 units).
- `jankbits.splash` – `FadeInOut` and `SplashScreen`.
- `jankbits.theme` – colours, `InteractionPalette`, `Label`, `Button` and the
  `header`, `label`, `button` and `button_small` helpers.
- `jankbits.settings` – volume steps, the volume label and `back_menu`.
- `jankbits.menus` – the menus' widgets and the `Transition`s their buttons
  return.
- `jankbits.flow` – `GameFlow`, the screen/menu/pause state machine, and
  `workshop_layout`.
- `jankbits.app` – `Game` (advanced with `Game.step`, shown with `Game.run`)
  and `main`.

## What it does not do

- No images or sounds are loaded or played. The player is drawn as a
  rectangle, projectiles and firework particles as circles; audio players are
  tracked with their volumes but never output.
- The workshop screen is empty in the window: there is no **Launch bits!**
  button there, so the launchpad is not reachable from the running game,
  though `Launchpad` works on its own.
- There is no UAP on the launchpad; `uap_intent` and `UapAnimation` exist but
  the game does not use them.
- The debug-UI flag toggled in `--dev` mode draws nothing.

## Running the tests

```
pip install ".[test]"
pytest
```