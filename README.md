# aceescape

A small 2D arcade game built on pygame. You fly a ship around a bounded arena
while Deimos, an enemy vessel, turns toward you and drifts after you. Its
looping corruption sound speeds up and slows down over time and is panned
according to where Deimos is relative to your ship.

The package also includes two smaller programs that share the same state and
menu machinery: a Breakout clone with a scoreboard, and a settings-menu demo.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
ace-escape
```

The game opens on a splash screen. After three seconds it moves to the main
menu, which offers **New Game** and **Quit**. An FPS counter is drawn in the
top-left corner.

Controls in game:

- Left / Right arrows: rotate the ship
- Up arrow: thrust forward
- Space: pause or resume the corruption sound
- Escape: quit

The ship is kept inside a 1200 × 640 arena.

Images and sounds are loaded from an `assets` directory in the current working
directory (for example `assets/textures/player.png`,
`assets/sounds/corruption.ogg`, `assets/branding/logo.png`). When a file is
missing the game still runs: ships are drawn as triangles, the splash screen
shows the title text, and there is no sound.

### What the game does not do

There is no way to win or lose: Deimos never collides with the ship, there are
no weapons, asteroids or score, and nothing leads to a game-over screen. The
main menu has no settings screen; passing any action other than
`MenuButtonAction.PLAY` or `MenuButtonAction.QUIT` to `menu_action` raises
`ValueError`. Once a game has started it cannot return to the menu; Escape
ends the program.

## Breakout

```
ace-escape-breakout
```

Move the paddle with the Left and Right arrows. Each brick the ball hits is
removed and adds one to the score shown in the top-left corner. A collision
sound (`assets/breakout_collision.ogg`) plays when present. The ball bounces
off every wall, including the bottom one, so the game runs until the window is
closed.

## Settings demo

```
ace-escape-settings-demo
```

This shows a splash screen for one second, then a menu. From the menu you can
open **Settings**, pick a display quality (Low, Medium or High) and a volume
from 0 to 9, then start a short game screen. That screen shows the chosen
settings for five seconds and then returns to the menu. The settings are only
shown; they do not change the window or any sound.

## Using the pieces as a library

The modules can be used on their own, without a window:

- `aceescape.states`: `GameState`, a `StateMachine` whose queued transitions
  (`set`) take effect on `apply` and run `on_enter` / `on_exit` callbacks, and a
  tagged-entity `World` with `despawn_screen`.
- `aceescape.ships`: `Key`, `Transform`, `Player`, `Deimos`, `move_player`,
  `move_deimos`, `smooth_nudge` and `corruption_speed`.
- `aceescape.splash`: `Timer` (once or repeating) and `SplashScreen`.
- `aceescape.menu`: `MenuState`, `MenuButtonAction`, `Interaction`,
  `button_color`, `menu_action` and `MainMenu`.
- `aceescape.app`: `AceEscape`, whose `update(dt, keys)` advances one frame
  and returns `False` once the game should quit.
- `aceescape.breakout`: `Collision`, `ball_collision`, `brick_layout`,
  `WallLocation` and the `Breakout` simulation, whose `update(dt, keys)` runs
  one step and returns the number of collisions.
- `aceescape.settings_demo`: `DisplayQuality`, `DemoSettings` and the
  `SettingsDemo` state model with `update`, `press`, `choose_quality` and
  `choose_volume`.
- `aceescape.settings_demo_app`: `DemoLayout`, which lists the buttons on the
  current menu screen (`buttons`) and turns a click position into an action
  (`click`).