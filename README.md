# brawldefender

A small real-time tower defense game. Mobs walk a winding path across the
map; you place towers on the marked emplacements to shoot them down before
they reach the exit. Each mob that gets through costs a life, and the game
ends when all three lives are gone.

## Installing

```
pip install .
```

The game uses `pygame`. Its images, sounds and font are not part of the
package: they are looked up relative to the current working directory
(`png/`, `music_sounds/`, `font/bs_font.ttf`). A missing image or sound is
simply not drawn or played, and a missing font falls back to pygame's
default font.

## Playing

```
brawldefender
```

The window is 1920×1080 and starts on the title menu (Play, Quit,
Settings). The settings menu toggles the sound on and off.

Show the help text instead of starting the game:

```
brawldefender -h
```

The help text is read from `src/h_gestion.txt` in the current working
directory; if that file cannot be read, the command prints an error and
exits with status 84.

### Controls

- Click an empty emplacement to open the tower market, then click a tower
  to buy it. Tiers cost 100, 250, 500 and 700 coins. Clicking elsewhere on
  the map, or pressing `Escape`, closes the market.
- Hover a tower to see its range.
- Press `S` while hovering a tower to sell it for half its price.
- Press `Space` to pause (Resume, Quit, Restart), `Escape` for settings.

You start with 200 coins and 3 lives. Mobs start arriving every 5 seconds
once the first tower is placed, and every 25 seconds each wave grows by one
mob. Towers pick the nearest mob in reach and hit it once a second; a
killed mob earns coins. When the lives run out the end-of-game menu offers
Play again and Quit.

## Library use

The game logic can be driven without a window:

```python
from brawldefender.game import GameState

state = GameState()
state.select_emplacement(0)
state.buy_tower("tier1")
print(state.money_text())  # "100"
```

- `brawldefender.game` — `GameState` (bank, lives, emplacements, market,
  mobs, tower shots, selling) and `distance_between`.
- `brawldefender.entities` — `Vec2`, `Rect`, `Button`, `Tower`, `Mob` and
  the factories `make_button`, `make_emplacement`, `make_selection_button`,
  `make_mob`, `spawn_mob`, `random_mob_type`.
- `brawldefender.mobs` — path movement: `move_mob`, `animate_mob`,
  `advance_mobs`.
- `brawldefender.menus` — `Menu`, `Action`, `Session`, `build_menus`,
  `volume_images`.
- `brawldefender.strtools` — small string and number helpers
  (`getnbr`, `str_to_word_array`, `format_printf`, `to_hex`, …).
- `brawldefender.app` — `App`, `wants_help` and `main`, the window and
  the command.

## What it does not do

There is no scoreboard: the end-of-game menu shows a Scoreboard button,
but pressing it only plays the click sound. Scores and progress are not
saved anywhere.

## Running the tests

```
pip install .[test]
pytest
```