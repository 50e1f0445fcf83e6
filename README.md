# minesweeper

A Minesweeper game that runs in a pygame window. It has a main menu, a settings menu, the board and an end screen. The end screen shows whether you won or lost and how long the game took.

## Install

```
pip install .
```

## Play

```
minesweeper
```

Options:

- `--fullscreen`: open a borderless full-screen window instead of a resizable one.
- `--seed N`: seed the random bomb placement, so the same boards come up again.

Controls:

- Left click uncovers a tile. Right click sets or removes a flag.
- On a touch screen, a short tap uncovers a tile. A touch held longer than the touch delay sets or removes a flag. Touch input is ignored while more than one finger is down.
- Hold the middle mouse button and move the mouse to pan the board. The scroll wheel zooms, and so does a pinch gesture.
- On the end screen, any click returns to the main menu.

The board ignores input until the start delay has passed. After that, uncovering an empty tile also uncovers its neighbours.

Without flag mode, a game is won when the only covered tiles left are the bombs. With flag mode on, every one of those bombs must also carry a flag. When a game is lost, every bomb is uncovered and each flag on a tile without a bomb is crossed out. After two seconds the end screen appears.

## Settings

The settings menu has three tabs:

- **Grid**: board width and height (default 7 × 7) and bomb count (default 10). The bomb count must stay between 1 and one less than the number of tiles. A side can be shrunk only while more tiles than bombs remain.
- **Game**: safe start and flag mode. Safe start uncovers one tile that is not a bomb when the game begins. If safe start is on and the bomb count is 1 or one less than the number of tiles, flag mode is forced on.
- **Accessibility**: start delay (default 0.8 s, in steps of 0.1 s) and touch delay (default 0.15 s, in steps of 0.01 s), each up to 3 s.

The same options are available in code through `minesweeper.settings.GameSettings`:

- `GameSettings.to_dict` and `GameSettings.from_dict` convert the options to and from plain data.
- `minesweeper.settings_menu.apply_action` and `is_disabled` apply the menu's rules to a `GameSettings`.

## Using the game logic in code

The game logic does not need a window. A `minesweeper.session.GameSession` runs one game. `update` returns the `GameEvent` values for that step: `WIN`, `LOSE`, and `ENDGAME` once the end delay has passed.

```python
import random

from minesweeper.coordinates import Coordinates
from minesweeper.session import GameEvent, GameSession
from minesweeper.settings import GameSettings

settings = GameSettings(map_size=(9, 9), bomb_count=10)
session = GameSession(settings, random.Random(1))
session.update(settings.timer_start)  # let the start delay pass
session.trigger_tile(Coordinates(0, 0))
events = session.update(0.016)
if GameEvent.LOSE in events:
    print("Boom")
```

Other parts can also be used on their own:

- `minesweeper.tile_map.TileMap` places bombs and counts neighbours.
- `minesweeper.board.Board` tracks covered and flagged tiles.
- `minesweeper.camera.Camera2D` converts between screen and world positions.
- `minesweeper.endgame.endgame_lines` builds the texts of the end screen.

## Limitations

- The board is drawn with plain shapes and the default pygame font. It uses no image textures.
- Settings are not saved. Changes in the settings menu last only until the program exits.
- Only a fixed tile size is supported. `GameSettings.fixed_tile_size` raises `ValueError` for an `AdaptiveTileSize`.

## Tests

```
pip install .[test]
pytest
```