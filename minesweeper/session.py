"""A single game of minesweeper: tiles, covers, flags, and how the game ends."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

from minesweeper.board import Board, FlagToggle
from minesweeper.bounds import Bounds2
from minesweeper.coordinates import Coordinates
from minesweeper.endgame import ENDGAME_DELAY
from minesweeper.settings import CenteredPosition, GameSettings
from minesweeper.states import AppState, GameState
from minesweeper.stopwatch import GameStopwatch, GameTimer
from minesweeper.tile import Tile, TileKind
from minesweeper.tile_map import TileMap

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
TEAL: Color = (0, 128, 128)

TILE_COLOR = WHITE
COVER_COLOR = TEAL
BOMB_COLOR = RED
FLAG_COLOR = RED
WRONG_FLAG_COLOR = RED

_NUMBER_COLORS: dict[int, Color] = {
    1: (0, 0, 255),
    2: (0, 128, 0),
    3: (255, 0, 0),
    4: (0, 0, 128),
    5: (128, 0, 0),
    6: (0, 255, 255),
    7: (128, 0, 128),
}
_SILVER: Color = (192, 192, 192)


def number_color(count: int) -> Color:
    """The colour of the number drawn on a tile next to ``count`` bombs."""
    return _NUMBER_COLORS.get(count, _SILVER)


class GameEvent(enum.Enum):
    """Something that happened during one update of the session."""

    WIN = "win"
    LOSE = "lose"
    ENDGAME = "endgame"


@dataclass(eq=False)
class TileEntity:
    """A tile on the board together with the state of its cover."""

    coordinates: Coordinates
    tile: Tile
    center: tuple[float, float]
    covered: bool = True
    flagged: bool = False
    pending_uncover: bool = False


class GameSession:
    """Builds a board from settings and runs the rules of one game."""

    def __init__(self, settings: GameSettings, rng: random.Random | None = None) -> None:
        self.settings = settings
        tile_size = settings.fixed_tile_size()
        width, height = settings.map_size
        tile_map = TileMap(width, height)
        board_size = (width * tile_size, height * tile_size)

        placement = settings.position
        if isinstance(placement, CenteredPosition):
            ox, oy, oz = placement.offset
            self.position = (-board_size[0] / 2.0 + ox, -board_size[1] / 2.0 + oy, oz)
        else:
            self.position = placement.position

        tile_map.set_bombs(settings.bomb_count, rng)

        self.tile_size = tile_size
        self.sprite_size = tile_size - settings.tile_padding
        self.tiles: dict[Coordinates, TileEntity] = {}
        self._pending: dict[TileEntity, None] = {}

        covered: dict[Coordinates, TileEntity] = {}
        safe_start: TileEntity | None = None
        for y, row in enumerate(tile_map):
            for x, tile in enumerate(row):
                coordinates = Coordinates(x, y)
                entity = TileEntity(
                    coordinates,
                    tile,
                    (x * tile_size + tile_size / 2.0, y * tile_size + tile_size / 2.0),
                )
                self.tiles[coordinates] = entity
                covered[coordinates] = entity
                if not tile.is_bomb():
                    safe_start = entity

        if settings.easy_mode and safe_start is not None:
            self._mark_uncover(safe_start)

        self.board = Board(
            tile_map=tile_map,
            bounds=Bounds2((self.position[0], self.position[1]), board_size),
            tile_size=tile_size,
            covered_tiles=covered,
            flagged_tiles=set(),
            entity="board",
        )
        self.app_state = AppState.PLAYING
        self.game_state = GameState.DISABLED
        self.stopwatch = GameStopwatch()
        self._start_timer = GameTimer(settings.timer_start)
        self._endgame_timer: GameTimer | None = None

    def _mark_uncover(self, entity: TileEntity) -> None:
        entity.pending_uncover = True
        self._pending[entity] = None

    def trigger_tile(self, coordinates: Coordinates) -> bool:
        """Ask to uncover a tile; True if it will be uncovered on the next update."""
        if self.game_state is not GameState.PLAYING:
            return False
        if coordinates in self.board.flagged_tiles:
            return False
        entity = self.board.tile_selected(coordinates)
        if entity is None:
            return False
        self._mark_uncover(entity)
        return True

    def toggle_flag(self, coordinates: Coordinates) -> FlagToggle:
        """Set or clear the flag on a covered tile."""
        if self.game_state is not GameState.PLAYING:
            return FlagToggle.NOTHING
        result, entity = self.board.try_toggle_flag(coordinates)
        if result is FlagToggle.SET:
            entity.flagged = True
        elif result is FlagToggle.UNSET:
            entity.flagged = False
            entity.pending_uncover = False
            self._pending.pop(entity, None)
        return result

    def _process_uncovers(self) -> bool:
        """Uncover every pending tile, cascading over empty ones; True on a bomb."""
        lost = False
        while True:
            batch = [entity for entity in self._pending if not entity.flagged]
            if not batch:
                return lost
            for entity in batch:
                del self._pending[entity]
                entity.pending_uncover = False
                entity.covered = False
                if self.board.try_uncover_tile(entity.coordinates) is None:
                    continue
                if entity.tile.is_bomb():
                    for cover in self.board.uncover_bomb():
                        self._mark_uncover(cover)
                    lost = True
                elif entity.tile.kind is TileKind.EMPTY:
                    for cover in self.board.uncover_tile_neighbour(entity.coordinates):
                        self._mark_uncover(cover)

    def _finish(self, state: GameState) -> None:
        self.game_state = state
        self.stopwatch.pause()
        self._endgame_timer = GameTimer(ENDGAME_DELAY)

    def update(self, delta: float) -> list[GameEvent]:
        """Advance the game by ``delta`` seconds and return what happened."""
        events: list[GameEvent] = []
        if self.app_state is not AppState.PLAYING:
            return events

        if self.game_state in (GameState.WIN, GameState.LOSE) and self._endgame_timer:
            if self._endgame_timer.tick(delta).finished():
                self.app_state = AppState.ENDGAME
                events.append(GameEvent.ENDGAME)
                return events

        if self.game_state is GameState.DISABLED:
            if self._start_timer.tick(delta).finished():
                self.game_state = GameState.PLAYING
                self.stopwatch.start()

        if self._process_uncovers():
            events.append(GameEvent.LOSE)
        if self.board.is_win(self.settings.flag_mode):
            events.append(GameEvent.WIN)

        if self.game_state is GameState.PLAYING:
            if GameEvent.LOSE in events:
                self._finish(GameState.LOSE)
            elif GameEvent.WIN in events:
                self._finish(GameState.WIN)
        return events

    def wrong_flags(self) -> list[Coordinates]:
        """Flagged tiles without a bomb, revealed once the game is lost."""
        if self.game_state is not GameState.LOSE:
            return []
        wrong = (
            c for c in self.board.flagged_tiles if not self.tiles[c].tile.is_bomb()
        )
        return sorted(wrong, key=lambda c: (c.y, c.x))