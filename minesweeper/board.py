"""The live board: which tiles are covered and which are flagged."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Hashable

from minesweeper.bounds import Bounds2
from minesweeper.coordinates import Coordinates
from minesweeper.tile_map import TileMap


class FlagToggle(enum.Enum):
    """Outcome of toggling a flag on a tile."""

    SET = "set"
    UNSET = "unset"
    NOTHING = "nothing"


@dataclass
class Board:
    """Board state; ``covered_tiles`` maps positions to their cover entities."""

    tile_map: TileMap
    bounds: Bounds2
    tile_size: float
    covered_tiles: dict[Coordinates, Hashable] = field(default_factory=dict)
    flagged_tiles: set[Coordinates] = field(default_factory=set)
    entity: Any = None

    def press_position(self, world_position: tuple[float, float]) -> Coordinates | None:
        """The tile under a world-space point, or None outside the board."""
        if not self.bounds.contains(world_position):
            return None
        dx = world_position[0] - self.bounds.position[0]
        dy = world_position[1] - self.bounds.position[1]
        return Coordinates(int(dx / self.tile_size), int(dy / self.tile_size))

    def tile_selected(self, coordinates: Coordinates) -> Hashable | None:
        return self.covered_tiles.get(coordinates)

    def try_uncover_tile(self, coordinates: Coordinates) -> Hashable | None:
        """Remove and return the cover of an unflagged covered tile."""
        if coordinates in self.flagged_tiles:
            return None
        return self.covered_tiles.pop(coordinates, None)

    def try_toggle_flag(
        self, coordinates: Coordinates
    ) -> tuple[FlagToggle, Hashable | None]:
        entity = self.covered_tiles.get(coordinates)
        if entity is None:
            return FlagToggle.NOTHING, None
        if coordinates in self.flagged_tiles:
            self.flagged_tiles.discard(coordinates)
            return FlagToggle.UNSET, entity
        self.flagged_tiles.add(coordinates)
        return FlagToggle.SET, entity

    def is_win(self, flag_mode: bool) -> bool:
        bombs = self.tile_map.bomb_count
        if flag_mode:
            return bombs == len(self.flagged_tiles) == len(self.covered_tiles)
        return bombs == len(self.covered_tiles)

    def uncover_tile_neighbour(self, coordinates: Coordinates) -> list[Hashable]:
        return [
            self.covered_tiles[c]
            for c in self.tile_map.neighbours(coordinates)
            if c in self.covered_tiles
        ]

    def uncover_bomb(self) -> list[Hashable]:
        return [
            self.covered_tiles[c]
            for c in self.tile_map.bomb_tiles()
            if c in self.covered_tiles
        ]