"""The grid of tiles with bomb placement and neighbour counting."""

from __future__ import annotations

import random
from collections.abc import Iterator

from minesweeper.coordinates import Coordinates
from minesweeper.tile import Tile, TileKind

_OFFSETS = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)


class TileMap:
    """A ``height`` by ``width`` grid of tiles, indexed as ``map[row][column]``."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self.bomb_count = 9
        self._bomb_coordinates: set[Coordinates] = set()
        self._rows: list[list[Tile]] = [[Tile.empty()] * width for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __iter__(self) -> Iterator[list[Tile]]:
        return iter(self._rows)

    def __getitem__(self, row: int) -> list[Tile]:
        return self._rows[row]

    def neighbours(self, coordinates: Coordinates) -> Iterator[Coordinates]:
        """The eight surrounding positions; those off the grid are included."""
        return (coordinates + offset for offset in _OFFSETS)

    def bomb_tiles(self) -> Iterator[Coordinates]:
        return iter(self._bomb_coordinates)

    def is_bomb_at(self, coordinates: Coordinates) -> bool:
        if coordinates.x >= self._width or coordinates.y >= self._height:
            return False
        return self._rows[coordinates.y][coordinates.x].is_bomb()

    def bomb_count_at(self, coordinates: Coordinates) -> int:
        """Number of bombs around a tile; zero for a bomb itself."""
        if self.is_bomb_at(coordinates):
            return 0
        return sum(1 for c in self.neighbours(coordinates) if self.is_bomb_at(c))

    def set_bombs(self, bomb_count: int, rng: random.Random | None = None) -> None:
        """Place ``bomb_count`` bombs at random and number their neighbours."""
        free = sum(1 for row in self._rows for tile in row if not tile.is_bomb())
        if bomb_count > free:
            raise ValueError(
                f"cannot place {bomb_count} bombs on a board with {free} free tiles"
            )
        rng = rng or random.Random()
        self.bomb_count = bomb_count
        remaining = bomb_count
        while remaining > 0:
            row = rng.randrange(self._height)
            column = rng.randrange(self._width)
            if self._rows[row][column].kind in (TileKind.EMPTY, TileKind.NEIGHBOUR):
                self._rows[row][column] = Tile.bomb()
                self._bomb_coordinates.add(Coordinates(column, row))
                remaining -= 1
        for y, row in enumerate(self._rows):
            for x in range(len(row)):
                count = self.bomb_count_at(Coordinates(x, y))
                if count > 0:
                    row[x] = Tile.neighbour(count)