"""The content of a single board tile."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TileKind(enum.Enum):
    BOMB = "bomb"
    NEIGHBOUR = "neighbour"
    EMPTY = "empty"


@dataclass(frozen=True)
class Tile:
    """A tile: a bomb, an empty cell, or a cell next to ``count`` bombs."""

    kind: TileKind
    count: int = 0

    @classmethod
    def bomb(cls) -> Tile:
        return cls(TileKind.BOMB)

    @classmethod
    def empty(cls) -> Tile:
        return cls(TileKind.EMPTY)

    @classmethod
    def neighbour(cls, count: int) -> Tile:
        if not 0 <= count <= 255:
            raise ValueError(f"bomb count out of range: {count}")
        return cls(TileKind.NEIGHBOUR, count)

    def is_bomb(self) -> bool:
        return self.kind is TileKind.BOMB