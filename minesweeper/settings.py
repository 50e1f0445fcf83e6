"""Board generation options and their serialised form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class FixedTileSize:
    size: float


@dataclass(frozen=True)
class AdaptiveTileSize:
    min: float = 10.0
    max: float = 50.0


@dataclass(frozen=True)
class CenteredPosition:
    offset: Vec3 = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class CustomPosition:
    position: Vec3


TileSize = Union[FixedTileSize, AdaptiveTileSize]
Position = Union[CenteredPosition, CustomPosition]


def _vec3(value: Any) -> Vec3:
    x, y, z = value
    return (float(x), float(y), float(z))


def _tile_size_to_dict(tile_size: TileSize) -> dict[str, Any]:
    if isinstance(tile_size, FixedTileSize):
        return {"Fixed": tile_size.size}
    return {"Adaptive": {"min": tile_size.min, "max": tile_size.max}}


def _tile_size_from_dict(data: dict[str, Any]) -> TileSize:
    if "Fixed" in data:
        return FixedTileSize(float(data["Fixed"]))
    if "Adaptive" in data:
        inner = data["Adaptive"]
        return AdaptiveTileSize(float(inner["min"]), float(inner["max"]))
    raise ValueError(f"unknown tile size variant: {data!r}")


def _position_to_dict(position: Position) -> dict[str, Any]:
    if isinstance(position, CenteredPosition):
        return {"Centered": {"offset": list(position.offset)}}
    return {"Custom": list(position.position)}


def _position_from_dict(data: dict[str, Any]) -> Position:
    if "Centered" in data:
        return CenteredPosition(_vec3(data["Centered"]["offset"]))
    if "Custom" in data:
        return CustomPosition(_vec3(data["Custom"]))
    raise ValueError(f"unknown position variant: {data!r}")


@dataclass
class GameSettings:
    """Options used to generate and play a board."""

    map_size: tuple[int, int] = (7, 7)
    bomb_count: int = 10
    position: Position = field(default_factory=CenteredPosition)
    tile_size: TileSize = field(default_factory=lambda: FixedTileSize(50.0))
    tile_padding: float = 3.0
    easy_mode: bool = True
    timer_start: float = 0.8
    timer_touch: float = 0.15
    flag_mode: bool = True

    def fixed_tile_size(self) -> float:
        """The tile size; only fixed sizes are supported."""
        if isinstance(self.tile_size, FixedTileSize):
            return self.tile_size.size
        raise ValueError("adaptive tile size is not supported")

    def to_dict(self) -> dict[str, Any]:
        return {
            "map_size": list(self.map_size),
            "bomb_count": self.bomb_count,
            "position": _position_to_dict(self.position),
            "tile_size": _tile_size_to_dict(self.tile_size),
            "tile_padding": self.tile_padding,
            "easy_mode": self.easy_mode,
            "timer_start": self.timer_start,
            "timer_touch": self.timer_touch,
            "flag_mode": self.flag_mode,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSettings:
        try:
            width, height = data["map_size"]
            return cls(
                map_size=(int(width), int(height)),
                bomb_count=int(data["bomb_count"]),
                position=_position_from_dict(data["position"]),
                tile_size=_tile_size_from_dict(data["tile_size"]),
                tile_padding=float(data["tile_padding"]),
                easy_mode=bool(data["easy_mode"]),
                timer_start=float(data["timer_start"]),
                timer_touch=float(data["timer_touch"]),
                flag_mode=bool(data["flag_mode"]),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid settings: {exc}") from exc