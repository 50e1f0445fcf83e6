"""Turning mouse clicks and touches into tile actions."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

from minesweeper.board import Board
from minesweeper.coordinates import Coordinates
from minesweeper.stopwatch import GameTimer

Point = tuple[float, float]


class TouchPhase(enum.Enum):
    STARTED = "started"
    MOVED = "moved"
    ENDED = "ended"
    CANCELED = "canceled"


class InputKind(enum.Enum):
    """What the player asked to do with a tile."""

    TRIGGER = "trigger"
    FLAG = "flag"


@dataclass(frozen=True)
class InputAction:
    kind: InputKind
    coordinates: Coordinates


def mouse_action(board: Board, world_position: Point, button: str) -> InputAction | None:
    """A left click uncovers, a right click flags; other buttons do nothing."""
    coordinates = board.press_position(world_position)
    if coordinates is None:
        return None
    if button == "left":
        return InputAction(InputKind.TRIGGER, coordinates)
    if button == "right":
        return InputAction(InputKind.FLAG, coordinates)
    return None


def endgame_input(mouse_pressed: bool, touch_pressed: bool) -> bool:
    """Whether the end screen should be left."""
    return touch_pressed or mouse_pressed


class TouchHandler:
    """A short tap uncovers a tile; holding for ``timer_touch`` seconds flags it."""

    def __init__(self, timer_touch: float) -> None:
        self.timer = GameTimer(timer_touch)
        self.first_touch: Point = (0.0, 0.0)
        self.is_covered = True

    def handle(
        self,
        phase: TouchPhase,
        position: Point,
        board: Board,
        to_world: Callable[[Point], Point],
    ) -> InputAction | None:
        """Process one touch event given in screen space."""
        if phase is TouchPhase.STARTED:
            self.first_touch = position
            self.is_covered = True
            self.timer.reset()
            return None
        coordinates = board.press_position(to_world(self.first_touch))
        if coordinates is None or not self.is_covered:
            return None
        if self.timer.finished():
            self.first_touch = position
            self.is_covered = False
            return InputAction(InputKind.FLAG, coordinates)
        if phase is TouchPhase.ENDED:
            return InputAction(InputKind.TRIGGER, coordinates)
        return None

    def tick(self, delta: float) -> None:
        self.timer.tick(delta)