"""Texts shown on the end-of-game screen."""

from __future__ import annotations

from minesweeper.states import GameState

ENDGAME_DELAY = 2.0
RETURN_HINT = "Click to return to main menu"

_RESULTS = {
    GameState.LOSE: "lose!",
    GameState.WIN: "win!",
}


def result_message(state: GameState) -> str:
    """The headline telling the player how the game ended."""
    return "You've " + _RESULTS.get(state, "[This is an easter egg ;)]")


def played_time_message(total_seconds: float) -> str:
    """Play time as minutes, seconds and milliseconds."""
    if total_seconds < 0:
        raise ValueError(f"play time must not be negative, got {total_seconds}")
    nanos = round(total_seconds * 1_000_000_000)
    whole_seconds, remainder = divmod(nanos, 1_000_000_000)
    minutes, seconds = divmod(whole_seconds, 60)
    millis = remainder // 1_000_000
    return f"Played for {minutes}:{seconds:02},{millis:03}"


def endgame_lines(state: GameState, total_seconds: float) -> list[tuple[str, float]]:
    """The lines of the end screen with their font sizes, top to bottom."""
    return [
        (result_message(state), 54.0),
        (played_time_message(total_seconds), 32.0),
        (RETURN_HINT, 21.0),
    ]