"""Top-level application states and the states of a single game."""

from __future__ import annotations

import enum


class AppState(enum.Enum):
    """What the application as a whole is doing."""

    LOADING = "loading"
    PLAYING = "playing"
    ENDGAME = "endgame"
    MENU = "menu"

    @classmethod
    def default(cls) -> AppState:
        return cls.LOADING


class GameState(enum.Enum):
    """Where the current game stands."""

    WIN = "win"
    LOSE = "lose"
    LOADING = "loading"
    PAUSE = "pause"
    PLAYING = "playing"
    DISABLED = "disabled"

    @classmethod
    def default(cls) -> GameState:
        return cls.DISABLED