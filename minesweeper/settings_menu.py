"""Rules of the settings menu: adjusting values and disabling buttons."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from minesweeper.settings import GameSettings

MAX_SIDE = 200
MAX_TIMER = 3.0


class SettingsAction(enum.Enum):
    """Which setting a settings button changes."""

    BOMB_COUNT = "bomb_count"
    WIDTH_BOARD = "width_board"
    HEIGHT_BOARD = "height_board"
    SAFE_START = "safe_start"
    TURN_FLAG = "turn_flag"
    START_TIMER = "start_timer"
    TOUCH_TIMER = "touch_timer"


@dataclass(frozen=True)
class SettingsButton:
    """A ``<`` or ``>`` button next to a setting."""

    action: SettingsAction
    increase: bool

    @property
    def label(self) -> str:
        return ">" if self.increase else "<"


def _flag_forced(settings: GameSettings) -> bool:
    width, height = settings.map_size
    return (
        settings.bomb_count == width * height - 1 or settings.bomb_count == 1
    ) and settings.easy_mode


def apply_action(
    settings: GameSettings, action: SettingsAction, increase: bool
) -> GameSettings:
    """Return the settings after pressing the button for ``action``."""
    width, height = settings.map_size
    bombs = settings.bomb_count

    if action is SettingsAction.BOMB_COUNT:
        if increase and bombs < width * height - 1:
            settings = replace(settings, bomb_count=bombs + 1)
        elif not increase and bombs > 1:
            settings = replace(settings, bomb_count=bombs - 1)
    elif action is SettingsAction.WIDTH_BOARD:
        if increase and width <= MAX_SIDE:
            settings = replace(settings, map_size=(width + 1, height))
        elif width > 1 and (width - 1) * height > bombs:
            settings = replace(settings, map_size=(width - 1, height))
    elif action is SettingsAction.HEIGHT_BOARD:
        if increase and height <= MAX_SIDE:
            settings = replace(settings, map_size=(width, height + 1))
        elif height > 1 and width * (height - 1) > bombs:
            settings = replace(settings, map_size=(width, height - 1))
    elif action is SettingsAction.SAFE_START:
        settings = replace(settings, easy_mode=increase)
    elif action is SettingsAction.TURN_FLAG:
        settings = replace(settings, flag_mode=increase)
    elif action is SettingsAction.START_TIMER:
        start = settings.timer_start
        if increase and start < MAX_TIMER:
            settings = replace(settings, timer_start=start + 0.1)
        elif start > 0.0:
            settings = replace(settings, timer_start=(start * 10.0 - 1.0) / 10.0)
    elif action is SettingsAction.TOUCH_TIMER:
        touch = settings.timer_touch
        if increase and touch < MAX_TIMER:
            settings = replace(settings, timer_touch=touch + 0.01)
        elif touch > 0.01:
            settings = replace(settings, timer_touch=(touch * 100.0 - 1.0) / 100.0)

    if _flag_forced(settings):
        settings = replace(settings, flag_mode=True)
    return settings


def is_disabled(settings: GameSettings, action: SettingsAction, increase: bool) -> bool:
    """Whether the button for ``action`` is shown as disabled."""
    width, height = settings.map_size
    bombs = settings.bomb_count

    if action is SettingsAction.BOMB_COUNT:
        return (not increase and not bombs > 1) or (
            increase and not bombs < width * height - 1
        )
    if action is SettingsAction.WIDTH_BOARD:
        return not (increase and width <= MAX_SIDE) and not (
            width > 1 and (width - 1) * height > bombs
        )
    if action is SettingsAction.HEIGHT_BOARD:
        return not (increase and height <= MAX_SIDE) and not (
            height > 1 and (height - 1) * width > bombs
        )
    if action is SettingsAction.SAFE_START:
        return increase == settings.easy_mode
    if action is SettingsAction.START_TIMER:
        return not settings.timer_start > 0.0 and not (
            increase and settings.timer_start < MAX_TIMER
        )
    if action is SettingsAction.TOUCH_TIMER:
        return not settings.timer_touch > 0.01 and not (
            increase and settings.timer_touch < MAX_TIMER
        )
    # TURN_FLAG
    return increase == settings.flag_mode or _flag_forced(settings)


def _rows(settings: GameSettings) -> list[tuple[str, list[tuple[str, SettingsAction, str]]]]:
    width, height = settings.map_size
    safe_start = "On" if settings.easy_mode else "Off"
    flag_mode = "On" if settings.flag_mode else "Off"
    return [
        (
            "Grid",
            [
                ("Width", SettingsAction.WIDTH_BOARD, str(width)),
                ("Height", SettingsAction.HEIGHT_BOARD, str(height)),
                ("Bombs", SettingsAction.BOMB_COUNT, str(settings.bomb_count)),
            ],
        ),
        (
            "Game",
            [
                ("Safe start", SettingsAction.SAFE_START, safe_start),
                ("Flag mode", SettingsAction.TURN_FLAG, flag_mode),
            ],
        ),
        (
            "Accessibility",
            [
                ("Start delay", SettingsAction.START_TIMER, f"{settings.timer_start:.1f}s"),
                ("Touch delay", SettingsAction.TOUCH_TIMER, f"{settings.timer_touch:.2f}s"),
            ],
        ),
    ]


def settings_values(settings: GameSettings) -> list[str]:
    """The displayed values, in the order they appear in the menu."""
    return [value for _, rows in _rows(settings) for _, _, value in rows]


def settings_tabs(
    settings: GameSettings,
) -> dict[str, list[tuple[str, SettingsAction, str]]]:
    """Menu tabs mapped to their rows of ``(label, action, value)``."""
    return dict(_rows(settings))