"""Main menu: its buttons, their colours and the state changes they cause."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from minesweeper.states import AppState
from minesweeper.theme import ButtonColors, LinearColor

MENU_TITLE = "Minesweeper"
_NO_QUIT_PLATFORMS = ("emscripten", "wasi", "android", "ios")


class MenuState(enum.Enum):
    MAIN = "main"
    SETTINGS = "settings"
    DISABLED = "disabled"

    @classmethod
    def default(cls) -> MenuState:
        return cls.DISABLED


class MenuAction(enum.Enum):
    PLAY = "play"
    SETTINGS = "settings"
    BACK_TO_MAIN_MENU = "back_to_main_menu"
    QUIT = "quit"


class Interaction(enum.Enum):
    PRESSED = "pressed"
    HOVERED = "hovered"
    NONE = "none"


@dataclass(frozen=True)
class MenuTransition:
    """State changes requested by a menu button; None leaves a state as is."""

    menu_state: MenuState | None = None
    app_state: AppState | None = None
    quit: bool = False


def header_font_size(window_width: float) -> float:
    """Font size of headings for a window of the given width."""
    width = 12.0 * window_width / 100.0
    return width if 0.0 <= width < 70.0 else 45.0


def text_font_size(window_width: float) -> float:
    """Font size of ordinary text for a window of the given width."""
    width = 12.0 * window_width / 100.0
    if 0.0 <= width < 60.0:
        return width / 2.0
    if 60.0 <= width < 100.0:
        return width / 4.0
    return 21.0


def button_color(colors: ButtonColors, interaction: Interaction, disabled: bool) -> LinearColor:
    """Background colour of a button for its interaction state."""
    if disabled:
        return colors.disabled
    if interaction is Interaction.PRESSED:
        return colors.pressed
    if interaction is Interaction.HOVERED:
        return colors.hovered
    return colors.normal


def apply_menu_action(action: MenuAction) -> MenuTransition:
    """The transition caused by pressing a menu button."""
    if action is MenuAction.QUIT:
        return MenuTransition(quit=True)
    if action is MenuAction.PLAY:
        return MenuTransition(menu_state=MenuState.DISABLED, app_state=AppState.PLAYING)
    if action is MenuAction.SETTINGS:
        return MenuTransition(menu_state=MenuState.SETTINGS)
    return MenuTransition(menu_state=MenuState.MAIN)


def main_menu_buttons(platform: str) -> list[tuple[str, MenuAction]]:
    """Buttons of the main menu; Quit is left out where an app cannot exit."""
    buttons = [("Play", MenuAction.PLAY), ("Settings", MenuAction.SETTINGS)]
    if not platform.startswith(_NO_QUIT_PLATFORMS):
        buttons.append(("Quit", MenuAction.QUIT))
    return buttons