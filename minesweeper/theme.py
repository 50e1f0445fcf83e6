"""Colours and sizes of the menu buttons."""

from __future__ import annotations

from dataclasses import dataclass, field

LinearColor = tuple[float, float, float]


@dataclass(frozen=True)
class ButtonColors:
    """Background colours of a button in each of its states, as linear RGB."""

    normal: LinearColor = (0.15, 0.15, 0.15)
    hovered: LinearColor = (0.25, 0.25, 0.25)
    pressed: LinearColor = (0.5, 0.5, 0.5)
    disabled: LinearColor = (0.35, 0.35, 0.35)


@dataclass(frozen=True)
class ButtonStyle:
    """Size and content alignment of a button, in pixels."""

    width: float
    height: float
    justify_content: str = "center"
    align_items: str = "center"


@dataclass(frozen=True)
class UISettings:
    """Look of the main menu buttons and the small settings buttons."""

    button_colors: ButtonColors = field(default_factory=ButtonColors)
    button_style: ButtonStyle = field(default_factory=lambda: ButtonStyle(140.0, 50.0))
    button_settings_style: ButtonStyle = field(
        default_factory=lambda: ButtonStyle(25.0, 50.0)
    )
    button_border_radius: float = 8.0