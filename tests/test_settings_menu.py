import itertools

import pytest

from minesweeper.settings import GameSettings
from minesweeper.settings_menu import (
    SettingsAction,
    SettingsButton,
    apply_action,
    is_disabled,
    settings_tabs,
    settings_values,
)

NUMERIC_ACTIONS = [
    SettingsAction.BOMB_COUNT,
    SettingsAction.WIDTH_BOARD,
    SettingsAction.HEIGHT_BOARD,
    SettingsAction.START_TIMER,
    SettingsAction.TOUCH_TIMER,
]

SAMPLE_SETTINGS = [
    GameSettings(),
    GameSettings(map_size=(2, 2), bomb_count=2),
    GameSettings(map_size=(2, 2), bomb_count=3),
    GameSettings(map_size=(1, 5), bomb_count=1, easy_mode=False, flag_mode=False),
    GameSettings(map_size=(201, 201), bomb_count=1, timer_start=0.0, timer_touch=0.01),
    GameSettings(map_size=(7, 7), bomb_count=48, timer_start=3.0, timer_touch=3.0),
]


def test_increase_bomb_count():
    settings = GameSettings()
    result = apply_action(settings, SettingsAction.BOMB_COUNT, True)
    assert result.bomb_count == settings.bomb_count + 1


def test_apply_does_not_mutate_input():
    settings = GameSettings()
    before = settings.to_dict()
    apply_action(settings, SettingsAction.WIDTH_BOARD, True)
    assert settings.to_dict() == before


def test_bomb_count_has_lower_limit():
    settings = GameSettings(bomb_count=1)
    assert apply_action(settings, SettingsAction.BOMB_COUNT, False).bomb_count == 1


def test_bomb_count_has_upper_limit():
    settings = GameSettings(map_size=(3, 3), bomb_count=8)
    assert apply_action(settings, SettingsAction.BOMB_COUNT, True).bomb_count == 8


def test_width_increase_and_decrease():
    settings = GameSettings()
    wider = apply_action(settings, SettingsAction.WIDTH_BOARD, True)
    assert wider.map_size == (settings.map_size[0] + 1, settings.map_size[1])
    narrower = apply_action(wider, SettingsAction.WIDTH_BOARD, False)
    assert narrower.map_size == settings.map_size


def test_width_cannot_shrink_below_bomb_room():
    settings = GameSettings(map_size=(2, 2), bomb_count=2)
    assert apply_action(settings, SettingsAction.WIDTH_BOARD, False).map_size == (2, 2)
    assert apply_action(settings, SettingsAction.HEIGHT_BOARD, False).map_size == (2, 2)


def test_increase_past_maximum_shrinks_instead():
    settings = GameSettings(map_size=(201, 7))
    result = apply_action(settings, SettingsAction.WIDTH_BOARD, True)
    assert result.map_size == (201 - 1, 7)


def test_safe_start_toggle():
    result = apply_action(GameSettings(), SettingsAction.SAFE_START, False)
    assert result.easy_mode is False


def test_flag_mode_forced_with_single_bomb():
    settings = GameSettings(bomb_count=2, flag_mode=False)
    result = apply_action(settings, SettingsAction.BOMB_COUNT, False)
    assert result.bomb_count == 1
    assert result.flag_mode is True


def test_flag_mode_not_forced_without_safe_start():
    settings = GameSettings(bomb_count=2, flag_mode=False, easy_mode=False)
    result = apply_action(settings, SettingsAction.BOMB_COUNT, False)
    assert result.flag_mode is False


def test_start_timer_steps():
    settings = GameSettings()
    up = apply_action(settings, SettingsAction.START_TIMER, True)
    assert up.timer_start == pytest.approx(settings.timer_start + 0.1)
    down = apply_action(up, SettingsAction.START_TIMER, False)
    assert down.timer_start == pytest.approx(settings.timer_start)


def test_start_timer_does_not_go_below_zero():
    settings = GameSettings(timer_start=0.0)
    assert apply_action(settings, SettingsAction.START_TIMER, False).timer_start == 0.0


def test_touch_timer_lower_limit():
    settings = GameSettings(timer_touch=0.01)
    assert apply_action(settings, SettingsAction.TOUCH_TIMER, False).timer_touch == 0.01


@pytest.mark.parametrize(
    "settings, action, increase",
    list(itertools.product(SAMPLE_SETTINGS, NUMERIC_ACTIONS, [False, True])),
)
def test_disabled_buttons_do_nothing(settings, action, increase):
    if is_disabled(settings, action, increase):
        expected = apply_action(settings, SettingsAction.SAFE_START, settings.easy_mode)
        assert apply_action(settings, action, increase) == expected
    else:
        assert apply_action(settings, action, increase) != settings


def test_safe_start_button_disabled_for_current_value():
    settings = GameSettings(easy_mode=True)
    assert is_disabled(settings, SettingsAction.SAFE_START, True) is True
    assert is_disabled(settings, SettingsAction.SAFE_START, False) is False


def test_flag_buttons_disabled_when_forced():
    settings = GameSettings(bomb_count=1, easy_mode=True, flag_mode=True)
    assert is_disabled(settings, SettingsAction.TURN_FLAG, False) is True
    assert is_disabled(settings, SettingsAction.TURN_FLAG, True) is True


def test_flag_button_enabled_when_free():
    settings = GameSettings(flag_mode=True)
    assert is_disabled(settings, SettingsAction.TURN_FLAG, False) is False


def test_settings_values_follow_settings():
    settings = GameSettings()
    values = settings_values(settings)
    assert values[:3] == [
        str(settings.map_size[0]),
        str(settings.map_size[1]),
        str(settings.bomb_count),
    ]
    assert values[3] == "On"
    assert float(values[5].rstrip("s")) == pytest.approx(settings.timer_start)
    assert float(values[6].rstrip("s")) == pytest.approx(settings.timer_touch)


def test_settings_tabs_match_values():
    settings = GameSettings(easy_mode=False)
    tabs = settings_tabs(settings)
    assert list(tabs) == ["Grid", "Game", "Accessibility"]
    flattened = [value for rows in tabs.values() for _, _, value in rows]
    assert flattened == settings_values(settings)
    assert tabs["Game"][0] == ("Safe start", SettingsAction.SAFE_START, "Off")


def test_settings_button_labels():
    assert SettingsButton(SettingsAction.BOMB_COUNT, False).label == "<"
    assert SettingsButton(SettingsAction.BOMB_COUNT, True).label == ">"