import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from minesweeper.app import MinesweeperApp, main  # noqa: E402
from minesweeper.camera import Camera2D  # noqa: E402
from minesweeper.endgame import ENDGAME_DELAY  # noqa: E402
from minesweeper.menu import MenuAction, MenuState, main_menu_buttons  # noqa: E402
from minesweeper.session import COVER_COLOR, GameEvent  # noqa: E402
from minesweeper.settings import GameSettings  # noqa: E402
from minesweeper.settings_menu import SettingsAction, SettingsButton, is_disabled  # noqa: E402
from minesweeper.states import AppState, GameState  # noqa: E402
import sys  # noqa: E402


def make_settings(**kwargs):
    base = dict(map_size=(5, 5), bomb_count=3, easy_mode=False, timer_start=0.0)
    base.update(kwargs)
    return GameSettings(**base)


def click(app, pos, button=1):
    app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos))
    app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=button, pos=pos))


def press(app, key):
    _, buttons = app._layout()
    matches = [b for b in buttons if b.key == key]
    assert matches, f"no button {key!r}"
    click(app, matches[0].rect.center)


def tile_screen_pos(app, coordinates):
    session = app.session
    entity = session.tiles[coordinates]
    world = (session.position[0] + entity.center[0], session.position[1] + entity.center[1])
    x, y = app.camera.world_to_screen(world, app.viewport)
    return round(x), round(y)


def started_app(**kwargs):
    app = MinesweeperApp(make_settings(**kwargs))
    app.rng = random.Random(7)
    press(app, MenuAction.PLAY)
    app.update(0.0)
    return app


def safe_tile(app):
    return next(c for c, e in app.session.tiles.items() if not e.tile.is_bomb())


def bomb_tile(app):
    return next(iter(app.session.board.tile_map.bomb_tiles()))


def test_starts_in_main_menu_with_platform_buttons():
    app = MinesweeperApp(make_settings())
    assert app.app_state is AppState.MENU
    assert app.menu_state is MenuState.MAIN
    _, buttons = app._layout()
    assert [b.label for b in buttons] == [label for label, _ in main_menu_buttons(sys.platform)]


def test_play_button_starts_game():
    settings = make_settings()
    app = MinesweeperApp(settings)
    press(app, MenuAction.PLAY)
    assert app.app_state is AppState.PLAYING
    assert app.menu_state is MenuState.DISABLED
    assert app.session.settings is settings
    app.update(0.0)
    assert app.session.game_state is GameState.PLAYING


def test_settings_width_increase_and_close():
    app = MinesweeperApp(make_settings())
    press(app, MenuAction.SETTINGS)
    assert app.menu_state is MenuState.SETTINGS
    width, height = app.settings.map_size
    press(app, SettingsButton(SettingsAction.WIDTH_BOARD, True))
    assert app.settings.map_size == (width + 1, height)
    texts, _ = app._layout()
    assert str(width + 1) in [t.text for t in texts]
    press(app, MenuAction.BACK_TO_MAIN_MENU)
    assert app.menu_state is MenuState.MAIN


def test_settings_buttons_disabled_state_follows_rules():
    app = MinesweeperApp(make_settings(bomb_count=1))
    press(app, MenuAction.SETTINGS)
    _, buttons = app._layout()
    for button in buttons:
        if isinstance(button.key, SettingsButton):
            expected = is_disabled(app.settings, button.key.action, button.key.increase)
            assert button.disabled == expected


def test_switching_tab_shows_its_rows():
    app = MinesweeperApp(make_settings())
    press(app, MenuAction.SETTINGS)
    press(app, "Game")
    assert app.settings_tab == "Game"
    texts, _ = app._layout()
    assert "Safe start" in [t.text for t in texts]


def test_quit_event_stops_running():
    app = MinesweeperApp(make_settings())
    app.handle_event(pygame.event.Event(pygame.QUIT))
    assert app.running is False


def test_resize_updates_viewport():
    app = MinesweeperApp(make_settings())
    app.handle_event(pygame.event.Event(pygame.VIDEORESIZE, w=640, h=480, size=(640, 480)))
    assert app.viewport == (640, 480)
    assert app.draw().get_size() == (640, 480)


def test_left_click_uncovers_tile():
    app = started_app()
    target = safe_tile(app)
    click(app, tile_screen_pos(app, target))
    app.update(0.0)
    assert app.session.tiles[target].covered is False


def test_right_click_flags_tile():
    app = started_app()
    target = safe_tile(app)
    click(app, tile_screen_pos(app, target), button=3)
    assert target in app.session.board.flagged_tiles
    assert app.session.tiles[target].flagged is True


def test_mouse_wheel_zooms_camera():
    app = started_app()
    expected = Camera2D(scale=app.camera.scale)
    expected.zoom_lines(1)
    app.handle_event(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=1))
    assert app.camera.scale == pytest.approx(expected.scale)


def test_middle_drag_pans_camera():
    app = started_app()
    app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=2, pos=(100, 100)))
    app.handle_event(
        pygame.event.Event(pygame.MOUSEMOTION, pos=(110, 105), rel=(10, 5), buttons=(0, 1, 0))
    )
    assert (app.camera.x, app.camera.y) == (10, -5)


def test_touch_tap_uncovers_tile():
    app = started_app()
    target = safe_tile(app)
    x, y = tile_screen_pos(app, target)
    width, height = app.viewport
    common = dict(finger_id=1, touch_id=1, x=x / width, y=y / height, dx=0.0, dy=0.0)
    app.handle_event(pygame.event.Event(pygame.FINGERDOWN, **common))
    app.handle_event(pygame.event.Event(pygame.FINGERUP, **common))
    assert app.session.tiles[target].pending_uncover is True
    app.update(0.0)
    assert app.session.tiles[target].covered is False


def test_losing_leads_to_endgame_and_back_to_menu():
    app = started_app()
    click(app, tile_screen_pos(app, bomb_tile(app)))
    events = app.update(0.0)
    assert GameEvent.LOSE in events
    assert app.session.game_state is GameState.LOSE
    events = app.update(ENDGAME_DELAY)
    assert GameEvent.ENDGAME in events
    assert app.app_state is AppState.ENDGAME
    assert app.draw().get_size() == app.viewport
    click(app, (10, 10))
    assert app.app_state is AppState.MENU
    assert app.menu_state is MenuState.MAIN
    assert app.session is None


def test_draw_shows_covered_tiles_on_common_background():
    app = MinesweeperApp(make_settings())
    menu_corner = tuple(app.draw().get_at((0, 0)))[:3]
    press(app, MenuAction.PLAY)
    app.update(0.0)
    target = safe_tile(app)
    surface = app.draw()
    assert tuple(surface.get_at((0, 0)))[:3] == menu_corner
    assert tuple(surface.get_at(tile_screen_pos(app, target)))[:3] == COVER_COLOR


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit) as info:
        main(["--seed", "not-a-number"])
    assert info.value.code == 2