"""The game window: menus, the board, the end screen and the event loop."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass, field
from functools import partial
from importlib import metadata

import pygame

from minesweeper.camera import Camera2D
from minesweeper.coordinates import Coordinates
from minesweeper.endgame import endgame_lines
from minesweeper.input import (
    InputAction,
    InputKind,
    TouchHandler,
    TouchPhase,
    endgame_input,
    mouse_action,
)
from minesweeper.menu import (
    MENU_TITLE,
    Interaction,
    MenuAction,
    MenuState,
    apply_menu_action,
    button_color,
    header_font_size,
    main_menu_buttons,
    text_font_size,
)
from minesweeper.session import (
    BOMB_COLOR,
    COVER_COLOR,
    FLAG_COLOR,
    TILE_COLOR,
    WRONG_FLAG_COLOR,
    GameEvent,
    GameSession,
    TileEntity,
    number_color,
)
from minesweeper.settings import GameSettings
from minesweeper.settings_menu import (
    SettingsButton,
    apply_action,
    is_disabled,
    settings_tabs,
)
from minesweeper.states import AppState, GameState
from minesweeper.theme import ButtonColors, LinearColor, UISettings
from minesweeper.tile import TileKind

WINDOW_TITLE = "Minesweepeer"
DEFAULT_VIEWPORT = (800, 600)
CLEAR_COLOR_LINEAR: LinearColor = (0.4, 0.4, 0.4)
TEXT_COLOR = (255, 255, 255)
PANEL_COLOR_LINEAR: LinearColor = (0.2, 0.2, 0.2)
FRAME_RATE = 60

_LEFT, _MIDDLE, _RIGHT = 1, 2, 3
_WHEEL_BUTTONS = (4, 5)


def _srgb(color: LinearColor) -> tuple[int, int, int]:
    """Convert a linear RGB colour to 8-bit sRGB."""

    def channel(c: float) -> int:
        c = min(max(c, 0.0), 1.0)
        value = 12.92 * c if c <= 0.0031308 else 1.055 * c ** (1 / 2.4) - 0.055
        return round(255 * value)

    r, g, b = color
    return channel(r), channel(g), channel(b)


def _version() -> str:
    try:
        return metadata.version("minesweeper")
    except metadata.PackageNotFoundError:
        return "0.1.0"


@dataclass
class _Text:
    text: str
    center: tuple[float, float]
    size: float
    color: tuple[int, int, int] = TEXT_COLOR


@dataclass
class _Button:
    rect: pygame.Rect
    label: str
    key: Hashable
    on_press: Callable[[], None]
    text_size: float
    colors: ButtonColors = field(default_factory=ButtonColors)
    disabled: bool = False
    selected: bool = False


class MinesweeperApp:
    """Holds every screen of the game and routes pygame events between them."""

    def __init__(self, settings: GameSettings | None = None, fullscreen: bool = False) -> None:
        self.settings = settings if settings is not None else GameSettings()
        self.fullscreen = fullscreen
        self.ui = UISettings()
        self.rng = random.Random()
        self.camera = Camera2D()
        self.viewport: tuple[int, int] = DEFAULT_VIEWPORT
        self.app_state = AppState.MENU
        self.menu_state = MenuState.MAIN
        self.settings_tab = "Grid"
        self.session: GameSession | None = None
        self.touch: TouchHandler | None = None
        self.running = True
        self.screen: pygame.Surface | None = None
        self.mouse_pos: tuple[int, int] = (-1, -1)
        self._mouse_held = False
        self._panning = False
        self._fingers: set[int] = set()
        self._fonts: dict[int, pygame.font.Font] = {}
        self._clear_color = _srgb(CLEAR_COLOR_LINEAR)

    # ---- state changes -------------------------------------------------

    def _start_game(self) -> None:
        self.session = GameSession(self.settings, self.rng)
        self.app_state = AppState.PLAYING
        self.menu_state = MenuState.DISABLED
        self.touch = None
        self._panning = False

    def _go_to_menu(self) -> None:
        self.session = None
        self.touch = None
        self.app_state = AppState.MENU
        self.menu_state = MenuState.MAIN

    def _menu_press(self, action: MenuAction) -> None:
        transition = apply_menu_action(action)
        if transition.quit:
            self.running = False
        if transition.app_state is AppState.PLAYING:
            self._start_game()
        if transition.menu_state is not None:
            self.menu_state = transition.menu_state

    def _settings_press(self, button: SettingsButton) -> None:
        self.settings = apply_action(self.settings, button.action, button.increase)

    def _select_tab(self, name: str) -> None:
        self.settings_tab = name

    def _apply_input(self, action: InputAction | None) -> None:
        if action is None or self.session is None:
            return
        if action.kind is InputKind.TRIGGER:
            self.session.trigger_tile(action.coordinates)
        else:
            self.session.toggle_flag(action.coordinates)

    def _to_world(self, position: tuple[float, float]) -> tuple[float, float]:
        return self.camera.screen_to_world(position, self.viewport)

    # ---- layout --------------------------------------------------------

    def _layout(self) -> tuple[list[_Text], list[_Button]]:
        if self.app_state is not AppState.MENU:
            return [], []
        if self.menu_state is MenuState.MAIN:
            return self._main_menu_layout()
        if self.menu_state is MenuState.SETTINGS:
            return self._settings_layout()
        return [], []

    def _main_menu_layout(self) -> tuple[list[_Text], list[_Button]]:
        width, height = self.viewport
        header = header_font_size(width)
        body = text_font_size(width)
        cx = width / 2.0
        y = height * 0.25
        texts = [_Text(MENU_TITLE, (cx, y), header)]
        y += header + 10.0
        style = self.ui.button_style
        buttons = []
        for label, action in main_menu_buttons(sys.platform):
            rect = pygame.Rect(0, 0, int(style.width), int(style.height))
            rect.midtop = (round(cx), round(y))
            buttons.append(
                _Button(rect, label, action, partial(self._menu_press, action), body,
                        self.ui.button_colors)
            )
            y += style.height + 10.0
        texts.append(_Text(f"v{_version()}", (cx, y + body / 2.0), body))
        return texts, buttons

    def _settings_layout(self) -> tuple[list[_Text], list[_Button]]:
        width, height = self.viewport
        header = header_font_size(width)
        body = text_font_size(width)
        cx = width / 2.0
        top = height * 0.1
        texts = [_Text("Settings", (cx, top), header)]
        buttons: list[_Button] = []

        tabs = settings_tabs(self.settings)
        if self.settings_tab not in tabs:
            self.settings_tab = next(iter(tabs))
        panel_left = width * 0.1
        tab_width = width * 0.8 / len(tabs)
        tab_y = top + header / 2.0 + 15.0
        for index, name in enumerate(tabs):
            rect = pygame.Rect(
                round(panel_left + index * tab_width), round(tab_y), round(tab_width) - 4, 40
            )
            buttons.append(
                _Button(rect, name, name, partial(self._select_tab, name), body,
                        self.ui.button_colors, selected=name == self.settings_tab)
            )

        small = self.ui.button_settings_style
        row_y = tab_y + 55.0
        for label, action, value in tabs[self.settings_tab]:
            middle = row_y + small.height / 2.0
            texts.append(_Text(label, (width * 0.3, middle), body))
            for increase, x in ((False, width * 0.62), (True, width * 0.76)):
                button = SettingsButton(action, increase)
                rect = pygame.Rect(0, 0, int(small.width), int(small.height))
                rect.midleft = (round(x), round(middle))
                buttons.append(
                    _Button(
                        rect,
                        button.label,
                        button,
                        partial(self._settings_press, button),
                        body,
                        self.ui.button_colors,
                        disabled=is_disabled(self.settings, action, increase),
                    )
                )
            texts.append(_Text(value, (width * 0.7, middle), body))
            row_y += small.height + 5.0

        style = self.ui.button_style
        close = pygame.Rect(0, 0, int(style.width), int(style.height))
        close.midbottom = (round(cx), height - 20)
        buttons.append(
            _Button(close, "Close", MenuAction.BACK_TO_MAIN_MENU,
                    partial(self._menu_press, MenuAction.BACK_TO_MAIN_MENU), body,
                    self.ui.button_colors)
        )
        return texts, buttons

    # ---- events --------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> None:
        """Process one pygame event."""
        kind = event.type
        if kind == pygame.QUIT:
            self.running = False
        elif kind == pygame.VIDEORESIZE:
            self.viewport = (event.w, event.h)
        elif kind == pygame.MOUSEMOTION:
            self.mouse_pos = event.pos
            if self._panning and self.app_state is AppState.PLAYING:
                dx, dy = event.rel
                self.camera.pan(dx, dy)
        elif kind == pygame.MOUSEBUTTONDOWN:
            self._mouse_down(event)
        elif kind == pygame.MOUSEBUTTONUP:
            self.mouse_pos = event.pos
            self._mouse_held = False
            if event.button == _MIDDLE:
                self._panning = False
        elif kind == pygame.MOUSEWHEEL:
            if self.app_state is AppState.PLAYING:
                self.camera.zoom_lines(event.y)
        elif kind in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            self._finger(event)
        elif kind == pygame.MULTIGESTURE:
            if self.app_state is AppState.PLAYING:
                factor = 1.0 + event.pinched * 5.0
                if factor > 0:
                    self.camera.pinch(factor)

    def _mouse_down(self, event: pygame.event.Event) -> None:
        if event.button in _WHEEL_BUTTONS:
            return
        self.mouse_pos = event.pos
        from_touch = getattr(event, "touch", False)
        if self.app_state is AppState.MENU:
            self._mouse_held = True
            _, buttons = self._layout()
            for button in buttons:
                if button.rect.collidepoint(event.pos):
                    button.on_press()
                    break
        elif self.app_state is AppState.PLAYING:
            if from_touch or self.session is None:
                return
            if event.button == _MIDDLE:
                self._panning = True
                return
            name = {_LEFT: "left", _RIGHT: "right"}.get(event.button, "")
            self._apply_input(
                mouse_action(self.session.board, self._to_world(event.pos), name)
            )
        elif self.app_state is AppState.ENDGAME:
            if endgame_input(mouse_pressed=True, touch_pressed=False):
                self._go_to_menu()

    def _finger(self, event: pygame.event.Event) -> None:
        width, height = self.viewport
        position = (event.x * width, event.y * height)
        if event.type == pygame.FINGERDOWN:
            self._fingers.add(event.finger_id)
            phase = TouchPhase.STARTED
        elif event.type == pygame.FINGERUP:
            self._fingers.discard(event.finger_id)
            phase = TouchPhase.ENDED
        else:
            phase = TouchPhase.MOVED
        if (
            self.app_state is AppState.PLAYING
            and self.session is not None
            and self.session.game_state is GameState.PLAYING
            and self.touch is not None
            and len(self._fingers) <= 1
        ):
            self._apply_input(
                self.touch.handle(phase, position, self.session.board, self._to_world)
            )

    # ---- frame ---------------------------------------------------------

    def update(self, delta: float) -> list[GameEvent]:
        """Advance the running game by ``delta`` seconds."""
        if self.app_state is not AppState.PLAYING or self.session is None:
            return []
        events = self.session.update(delta)
        if self.session.game_state is GameState.PLAYING:
            if self.touch is None:
                self.touch = TouchHandler(self.settings.timer_touch)
            else:
                self.touch.tick(delta)
        else:
            self.touch = None
        if GameEvent.ENDGAME in events:
            self.app_state = AppState.ENDGAME
        return events

    def _font(self, size: float) -> pygame.font.Font:
        key = max(1, round(size))
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.Font(None, key)
        return self._fonts[key]

    def _blit_text(self, surface: pygame.Surface, text: _Text) -> None:
        rendered = self._font(text.size).render(text.text, True, text.color)
        surface.blit(rendered, rendered.get_rect(center=(round(text.center[0]),
                                                          round(text.center[1]))))

    def _interaction(self, button: _Button) -> Interaction:
        if not button.rect.collidepoint(self.mouse_pos):
            return Interaction.NONE
        return Interaction.PRESSED if self._mouse_held else Interaction.HOVERED

    def _draw_menu(self, surface: pygame.Surface) -> None:
        texts, buttons = self._layout()
        if self.menu_state is MenuState.SETTINGS:
            width, height = self.viewport
            panel = pygame.Rect(round(width * 0.1), 0, round(width * 0.8), height)
            tab_buttons = [b for b in buttons if isinstance(b.key, str)]
            if tab_buttons:
                panel.top = tab_buttons[0].rect.bottom
                panel.height = max(0, height - 80 - panel.top)
            pygame.draw.rect(surface, _srgb(PANEL_COLOR_LINEAR), panel)
        for button in buttons:
            interaction = self._interaction(button)
            color = button_color(button.colors, interaction, button.disabled)
            if button.selected and interaction is Interaction.NONE:
                color = button.colors.hovered
            pygame.draw.rect(surface, _srgb(color), button.rect,
                             border_radius=round(self.ui.button_border_radius))
            self._blit_text(surface, _Text(button.label, button.rect.center, button.text_size))
        for text in texts:
            self._blit_text(surface, text)

    def _tile_rect(self, session: GameSession, entity: TileEntity) -> pygame.Rect:
        half = session.sprite_size / 2.0
        corner = (
            session.position[0] + entity.center[0] - half,
            session.position[1] + entity.center[1] + half,
        )
        sx, sy = self.camera.world_to_screen(corner, self.viewport)
        side = max(1, math.ceil(session.sprite_size / self.camera.scale))
        return pygame.Rect(round(sx), round(sy), side, side)

    def _draw_board(self, surface: pygame.Surface, session: GameSession) -> None:
        wrong = set(session.wrong_flags())
        for coordinates, entity in session.tiles.items():
            rect = self._tile_rect(session, entity)
            if entity.covered:
                pygame.draw.rect(surface, COVER_COLOR, rect)
                if coordinates in wrong:
                    self._draw_cross(surface, rect)
                elif entity.flagged:
                    self._draw_flag(surface, rect)
                continue
            pygame.draw.rect(surface, TILE_COLOR, rect)
            if entity.tile.is_bomb():
                pygame.draw.circle(surface, BOMB_COLOR, rect.center, max(1, rect.width // 3))
            elif entity.tile.kind is TileKind.NEIGHBOUR:
                self._blit_text(
                    surface,
                    _Text(str(entity.tile.count), rect.center, rect.height,
                          number_color(entity.tile.count)),
                )

    @staticmethod
    def _draw_flag(surface: pygame.Surface, rect: pygame.Rect) -> None:
        pole_x = rect.left + rect.width // 3
        top = rect.top + rect.height // 6
        bottom = rect.bottom - rect.height // 6
        pygame.draw.line(surface, FLAG_COLOR, (pole_x, top), (pole_x, bottom), 2)
        pygame.draw.polygon(
            surface,
            FLAG_COLOR,
            [(pole_x, top), (rect.right - rect.width // 6, top + rect.height // 5),
             (pole_x, top + 2 * rect.height // 5)],
        )

    @staticmethod
    def _draw_cross(surface: pygame.Surface, rect: pygame.Rect) -> None:
        inner = rect.inflate(-rect.width // 4, -rect.height // 4)
        pygame.draw.line(surface, WRONG_FLAG_COLOR, inner.topleft, inner.bottomright, 3)
        pygame.draw.line(surface, WRONG_FLAG_COLOR, inner.topright, inner.bottomleft, 3)

    def _draw_endgame(self, surface: pygame.Surface, session: GameSession) -> None:
        lines = endgame_lines(session.game_state, session.stopwatch.total_time)
        width, height = self.viewport
        total = sum(size for _, size in lines) + 10.0 * (len(lines) - 1)
        y = (height - total) / 2.0
        for text, size in lines:
            self._blit_text(surface, _Text(text, (width / 2.0, y + size / 2.0), size))
            y += size + 10.0

    def draw(self) -> pygame.Surface:
        """Render the current screen and return the surface drawn on."""
        surface = self.screen if self.screen is not None else pygame.Surface(self.viewport)
        surface.fill(self._clear_color)
        if self.app_state is AppState.MENU:
            self._draw_menu(surface)
        elif self.app_state is AppState.PLAYING and self.session is not None:
            self._draw_board(surface, self.session)
        elif self.app_state is AppState.ENDGAME and self.session is not None:
            self._draw_endgame(surface, self.session)
        return surface

    def run(self) -> None:
        """Open the window and run the game loop until the player quits."""
        pygame.init()
        try:
            if self.fullscreen:
                self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN | pygame.NOFRAME)
            else:
                self.screen = pygame.display.set_mode(self.viewport, pygame.RESIZABLE)
            pygame.display.set_caption(WINDOW_TITLE)
            self.viewport = self.screen.get_size()
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                    if event.type == pygame.VIDEORESIZE and not self.fullscreen:
                        self.screen = pygame.display.get_surface()
                delta = clock.tick(FRAME_RATE) / 1000.0
                self.update(delta)
                self.draw()
                pygame.display.flip()
        finally:
            self.screen = None
            self._fonts.clear()
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="minesweeper", description="Play minesweeper.")
    parser.add_argument("--fullscreen", action="store_true",
                        help="borderless full-screen window, as on mobile devices")
    parser.add_argument("--seed", type=int, default=None, help="seed for bomb placement")
    args = parser.parse_args(argv)
    app = MinesweeperApp(GameSettings(), fullscreen=args.fullscreen)
    if args.seed is not None:
        app.rng = random.Random(args.seed)
    app.run()
    return 0