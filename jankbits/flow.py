"""Screen and menu state machine, with pausing on the playable screens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from jankbits.menus import Transition
from jankbits.states import Key, Menu, Screen

WORKSHOP_TILE_WIDTH = 64.0
WORKSHOP_COLUMNS = 8
WORKSHOP_ROWS = 8
WORKSHOP_SIDEBAR_WIDTH = 128.0


@dataclass
class GameFlow:
    """Current screen, menu and pause state, and the rules for changing them."""

    resources_done: Callable[[], bool] = lambda: True
    screen: Screen = field(default_factory=Screen.default)
    menu: Menu = field(default_factory=Menu.default)
    paused: bool = False
    exit_requested: bool = False
    overlay: bool = False

    def set_screen(self, screen: Screen) -> None:
        """Switch screens, running the exit and enter rules of each."""
        if screen is self.screen:
            return
        old = self.screen
        if old is Screen.TITLE or old.pausable:
            self.set_menu(Menu.NONE)
        if old.pausable:
            self._set_paused(False)
        self.screen = screen
        if screen is Screen.TITLE:
            self.set_menu(Menu.MAIN)

    def set_menu(self, menu: Menu) -> None:
        """Switch menus; closing all menus on a playable screen unpauses."""
        if menu is self.menu:
            return
        self.menu = menu
        if menu is Menu.NONE and self.screen.pausable:
            self._set_paused(False)

    def _set_paused(self, paused: bool) -> None:
        self.paused = paused
        self.overlay = paused

    def apply(self, transition: Optional[Transition]) -> None:
        """Carry out what a button asked for."""
        if transition is None:
            return
        if transition.exit:
            self.exit_requested = True
        if transition.screen is not None:
            self.set_screen(transition.screen)
        if transition.menu is not None:
            self.set_menu(transition.menu)

    def handle_key(self, key: Key) -> None:
        """React to a key that was just pressed."""
        if self.screen.pausable:
            if not self.menu.is_open and key in (Key.P, Key.ESCAPE):
                self._set_paused(True)
                self.set_menu(Menu.PAUSE)
                return
            if self.menu.is_open and key is Key.P:
                self.set_menu(Menu.NONE)
                return
        if key is not Key.ESCAPE:
            return
        if self.screen is Screen.SPLASH:
            self.set_screen(Screen.TITLE)
        elif self.menu in (Menu.CREDITS,):
            self.set_menu(Menu.MAIN)
        elif self.menu is Menu.PAUSE:
            self.set_menu(Menu.NONE)
        elif self.menu is Menu.SETTINGS:
            self.set_menu(Menu.MAIN if self.screen is Screen.TITLE else Menu.PAUSE)

    def update(self, delta_secs: float) -> None:
        """Per-frame checks: leave the loading screen once everything is loaded."""
        if self.screen is Screen.LOADING and self.resources_done():
            self.set_screen(Screen.GAMEPLAY)


def workshop_layout(width: float, height: float) -> dict[str, tuple[float, float, float, float]]:
    """Centred rectangles (x, y, w, h) of the sidebar and workspace in a window."""
    area_w = WORKSHOP_TILE_WIDTH * WORKSHOP_COLUMNS
    area_h = WORKSHOP_TILE_WIDTH * WORKSHOP_ROWS
    total = WORKSHOP_SIDEBAR_WIDTH + area_w
    left = (width - total) / 2.0
    top = (height - area_h) / 2.0
    return {
        "sidebar": (left, top, WORKSHOP_SIDEBAR_WIDTH, area_h),
        "workspace": (left + WORKSHOP_SIDEBAR_WIDTH, top, area_w, area_h),
    }