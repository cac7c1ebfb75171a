"""Top-level game states, system ordering and input keys."""

from __future__ import annotations

from enum import Enum, IntEnum


class Screen(Enum):
    """The game's main screen states."""

    SPLASH = "splash"
    TITLE = "title"
    LOADING = "loading"
    GAMEPLAY = "gameplay"
    WORKSHOP = "workshop"
    LAUNCHPAD = "launchpad"

    @classmethod
    def default(cls) -> Screen:
        """The screen the game starts on."""
        return cls.SPLASH

    @property
    def pausable(self) -> bool:
        """Whether the pause key toggles the pause menu on this screen."""
        return self in _PAUSABLE_SCREENS


_PAUSABLE_SCREENS = frozenset({Screen.GAMEPLAY, Screen.WORKSHOP, Screen.LAUNCHPAD})


class Menu(Enum):
    """The menu shown on top of the current screen, if any."""

    NONE = "none"
    MAIN = "main"
    CREDITS = "credits"
    SETTINGS = "settings"
    PAUSE = "pause"

    @classmethod
    def default(cls) -> Menu:
        """The menu state the game starts in."""
        return cls.NONE

    @property
    def is_open(self) -> bool:
        """Whether any menu is shown."""
        return self is not Menu.NONE


class AppSystems(IntEnum):
    """High-level groupings of per-frame work, run in ascending order."""

    TICK_TIMERS = 1
    RECORD_INPUT = 2
    UPDATE = 3

    @classmethod
    def chain(cls) -> tuple[AppSystems, ...]:
        """All groups in the order they run each frame."""
        return tuple(sorted(cls))


class Key(Enum):
    """Keys the game reacts to."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"
    ESCAPE = "escape"
    P = "p"
    BACKQUOTE = "`"

    @classmethod
    def parse(cls, name: str) -> Key:
        """Look a key up by its value or member name, ignoring case."""
        text = name.strip()
        try:
            return cls(text.lower())
        except ValueError:
            pass
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"unknown key: {name!r}") from None