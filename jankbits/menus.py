"""The menus' contents and the transitions their buttons request."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Optional, Union

from jankbits.settings import back_menu, lower_global_volume, raise_global_volume, volume_label
from jankbits.states import Menu, Screen
from jankbits.theme import Button, Label, button, button_small, header, label

Widget = Union[Label, Button]

CREDITS_MUSIC = "audio/music/Monkeys Spinning Monkeys.ogg"

CREATED_BY: tuple[tuple[str, str], ...] = (
    ("Joe Shmoe", "Implemented alligator wrestling AI"),
    ("Jane Doe", "Made the music for the alien invasion"),
)

ASSETS: tuple[tuple[str, str], ...] = (
    ("Ducky sprite", "Used with permission"),
    ("Button SFX", "Used with permission"),
    ("Music", "Used with permission"),
    ("Splash logo", "Used unmodified with permission"),
)


@dataclass(frozen=True)
class Transition:
    """A change a button asks for: a new screen, menu or volume, or exiting."""

    screen: Optional[Screen] = None
    menu: Optional[Menu] = None
    volume: Optional[float] = None
    exit: bool = False


def main_menu(resources_done: Union[bool, Callable[[], bool]], can_exit: bool = True) -> list[Widget]:
    """The title screen's menu. ``resources_done`` may be checked lazily at click time."""

    def play() -> Transition:
        done = resources_done() if callable(resources_done) else resources_done
        return Transition(screen=Screen.WORKSHOP if done else Screen.LOADING)

    widgets: list[Widget] = [
        button("Play", play),
        button("Settings", lambda: Transition(menu=Menu.SETTINGS)),
        button("Credits", lambda: Transition(menu=Menu.CREDITS)),
    ]
    if can_exit:
        widgets.append(button("Exit", lambda: Transition(exit=True)))
    return widgets


def pause_menu() -> list[Widget]:
    """The in-game pause menu."""
    return [
        header("Game paused"),
        button("Continue", lambda: Transition(menu=Menu.NONE)),
        button("Settings", lambda: Transition(menu=Menu.SETTINGS)),
        button("Quit to title", lambda: Transition(screen=Screen.TITLE)),
    ]


def credits_grid(rows: Iterable[Sequence[str]]) -> list[Label]:
    """Two-column grid of labels: the first column right-aligned, the second left."""
    cells = (text for row in rows for text in row)
    grid = []
    for index, text in enumerate(cells):
        cell = label(text)
        cell.justify = "end" if index % 2 == 0 else "start"
        grid.append(cell)
    return grid


def credits_menu() -> list[Widget]:
    """The credits menu."""
    return [
        header("Created by"),
        *credits_grid(CREATED_BY),
        header("Assets"),
        *credits_grid(ASSETS),
        button("Back", lambda: Transition(menu=Menu.MAIN)),
    ]


def settings_menu(screen: Screen, volume: float) -> list[Widget]:
    """The settings menu as shown on ``screen`` with the current ``volume``."""
    caption = label("Master Volume")
    caption.justify = "end"
    current = label(volume_label(volume))
    current.name = "Current Volume"
    return [
        header("Settings"),
        caption,
        button_small("-", lambda: Transition(volume=lower_global_volume(volume))),
        current,
        button_small("+", lambda: Transition(volume=raise_global_volume(volume))),
        button("Back", lambda: Transition(menu=back_menu(screen))),
    ]