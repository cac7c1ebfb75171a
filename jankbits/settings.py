"""Settings logic: the master volume and where the settings menu returns to."""

from __future__ import annotations

from jankbits.states import Menu, Screen

MIN_VOLUME = 0.0
MAX_VOLUME = 3.0
VOLUME_STEP = 0.1


def lower_global_volume(volume: float) -> float:
    """The volume one step quieter, never below the minimum."""
    return max(volume - VOLUME_STEP, MIN_VOLUME)


def raise_global_volume(volume: float) -> float:
    """The volume one step louder, never above the maximum."""
    return min(volume + VOLUME_STEP, MAX_VOLUME)


def volume_label(volume: float) -> str:
    """The volume as a whole percentage, padded to three characters."""
    percent = 100.0 * volume
    return f"{percent:3.0f}%"


def back_menu(screen: Screen) -> Menu:
    """The menu that leaving settings goes back to on ``screen``."""
    return Menu.MAIN if screen is Screen.TITLE else Menu.PAUSE