"""Audio players tagged by category, and global volume handling."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from enum import Enum


class PlaybackMode(Enum):
    """What happens when a sound reaches its end."""

    LOOP = "loop"
    DESPAWN = "despawn"


class AudioCategory(Enum):
    """Broad category of a playing sound."""

    MUSIC = "music"
    SOUND_EFFECT = "sound_effect"


@dataclass
class AudioPlayer:
    """A playing sound instance.

    ``volume`` is the instance's own volume; ``sink_volume`` is the effective
    output volume once the global volume has been applied.
    """

    handle: Hashable
    mode: PlaybackMode
    category: AudioCategory
    volume: float = 1.0
    sink_volume: float | None = None


def music(handle: Hashable) -> AudioPlayer:
    """A looping music instance."""
    return AudioPlayer(handle, PlaybackMode.LOOP, AudioCategory.MUSIC)


def sound_effect(handle: Hashable) -> AudioPlayer:
    """A one-shot sound effect that is removed when it ends."""
    return AudioPlayer(handle, PlaybackMode.DESPAWN, AudioCategory.SOUND_EFFECT)


def apply_global_volume(global_volume: float, players: Iterable[AudioPlayer]) -> None:
    """Update already-running players to reflect a changed global volume."""
    for player in players:
        player.sink_volume = global_volume * player.volume