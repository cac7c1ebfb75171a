"""Frame timers and sprite animations for the player and the UAP."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import ClassVar, Union

Seconds = Union[float, int, timedelta]

_NANOS_PER_SECOND = 1_000_000_000


def _to_nanos(value: Seconds) -> int:
    seconds = value.total_seconds() if isinstance(value, timedelta) else float(value)
    if seconds < 0:
        raise ValueError(f"duration must not be negative: {value!r}")
    return round(seconds * _NANOS_PER_SECOND)


class TimerMode(Enum):
    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """A countdown timer measured in seconds, either one-shot or repeating."""

    def __init__(self, duration: Seconds, mode: TimerMode = TimerMode.ONCE) -> None:
        self._duration = _to_nanos(duration)
        self.mode = mode
        self._elapsed = 0
        self._finished = False
        self.times_finished_this_tick = 0

    @property
    def duration(self) -> float:
        return self._duration / _NANOS_PER_SECOND

    @property
    def elapsed(self) -> float:
        return self._elapsed / _NANOS_PER_SECOND

    @property
    def remaining(self) -> float:
        return max(self._duration - self._elapsed, 0) / _NANOS_PER_SECOND

    @property
    def finished(self) -> bool:
        """Whether the timer has reached its duration (this tick, if repeating)."""
        return self._finished

    @property
    def just_finished(self) -> bool:
        """Whether the timer finished during the last tick."""
        return self.times_finished_this_tick > 0

    def tick(self, delta: Seconds) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        step = _to_nanos(delta)
        if self._finished and self.mode is TimerMode.ONCE:
            self.times_finished_this_tick = 0
            return self

        self._elapsed += step
        self._finished = self._elapsed >= self._duration
        if not self._finished:
            self.times_finished_this_tick = 0
        elif self.mode is TimerMode.REPEATING:
            if self._duration == 0:
                self.times_finished_this_tick = 1
                self._elapsed = 0
            else:
                self.times_finished_this_tick, self._elapsed = divmod(
                    self._elapsed, self._duration
                )
        else:
            self.times_finished_this_tick = 1
            self._elapsed = self._duration
        return self

    def reset(self) -> None:
        """Return the timer to its unstarted state."""
        self._elapsed = 0
        self._finished = False
        self.times_finished_this_tick = 0


class _AnimationState(Enum):
    """Animation state carrying its frame count, frame interval and atlas offset."""

    def __init__(self, frames: int, interval: float, atlas_offset: int) -> None:
        self.frames = frames
        self.interval = interval
        self.atlas_offset = atlas_offset


class _SpriteAnimation:
    initial_state: ClassVar[_AnimationState]

    def __init__(self) -> None:
        self._restart(self.initial_state)

    def _restart(self, state: _AnimationState) -> None:
        self.state = state
        self.frame = 0
        self.timer = Timer(state.interval, TimerMode.REPEATING)

    def _advance(self, delta: Seconds) -> None:
        self.timer.tick(delta)
        if not self.timer.finished:
            return
        self.frame = (self.frame + 1) % self.state.frames

    def _switch(self, state: _AnimationState) -> None:
        if state is not self.state:
            self._restart(state)


class PlayerAnimationState(_AnimationState):
    IDLING = (2, 0.5, 0)
    WALKING = (6, 0.05, 6)


class PlayerAnimation(_SpriteAnimation):
    """The player's animation, bound to its 6x2 texture atlas."""

    initial_state = PlayerAnimationState.IDLING

    def update_timer(self, delta: Seconds) -> None:
        """Tick the frame timer, advancing a frame when it fires."""
        self._advance(delta)

    def update_state(self, state: PlayerAnimationState) -> None:
        """Switch to ``state``, restarting from its first frame, if it differs."""
        self._switch(state)

    def changed(self) -> bool:
        """Whether the frame changed this tick."""
        return self.timer.finished

    def atlas_index(self) -> int:
        """The sprite index in the texture atlas."""
        return self.state.atlas_offset + self.frame


class UapAnimationState(_AnimationState):
    IDLING = (4, 0.1, 0)
    FLYING = (1, 0.05, 0)


class UapAnimation(_SpriteAnimation):
    """The UAP's animation, bound to its 4x1 texture atlas."""

    initial_state = UapAnimationState.IDLING

    def update_timer(self, delta: Seconds) -> None:
        """Tick the frame timer, advancing a frame when it fires."""
        self._advance(delta)

    def update_state(self, state: UapAnimationState) -> None:
        """Switch to ``state``, restarting from its first frame, if it differs."""
        self._switch(state)

    def changed(self) -> bool:
        """Whether the frame changed this tick."""
        return self.timer.finished

    def atlas_index(self) -> int:
        """The sprite index in the texture atlas."""
        return self.state.atlas_offset + self.frame