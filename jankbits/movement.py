"""2D vectors, the character controller, screen wrapping and directional input."""

from __future__ import annotations

import math
from collections.abc import Collection
from dataclasses import dataclass, field
from typing import ClassVar

from jankbits.states import Key

DEFAULT_MAX_SPEED = 400.0
"""Maximum speed in world units (pixels) per second."""

SCREEN_WRAP_MARGIN = 256.0
"""Extra room beyond the window before a wrapped entity reappears opposite."""


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalize_or_zero(self) -> Vec2:
        """Unit vector in the same direction, or the zero vector if that is undefined."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return Vec2()
        return Vec2(self.x / length, self.y / length)

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; raises for a zero or non-finite vector."""
        unit = self.normalize_or_zero()
        if unit == Vec2():
            raise ValueError(f"cannot normalize {self!r}")
        return unit


Vec2.ZERO = Vec2()


@dataclass
class MovementController:
    """Movement parameters: the desired direction and the maximum speed."""

    intent: Vec2 = field(default_factory=Vec2)
    max_speed: float = DEFAULT_MAX_SPEED


def apply_movement(position: Vec2, controller: MovementController, delta_secs: float) -> Vec2:
    """Position after moving along the controller's intent for ``delta_secs``."""
    velocity = controller.intent * controller.max_speed
    return position + velocity * delta_secs


def _wrap(value: float, size: float) -> float:
    half = size / 2.0
    # Python's float modulo with a positive divisor is Euclidean.
    return (value + half) % size - half


def screen_wrap(position: Vec2, window_size: Vec2) -> Vec2:
    """Wrap ``position`` around a window of ``window_size`` plus a margin."""
    return Vec2(
        _wrap(position.x, window_size.x + SCREEN_WRAP_MARGIN),
        _wrap(position.y, window_size.y + SCREEN_WRAP_MARGIN),
    )


_PLAYER_BINDINGS: tuple[tuple[frozenset[Key], Vec2], ...] = (
    (frozenset({Key.W, Key.UP}), Vec2(0.0, 1.0)),
    (frozenset({Key.S, Key.DOWN}), Vec2(0.0, -1.0)),
    (frozenset({Key.A, Key.LEFT}), Vec2(-1.0, 0.0)),
    (frozenset({Key.D, Key.RIGHT}), Vec2(1.0, 0.0)),
)

_UAP_BINDINGS: tuple[tuple[frozenset[Key], Vec2], ...] = (
    (frozenset({Key.UP}), Vec2(0.0, 1.0)),
    (frozenset({Key.DOWN}), Vec2(0.0, -1.0)),
    (frozenset({Key.LEFT}), Vec2(-1.0, 0.0)),
    (frozenset({Key.RIGHT}), Vec2(1.0, 0.0)),
)


def _intent(pressed: Collection[Key], bindings) -> Vec2:
    intent = Vec2()
    for keys, step in bindings:
        if any(key in pressed for key in keys):
            intent = intent + step
    # Normalised so diagonal movement is as fast as straight movement.
    return intent.normalize_or_zero()


def player_intent(pressed: Collection[Key]) -> Vec2:
    """Movement intent from WASD or arrow keys."""
    return _intent(pressed, _PLAYER_BINDINGS)


def uap_intent(pressed: Collection[Key]) -> Vec2:
    """Movement intent from the arrow keys only."""
    return _intent(pressed, _UAP_BINDINGS)