"""The splash screen shown briefly at startup."""

from __future__ import annotations

from dataclasses import dataclass, field

from jankbits.animation import Timer, TimerMode
from jankbits.states import Screen

SPLASH_BACKGROUND_COLOR = (0.157, 0.157, 0.157)
SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6
SPLASH_IMAGE = "images/splash.png"


@dataclass
class FadeInOut:
    """Trapezoid-shaped alpha over time: fade in, hold, fade out."""

    total_duration: float = SPLASH_DURATION_SECS
    fade_duration: float = SPLASH_FADE_DURATION_SECS
    t: float = 0.0

    def alpha(self) -> float:
        """Current opacity, between 0 and 1."""
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def tick(self, delta_secs: float) -> None:
        """Advance the progress by ``delta_secs``."""
        self.t += delta_secs


@dataclass
class SplashScreen:
    """Fading splash image that hands over to the title screen when its time is up."""

    fade: FadeInOut = field(default_factory=FadeInOut)
    timer: Timer = field(
        default_factory=lambda: Timer(SPLASH_DURATION_SECS, TimerMode.ONCE)
    )
    image: str = SPLASH_IMAGE
    background: tuple[float, float, float] = SPLASH_BACKGROUND_COLOR
    image_alpha: float = 0.0

    def update(self, delta_secs: float) -> Screen | None:
        """Run one frame; return the screen to switch to, if any."""
        self.fade.tick(delta_secs)
        self.timer.tick(delta_secs)
        self.image_alpha = self.fade.alpha()
        if self.timer.just_finished:
            return Screen.TITLE
        return None