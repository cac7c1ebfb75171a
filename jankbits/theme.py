"""Colours, interaction palettes and the common UI widgets."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

HEADER_FONT_SIZE = 40.0
LABEL_FONT_SIZE = 24.0
BUTTON_FONT_SIZE = 40.0

HOVER_SOUND = "audio/sound_effects/button_hover.ogg"
CLICK_SOUND = "audio/sound_effects/button_click.ogg"


@dataclass(frozen=True)
class Color:
    """An sRGB colour with components between 0 and 1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @property
    def rgba8(self) -> tuple[int, int, int, int]:
        """The colour as 8-bit channels."""
        return tuple(
            max(0, min(255, round(channel * 255))) for channel in (self.r, self.g, self.b, self.a)
        )

    def with_alpha(self, alpha: float) -> Color:
        return Color(self.r, self.g, self.b, alpha)


# #ddd369
LABEL_TEXT = Color(0.867, 0.827, 0.412)
# #fcfbcc
HEADER_TEXT = Color(0.988, 0.984, 0.800)
# #ececec
BUTTON_TEXT = Color(0.925, 0.925, 0.925)
# #4666bf
BUTTON_BACKGROUND = Color(0.275, 0.400, 0.750)
# #6299d1
BUTTON_HOVERED_BACKGROUND = Color(0.384, 0.600, 0.820)
# #3d4999
BUTTON_PRESSED_BACKGROUND = Color(0.239, 0.286, 0.600)


class Interaction(Enum):
    """How the pointer currently relates to a widget."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True)
class InteractionPalette:
    """Background colours for each interaction state of a widget."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        """The background colour for ``interaction``."""
        return {
            Interaction.NONE: self.none,
            Interaction.HOVERED: self.hovered,
            Interaction.PRESSED: self.pressed,
        }[interaction]


BUTTON_PALETTE = InteractionPalette(
    none=BUTTON_BACKGROUND,
    hovered=BUTTON_HOVERED_BACKGROUND,
    pressed=BUTTON_PRESSED_BACKGROUND,
)


@dataclass
class Label:
    """A line of text; ``justify`` is ``"start"``, ``"end"`` or ``None`` for centred."""

    text: str
    font_size: float = LABEL_FONT_SIZE
    color: Color = LABEL_TEXT
    name: str = "Label"
    justify: Optional[str] = None


@dataclass
class Button:
    """A clickable button whose background follows its interaction state."""

    text: str
    action: Callable[[], Any]
    width: float
    height: float
    rounded: bool = False
    font_size: float = BUTTON_FONT_SIZE
    text_color: Color = BUTTON_TEXT
    palette: InteractionPalette = BUTTON_PALETTE
    position: tuple[float, float] = (0.0, 0.0)
    interaction: Interaction = Interaction.NONE
    name: str = "Button"
    hover_sound: str = field(default=HOVER_SOUND, repr=False)
    click_sound: str = field(default=CLICK_SOUND, repr=False)

    @property
    def background(self) -> Color:
        return self.palette.color_for(self.interaction)

    def hit(self, point: Sequence[float]) -> bool:
        """Whether ``point`` lies inside the button's rectangle."""
        x, y = point
        left, top = self.position
        return left <= x < left + self.width and top <= y < top + self.height


def header(text: str) -> Label:
    """A large header label."""
    return Label(str(text), font_size=HEADER_FONT_SIZE, color=HEADER_TEXT, name="Header")


def label(text: str) -> Label:
    """A plain text label."""
    return Label(str(text), font_size=LABEL_FONT_SIZE, color=LABEL_TEXT, name="Label")


def button(text: str, action: Callable[[], Any]) -> Button:
    """A large rounded button."""
    return Button(str(text), action, width=480.0, height=80.0, rounded=True)


def button_small(text: str, action: Callable[[], Any]) -> Button:
    """A small square button."""
    return Button(str(text), action, width=30.0, height=30.0)