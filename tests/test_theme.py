import pytest

from jankbits.theme import (
    BUTTON_BACKGROUND,
    BUTTON_HOVERED_BACKGROUND,
    BUTTON_PALETTE,
    BUTTON_PRESSED_BACKGROUND,
    CLICK_SOUND,
    HEADER_TEXT,
    HOVER_SOUND,
    LABEL_TEXT,
    Button,
    Color,
    Interaction,
    InteractionPalette,
    Label,
    button,
    button_small,
    header,
    label,
)


def test_palette_constants_match_source():
    assert LABEL_TEXT == Color(0.867, 0.827, 0.412)
    assert HEADER_TEXT == Color(0.988, 0.984, 0.800)
    assert BUTTON_BACKGROUND == Color(0.275, 0.400, 0.750)


@pytest.mark.parametrize(
    "interaction, expected",
    [
        (Interaction.NONE, BUTTON_BACKGROUND),
        (Interaction.HOVERED, BUTTON_HOVERED_BACKGROUND),
        (Interaction.PRESSED, BUTTON_PRESSED_BACKGROUND),
    ],
)
def test_color_for(interaction, expected):
    assert BUTTON_PALETTE.color_for(interaction) == expected


def test_custom_palette_color_for():
    red, green, blue = Color(1, 0, 0), Color(0, 1, 0), Color(0, 0, 1)
    palette = InteractionPalette(none=red, hovered=green, pressed=blue)
    assert palette.color_for(Interaction.HOVERED) == green
    assert palette.color_for(Interaction.PRESSED) == blue


def test_rgba8_extremes():
    assert Color(0.0, 1.0, 0.0).rgba8 == (0, 255, 0, 255)


def test_header_and_label():
    h = header("Settings")
    assert isinstance(h, Label)
    assert (h.text, h.font_size, h.color, h.name) == ("Settings", 40.0, HEADER_TEXT, "Header")
    lab = label("Loading...")
    assert (lab.text, lab.font_size, lab.color, lab.name) == ("Loading...", 24.0, LABEL_TEXT, "Label")


def test_button_sizes_and_action():
    calls = []
    big = button("Play", lambda: calls.append("play") or "done")
    assert (big.width, big.height, big.rounded) == (480.0, 80.0, True)
    assert big.action() == "done"
    assert calls == ["play"]
    small = button_small("-", lambda: None)
    assert (small.width, small.height, small.rounded) == (30.0, 30.0, False)


def test_button_background_follows_interaction():
    b = button("Go", lambda: None)
    assert b.background == BUTTON_BACKGROUND
    b.interaction = Interaction.PRESSED
    assert b.background == BUTTON_PRESSED_BACKGROUND
    assert (b.hover_sound, b.click_sound) == (HOVER_SOUND, CLICK_SOUND)


def test_button_hit():
    b = button_small("+", lambda: None)
    b.position = (10.0, 20.0)
    assert b.hit((10.0, 20.0))
    assert b.hit((10.0 + b.width / 2, 20.0 + b.height / 2))
    assert not b.hit((10.0 + b.width, 20.0))
    assert not b.hit((9.0, 20.0))
    assert not b.hit((10.0, 20.0 + b.height))


def test_button_is_dataclass_with_defaults():
    b = Button("x", lambda: None, width=5.0, height=5.0)
    assert b.interaction is Interaction.NONE
    assert b.position == (0.0, 0.0)