"""Shared constants: timing, window settings and colour palettes."""

from __future__ import annotations

Color = tuple[int, int, int]


def rgb(r: float, g: float, b: float) -> Color:
    """Convert floating point channels in [0, 1] to an 8-bit RGB triple."""
    channels = (r, g, b)
    for channel in channels:
        if not 0.0 <= channel <= 1.0:
            raise ValueError(f"colour channel {channel!r} is outside [0, 1]")
    return tuple(round(channel * 255) for channel in channels)  # type: ignore[return-value]


TIME_STEP: float = 1.0 / 60.0

WINDOW_TITLE = "Double Dodge!"
WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 600
BACKGROUND_COLOR: Color = rgb(0.80, 0.80, 0.80)

# Player 1, the wall, player 2.
PLAYER_COLOR: tuple[Color, Color, Color] = (
    rgb(1.0, 0.07, 0.31),
    rgb(0.04, 0.03, 0.03),
    rgb(0.0, 0.57, 0.68),
)

CREATURE_COLORS: tuple[Color, Color, Color] = (
    rgb(0.54, 0.17, 0.39),
    rgb(0.45, 0.23, 0.4),
    rgb(0.36, 0.30, 0.49),
)

BOLD_FONT = "fonts/FiraSans-Bold.ttf"
MONO_FONT = "fonts/FiraMono-Medium.ttf"