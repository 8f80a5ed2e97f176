"""Single-button menus: the start menu and the game-over screen."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from doubledodge.consts import BOLD_FONT, Color, rgb

BUTTON_SIZE = (120.0, 50.0)
BUTTON_TEXT_COLOR: Color = rgb(0.9, 0.9, 0.9)


class Interaction(enum.Enum):
    """How the pointer currently relates to a button."""

    NONE = "none"
    HOVERED = "hovered"
    CLICKED = "clicked"


@dataclass(frozen=True)
class ButtonColors:
    """Background colours of a button at rest and under the pointer."""

    normal: Color = rgb(0.15, 0.15, 0.15)
    hovered: Color = rgb(0.25, 0.25, 0.25)


@dataclass
class Button:
    """A labelled rectangle centred on a point in screen coordinates."""

    label: str
    center: tuple[float, float]
    font_size: int
    size: tuple[float, float] = BUTTON_SIZE
    font: str = BOLD_FONT
    text_color: Color = BUTTON_TEXT_COLOR
    colors: ButtonColors = field(default_factory=ButtonColors)
    color: Color | None = None

    def __post_init__(self) -> None:
        if self.color is None:
            self.color = self.colors.normal

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """Left, top, width and height of the button."""
        width, height = self.size
        cx, cy = self.center
        return (cx - width / 2, cy - height / 2, width, height)

    def contains(self, point: tuple[float, float]) -> bool:
        """Whether the point lies on the button, edges included."""
        x, y = point
        cx, cy = self.center
        width, height = self.size
        return abs(x - cx) <= width / 2 and abs(y - cy) <= height / 2

    def interaction(self, point: tuple[float, float], pressed: bool) -> Interaction:
        """Classify the pointer at ``point`` with the button ``pressed`` or not."""
        if not self.contains(point):
            return Interaction.NONE
        return Interaction.CLICKED if pressed else Interaction.HOVERED

    def update(self, point: tuple[float, float], pressed: bool) -> Interaction:
        """Recolour the button for the pointer state and return that state."""
        state = self.interaction(point, pressed)
        if state is Interaction.HOVERED:
            self.color = self.colors.hovered
        elif state is Interaction.NONE:
            self.color = self.colors.normal
        return state


def make_play_button(center: tuple[float, float]) -> Button:
    """The start menu's button."""
    return Button(label="Play", center=center, font_size=40)


def make_restart_button(center: tuple[float, float]) -> Button:
    """The game-over screen's button."""
    return Button(label="Restart", center=center, font_size=38)