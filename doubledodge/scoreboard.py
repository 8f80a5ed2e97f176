"""Score keeping and the text shown for it."""

from __future__ import annotations

from dataclasses import dataclass

from doubledodge.consts import BOLD_FONT, MONO_FONT, Color, rgb

SCORE_LABEL = "Score: "
SCORE_FONT_SIZE = 40
LABEL_COLOR: Color = rgb(0.5, 0.5, 1.0)
VALUE_COLOR: Color = rgb(1.0, 0.5, 0.5)


@dataclass(frozen=True)
class TextSection:
    """One run of text with its own font, size and colour."""

    value: str
    font: str
    font_size: int
    color: Color


@dataclass
class Scoreboard:
    """The number of seconds survived in the current round."""

    score: int = 0

    def reset(self) -> None:
        """Start counting again from zero."""
        self.score = 0

    def tick(self) -> None:
        """Add one point."""
        self.score += 1

    def sections(self) -> list[TextSection]:
        """The label and the value, styled as they are drawn."""
        return [
            TextSection(SCORE_LABEL, BOLD_FONT, SCORE_FONT_SIZE, LABEL_COLOR),
            TextSection(str(self.score), MONO_FONT, SCORE_FONT_SIZE, VALUE_COLOR),
        ]

    def text(self) -> str:
        """The whole score line as plain text."""
        return "".join(section.value for section in self.sections())