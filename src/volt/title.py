"""Title banner printed before the prompts."""

from __future__ import annotations

from typing import Sequence

from rich.color import Color
from rich.color_triplet import ColorTriplet
from rich.console import Console
from rich.style import Style
from rich.text import Text

__all__ = ["BANNER", "POIMANDRES_THEME", "gradient_text", "render_title"]


BANNER = """
▀██▀  ▀█▀  ▄▄█▀▀██   ▀██▀      █▀▀██▀▀█
 ▀█▄  ▄▀  ▄█▀    ██   ██          ██
  ██  █   ██      ██  ██          ██
   ███    ▀█▄     ██  ██          ██
    █      ▀▀█▄▄▄█▀  ▄██▄▄▄▄▄█   ▄██▄
"""

# Colours from the poimandres VS Code theme.
POIMANDRES_THEME = {
    "blue": "#add7ff",
    "cyan": "#89ddff",
    "magenta": "#fae4fc",
    "red": "#d0679d",
    "yellow": "#fffac2",
}


def _interpolate(stops: Sequence[ColorTriplet], position: float) -> Color:
    if len(stops) == 1:
        return Color.from_triplet(stops[0])
    scaled = position * (len(stops) - 1)
    index = min(int(scaled), len(stops) - 2)
    fraction = scaled - index
    start, end = stops[index], stops[index + 1]
    mixed = ColorTriplet(
        *(round(a + (b - a) * fraction) for a, b in zip(start, end))
    )
    return Color.from_triplet(mixed)


def gradient_text(block: str, colors: Sequence[str]) -> Text:
    """Colour ``block`` left to right with a gradient through ``colors``.

    Every line shares the same column colours so multi-line art stays aligned.
    """

    stops = [Color.parse(color).get_truecolor() for color in colors]
    lines = block.strip("\n").splitlines()
    width = max((len(line) for line in lines), default=0)
    palette = [_interpolate(stops, column / max(width - 1, 1)) for column in range(width)]

    text = Text()
    for number, line in enumerate(lines):
        if number:
            text.append("\n")
        for column, char in enumerate(line):
            text.append(char, style=Style(color=palette[column]))
    return text


def render_title(console: Console | None = None) -> None:
    """Print the VOLT banner."""

    console = console or Console()
    console.print(gradient_text(BANNER, list(POIMANDRES_THEME.values())))
