"""Translation from path styles to terminal color specs, and SGR encoding.

The terminal model knows 24-bit RGB, 256-color indices, and the 8 basic
named colors. Bright named colors have no slot of their own there, so
they map to palette indices 8-15, which is where 8-bit palettes keep them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Union

from . import styles


class TerminalNamedColor(Enum):
    """Basic terminal colors; values are SGR offsets from 30 (fg) / 40 (bg)."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


@dataclass(frozen=True)
class TerminalRgb:
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class Ansi256:
    index: int


TerminalColor = Union[TerminalNamedColor, TerminalRgb, Ansi256]


@dataclass(frozen=True)
class TerminalColorSpec:
    """Terminal-facing form of a ``Style``."""

    foreground: TerminalColor | None = None
    background: TerminalColor | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False

    def is_plain(self) -> bool:
        """Return whether this spec would not change the terminal's rendition."""
        return (
            self.foreground is None
            and self.background is None
            and not (self.bold or self.italic or self.underline)
        )


_NAMED_COLORS: dict[styles.NamedColor, TerminalColor] = {
    styles.NamedColor.BLACK: TerminalNamedColor.BLACK,
    styles.NamedColor.RED: TerminalNamedColor.RED,
    styles.NamedColor.GREEN: TerminalNamedColor.GREEN,
    styles.NamedColor.YELLOW: TerminalNamedColor.YELLOW,
    styles.NamedColor.BLUE: TerminalNamedColor.BLUE,
    styles.NamedColor.MAGENTA: TerminalNamedColor.MAGENTA,
    styles.NamedColor.CYAN: TerminalNamedColor.CYAN,
    styles.NamedColor.WHITE: TerminalNamedColor.WHITE,
    styles.NamedColor.BRIGHT_BLACK: Ansi256(8),
    styles.NamedColor.BRIGHT_RED: Ansi256(9),
    styles.NamedColor.BRIGHT_GREEN: Ansi256(10),
    styles.NamedColor.BRIGHT_YELLOW: Ansi256(11),
    styles.NamedColor.BRIGHT_BLUE: Ansi256(12),
    styles.NamedColor.BRIGHT_MAGENTA: Ansi256(13),
    styles.NamedColor.BRIGHT_CYAN: Ansi256(14),
    styles.NamedColor.BRIGHT_WHITE: Ansi256(15),
}


def convert_color(color: styles.Color) -> TerminalColor:
    """Map a style color onto the terminal color model."""
    if isinstance(color, styles.Rgb):
        return TerminalRgb(color.r, color.g, color.b)
    if isinstance(color, styles.Fixed):
        return Ansi256(color.index)
    return _NAMED_COLORS[color]


def convert_to_color_spec(style: styles.Style | None) -> TerminalColorSpec | None:
    """Convert ``style`` into a ``TerminalColorSpec``; ``None`` stays ``None``."""
    if style is None:
        return None
    return TerminalColorSpec(
        foreground=convert_color(style.foreground) if style.foreground is not None else None,
        background=convert_color(style.background) if style.background is not None else None,
        bold=style.font_style.bold,
        italic=style.font_style.italic,
        underline=style.font_style.underline,
    )


RESET = "\033[0m"


def _color_params(color: TerminalColor, base: int) -> list[str]:
    if isinstance(color, TerminalNamedColor):
        return [str(base + color.value)]
    if isinstance(color, Ansi256):
        return [str(base + 8), "5", str(color.index)]
    return [str(base + 8), "2", str(color.r), str(color.g), str(color.b)]


def sgr_sequence(spec: TerminalColorSpec) -> str:
    """Return the SGR escape that switches the terminal to ``spec``.

    The sequence starts from a reset so attributes from earlier writes
    never leak into this one.
    """
    params = ["0"]
    if spec.bold:
        params.append("1")
    if spec.italic:
        params.append("3")
    if spec.underline:
        params.append("4")
    if spec.foreground is not None:
        params.extend(_color_params(spec.foreground, 30))
    if spec.background is not None:
        params.extend(_color_params(spec.background, 40))
    return f"\033[{';'.join(params)}m"


class ColorChoice(Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def normalize_color_choice(value: str | None) -> ColorChoice:
    """Return a valid color choice, falling back to ``AUTO``."""
    if not value:
        return ColorChoice.AUTO
    candidate = str(value).strip().lower()
    for choice in ColorChoice:
        if choice.value == candidate:
            return choice
    return ColorChoice.AUTO


def should_colorize(
    choice: ColorChoice = ColorChoice.AUTO,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Decide whether SGR sequences should be written.

    ``AUTO`` colors unless ``NO_COLOR`` is set or ``TERM`` is ``dumb``. The
    output stream is not consulted, so the same entries and lookup always
    render the same bytes.
    """
    if choice is ColorChoice.ALWAYS:
        return True
    if choice is ColorChoice.NEVER:
        return False
    env = os.environ if environ is None else environ
    if "NO_COLOR" in env:
        return False
    return env.get("TERM", "") != "dumb"


__all__ = [
    "TerminalNamedColor",
    "TerminalRgb",
    "Ansi256",
    "TerminalColor",
    "TerminalColorSpec",
    "ColorChoice",
    "RESET",
    "convert_color",
    "convert_to_color_spec",
    "normalize_color_choice",
    "sgr_sequence",
    "should_colorize",
]
