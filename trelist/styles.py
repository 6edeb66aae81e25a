"""Per-path style model and the ``LS_COLORS`` style lookup.

``Style`` is the color/emphasis a path asks for, independent of how a
terminal can express it. ``LsColors`` resolves styles from the GNU
``LS_COLORS`` convention (file-type indicators plus ``*suffix`` globs).
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Protocol, Union


class NamedColor(Enum):
    """The 8 standard and 8 bright color names of the 16-color model."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"


# SGR offsets 0..7 in order, shared by 30-37/40-47 and 90-97/100-107.
STANDARD_COLORS = (
    NamedColor.BLACK,
    NamedColor.RED,
    NamedColor.GREEN,
    NamedColor.YELLOW,
    NamedColor.BLUE,
    NamedColor.MAGENTA,
    NamedColor.CYAN,
    NamedColor.WHITE,
)
BRIGHT_COLORS = (
    NamedColor.BRIGHT_BLACK,
    NamedColor.BRIGHT_RED,
    NamedColor.BRIGHT_GREEN,
    NamedColor.BRIGHT_YELLOW,
    NamedColor.BRIGHT_BLUE,
    NamedColor.BRIGHT_MAGENTA,
    NamedColor.BRIGHT_CYAN,
    NamedColor.BRIGHT_WHITE,
)


@dataclass(frozen=True)
class Rgb:
    """24-bit color."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class Fixed:
    """Index into the 256-color palette."""

    index: int


Color = Union[NamedColor, Rgb, Fixed]


@dataclass(frozen=True)
class FontStyle:
    bold: bool = False
    italic: bool = False
    underline: bool = False


@dataclass(frozen=True)
class Style:
    """Desired color and emphasis for one path."""

    foreground: Color | None = None
    background: Color | None = None
    font_style: FontStyle = field(default_factory=FontStyle)


class StyleLookup(Protocol):
    def style_for_path(self, path: str) -> Style | None:
        """Return the style for ``path``, or ``None`` when there is no opinion."""
        ...


DEFAULT_LS_COLORS = (
    "rs=0:di=01;34:ln=01;36:mh=00:pi=40;33:so=01;35:do=01;35:bd=40;33;01:"
    "cd=40;33;01:or=40;31;01:mi=00:su=37;41:sg=30;43:ca=00:tw=30;42:"
    "ow=34;42:st=37;44:ex=01;32:*.tar=01;31:*.tgz=01;31:*.zip=01;31:"
    "*.gz=01;31:*.bz2=01;31:*.xz=01;31:*.7z=01;31:*.jpg=01;35:"
    "*.jpeg=01;35:*.gif=01;35:*.png=01;35:*.svg=01;35:*.mp4=01;35:"
    "*.mkv=01;35:*.mp3=00;36:*.flac=00;36:*.wav=00;36"
)


def _extended_color(codes: list[int], i: int) -> tuple[Color | None, int]:
    """Parse the tail of a ``38``/``48`` sequence starting at ``codes[i]``.

    Returns the color (or ``None`` when truncated/invalid) and the index of
    the next unconsumed code.
    """
    if i >= len(codes):
        return None, i
    mode = codes[i]
    if mode == 5:
        if i + 1 < len(codes) and 0 <= codes[i + 1] <= 255:
            return Fixed(codes[i + 1]), i + 2
        return None, len(codes)
    if mode == 2:
        rgb = codes[i + 1 : i + 4]
        if len(rgb) == 3 and all(0 <= c <= 255 for c in rgb):
            return Rgb(*rgb), i + 4
        return None, len(codes)
    return None, i + 1


def parse_sgr_style(sgr: str) -> Style | None:
    """Translate a ``;``-separated SGR parameter string into a ``Style``.

    Unknown codes are skipped, and an empty or unparsable string yields
    ``None``.
    """
    codes: list[int] = []
    for part in sgr.split(";"):
        part = part.strip()
        if not part:
            continue
        try:
            codes.append(int(part))
        except ValueError:
            return None
    if not codes:
        return None

    foreground: Color | None = None
    background: Color | None = None
    bold = italic = underline = False
    i = 0
    while i < len(codes):
        code = codes[i]
        i += 1
        if code == 0:
            foreground = background = None
            bold = italic = underline = False
        elif code == 1:
            bold = True
        elif code == 3:
            italic = True
        elif code == 4:
            underline = True
        elif 30 <= code <= 37:
            foreground = STANDARD_COLORS[code - 30]
        elif 40 <= code <= 47:
            background = STANDARD_COLORS[code - 40]
        elif 90 <= code <= 97:
            foreground = BRIGHT_COLORS[code - 90]
        elif 100 <= code <= 107:
            background = BRIGHT_COLORS[code - 100]
        elif code == 38:
            color, i = _extended_color(codes, i)
            if color is not None:
                foreground = color
        elif code == 48:
            color, i = _extended_color(codes, i)
            if color is not None:
                background = color
    return Style(
        foreground=foreground,
        background=background,
        font_style=FontStyle(bold=bold, italic=italic, underline=underline),
    )


class LsColors:
    """``StyleLookup`` backed by an ``LS_COLORS`` definition."""

    def __init__(self, indicators: dict[str, Style], suffixes: list[tuple[str, Style]]) -> None:
        self.indicators = indicators
        # Longest suffix first so ``*.tar.gz`` wins over ``*.gz``.
        self.suffixes = sorted(suffixes, key=lambda item: len(item[0]), reverse=True)

    @classmethod
    def from_string(cls, spec: str) -> "LsColors":
        indicators: dict[str, Style] = {}
        suffixes: list[tuple[str, Style]] = []
        for pair in spec.split(":"):
            key, sep, value = pair.partition("=")
            if not sep or not key:
                continue
            style = parse_sgr_style(value)
            if style is None:
                continue
            if key.startswith("*"):
                suffix = key[1:].lower()
                if suffix:
                    suffixes.append((suffix, style))
            else:
                indicators[key] = style
        return cls(indicators, suffixes)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LsColors":
        env = os.environ if environ is None else environ
        spec = env.get("LS_COLORS", "").strip()
        return cls.from_string(spec or DEFAULT_LS_COLORS)

    def _style_for_suffix(self, name: str) -> Style | None:
        folded = name.lower()
        for suffix, style in self.suffixes:
            if folded.endswith(suffix):
                return style
        return None

    def style_for_path(self, path: str) -> Style | None:
        try:
            st = os.lstat(path)
        except OSError:
            return None

        mode = st.st_mode
        if stat.S_ISLNK(mode):
            if not os.path.exists(path) and "or" in self.indicators:
                return self.indicators["or"]
            return self.indicators.get("ln")
        if stat.S_ISDIR(mode):
            return self.indicators.get("di")
        if stat.S_ISFIFO(mode):
            return self.indicators.get("pi")
        if stat.S_ISSOCK(mode):
            return self.indicators.get("so")
        if stat.S_ISBLK(mode):
            return self.indicators.get("bd")
        if stat.S_ISCHR(mode):
            return self.indicators.get("cd")
        if mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH) and "ex" in self.indicators:
            return self.indicators["ex"]
        style = self._style_for_suffix(os.path.basename(path))
        if style is not None:
            return style
        return self.indicators.get("fi")


__all__ = [
    "NamedColor",
    "Rgb",
    "Fixed",
    "Color",
    "FontStyle",
    "Style",
    "StyleLookup",
    "LsColors",
    "DEFAULT_LS_COLORS",
    "parse_sgr_style",
]
