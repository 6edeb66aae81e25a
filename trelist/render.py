"""Print formatted tree entries to the terminal.

Each entry becomes one line: its prefix, an optional ``[index] `` handle,
and its name styled per the path's lookup result. Coloring is
best-effort: a styled write that fails is retried as plain text so the
listing always prints in full.
"""

from __future__ import annotations

import logging
import sys
from typing import Sequence, TextIO

from .colors import (
    RESET,
    ColorChoice,
    TerminalColorSpec,
    TerminalNamedColor,
    convert_to_color_spec,
    sgr_sequence,
    should_colorize,
)
from .entry import FormattedEntry
from .styles import StyleLookup

logger = logging.getLogger(__name__)

NUMBER_COLOR = TerminalColorSpec(foreground=TerminalNamedColor.RED)


def color_print(text: object, color: TerminalColorSpec | None, stream: TextIO, colorize: bool = True) -> bool:
    """Write ``text`` to ``stream`` wrapped in ``color``'s SGR sequence.

    The styled fragment is assembled in full before a single write. When
    that write fails, the plain text is written instead and ``False`` is
    returned. Plain specs and ``colorize=False`` skip escapes entirely.
    """
    if color is None or not colorize or color.is_plain():
        stream.write(f"{text}")
        return True
    try:
        stream.write(f"{sgr_sequence(color)}{text}{RESET}")
    except (OSError, ValueError) as exc:
        logger.debug("styled write failed, falling back to plain text: %s", exc)
        stream.write(f"{text}")
        return False
    return True


def print_entries(
    entries: Sequence[FormattedEntry],
    create_alias: bool,
    lscolors: StyleLookup | None = None,
    *,
    stream: TextIO | None = None,
    color_choice: ColorChoice = ColorChoice.AUTO,
) -> None:
    """Print ``entries`` one per line, in order.

    With ``create_alias`` each name is preceded by ``[i] `` where ``i`` is the
    zero-based position. Without a style lookup nothing is colored, the
    index included.
    """
    out = sys.stdout if stream is None else stream
    colorize = lscolors is not None and should_colorize(color_choice)
    number_color = NUMBER_COLOR if lscolors is not None else None

    for index, entry in enumerate(entries):
        out.write(entry.prefix)
        if create_alias:
            out.write("[")
            color_print(index, number_color, out, colorize)
            out.write("] ")

        spec = None
        if lscolors is not None:
            spec = convert_to_color_spec(lscolors.style_for_path(entry.path))
        color_print(entry.name, spec, out, colorize)
        out.write("\n")
