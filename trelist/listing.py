"""Single entry point used after entry collection.

Prints the listing and, when numeric handles are requested, writes the
alias scripts that reopen each listed path by its index.
"""

from __future__ import annotations

from typing import Sequence, TextIO

from . import config
from .aliases import AliasEnvironment, create_edit_aliases, resolve_alias_environment
from .colors import ColorChoice
from .entry import FormattedEntry
from .render import print_entries
from .styles import StyleLookup


def present_entries(
    entries: Sequence[FormattedEntry],
    *,
    create_alias: bool = False,
    editor: str | None = None,
    lscolors: StyleLookup | None = None,
    color_choice: ColorChoice | None = None,
    environment: AliasEnvironment | None = None,
    stream: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """Render ``entries`` and optionally emit their edit aliases.

    ``color_choice`` and ``editor`` fall back to persisted preferences when
    omitted. Nothing is raised for coloring or alias-file problems.
    """
    choice = config.load_color_choice() if color_choice is None else color_choice
    print_entries(entries, create_alias, lscolors, stream=stream, color_choice=choice)
    if not create_alias:
        return
    env = resolve_alias_environment() if environment is None else environment
    create_edit_aliases(config.resolve_editor(editor), entries, env, stderr)
