"""POSIX shell alias file emitter."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ..entry import FormattedEntry
from .base import AliasEmitter, open_alias_file, report_error


def escape_single_quotes(path: str) -> str:
    return path.replace("'", "\\'")


def format_posix_alias(index: int, editor: str, path: str) -> str:
    """Return the ``alias e<i>=...`` line for one entry.

    The alias evaluates ``<editor> "<path>"``; single quotes in ``path``
    are backslash-escaped to keep the line re-parseable.
    """
    return f"alias e{index}=\"eval '{editor} \\\"{escape_single_quotes(path)}\\\"'\""


class PosixAliasEmitter(AliasEmitter):
    def alias_paths(self) -> list[Path]:
        return [Path(self.environment.tmp_root) / self.environment.file_stem]

    def create_edit_aliases(self, editor: str, entries: Sequence[FormattedEntry]) -> None:
        path = self.alias_paths()[0]
        alias_file = open_alias_file(path, self.stderr)
        if alias_file is None:
            return
        # Buffered writes can also fail when the file is flushed on close.
        try:
            with alias_file:
                for index, entry in enumerate(entries):
                    alias_file.write(format_posix_alias(index, editor, entry.path) + "\n")
        except OSError:
            report_error("failed to write to alias file.", self.stderr)
