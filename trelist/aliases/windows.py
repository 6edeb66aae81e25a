"""Windows alias emitter: a PowerShell module plus a ``doskey`` batch file.

Both files define the same ``e<i>`` handles in their own dialect and are
written independently, so a failure in one does not stop the other.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Sequence

from ..entry import FormattedEntry
from .base import AliasEmitter, open_alias_file, report_write_error

POWERSHELL_SUFFIX = "psm1"
CMD_SUFFIX = "bat"
POWERSHELL_TRAILER = "Export-ModuleMember -Function *"
CMD_DEFAULT_OPENER = "START"


def format_powershell_function(index: int, editor: str, path: str) -> str:
    if not editor:
        return f'Function e{index} {{ Start-Process "{path}"}}'
    return f'Function e{index} {{ {editor} $args "{path}"}}'


def format_doskey_macro(index: int, editor: str, path: str) -> str:
    opener = editor or CMD_DEFAULT_OPENER
    return f"doskey /exename=cmd.exe e{index}={opener} {path}"


class WindowsAliasEmitter(AliasEmitter):
    def _path_with_suffix(self, suffix: str) -> Path:
        return Path(self.environment.tmp_root) / f"{self.environment.file_stem}.{suffix}"

    def alias_paths(self) -> list[Path]:
        return [self._path_with_suffix(POWERSHELL_SUFFIX), self._path_with_suffix(CMD_SUFFIX)]

    def _write_lines(self, path: Path, kind: str, lines: Iterable[str]) -> None:
        alias_file = open_alias_file(path, self.stderr)
        if alias_file is None:
            return
        try:
            with alias_file:
                for line in lines:
                    alias_file.write(line + "\n")
        except OSError as exc:
            report_write_error(kind, exc, self.stderr)

    def _powershell_lines(self, editor: str, entries: Sequence[FormattedEntry]) -> Iterator[str]:
        for index, entry in enumerate(entries):
            yield format_powershell_function(index, editor, entry.path)
        yield POWERSHELL_TRAILER

    def _cmd_lines(self, editor: str, entries: Sequence[FormattedEntry]) -> Iterator[str]:
        for index, entry in enumerate(entries):
            yield format_doskey_macro(index, editor, entry.path)

    def create_edit_aliases(self, editor: str, entries: Sequence[FormattedEntry]) -> None:
        powershell_path, cmd_path = self.alias_paths()
        self._write_lines(powershell_path, "PowerShell", self._powershell_lines(editor, entries))
        self._write_lines(cmd_path, "CMD", self._cmd_lines(editor, entries))
