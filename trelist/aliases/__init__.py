"""Alias script emission for numbered listing entries.

``create_edit_aliases`` picks the emitter for the host platform and
writes one ``e<i>`` alias per entry. It never raises; problems are
reported on stderr.
"""

from __future__ import annotations

import logging
from typing import Sequence, TextIO

from ..entry import FormattedEntry
from .base import AliasEmitter, report_error
from .environment import AliasEnvironment, resolve_alias_environment
from .posix import PosixAliasEmitter, format_posix_alias
from .windows import WindowsAliasEmitter, format_doskey_macro, format_powershell_function

logger = logging.getLogger(__name__)


def select_alias_emitter(environment: AliasEnvironment, stderr: TextIO | None = None) -> AliasEmitter:
    """Return the emitter variant matching ``environment``'s platform."""
    if environment.is_windows:
        logger.debug("using Windows alias emitter in %s", environment.tmp_root)
        return WindowsAliasEmitter(environment, stderr)
    logger.debug("using POSIX alias emitter in %s", environment.tmp_root)
    return PosixAliasEmitter(environment, stderr)


def create_edit_aliases(
    editor: str,
    entries: Sequence[FormattedEntry],
    environment: AliasEnvironment | None = None,
    stderr: TextIO | None = None,
) -> None:
    env = resolve_alias_environment() if environment is None else environment
    select_alias_emitter(env, stderr).create_edit_aliases(editor, entries)


__all__ = [
    "AliasEmitter",
    "AliasEnvironment",
    "PosixAliasEmitter",
    "WindowsAliasEmitter",
    "create_edit_aliases",
    "format_doskey_macro",
    "format_posix_alias",
    "format_powershell_function",
    "report_error",
    "resolve_alias_environment",
    "select_alias_emitter",
]
