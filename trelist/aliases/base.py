"""Shared alias-emitter plumbing: the capability interface and error reporting.

Failures are reported on stderr as ``[tre] ...`` lines and never raised.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence, TextIO

from ..entry import FormattedEntry
from .environment import AliasEnvironment

logger = logging.getLogger(__name__)

ERROR_PREFIX = "[tre]"


def report_error(message: str, stream: TextIO | None = None) -> None:
    """Write one ``[tre]``-prefixed diagnostic line to stderr."""
    err = sys.stderr if stream is None else stream
    err.write(f"{ERROR_PREFIX} {message}\n")


def report_write_error(kind: str, exc: OSError, stream: TextIO | None = None) -> None:
    report_error(f"failed to write to {kind} alias file due to:", stream)
    err = sys.stderr if stream is None else stream
    err.write(f"{exc}\n")


def open_alias_file(path: Path, stream: TextIO | None = None) -> TextIO | None:
    """Open ``path`` for writing in truncate mode, reporting failure.

    Returns ``None`` when the file could not be created.
    """
    try:
        handle = open(path, "w", encoding="utf-8", newline="\n")
    except OSError as exc:
        logger.debug("cannot open alias file %s: %s", path, exc)
        report_error(f'failed to open "{path}"', stream)
        return None
    logger.debug("writing alias file %s", path)
    return handle


class AliasEmitter(ABC):
    """Writes shell alias files binding ``e<i>`` to opening entry ``i``."""

    def __init__(self, environment: AliasEnvironment, stderr: TextIO | None = None) -> None:
        self.environment = environment
        self.stderr = stderr

    @abstractmethod
    def alias_paths(self) -> list[Path]:
        """Return every file this emitter writes, in write order."""

    @abstractmethod
    def create_edit_aliases(self, editor: str, entries: Sequence[FormattedEntry]) -> None:
        """Write aliases for ``entries``; failures are reported, never raised."""
