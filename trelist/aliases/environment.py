"""Environment-derived settings for alias file placement.

Resolved once at startup and passed to the emitters, so no emitter reads
process environment on its own. Missing values degrade to defaults
instead of failing.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Mapping

POSIX_TMP_ROOT = "/tmp"
ALIAS_FILE_STEM = "tre_aliases_"


@dataclass(frozen=True)
class AliasEnvironment:
    user: str
    tmp_root: str
    is_windows: bool = False

    @property
    def file_stem(self) -> str:
        return f"{ALIAS_FILE_STEM}{self.user}"


def resolve_alias_environment(
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> AliasEnvironment:
    """Build an ``AliasEnvironment`` for ``platform`` (default: this host).

    POSIX reads ``USER`` and always places files under ``/tmp``. Windows
    reads ``USERNAME`` and uses ``TEMP``, then ``HOME``, then ``.``.
    """
    env = os.environ if environ is None else environ
    target = sys.platform if platform is None else platform
    if target.startswith("win"):
        tmp_root = env.get("TEMP") or env.get("HOME") or "."
        return AliasEnvironment(user=env.get("USERNAME", ""), tmp_root=tmp_root, is_windows=True)
    return AliasEnvironment(user=env.get("USER", ""), tmp_root=POSIX_TMP_ROOT, is_windows=False)
