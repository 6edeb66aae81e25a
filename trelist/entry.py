"""Entry datatype shared by the renderer and alias emitters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FormattedEntry:
    """One listed path with its tree-branch prefix and display label."""

    prefix: str
    name: str
    path: str
