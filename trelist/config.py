"""Persistent JSON config helpers.

Reads the default alias editor and the color preference.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Mapping

from platformdirs import user_config_dir

from .colors import ColorChoice, normalize_color_choice

APP_NAME = "trelist"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_editor() -> str | None:
    """Load persisted alias editor, returning ``None`` when unset/invalid."""
    value = load_config().get("editor")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_color_choice() -> ColorChoice:
    value = load_config().get("color")
    return normalize_color_choice(value if isinstance(value, str) else None)


def resolve_editor(editor: str | None = None, environ: Mapping[str, str] | None = None) -> str:
    """Pick the alias editor: explicit value, saved preference, ``$EDITOR``, then ``""``.

    An empty result means "use the platform's default open action".
    """
    if editor is not None:
        return editor
    saved = load_editor()
    if saved is not None:
        return saved
    env = os.environ if environ is None else environ
    return env.get("EDITOR", "").strip()
