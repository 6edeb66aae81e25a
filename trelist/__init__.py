"""Public package surface for trelist.

Renders pre-computed tree entries to a terminal and writes the numeric
alias scripts that reopen listed paths. Submodules hold the details.
"""

from __future__ import annotations


def present_entries(*args, **kwargs):
    """Lazily import the listing entrypoint to keep package imports lightweight."""
    from .listing import present_entries as _present_entries

    return _present_entries(*args, **kwargs)


__all__ = ["present_entries"]
