"""Locating a command in the directories listed by PATH."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence


def find_command(env: Iterable[str], args: Sequence[str]) -> str | None:
    """Return the executable path for ``args[0]``.

    Every ``PATH=`` entry of *env* is searched in order; if no directory holds
    an executable of that name the name itself is returned. An empty command
    gives None.
    """
    if not args or not args[0]:
        return None
    name = args[0]
    for entry in env:
        if not entry.startswith("PATH="):
            continue
        for directory in filter(None, entry[len("PATH="):].split(":")):
            candidate = f"{directory}/{name}"
            if os.access(candidate, os.X_OK):
                return candidate
    return name