"""Error message formatting in the shell's diagnostic style."""

from __future__ import annotations

import sys
from typing import TextIO


def format_error(prefix: str, cmd_arg: str | None, msg: str) -> str:
    """Build a diagnostic line: prefix, optional ``arg : `` part, message, newline."""
    parts = [prefix]
    if cmd_arg:
        parts.append(f"{cmd_arg} : ")
    parts.append(msg)
    parts.append("\n")
    return "".join(parts)


def print_error(
    prefix: str,
    cmd_arg: str | None,
    msg: str,
    stream: TextIO | None = None,
) -> None:
    """Write a formatted diagnostic to *stream* (standard error by default)."""
    target = sys.stderr if stream is None else stream
    target.write(format_error(prefix, cmd_arg, msg))
    target.flush()