"""Checks run on an input line before it is split into words."""

from __future__ import annotations

_WHITESPACE = " \b\t\n\v\f\r"


class ShellSyntaxError(ValueError):
    """Raised when an input line cannot be run as written."""


def count_quotes(line: str) -> int:
    """Return the number of single and double quote characters in *line*."""
    return line.count("'") + line.count('"')


def check_quotes(line: str) -> int:
    """Raise ShellSyntaxError on an unclosed quote; return the quote count."""
    if line.count("'") % 2:
        raise ShellSyntaxError("missing quote")
    if line.count('"') % 2:
        raise ShellSyntaxError("missing double quote")
    return count_quotes(line)


def count_pipes(line: str) -> int:
    """Count ``|`` characters that are outside quotes."""
    pipes = 0
    quote: str | None = None
    for ch in line:
        if quote:
            if ch == quote:
                quote = None
        elif ch in "'\"":
            quote = ch
        elif ch == "|":
            pipes += 1
    return pipes


def check_leading_pipe(line: str) -> None:
    """Raise ShellSyntaxError if the line starts with a pipe."""
    stripped = line.lstrip(_WHITESPACE)
    if stripped.startswith("||"):
        raise ShellSyntaxError("bash: syntax error near unexpected token `||'")
    if stripped.startswith("|"):
        raise ShellSyntaxError("bash: syntax error near unexpected token `|'")