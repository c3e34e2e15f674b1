"""Splitting an input line into raw tokens that keep their quote characters."""

from __future__ import annotations

from minishell.splitter import count_letters, skip_spaces


def count_token_length(line: str) -> int:
    """Return the position where the first raw token of *line* ends.

    The boundaries are the same as for plain words. An operator at the very
    start is a token of its own. An operator further on ends the token before
    it. Quoted text runs up to the next space outside quotes.
    """
    return count_letters(line)


def split_tokens(line: str) -> list[str]:
    """Split *line* into tokens, leaving quote characters in place.

    Empty pieces are dropped, so the result holds only non-empty tokens.
    """
    tokens: list[str] = []
    rest = line[skip_spaces(line, 0):]
    while rest:
        length = count_token_length(rest)
        if length:
            tokens.append(rest[:length])
        else:
            # Nothing measurable here; step over one character to make progress.
            length = 1
        rest = rest[length:]
        rest = rest[skip_spaces(rest, 0):]
    return tokens