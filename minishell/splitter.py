"""Splitting an input line into words, operators and quoted strings."""

from __future__ import annotations

_WHITESPACE = "\b\t\n\v\f\r "
_OPERATORS = ("<", ">", "|")
_DOUBLE_OPERATORS = (">>", "<<")
_QUOTES = ("'", '"')
# Characters that end a word while it is being scanned.
_WORD_BREAKS = frozenset(" \t\n\v\f")


def is_whitespace(ch: str) -> bool:
    """Tell whether *ch* is a space or a control character from backspace to CR."""
    return len(ch) == 1 and ch in _WHITESPACE


def skip_spaces(line: str, index: int) -> int:
    """Return the first position at or after *index* that is not whitespace."""
    while index < len(line) and is_whitespace(line[index]):
        index += 1
    return index


def _is_word_char(ch: str) -> bool:
    return ch not in _WORD_BREAKS


def _operator_end(line: str, pos: int) -> int:
    """Return where the word ends if an operator sits at *pos*, else 0."""
    if line[pos:pos + 2] in _DOUBLE_OPERATORS:
        return 2 if pos == 0 else pos
    if line[pos] in _OPERATORS:
        return 1 if pos == 0 else pos
    return 0


def _quoted_end(line: str, pos: int) -> int:
    """Return where a word holding the quoted text at *pos* ends."""
    quote = line[pos]
    end = len(line)
    pos += 1
    while pos < end and line[pos] != quote:
        pos += 1
    following = 0
    while pos < end:
        if line[pos] == " " and following % 2 == 0:
            return pos
        pos += 1
        if pos < end and line[pos] == quote:
            following += 1
    return end


def count_letters(line: str) -> int:
    """Return the position where the first word of *line* ends.

    An operator at the very start is a word of its own; an operator later on
    ends the word before it. Quoted text runs up to the next space outside
    quotes.
    """
    pos = skip_spaces(line, 0)
    while pos < len(line) and _is_word_char(line[pos]):
        end = _operator_end(line, pos)
        if end:
            return end
        if line[pos] in _QUOTES:
            return _quoted_end(line, pos)
        pos += 1
    return pos


def split_words(line: str) -> list[str]:
    """Split *line* into words with every quote character removed."""
    words: list[str] = []
    rest = line.lstrip(_WHITESPACE)
    while rest:
        length = count_letters(rest)
        words.append(rest[:length].replace('"', "").replace("'", ""))
        rest = rest[length:].lstrip(_WHITESPACE)
    return words