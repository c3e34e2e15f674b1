"""Estimating how many words an input line will be split into.

The count follows the shell's own heuristics. Redirection and pipe operators
add words depending on whether they touch their neighbours, and quoted text
joins the words it spans.
"""

from __future__ import annotations

from minishell.splitter import skip_spaces

_OPERATORS = ("<", ">", "|")
_DOUBLE_OPERATORS = (">>", "<<")
_QUOTES = ("'", '"')
# Characters that end a word while it is being scanned.
_WORD_BREAKS = frozenset(" \t\n\v\f")


def _at(line: str, pos: int) -> str:
    """Return the character at *pos*; the start of a line reads as a space."""
    if pos < 0:
        return " "
    return line[pos] if pos < len(line) else ""


def _is_word_char(ch: str) -> bool:
    return ch != "" and ch not in _WORD_BREAKS


def _count_operators(line: str, pos: int, words: int) -> tuple[int, int]:
    """Account for a redirection or pipe at *pos*; return the new position and count."""
    if line[pos:pos + 2] in _DOUBLE_OPERATORS:
        words += 1 if _at(line, pos - 1) == " " else 2
        pos += 2
    if _at(line, pos) in _OPERATORS:
        spaced = (_at(line, pos - 1) == " ") + (_at(line, pos + 1) == " ")
        words += (2, 1, 0)[spaced]
    return pos, words


def _skip_quoted(line: str, pos: int) -> tuple[int, bool]:
    """Move past the quoted text starting at *pos*.

    Return the new position and whether the quoted part was followed by a
    space, which ends it as a word of its own.
    """
    quote = line[pos]
    end = len(line)
    pos += 1
    while pos < end and line[pos] != quote:
        pos += 1
    if pos >= end:
        return end, False
    following = 0
    while pos < end:
        if line[pos] == " " and following % 2 == 0:
            return pos, True
        pos += 1
        if _at(line, pos) == quote:
            following += 1
    return pos, False


def _scan_word(line: str, pos: int, words: int) -> tuple[int, int]:
    while _is_word_char(_at(line, pos)):
        pos, words = _count_operators(line, pos, words)
        if _at(line, pos) in _QUOTES:
            pos, closed = _skip_quoted(line, pos)
            if closed:
                words += 1
        if pos < len(line):
            pos += 1
    return pos, words


def count_words(line: str) -> int:
    """Return the shell's estimate of the number of words in *line*."""
    pos = 0
    words = 0
    while pos < len(line):
        pos = skip_spaces(line, pos)
        if pos < len(line):
            words += 1
            pos, words = _scan_word(line, pos, words)
    return words