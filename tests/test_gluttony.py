import pytest

from minishell.gluttony import count_token_length, split_tokens
from minishell.splitter import split_words


def test_plain_words_are_split_on_spaces():
    assert split_tokens("ls -l /tmp") == ["ls", "-l", "/tmp"]


def test_leading_and_trailing_spaces_are_ignored():
    assert split_tokens("   echo   hi   ") == ["echo", "hi"]


@pytest.mark.parametrize("line", ["", "   ", "\t \n"])
def test_blank_lines_give_no_tokens(line):
    assert split_tokens(line) == []


def test_double_quotes_are_kept():
    assert split_tokens('echo "a b"') == ["echo", '"a b"']


def test_single_quotes_are_kept():
    assert split_tokens("echo 'x y'") == ["echo", "'x y'"]


def test_quoted_text_joins_following_characters():
    assert split_tokens('echo "x y"z w') == ["echo", '"x y"z', "w"]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("a>b", ["a", ">", "b"]),
        ("a>>b", ["a", ">>", "b"]),
        ("cat<<EOF", ["cat", "<<", "EOF"]),
        ("a|b", ["a", "|", "b"]),
        ("cat < in > out", ["cat", "<", "in", ">", "out"]),
    ],
)
def test_operators_are_tokens_of_their_own(line, expected):
    assert split_tokens(line) == expected


def test_first_token_length_marks_its_end():
    line = "ls -l"
    assert line[:count_token_length(line)] == "ls"


def test_operator_at_start_has_its_own_length():
    assert ">>f"[:count_token_length(">>f")] == ">>"
    assert "|x"[:count_token_length("|x")] == "|"


def test_operator_after_word_ends_the_word():
    line = "abc>def"
    assert line[:count_token_length(line)] == "abc"


@pytest.mark.parametrize(
    "line",
    ["ls -l", "cat<in>out", "a | b | c", "echo hi >> log", "x<<y"],
)
def test_tokens_rebuild_line_without_spaces(line):
    assert "".join(split_tokens(line)) == line.replace(" ", "")


@pytest.mark.parametrize(
    "line",
    ['echo "a b" c', "echo 'q' | cat", "ls -l", 'say "hi there"x y'],
)
def test_tokens_without_quotes_match_words(line):
    stripped = [t.replace('"', "").replace("'", "") for t in split_tokens(line)]
    assert stripped == split_words(line)


def test_no_token_is_empty():
    tokens = split_tokens("a  >  b |c<<d")
    assert all(tokens)
    assert tokens == ["a", ">", "b", "|", "c", "<<", "d"]