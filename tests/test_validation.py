import pytest

from minishell.validation import (
    ShellSyntaxError,
    check_leading_pipe,
    check_quotes,
    count_pipes,
    count_quotes,
)


def test_check_quotes_balanced_returns_count():
    line = "echo 'a' \"b\""
    assert check_quotes(line) == count_quotes(line)


def test_count_quotes_counts_both_kinds():
    assert count_quotes("'a' \"b\"") == 4


def test_count_quotes_none():
    assert count_quotes("ls -l") == 0


def test_check_quotes_missing_single():
    with pytest.raises(ShellSyntaxError, match="^missing quote$"):
        check_quotes("echo 'a")


def test_check_quotes_missing_double():
    with pytest.raises(ShellSyntaxError, match="^missing double quote$"):
        check_quotes('echo "a')


def test_check_quotes_single_reported_first():
    with pytest.raises(ShellSyntaxError, match="^missing quote$"):
        check_quotes("'\"")


def test_shell_syntax_error_is_value_error():
    with pytest.raises(ValueError):
        check_quotes("'")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("ls | wc", 1),
        ("a|b|c", 2),
        ("echo '|' | cat", 1),
        ('echo "a|b"', 0),
        ("ls", 0),
    ],
)
def test_count_pipes(line, expected):
    assert count_pipes(line) == expected


def test_count_pipes_unquoted_matches_plain_count():
    line = "a | b | c | d"
    assert count_pipes(line) == line.count("|")


def test_count_pipes_quotes_do_not_add():
    assert count_pipes("x | 'y|z' | \"w|v\"") == count_pipes("x | y | w")


def test_leading_pipe_rejected():
    with pytest.raises(ShellSyntaxError, match="`\\|'$"):
        check_leading_pipe("| ls")


def test_leading_double_pipe_rejected():
    with pytest.raises(ShellSyntaxError) as info:
        check_leading_pipe("  || ls")
    assert str(info.value) == "bash: syntax error near unexpected token `||'"


def test_leading_pipe_after_tab_rejected():
    with pytest.raises(ShellSyntaxError) as info:
        check_leading_pipe("\t| x")
    assert str(info.value) == "bash: syntax error near unexpected token `|'"