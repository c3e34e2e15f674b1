"""The interactive shell: reading lines, checking them and running them."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable, Mapping
from types import FrameType
from typing import Optional, Union

from minishell.environment import Environment
from minishell.executor import execute
from minishell.gluttony import split_tokens
from minishell.parser import parse_commands
from minishell.splitter import split_words
from minishell.validation import (
    ShellSyntaxError,
    check_leading_pipe,
    check_quotes,
    count_pipes,
)

PROMPT = "💾 minishell :"
EXIT_WORD = "exit"

ReadLine = Callable[[str], Union[str, None]]


def _default_read_line(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def _on_interrupt(signum: int, frame: Optional[FrameType]) -> None:
    sys.stdout.write("\n")
    sys.stdout.flush()


def install_signal_handlers() -> None:
    """Make Ctrl-C start a fresh line and make Ctrl-\\ do nothing."""
    signal.signal(signal.SIGINT, _on_interrupt)
    if hasattr(signal, "SIGQUIT"):
        signal.signal(signal.SIGQUIT, signal.SIG_IGN)


class Shell:
    """A shell session holding its own environment and history."""

    def __init__(self, environ: Mapping[str, str] | Environment | None = None) -> None:
        if isinstance(environ, Environment):
            self.env = environ
        else:
            self.env = Environment.from_mapping(os.environ if environ is None else environ)
        self.history: list[str] = []
        self.words: list[str] = []
        self.tokens: list[str] = []
        self.pipe_count = 0
        self.quote_count = 0
        self.status = 0
        self._read_line: ReadLine | None = None

    def _reject(self, line: str, error: ShellSyntaxError) -> int:
        self.history.append(line)
        sys.stdout.write(f"{error}\n")
        sys.stdout.flush()
        self.status = 1
        return self.status

    def process_line(self, line: str) -> int:
        """Check, split, parse and run one input line; return its status.

        An empty line does nothing. A line with an unclosed quote or a
        leading pipe is recorded in the history, reported and not run.
        """
        if not line:
            return 0
        try:
            self.quote_count = check_quotes(line)
        except ShellSyntaxError as exc:
            return self._reject(line, exc)
        self.pipe_count = count_pipes(line)
        try:
            check_leading_pipe(line)
        except ShellSyntaxError as exc:
            return self._reject(line, exc)
        self.history.append(line)
        self.words = split_words(line)
        self.tokens = split_tokens(line)
        commands = parse_commands(self.words)
        self.status = execute(commands, self.env, self._read_line)
        return self.status

    def run(self, read_line: ReadLine | None = None) -> int:
        """Read and run lines until ``exit`` or end of input; return 0."""
        reader = _default_read_line if read_line is None else read_line
        self._read_line = read_line
        while True:
            try:
                line = reader(PROMPT)
            except EOFError:
                line = None
            except KeyboardInterrupt:
                sys.stdout.write("\n")
                sys.stdout.flush()
                continue
            if line is None or line == EXIT_WORD:
                sys.stdout.write(f"{EXIT_WORD}\n")
                sys.stdout.flush()
                return 0
            self.process_line(line)


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session; extra arguments are refused."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        return 1
    shell = Shell()
    install_signal_handlers()
    return shell.run()