"""Running a parsed pipeline: built-ins in process, other programs as children."""

from __future__ import annotations

import io
import os
import subprocess
import sys
import tempfile
from collections.abc import Callable, Iterable
from typing import IO, Union

from minishell.builtins import is_builtin, run_builtin
from minishell.environment import Environment
from minishell.errors import print_error
from minishell.parser import Command
from minishell.pathway import find_command

ReadLine = Callable[[str], Union[str, None]]

HEREDOC_PROMPT = ">"
NOT_FOUND_STATUS = 127

# What a pipeline stage reads from: nothing special, a buffer, or a pipe.
_Source = Union[None, bytes, IO[bytes]]


def _default_read_line(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def read_heredoc(delimiter: str, read_line: ReadLine | None = None) -> str:
    """Collect lines until one equals *delimiter* or input ends.

    Each collected line is followed by a newline; the delimiter line is
    not included.
    """
    reader = _default_read_line if read_line is None else read_line
    lines: list[str] = []
    while True:
        try:
            line = reader(HEREDOC_PROMPT)
        except EOFError:
            line = None
        if line is None or line == delimiter:
            break
        lines.append(line + "\n")
    return "".join(lines)


def resolve_input(command: Command, read_line: ReadLine | None = None) -> bytes | None:
    """Return the bytes a command's input redirection supplies, or None.

    A missing or unreadable input file raises OSError.
    """
    if not command.input_file:
        return None
    if command.here_doc:
        return read_heredoc(command.input_file, read_line).encode()
    with open(command.input_file, "rb") as handle:
        return handle.read()


def open_output(command: Command) -> IO[bytes] | None:
    """Open the command's output file, truncating or appending; None if unset."""
    if not command.output_file:
        return None
    flags = os.O_WRONLY | os.O_CREAT
    flags |= os.O_APPEND if command.append else os.O_TRUNC
    fd = os.open(command.output_file, flags, 0o644)
    return os.fdopen(fd, "ab" if command.append else "wb")


def _stdout_fd() -> int | None:
    sys.stdout.flush()
    try:
        return sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def _close_source(source: _Source) -> None:
    if source is not None and not isinstance(source, bytes):
        source.close()


def _child_env(env: Environment) -> dict[str, str]:
    result: dict[str, str] = {}
    for entry in env:
        name, _, value = entry.partition("=")
        result.setdefault(name, value)
    return result


def _stdin_for(source: _Source) -> IO[bytes] | None:
    if isinstance(source, bytes):
        buffer = tempfile.TemporaryFile()
        buffer.write(source)
        buffer.seek(0)
        return buffer
    return source


class _Pipeline:
    """State of one pipeline run."""

    def __init__(self, env: Environment, read_line: ReadLine | None, single: bool) -> None:
        self.env = env
        self.read_line = read_line
        self.single = single
        self.procs: list[subprocess.Popen[bytes]] = []
        self.captured: subprocess.Popen[bytes] | None = None
        self.status = 0

    def run_stage(self, command: Command, source: _Source, last: bool) -> _Source:
        try:
            redirected = resolve_input(command, self.read_line)
        except OSError as exc:
            _close_source(source)
            sys.stderr.write(f"{command.input_file}: {exc.strerror}\n")
            self.status = 1
            return b""
        if redirected is not None:
            _close_source(source)
            source = redirected
        try:
            output = open_output(command)
        except OSError as exc:
            _close_source(source)
            sys.stderr.write(f"{command.output_file}: {exc.strerror}\n")
            self.status = 1
            return b""
        if command.args and is_builtin(command.args[0]):
            _close_source(source)
            return self._run_builtin(command, output, last)
        return self._run_program(command, source, output, last)

    def _run_builtin(self, command: Command, output: IO[bytes] | None, last: bool) -> _Source:
        # Outside a lone unredirected command the built-in runs detached,
        # so its changes to the environment do not last.
        env = self.env if self.single and output is None else Environment(self.env.entries())
        buffer = io.StringIO()
        self.status = run_builtin(command.args, env, buffer, sys.stderr)
        text = buffer.getvalue()
        if output is not None:
            with output:
                output.write(text.encode())
            return b""
        if last:
            sys.stdout.write(text)
            sys.stdout.flush()
            return None
        return text.encode()

    def _fail_exec(self, command: Command) -> None:
        name = command.args[0]
        if self.single and name == ".":
            print_error("bash :", None, "filename argument required", sys.stderr)
        else:
            print_error("bash :", name, "command not found", sys.stderr)
        self.status = NOT_FOUND_STATUS if self.single else 1

    def _run_program(
        self,
        command: Command,
        source: _Source,
        output: IO[bytes] | None,
        last: bool,
    ) -> _Source:
        path = find_command(self.env, command.args)
        if path is None:
            _close_source(source)
            if output is not None:
                output.close()
            print_error("bash :", command.args[0] if command.args else None,
                        "command not found", sys.stderr)
            self.status = NOT_FOUND_STATUS
            return b""
        executable = path if "/" in path else os.path.join(".", path)

        capture_last = False
        stdout: int | IO[bytes] | None
        if output is not None:
            stdout = output
        elif last:
            fd = _stdout_fd()
            capture_last = fd is None
            stdout = subprocess.PIPE if capture_last else fd
        else:
            stdout = subprocess.PIPE

        stdin = _stdin_for(source)
        try:
            proc = subprocess.Popen(
                command.args,
                executable=executable,
                env=_child_env(self.env),
                stdin=stdin,
                stdout=stdout,
            )
        except OSError:
            self._fail_exec(command)
            return b""
        finally:
            if stdin is not None:
                stdin.close()
            if output is not None:
                output.close()

        self.procs.append(proc)
        if capture_last:
            self.captured = proc
            return None
        if stdout is subprocess.PIPE:
            return proc.stdout
        return b"" if not last else None

    def finish(self, last_command: Command) -> int:
        if self.captured is not None:
            data, _ = self.captured.communicate()
            sys.stdout.write(data.decode(errors="replace"))
            sys.stdout.flush()
        for proc in self.procs:
            proc.wait()
        last_proc = self.procs[-1] if self.procs else None
        if (
            last_proc is not None
            and last_command.args
            and not is_builtin(last_command.args[0])
            and last_proc.args == last_command.args
        ):
            return last_proc.returncode
        return self.status


def execute(
    commands: Iterable[Command],
    env: Environment,
    read_line: ReadLine | None = None,
) -> int:
    """Run a pipeline of commands and return the status of the last one.

    A lone built-in without redirections runs against *env* itself; every
    other built-in works on a copy. Other commands are started as child
    processes connected by pipes.
    """
    stages = list(commands)
    if not stages:
        return 0
    pipeline = _Pipeline(env, read_line, single=len(stages) == 1)
    source: _Source = None
    status_by_stage = 0
    for index, command in enumerate(stages):
        last = index == len(stages) - 1
        procs_before = len(pipeline.procs)
        source = pipeline.run_stage(command, source, last)
        if last:
            started = len(pipeline.procs) > procs_before
            status_by_stage = -1 if started else pipeline.status
    _close_source(source)
    status = pipeline.finish(stages[-1])
    return status if status_by_stage == -1 else status_by_stage