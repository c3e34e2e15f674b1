"""The shell's built-in commands: echo, pwd, cd, env, export and unset."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from typing import TextIO

from minishell.environment import Environment
from minishell.errors import print_error

BUILTIN_NAMES = frozenset({"echo", "pwd", "cd", "env", "export", "unset", "exit"})

# A "$" followed by one of these characters is printed as written.
_LITERAL_AFTER_DOLLAR = frozenset("=-+/%.,:}]")


def _echo_options(args: Sequence[str]) -> tuple[int, bool]:
    """Return the index of the first word to print and whether to end with a newline."""
    newline = True
    start = len(args)
    for pos, word in enumerate(args[1:], start=1):
        if not word.startswith("-n") or word[2:].strip("n"):
            start = pos
            break
        if pos == 1:
            newline = False
    return start, newline


def _expand_word(word: str, environ: Mapping[str, str]) -> str:
    if word.startswith("\\$"):
        return "$" + word[2:]
    if word.startswith("$") and len(word) > 1:
        if word[1] in _LITERAL_AFTER_DOLLAR:
            return word
        return environ.get(word[1:]) or ""
    return word


def echo(
    args: Sequence[str],
    out: TextIO | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Print the arguments separated by spaces, honouring leading ``-n`` flags."""
    target = sys.stdout if out is None else out
    variables = os.environ if environ is None else environ
    start, newline = _echo_options(args)
    text = " ".join(_expand_word(word, variables) for word in args[start:])
    target.write(text + ("\n" if newline else ""))
    return 0


def pwd(out: TextIO | None = None, err: TextIO | None = None) -> int:
    """Print the current working directory."""
    target = sys.stdout if out is None else out
    errors = sys.stderr if err is None else err
    try:
        position = os.getcwd()
    except OSError as exc:
        errors.write(f"pwd: {exc.strerror}\n")
        return 1
    target.write(position + "\n")
    return 0


def cd(args: Sequence[str], env: Environment, err: TextIO | None = None) -> int:
    """Change directory to the argument, ``$HOME`` or ``$OLDPWD`` and update PWD."""
    errors = sys.stderr if err is None else err
    try:
        old_pwd: str | None = os.getcwd()
    except OSError:
        old_pwd = None

    if len(args) < 2:
        target = env.get("HOME")
        missing = "HOME"
    elif args[1].startswith("-"):
        target = env.get("OLDPWD")
        missing = "OLDPWD"
    else:
        target = args[1]
        missing = ""

    if target is None:
        errors.write(f"cd: {missing} not set\n")
        return 1
    try:
        os.chdir(target)
    except OSError as exc:
        errors.write(f"cd: {exc.strerror}\n")
        return 1

    if old_pwd is not None:
        env.set("OLDPWD", old_pwd)
    try:
        env.set("PWD", os.getcwd())
    except OSError:
        pass
    return 0


def env_builtin(env: Environment, out: TextIO | None = None) -> int:
    """Print every environment entry on its own line."""
    target = sys.stdout if out is None else out
    for entry in env:
        target.write(entry + "\n")
    return 0


def export(args: Sequence[str], env: Environment, out: TextIO | None = None) -> int:
    """Apply ``NAME=value`` arguments; with none, print the environment."""
    if len(args) < 2:
        return env_builtin(env, out)
    for assignment in args[1:]:
        env.assign(assignment)
    return 0


def unset(args: Sequence[str], env: Environment, err: TextIO | None = None) -> int:
    """Remove the named variables from the environment."""
    if len(args) < 2:
        print_error("bash: ", None, ": not enough arguments", err)
        return 0
    if not args[1]:
        print_error("bash: ", args[1], ": not a valid identifier", err)
        return 0
    for name in args[1:]:
        env.remove(name)
    return 0


def is_builtin(name: str | None) -> bool:
    """Tell whether *name* is one of the shell's built-in commands."""
    return name in BUILTIN_NAMES


def run_builtin(
    args: Sequence[str],
    env: Environment,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Run the built-in named by ``args[0]``; the status is always 0."""
    name = args[0] if args else None
    if name == "echo":
        echo(args, out)
    elif name == "pwd":
        pwd(out, err)
    elif name == "cd":
        cd(args, env, err)
    elif name == "unset":
        unset(args, env, err)
    elif name == "export":
        export(args, env, out)
    elif name == "env":
        env_builtin(env, out)
    return 0