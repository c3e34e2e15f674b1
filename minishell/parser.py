"""Turning a list of tokens into a pipeline of commands."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class Command:
    """One stage of a pipeline with its arguments and redirections."""

    args: list[str] = field(default_factory=list)
    input_file: str | None = None
    output_file: str | None = None
    append: bool = False
    here_doc: bool = False
    operators: int = 0

    @property
    def argc(self) -> int:
        """Number of arguments, the command name included."""
        return len(self.args)


def parse_commands(tokens: Sequence[str]) -> list[Command]:
    """Group *tokens* into commands separated by pipes.

    ``>``, ``>>``, ``<`` and ``<<`` take the following token as their file;
    a later redirection of the same direction replaces an earlier one. An
    operator with nothing after it is kept as an ordinary argument.
    """
    current = Command()
    commands = [current]
    pos = 0
    while pos < len(tokens):
        token = tokens[pos]
        has_next = pos + 1 < len(tokens)
        if token.startswith("|"):
            current = Command(operators=1)
            commands.append(current)
            pos += 1
            continue
        if has_next and token.startswith(">>"):
            current.output_file = tokens[pos + 1]
            current.append = True
        elif has_next and token.startswith(">"):
            current.output_file = tokens[pos + 1]
            current.append = False
        elif has_next and token.startswith("<<"):
            current.input_file = tokens[pos + 1]
            current.here_doc = True
        elif has_next and token.startswith("<"):
            current.input_file = tokens[pos + 1]
        else:
            current.args.append(token)
            pos += 1
            continue
        current.operators += 1
        pos += 2
    return commands


def _format_command(number: int, command: Command, has_next: bool) -> list[str]:
    lines = [f"=== Commande {number} ==="]
    if command.args:
        lines.append("Arguments :" + "".join(f" '{arg}'" for arg in command.args))
    else:
        lines.append("Arguments : (aucun)")
    if command.input_file:
        lines.append(f"Fichier d'entrée : '{command.input_file}'")
    else:
        lines.append("Fichier d'entrée : (aucun)")
    if command.output_file:
        lines.append(f"Fichier de sortie : '{command.output_file}'")
        mode = "append (>>)" if command.here_doc else "overwrite (>)"
        lines.append(f"Mode d'écriture   : {mode}")
    else:
        lines.append("Fichier de sortie : (aucun)")
    if has_next:
        lines.append("Piped vers la commande suivante.")
    else:
        lines.append("Pas de commande suivante.")
    lines.append("")
    return lines


def format_command_list(commands: Iterable[Command]) -> str:
    """Describe every command of a pipeline in a readable report."""
    items = list(commands)
    lines: list[str] = []
    for number, command in enumerate(items, start=1):
        lines.extend(_format_command(number, command, number < len(items)))
    return "".join(line + "\n" for line in lines)