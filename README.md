# minishell

A small interactive shell. It reads a line and checks its quotes and
pipes. It then splits the line into words and operators, builds a list of
commands and runs them. The commands are connected by pipes, and their input
and output are redirected where the line asks for it.

## Installing

```
pip install .
```

## Running

```
minishell
```

The command takes no arguments. If you give it any, it exits with status 1.
The prompt then waits for a line. To leave the shell, type `exit` alone on a
line or send end of input with Ctrl-D. Ctrl-C prints a new line and does not
stop the shell. Ctrl-\ is ignored.

## What it understands

- Programs found in the directories listed by `PATH`, or given as a path.
- Pipes, for example `ls -l | grep txt | wc -l`.
- Redirections: `< file`, `> file`, `>> file`, and here-documents with
  `<< WORD`. A here-document collects lines, each under a `>` prompt, until
  a line equal to `WORD` or end of input.
- Single and double quotes. They keep spaces inside one word, and the quote
  characters themselves are removed.
- Built-in commands:
  - `echo [-n] args...`: a word of the form `$NAME` is replaced by the
    value of that variable. `\$` prints a literal `$`.
  - `cd [dir | -]`: with no argument it goes to `$HOME`, and `-` goes to
    `$OLDPWD`. It updates `PWD` and `OLDPWD`.
  - `pwd`
  - `env`
  - `export [NAME=value ...]`: with no arguments it prints the environment.
    An argument without `=` is ignored.
  - `unset NAME ...`

A built-in that runs alone and without redirections changes the shell's own
environment. Inside a pipeline, or with a redirection, it works on a copy,
so its changes do not last.

The shell reports a line that starts with a pipe, or that has an unbalanced
single or double quote, and does not run it.

## What it does not do

- Variables are expanded only by `echo`, and only for a whole word written
  `$NAME`. No other command sees expanded variables. There is no `$?`.
- There is no `;`, `&&`, `||`, background jobs, globbing or command
  substitution.
- `exit` only works when typed alone on a line. It takes no status.

## Using it from Python

You can also use the parts of the shell one at a time:

```python
from minishell.environment import Environment
from minishell.splitter import split_words
from minishell.parser import parse_commands, format_command_list
from minishell.shell import Shell

env = Environment.from_mapping({"HOME": "/tmp", "PATH": "/usr/bin:/bin"})
env.assign("GREETING=hello")
print(env.get("GREETING"))           # hello

words = split_words("ls -l | wc -l")
commands = parse_commands(words)
print(format_command_list(commands))

shell = Shell({"PATH": "/usr/bin:/bin"})
shell.process_line("echo hello")
```

Other modules:

- `minishell.builtins`: the built-in commands, `is_builtin` and
  `run_builtin`.
- `minishell.validation`: `check_quotes`, `count_pipes` and
  `check_leading_pipe`. These raise `ShellSyntaxError` when a line cannot
  be run.
- `minishell.pathway`: `find_command` searches `PATH`.
- `minishell.executor`: `execute` runs a list of `Command` objects.
- `minishell.gluttony`: `split_tokens` splits a line but keeps the quote
  characters.

`Shell.run` takes a function that is given the prompt and returns the next
line, or `None` at end of input. This lets something other than a terminal
drive the shell.

## Tests

```
pip install ".[test]"
pytest
```