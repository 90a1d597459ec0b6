# hshell

hshell is a small shell. It reads one command per line, splits the line on
whitespace and runs the named program. It looks the program up on `PATH`. If
the name contains a `/`, it uses the name as the path.

## Installing

```
pip install .
```

To install it with the test dependencies:

```
pip install .[test]
```

## Running

```
hshell
```

When standard input is a terminal, the shell prints a `$ ` prompt before each
line. When standard input is not a terminal, the shell prints no prompt, so you
can pipe commands into it:

```
printf 'ls -l\necho done\n' | hshell
```

The shell stops at end of input (Ctrl+D) or at `exit`. Ctrl+C does not stop the
shell. It writes a newline and a fresh `$ ` prompt.

## Behaviour

- Words are separated by runs of spaces, tabs, carriage returns, newlines and
  bell characters. An empty line does nothing.
- The shell looks up a command name in the `PATH` directories, in order, and
  runs the first `dir/name` that exists. Empty `PATH` entries are skipped.
- If the shell cannot find a command, it prints `<name>: command not found` to
  standard error and sets the exit status to 127.
- If a program is found but cannot be started, the shell prints
  `<name>: <reason>` and sets the exit status to 1.
- The shell keeps the exit status of the last command. If signal N kills a
  command, the status is 128 + N.
- `exit` is the only built-in command. It has three forms:
  - `exit` leaves the shell with the status of the last command.
  - `exit N` leaves the shell with status `N & 255`.
  - `exit` with a negative or non-numeric argument prints
    `exit: Illegal number: <arg>`, sets the status to 2 and does not leave the
    shell.

The exit code of `hshell` is the final exit status.

## Using it from Python

```python
import io
from hshell.shell import ShellState, shell_loop

state = ShellState()
shell_loop(state, stdin=io.StringIO("true\nexit 3\n"))
print(state.exit_status)  # 3
```

`shell_loop` also takes `stdout` and `stderr` streams and returns the final
exit status. `hshell.shell.process_command(line, state)` runs a single line. It
returns `False` when the shell should stop.

You can also use the parts on their own:

- `hshell.parser.split_line(line)` returns the list of words in a line.
- `hshell.pathsearch.find_command_path(command, path_env=None)` returns the
  resolved path, or `None` if the command is not found.
- `hshell.pathsearch.search_in_path(command, path_env)` returns the first
  `dir/command` that exists among the `PATH` entries.
- `hshell.builtins.check_for_builtin(args, state)` returns a `BuiltinResult`:
  `EXIT`, `NOT_BUILTIN` or `ERROR`.
- `hshell.process.execute_command(args, state)` and
  `hshell.process.launch_process(args, state)` run commands.
- `hshell.interactive` provides `is_interactive`, `display_prompt`,
  `read_line` and `handle_signal`.

## What it does not do

hshell has no quoting, escaping, globbing, variable expansion, pipes,
redirection, background jobs or command separators. Apart from `exit` it has no
built-ins, so there is no `cd`, `env` or `alias`. It keeps no history and has no
line editing.