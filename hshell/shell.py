"""The read-evaluate loop and the command entry point."""

from __future__ import annotations

import signal
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO

from hshell.interactive import (
    display_prompt,
    handle_signal,
    is_interactive,
    read_line,
)
from hshell.parser import split_line
from hshell.process import execute_command


@dataclass
class ShellState:
    """Mutable shell state; holds the last command's exit status."""

    exit_status: int = 0


def process_command(line: str, state: ShellState, stderr: TextIO | None = None) -> bool:
    """Parse and run one line; return False when the shell should stop."""
    if not line or line[0] == "\n":
        return True
    return execute_command(split_line(line), state, stderr)


def shell_loop(
    state: ShellState,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Read and run commands until end of input or ``exit``.

    Returns the final exit status.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    while True:
        if is_interactive(stdin):
            display_prompt(stdout)
        line = read_line(stdin)
        if line is None:
            break
        if not process_command(line, state, stderr):
            break
    return state.exit_status


def main(argv: Sequence[str] | None = None) -> int:
    """Run the shell on standard input and return its exit status."""
    state = ShellState()
    signal.signal(signal.SIGINT, handle_signal)
    shell_loop(state)
    return state.exit_status


if __name__ == "__main__":
    sys.exit(main())