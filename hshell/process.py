"""Running external commands."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Any, Sequence, TextIO

from hshell.builtins import BuiltinResult, check_for_builtin
from hshell.pathsearch import find_command_path

COMMAND_NOT_FOUND = 127


def launch_process(
    args: Sequence[str], state: Any, stderr: TextIO | None = None
) -> bool:
    """Run *args* as an external program and record its exit status.

    Always returns True so that the shell keeps going.
    """
    stderr = sys.stderr if stderr is None else stderr
    command_path = find_command_path(args[0])
    if command_path is None:
        stderr.write(f"{args[0]}: command not found\n")
        stderr.flush()
        state.exit_status = COMMAND_NOT_FOUND
        return True

    try:
        completed = subprocess.run(list(args), executable=command_path)
    except OSError as exc:
        stderr.write(f"{args[0]}: {os.strerror(exc.errno or 0)}\n")
        stderr.flush()
        state.exit_status = 1
        return True

    code = completed.returncode
    state.exit_status = 128 - code if code < 0 else code
    return True


def execute_command(
    args: Sequence[str], state: Any, stderr: TextIO | None = None
) -> bool:
    """Run a parsed command; return False when the shell should stop."""
    if not args:
        return True
    result = check_for_builtin(args, state, stderr)
    if result is BuiltinResult.EXIT:
        return False
    if result is BuiltinResult.ERROR:
        return True
    return launch_process(args, state, stderr)