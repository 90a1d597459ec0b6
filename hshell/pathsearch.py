"""Locating the executable a command name refers to."""

from __future__ import annotations

import os


def validate_command_path(command_path: str | None) -> bool:
    """Return True if *command_path* names something that exists."""
    if command_path is None:
        return False
    try:
        os.stat(command_path)
    except (OSError, ValueError):
        return False
    return True


def search_in_path(command: str, path_env: str) -> str | None:
    """Return the first ``dir/command`` that exists among the PATH entries."""
    for directory in path_env.split(":"):
        if not directory:
            continue
        candidate = f"{directory}/{command}"
        if validate_command_path(candidate):
            return candidate
    return None


def find_command_path(command: str, path_env: str | None = None) -> str | None:
    """Resolve *command* to a path, or return None if it cannot be found.

    A command containing a slash is used as given. Otherwise the
    directories in *path_env* (the PATH environment variable by default)
    are searched in order.
    """
    if "/" in command:
        return command if validate_command_path(command) else None
    if path_env is None:
        path_env = os.environ.get("PATH")
        if path_env is None:
            return None
    return search_in_path(command, path_env)