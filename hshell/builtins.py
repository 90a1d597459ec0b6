"""Commands handled by the shell itself."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, Sequence, TextIO


class BuiltinResult(Enum):
    """Outcome of trying a command as a builtin."""

    EXIT = 0
    NOT_BUILTIN = 1
    ERROR = 2


_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


def is_valid_number(text: str | None) -> bool:
    """Return True for an optional '-' followed only by ASCII digits."""
    if not text:
        return False
    digits = text[1:] if text.startswith("-") else text
    return all("0" <= ch <= "9" for ch in digits)


def _atoi(text: str) -> int:
    """Convert like the C library: clamp to a long, then wrap to an int."""
    value = int(text) if text.lstrip("-") else 0
    value = max(_LONG_MIN, min(_LONG_MAX, value))
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def shell_exit(
    args: Sequence[str], state: Any, stderr: TextIO | None = None
) -> BuiltinResult:
    """Handle ``exit [n]``, updating the state's exit status."""
    stderr = sys.stderr if stderr is None else stderr
    if len(args) > 1:
        argument = args[1]
        status = _atoi(argument) if is_valid_number(argument) else -1
        if status < 0:
            stderr.write(f"exit: Illegal number: {argument}\n")
            stderr.flush()
            state.exit_status = 2
            return BuiltinResult.ERROR
        state.exit_status = status & 255
    return BuiltinResult.EXIT


def check_for_builtin(
    args: Sequence[str], state: Any, stderr: TextIO | None = None
) -> BuiltinResult:
    """Run *args* as a builtin if it names one."""
    if args[0] == "exit":
        return shell_exit(args, state, stderr)
    return BuiltinResult.NOT_BUILTIN