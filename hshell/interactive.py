"""Terminal interaction: prompt, input and interrupt handling."""

from __future__ import annotations

import os
import signal
import sys
from typing import TextIO

PROMPT = "$ "


def is_interactive(stream: TextIO | None = None) -> bool:
    """Return True if *stream* (standard input by default) is a terminal."""
    stream = sys.stdin if stream is None else stream
    return stream.isatty()


def display_prompt(stream: TextIO | None = None) -> None:
    """Write the prompt to *stream* (standard output by default)."""
    stream = sys.stdout if stream is None else stream
    stream.write(PROMPT)
    stream.flush()


def read_line(stream: TextIO | None = None) -> str | None:
    """Read one line without its newline; None at end of input."""
    stream = sys.stdin if stream is None else stream
    line = stream.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def handle_signal(signum: int, frame: object) -> None:
    """On SIGINT, start a fresh prompt line instead of terminating."""
    if signum == signal.SIGINT:
        os.write(sys.__stdout__.fileno() if sys.__stdout__ else 1, b"\n" + PROMPT.encode())