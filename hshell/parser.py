"""Splitting a command line into words."""

from __future__ import annotations

import re

DELIMITERS = " \t\r\n\a"

_SPLITTER = re.compile("[" + re.escape(DELIMITERS) + "]+")


def split_line(line: str) -> list[str]:
    """Split *line* on blanks, tabs, carriage returns, newlines and bells.

    Runs of delimiters count as one; empty words are never produced.
    """
    return [word for word in _SPLITTER.split(line) if word]