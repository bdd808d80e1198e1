"""Reading lines and numbers from a text stream."""

import re
import sys
from typing import TextIO

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def read_line(stream: TextIO | None = None) -> str:
    """Read one line without its line terminator; empty at end of input."""
    source = sys.stdin if stream is None else stream
    line = source.readline()
    if line.endswith("\n"):
        line = line[:-1]
    return line


def read_line_with_number(stream: TextIO | None = None) -> int:
    """Read an integer and discard the rest of the line it ends on.

    Blank lines before the number are skipped.
    """
    source = sys.stdin if stream is None else stream
    while True:
        line = source.readline()
        if not line:
            raise EOFError("no number before end of input")
        if line.strip():
            break
    match = _LEADING_INT.match(line)
    if match is None:
        raise ValueError(f"expected a number, got {line.strip()!r}")
    return int(match.group(1))