"""Console helpers: scanf-style token reading and fixed-format printing."""

from __future__ import annotations

import re
import shutil
import sys
from collections.abc import Sequence
from typing import TextIO

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class InputError(ValueError):
    """Raised when the next token cannot be read as the requested number."""


class TokenReader:
    """Reads numbers and lines from a text stream the way the console prompts expect.

    Numbers are read as whitespace-separated tokens that may span lines;
    whatever follows a number on its line stays pending for the next read.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._pending = ""

    def _next_line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError("end of input")
        return line

    def _scan(self, pattern: re.Pattern[str], kind: str) -> str:
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                break
            self._pending = self._next_line()
        self._pending = stripped
        match = pattern.match(stripped)
        if match is None:
            raise InputError(f"expected {kind}, got {stripped.split()[0]!r}")
        self._pending = stripped[match.end():]
        return match.group()

    def next_int(self) -> int:
        """Return the next integer token."""
        return int(self._scan(_INT_PATTERN, "an integer"))

    def next_float(self) -> float:
        """Return the next real-number token."""
        return float(self._scan(_FLOAT_PATTERN, "a real number"))

    def read_line(self) -> str:
        """Return the rest of the current line, or the next line, without its newline."""
        if self._pending:
            line, self._pending = self._pending, ""
        else:
            line = self._next_line()
        return line.rstrip("\n")

    def discard_line(self) -> None:
        """Skip everything up to and including the next newline."""
        if self._pending:
            self._pending = ""
            return
        try:
            self._next_line()
        except EOFError:
            pass


def print_line(char: str = "-", out: TextIO | None = None) -> None:
    """Write a rule of ``char`` as wide as the terminal."""
    stream = out if out is not None else sys.stdout
    width = shutil.get_terminal_size().columns
    stream.write(char * width + "\n")


def format_int_vector(values: Sequence[int]) -> str:
    """Render integers as ``[a, b, c]``."""
    return "[" + ", ".join(f"{value:d}" for value in values) + "]"


def format_real_vector(values: Sequence[float]) -> str:
    """Render reals with two decimals as ``[a, b, c]``."""
    return "[" + ", ".join(f"{value:.2f}" for value in values) + "]"


def _format_matrix(matrix: Sequence[Sequence[object]], spec: str) -> str:
    return "".join(
        f"ROW [{index}]: " + "".join(f"{value:{spec}} " for value in row) + "\n"
        for index, row in enumerate(matrix)
    )


def format_int_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render an integer matrix one ``ROW [i]:`` line per row."""
    return _format_matrix(matrix, "d")


def format_real_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Render a real matrix one ``ROW [i]:`` line per row, two decimals each."""
    return _format_matrix(matrix, ".2f")