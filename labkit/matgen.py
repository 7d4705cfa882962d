"""Random square-matrix file generators with CPU-time reporting."""

from __future__ import annotations

import random
import re
import struct
import sys
import time
from collections.abc import Sequence
from pathlib import Path

CLOCKS_PER_SEC = 1_000_000
ELEMENT_RANGE = 1000.0

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _atoi(text: str) -> int:
    """Leading integer of ``text``, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _clock() -> float:
    """Processor time used so far, in clock ticks."""
    return time.process_time() * CLOCKS_PER_SEC


def random_elements(count: int, rng: random.Random | None = None) -> list[float]:
    """Return ``count`` single-precision values drawn uniformly from [0, 1000)."""
    rng = rng if rng is not None else random.Random()
    return [_f32(_f32(rng.random()) * ELEMENT_RANGE) for _ in range(max(count, 0))]


def write_flat_matrix(
    path: str | Path, n: int, rng: random.Random | None = None
) -> list[float]:
    """Write ``n * n`` random elements on a single line and return them."""
    values = random_elements(n * n, rng)
    with open(path, "w", encoding="ascii") as handle:
        handle.write("".join(f"{value:f} " for value in values))
    return values


def write_row_matrix(
    path: str | Path, n: int, rng: random.Random | None = None
) -> list[list[float]]:
    """Write an ``n`` x ``n`` random matrix one row per line and return its rows."""
    rng = rng if rng is not None else random.Random()
    size = max(n, 0)
    rows = [random_elements(size, rng) for _ in range(size)]
    with open(path, "w", encoding="ascii") as handle:
        for row in rows:
            handle.write("".join(f"{value:f} " for value in row) + "\n")
    return rows


def read_elements(path: str | Path) -> list[float]:
    """Read every whitespace-separated number in the file."""
    with open(path, encoding="ascii") as handle:
        return [float(token) for token in handle.read().split()]


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a flat random matrix file, echo its elements and report CPU time."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    if len(args) != 2:
        out.write("wrong arguments - use the format \n $matgen2file filename N\n")
        return 0

    filename, size_text = args
    start = _clock()
    n = _atoi(size_text)
    try:
        out.write("-" * 31 + "\n")
        write_flat_matrix(filename, n)
        end = _clock()
        total = (end - start) / CLOCKS_PER_SEC
        values = read_elements(filename)
    except (OSError, ValueError) as exc:
        out.flush()
        print(f"error: {exc}", file=sys.stderr)
        return 1

    out.write("".join(f"{value:f} " for value in values))
    out.write("\n\n")
    out.write("-" * 50 + "\n")
    out.write(
        f"START TIME - TIME BEFORE THE START OF FILE CREATION = {start:f} clock cycles\n"
    )
    out.write(f"START OF FILE {filename} CREATION :\n")
    out.write(f"END OF FILE {filename} CREATION :\n")
    out.write(f"END TIME - TIME AFTER THE END OF FILE CREATION = {end:f} clock cycles\n")
    out.write(f"CLOCKS_PER_SEC = {CLOCKS_PER_SEC}\n")
    out.write(f"TOTAL TIME TAKEN BY CPU FOR {filename} FILE CREATION: {total:f} secs\n")
    out.write("-" * 50 + "\n")
    out.write(f"ELEMENTS OF {n} x {n} MATRIX {filename} :\n")
    out.write("-" * 50 + "\n")
    out.flush()
    return 0


def main_rows(argv: Sequence[str] | None = None) -> int:
    """Generate a row-per-line random matrix file, report CPU time and echo it."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    if len(args) != 2:
        out.write("Usage: matgen2file <filename> <n>\n")
        return 1

    filename, size_text = args
    start = _clock()
    out.write(
        f"===> START TIME - TIME BEFORE THE START OF FILE CREATION = {start:f} clock cycles\n\n"
    )
    n = _atoi(size_text)
    out.write(f"===> START OF FILE {filename} CREATION\n\n")
    try:
        write_row_matrix(filename, n)
    except OSError:
        out.write("error opening file for writing.\n")
        return 1
    end = _clock()
    total = (end - start) / CLOCKS_PER_SEC

    out.write(f"===> END OF FILE {filename} CREATION\n\n")
    out.write(
        f"===> END TIME - TIME AFTER THE END OF FILE CREATION = {end:f} clock cycles\n\n"
    )
    out.write(f"===> CLOCKS_PER_SEC = {CLOCKS_PER_SEC}\n\n")
    out.write(f"===> TOTAL TIME TAKEN BY CPU FOR {filename} FILE CREATION: {total:f} secs\n\n")
    out.write(f"===> ELEMENTS OF {n} x {n} MATRIX {filename} :\n\n")

    try:
        values = read_elements(filename)
    except OSError:
        out.write("error opening file for reading.\n")
        return 1
    except ValueError as exc:
        out.flush()
        print(f"error: {exc}", file=sys.stderr)
        return 1

    size = max(n, 0)
    for offset in range(0, size * size, size):
        out.write("".join(f"{value:.2f}\t" for value in values[offset:offset + size]) + "\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())