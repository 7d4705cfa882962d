"""Single-precision matrix multiplication against a transposed second operand."""

from __future__ import annotations

import re
import struct
import sys
import time
from collections.abc import Sequence

from labkit.loop_order import read_square_matrix, write_matrix

TIME_LOG = "time_taken.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def multiply_matrices(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> list[list[float]]:
    """Return ``a @ b`` computed in single precision."""
    columns = list(zip(*b))
    result = []
    for row in a:
        out_row = []
        for column in columns:
            total = 0.0
            for x, y in zip(row, column):
                total = _f32(total + _f32(x * y))
            out_row.append(total)
        result.append(out_row)
    return result


def transpose_matrix(b: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the transpose of a square matrix."""
    return [list(column) for column in zip(*b)]


def main(argv: Sequence[str] | None = None) -> int:
    """Multiply matrix A by the transpose of B from files, print and log the timing."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    if len(args) != 4:
        out.write("Usage: transposed <N> <MatrixA_File> <MatrixB_File> <MatrixC_File>\n")
        return 1

    n = _atoi(args[0])
    a_file, b_file, c_file = args[1:]
    try:
        a = read_square_matrix(a_file, n)
        b = read_square_matrix(b_file, n)
    except OSError:
        out.write("Error opening files.\n")
        return 1
    except ValueError as exc:
        out.flush()
        print(f"error: {exc}", file=sys.stderr)
        return 1

    a = [[_f32(value) for value in row] for row in a]
    b = [[_f32(value) for value in row] for row in b]
    bt = transpose_matrix(b)

    start = time.process_time()
    c = multiply_matrices(a, bt)
    elapsed = time.process_time() - start

    try:
        write_matrix(c_file, c)
    except OSError:
        out.write("Error opening file.\n")
        return 1
    for row in c:
        out.write("".join(f"{value:f}\t" for value in row) + "\n")

    line = f"N={n}: Time taken = {elapsed:f} seconds\n"
    try:
        with open(TIME_LOG, "a", encoding="ascii") as log:
            log.write(line)
    except OSError:
        out.write("Error opening file.\n")
        return 1
    out.write(line)
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())