"""Matrix multiplication in all six loop orders, timed and written to files."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Callable, Sequence
from pathlib import Path

Matrix = list[list[float]]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def mmat_ijk(a: Matrix, b: Matrix, c: Matrix) -> Matrix:
    """Add ``a @ b`` into ``c`` looping i, j, k; return ``c``."""
    n = len(a)
    for i in range(n):
        for j in range(n):
            for k in range(n):
                c[i][j] += a[i][k] * b[k][j]
    return c


def mmat_jik(a: Matrix, b: Matrix, c: Matrix) -> Matrix:
    """Add ``a @ b`` into ``c`` looping j, i, k; return ``c``."""
    n = len(a)
    for j in range(n):
        for i in range(n):
            for k in range(n):
                c[i][j] += a[i][k] * b[k][j]
    return c


def mmat_jki(a: Matrix, b: Matrix, c: Matrix) -> Matrix:
    """Add ``a @ b`` into ``c`` looping j, k, i; return ``c``."""
    n = len(a)
    for j in range(n):
        for k in range(n):
            for i in range(n):
                c[i][j] += a[i][k] * b[k][j]
    return c


def mmat_kji(a: Matrix, b: Matrix, c: Matrix) -> Matrix:
    """Add ``a @ b`` into ``c`` looping k, j, i; return ``c``."""
    n = len(a)
    for k in range(n):
        for j in range(n):
            for i in range(n):
                c[i][j] += a[i][k] * b[k][j]
    return c


def mmat_kij(a: Matrix, b: Matrix, c: Matrix) -> Matrix:
    """Add ``a @ b`` into ``c`` looping k, i, j; return ``c``."""
    n = len(a)
    for k in range(n):
        for i in range(n):
            for j in range(n):
                c[i][j] += a[i][k] * b[k][j]
    return c


def mmat_ikj(a: Matrix, b: Matrix, c: Matrix) -> Matrix:
    """Add ``a @ b`` into ``c`` looping i, k, j; return ``c``."""
    n = len(a)
    for i in range(n):
        for k in range(n):
            for j in range(n):
                c[i][j] += a[i][k] * b[k][j]
    return c


VERSIONS: tuple[Callable[[Matrix, Matrix, Matrix], Matrix], ...] = (
    mmat_ijk,
    mmat_jik,
    mmat_jki,
    mmat_kji,
    mmat_kij,
    mmat_ikj,
)


def read_square_matrix(path: str | Path, n: int) -> Matrix:
    """Read the first ``n * n`` numbers of a file as an ``n`` x ``n`` matrix."""
    size = max(n, 0)
    with open(path, encoding="ascii") as handle:
        tokens = handle.read().split()
    if len(tokens) < size * size:
        raise ValueError(f"{path}: expected {size * size} numbers, found {len(tokens)}")
    values = [float(token) for token in tokens[: size * size]]
    return [values[row * size:(row + 1) * size] for row in range(size)]


def write_matrix(path: str | Path, matrix: Sequence[Sequence[float]]) -> None:
    """Write a matrix one row per line, each element followed by a space."""
    with open(path, "w", encoding="ascii") as handle:
        for row in matrix:
            handle.write("".join(f"{value:f} " for value in row) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Multiply two matrix files in every loop order, writing and timing each version."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    if len(args) != 4:
        out.write("Usage: loop_order N A_matrix_file B_matrix_file C_matrix_prefix\n")
        return 1

    n = _atoi(args[0])
    a_file, b_file, prefix = args[1:]
    try:
        a = read_square_matrix(a_file, n)
        b = read_square_matrix(b_file, n)
    except OSError:
        out.write("Error: Unable to open input files.\n")
        return 1
    except ValueError as exc:
        out.flush()
        print(f"error: {exc}", file=sys.stderr)
        return 1

    size = max(n, 0)
    c = [[0.0] * size for _ in range(size)]
    for version, multiply in enumerate(VERSIONS, start=1):
        filename = f"{prefix}_version{version}.txt"
        try:
            handle = open(filename, "w", encoding="ascii")
        except OSError:
            out.write("Error: Unable to open output file.\n")
            return 1
        with handle:
            start = time.process_time()
            multiply(a, b, c)
            elapsed = time.process_time() - start
            for row in c:
                handle.write("".join(f"{value:f} " for value in row) + "\n")
        out.write(f"Version {version} CPU time: {elapsed:.6f} seconds\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())