"""Square integer and real-number matrix operations."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[float]]


def _size(a: Matrix) -> int:
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    return n


def _same_size(a: Matrix, b: Matrix) -> int:
    n = _size(a)
    if _size(b) != n:
        raise ValueError("matrices must have the same size")
    return n


def _elementwise(a: Matrix, b: Matrix, op) -> list[list]:
    _same_size(a, b)
    return [[op(x, y) for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def _multiply(a: Matrix, b: Matrix, start) -> list[list]:
    _same_size(a, b)
    columns = list(zip(*b))
    return [[sum((x * y for x, y in zip(row, col)), start) for col in columns] for row in a]


def _transpose(a: Matrix) -> list[list]:
    _size(a)
    return [list(column) for column in zip(*a)]


def imatadd(a: Matrix, b: Matrix) -> list[list[int]]:
    """Element-wise sum of two square matrices."""
    return _elementwise(a, b, lambda x, y: x + y)


def imatsub(a: Matrix, b: Matrix) -> list[list[int]]:
    """Element-wise difference of two square matrices."""
    return _elementwise(a, b, lambda x, y: x - y)


def imatmult(a: Matrix, b: Matrix) -> list[list[int]]:
    """Matrix product of two square matrices."""
    return _multiply(a, b, 0)


def imattrans(a: Matrix) -> list[list[int]]:
    """Transpose of a square matrix."""
    return _transpose(a)


def rmatadd(a: Matrix, b: Matrix) -> list[list[float]]:
    """Element-wise sum of two square matrices."""
    return _elementwise(a, b, lambda x, y: x + y)


def rmatsub(a: Matrix, b: Matrix) -> list[list[float]]:
    """Element-wise difference of two square matrices."""
    return _elementwise(a, b, lambda x, y: x - y)


def rmatmult(a: Matrix, b: Matrix) -> list[list[float]]:
    """Matrix product of two square matrices."""
    return _multiply(a, b, 0.0)


def rmattrans(a: Matrix) -> list[list[float]]:
    """Transpose of a square matrix."""
    return _transpose(a)