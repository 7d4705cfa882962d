"""Element-wise integer and real-number vector operations."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _real_div(a: float, b: float) -> float:
    """IEEE division: a zero divisor gives an infinity or NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _sort(x: Sequence, s: int) -> list:
    return sorted(x, reverse=s != 1)


def iadd_vec(x: Sequence[int], y: Sequence[int]) -> list[int]:
    """Element-wise sum."""
    return [a + b for a, b in zip(x, y, strict=True)]


def isub_vec(x: Sequence[int], y: Sequence[int]) -> list[int]:
    """Element-wise difference."""
    return [a - b for a, b in zip(x, y, strict=True)]


def imul_vec(x: Sequence[int], y: Sequence[int]) -> list[int]:
    """Element-wise product."""
    return [a * b for a, b in zip(x, y, strict=True)]


def idiv_vec(x: Sequence[int], y: Sequence[int]) -> list[int]:
    """Element-wise quotient, truncated toward zero."""
    return [_trunc_div(a, b) for a, b in zip(x, y, strict=True)]


def imulk_vec(x: Sequence[int], k: int) -> list[int]:
    """Every element multiplied by ``k``."""
    return [a * k for a in x]


def idivk_vec(x: Sequence[int], k: int) -> list[int]:
    """Every element divided by ``k``, truncated toward zero."""
    return [_trunc_div(a, k) for a in x]


def irev_vec(x: Sequence[int]) -> list[int]:
    """The elements in reverse order."""
    return list(reversed(x))


def isort_vec(x: Sequence[int], s: int) -> list[int]:
    """Sorted ascending when ``s`` is 1, descending otherwise."""
    return _sort(x, s)


def radd_vec(x: Sequence[float], y: Sequence[float]) -> list[float]:
    """Element-wise sum."""
    return [a + b for a, b in zip(x, y, strict=True)]


def rsub_vec(x: Sequence[float], y: Sequence[float]) -> list[float]:
    """Element-wise difference."""
    return [a - b for a, b in zip(x, y, strict=True)]


def rmul_vec(x: Sequence[float], y: Sequence[float]) -> list[float]:
    """Element-wise product."""
    return [a * b for a, b in zip(x, y, strict=True)]


def rdiv_vec(x: Sequence[float], y: Sequence[float]) -> list[float]:
    """Element-wise quotient with IEEE handling of zero divisors."""
    return [_real_div(a, b) for a, b in zip(x, y, strict=True)]


def rmulk_vec(x: Sequence[float], j: float) -> list[float]:
    """Every element multiplied by ``j``."""
    return [a * j for a in x]


def rdivk_vec(x: Sequence[float], j: float) -> list[float]:
    """Every element divided by ``j`` with IEEE handling of zero."""
    return [_real_div(a, j) for a in x]


def rrev_vec(x: Sequence[float]) -> list[float]:
    """The elements in reverse order."""
    return list(reversed(x))


def rsort_vec(x: Sequence[float], s: int) -> list[float]:
    """Sorted ascending when ``s`` is 1, descending otherwise."""
    return _sort(x, s)