"""Interactive console for the integer and real-number vector routines."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial
from typing import TextIO

from labkit.console import (
    InputError,
    TokenReader,
    format_int_vector,
    format_real_vector,
    print_line,
)
from labkit.vector import (
    iadd_vec,
    idiv_vec,
    idivk_vec,
    imul_vec,
    imulk_vec,
    irev_vec,
    isort_vec,
    isub_vec,
    radd_vec,
    rdiv_vec,
    rdivk_vec,
    rmul_vec,
    rmulk_vec,
    rrev_vec,
    rsort_vec,
    rsub_vec,
)

_BINARY_LABELS = ("ADDITION", "SUBTRACTION", "MULTIPLICATION", "DIVISION")
_SCALAR_LABELS = ("SCALAR MULTIPLICATION", "SCALAR DIVISION")


@dataclass(frozen=True)
class _Flavour:
    """The routines, input reader and formatter for one element type."""

    tag: str
    read: Callable[[TokenReader], float]
    binary: tuple[Callable, ...]
    scalar: tuple[Callable, ...]
    reverse: Callable
    sort: Callable
    render: Callable[[Sequence], str]


_INTEGER = _Flavour(
    "INTEGER",
    TokenReader.next_int,
    (iadd_vec, isub_vec, imul_vec, idiv_vec),
    (imulk_vec, idivk_vec),
    irev_vec,
    isort_vec,
    format_int_vector,
)
_REAL = _Flavour(
    "REAL NUMBER",
    TokenReader.next_float,
    (radd_vec, rsub_vec, rmul_vec, rdiv_vec),
    (rmulk_vec, rdivk_vec),
    rrev_vec,
    rsort_vec,
    format_real_vector,
)


def _streams(reader: TokenReader | None, out: TextIO | None) -> tuple[TokenReader, TextIO]:
    return (
        reader if reader is not None else TokenReader(sys.stdin),
        out if out is not None else sys.stdout,
    )


def _take_vector(
    flavour: _Flavour, name: str, size: int, reader: TokenReader, out: TextIO
) -> list:
    if size < 0:
        raise ValueError(f"vector size must not be negative, got {size}")
    tag = flavour.tag
    out.write(f"[{tag}] ENTER {size} ELEMENTS OF {tag} VECTOR <{name}>\n")
    print_line("-", out)
    values = []
    for position in range(1, size + 1):
        out.write(f"[{tag}] ENTER ELEMENT - {position}: ")
        values.append(flavour.read(reader))
    return values


def take_integer_vector(
    name: str,
    size: int,
    reader: TokenReader | None = None,
    out: TextIO | None = None,
) -> list[int]:
    """Prompt for ``size`` integers making up vector ``name`` and return them."""
    return _take_vector(_INTEGER, name, size, *_streams(reader, out))


def take_real_vector(
    name: str,
    size: int,
    reader: TokenReader | None = None,
    out: TextIO | None = None,
) -> list[float]:
    """Prompt for ``size`` real numbers making up vector ``name`` and return them."""
    return _take_vector(_REAL, name, size, *_streams(reader, out))


def _perform(
    flavour: _Flavour, x: Sequence, y: Sequence, scalar: float, out: TextIO
) -> None:
    steps = [
        *zip(_BINARY_LABELS, (partial(fn, x, y) for fn in flavour.binary)),
        *zip(_SCALAR_LABELS, (partial(fn, x, scalar) for fn in flavour.scalar)),
        ("VECTOR REVERSAL", partial(flavour.reverse, x)),
        ("VECTOR SORTING ASCENDING", partial(flavour.sort, x, 1)),
        ("VECTOR SORTING DESCENDING", partial(flavour.sort, x, 0)),
    ]
    # Each result is computed only when its turn comes, so earlier results
    # are already written if a later operation fails.
    for index, (label, compute) in enumerate(steps):
        if index:
            print_line("-", out)
        out.write(f"[{flavour.tag}] {label}: {flavour.render(compute())}\n")


def perform_integer_vector(
    x: Sequence[int],
    y: Sequence[int],
    scalar: int,
    out: TextIO | None = None,
) -> None:
    """Run every integer vector operation on ``x`` and ``y`` and print the results."""
    _perform(_INTEGER, x, y, scalar, out if out is not None else sys.stdout)


def perform_real_vector(
    x: Sequence[float],
    y: Sequence[float],
    scalar: float,
    out: TextIO | None = None,
) -> None:
    """Run every real-number vector operation on ``x`` and ``y`` and print the results."""
    _perform(_REAL, x, y, scalar, out if out is not None else sys.stdout)


def _section(
    flavour: _Flavour, names: Sequence[str], reader: TokenReader, out: TextIO
) -> None:
    tag = flavour.tag
    out.write(f"[{tag}] ENTER VECTOR SIZE (min 15): ")
    size = reader.next_int()
    out.write(f"[{tag}] ENTER SCALAR: ")
    scalar = flavour.read(reader)
    out.write(f"[{tag}] ENTER SORT OPTION (1 - ascending, 2 - descending): ")
    reader.next_int()

    print_line("-", out)
    vectors = []
    for name in names:
        vectors.append(_take_vector(flavour, name, size, reader, out))
        print_line("-", out)

    _perform(flavour, *vectors, scalar, out)


def _run(reader: TokenReader, out: TextIO) -> None:
    print_line("*", out)
    for flavour, names in ((_INTEGER, ("X", "Y")), (_REAL, ("P", "Q"))):
        _section(flavour, names, reader, out)
        print_line("*", out)


def main(argv: Sequence[str] | None = None) -> int:
    """Read two integer and two real vectors from standard input and print every operation."""
    out = sys.stdout
    try:
        _run(TokenReader(sys.stdin), out)
    except (EOFError, InputError, ValueError, ZeroDivisionError) as exc:
        out.flush()
        print(f"error: {exc}", file=sys.stderr)
        return 1
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())