"""Interactive console for the integer and real-number matrix routines."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial
from typing import TextIO

from labkit.console import (
    InputError,
    TokenReader,
    format_int_matrix,
    format_real_matrix,
    print_line,
)
from labkit.matrix import (
    imatadd,
    imatmult,
    imatsub,
    imattrans,
    rmatadd,
    rmatmult,
    rmatsub,
    rmattrans,
)


@dataclass(frozen=True)
class _Flavour:
    """The routines, input reader and formatter for one element type."""

    tag: str
    read: Callable[[TokenReader], float]
    add: Callable
    mult: Callable
    sub: Callable
    trans: Callable
    render: Callable[[Sequence[Sequence]], str]


_INTEGER = _Flavour(
    "INTEGER", TokenReader.next_int, imatadd, imatmult, imatsub, imattrans, format_int_matrix
)
_REAL = _Flavour(
    "REAL NUMBER",
    TokenReader.next_float,
    rmatadd,
    rmatmult,
    rmatsub,
    rmattrans,
    format_real_matrix,
)


def _streams(reader: TokenReader | None, out: TextIO | None) -> tuple[TokenReader, TextIO]:
    return (
        reader if reader is not None else TokenReader(sys.stdin),
        out if out is not None else sys.stdout,
    )


def _take_matrix(
    flavour: _Flavour, name: str, size: int, reader: TokenReader, out: TextIO
) -> list[list]:
    if size < 0:
        raise ValueError(f"matrix size must not be negative, got {size}")
    tag = flavour.tag
    out.write(f"[{tag}] ENTER {size * size} ELEMENTS OF {size}x{size} MATRIX [{name}]\n")
    print_line("-", out)
    matrix = []
    for index in range(size):
        out.write(f'[{tag}] ENTER ROW (separated with space " ") - [{index}]: ')
        try:
            row = [flavour.read(reader) for _ in range(size)]
        except (InputError, EOFError) as exc:
            out.write("Insufficient input provided.\n")
            raise InputError(f"insufficient input for matrix {name}") from exc
        matrix.append(row)
        reader.discard_line()
    return matrix


def take_integer_matrix(
    name: str,
    size: int,
    reader: TokenReader | None = None,
    out: TextIO | None = None,
) -> list[list[int]]:
    """Prompt for a ``size`` x ``size`` integer matrix row by row and return it."""
    return _take_matrix(_INTEGER, name, size, *_streams(reader, out))


def take_real_matrix(
    name: str,
    size: int,
    reader: TokenReader | None = None,
    out: TextIO | None = None,
) -> list[list[float]]:
    """Prompt for a ``size`` x ``size`` real-number matrix row by row and return it."""
    return _take_matrix(_REAL, name, size, *_streams(reader, out))


def _perform(flavour: _Flavour, a: Sequence, b: Sequence, out: TextIO) -> None:
    steps = (
        ("ADDITION", partial(flavour.add, a, b)),
        ("MULTIPLICATION", partial(flavour.mult, a, b)),
        ("SUBTRACTION", partial(flavour.sub, a, b)),
        ("TRANSPOSE", partial(flavour.trans, a)),
    )
    for index, (label, compute) in enumerate(steps):
        if index:
            print_line("-", out)
        out.write(f"[{flavour.tag}] {label}\n")
        print_line("-", out)
        out.write(flavour.render(compute()))


def perform_integer_matrix(
    a: Sequence[Sequence[int]],
    b: Sequence[Sequence[int]],
    out: TextIO | None = None,
) -> None:
    """Run every integer matrix operation on ``a`` and ``b`` and print the results."""
    _perform(_INTEGER, a, b, out if out is not None else sys.stdout)


def perform_real_matrix(
    a: Sequence[Sequence[float]],
    b: Sequence[Sequence[float]],
    out: TextIO | None = None,
) -> None:
    """Run every real-number matrix operation on ``a`` and ``b`` and print the results."""
    _perform(_REAL, a, b, out if out is not None else sys.stdout)


def _section(
    flavour: _Flavour, names: Sequence[str], reader: TokenReader, out: TextIO
) -> None:
    out.write(f"[{flavour.tag}] ENTER SIZE OF MATRICIES (min 15): ")
    size = reader.next_int()

    print_line("-", out)
    matrices = []
    for name in names:
        matrices.append(_take_matrix(flavour, name, size, reader, out))
        print_line("-", out)

    _perform(flavour, *matrices, out)


def _run(reader: TokenReader, out: TextIO) -> None:
    for flavour, names in ((_INTEGER, ("A", "B")), (_REAL, ("P", "Q"))):
        print_line("*", out)
        _section(flavour, names, reader, out)
    print_line("*", out)


def main(argv: Sequence[str] | None = None) -> int:
    """Read two integer and two real matrices from standard input and print every operation."""
    out = sys.stdout
    try:
        _run(TokenReader(sys.stdin), out)
    except (EOFError, ValueError) as exc:
        out.flush()
        print(f"error: {exc}", file=sys.stderr)
        return 1
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())