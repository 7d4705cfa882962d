"""Student records with allocation tracing of every record created and released."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, fields
from typing import Any, TextIO

from labkit.console import TokenReader, print_line

# Capacity of each text field, terminating byte included.
FIELD_CAPACITY = {
    "name": 64,
    "program": 16,
    "level": 16,
    "email": 64,
    "phone": 16,
    "student_id": 16,
    "section": 16,
}

_POINTER_SIZE = 8
STUDENT_SIZE = sum(FIELD_CAPACITY.values()) + _POINTER_SIZE


@dataclass
class Student:
    """One student entry; every field must fit its fixed capacity."""

    name: str
    program: str
    level: str
    email: str
    phone: str
    student_id: str
    section: str

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            capacity = FIELD_CAPACITY[field.name]
            if len(value) >= capacity:
                raise ValueError(
                    f"{field.name} holds at most {capacity - 1} characters, got {len(value)}"
                )


class AllocationTracker:
    """Records live objects and reports each allocation and release."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self._live: dict[int, tuple[Any, int]] = {}

    @property
    def stream(self) -> TextIO:
        """Where allocation messages are written."""
        return self._out if self._out is not None else sys.stdout

    @property
    def live(self) -> int:
        """Number of objects allocated and not yet released."""
        return len(self._live)

    @property
    def allocated_bytes(self) -> int:
        """Total size of the objects still live."""
        return sum(size for _, size in self._live.values())

    def allocate(self, obj: Any, size: int) -> Any:
        """Record ``obj`` as allocated with ``size`` bytes and return it."""
        key = id(obj)
        if key in self._live:
            raise ValueError("object is already allocated")
        self._live[key] = (obj, size)
        self.stream.write(f"[MALLOC] ALLOCATED MEMORY AT ADDRESS: {key:#x}, SIZE: {size}\n")
        return obj

    def release(self, obj: Any) -> None:
        """Release ``obj``; ``None`` is ignored, an unknown object is an error."""
        if obj is None:
            return
        key = id(obj)
        if key not in self._live:
            raise ValueError("object was not allocated or was already released")
        self.stream.write(f"[FREE] DEALLOCATED MEMORY AT ADDRESS: {key:#x}\n")
        del self._live[key]


def create_student_entry(
    name: str,
    program: str,
    level: str,
    email: str,
    phone: str,
    student_id: str,
    section: str,
    tracker: AllocationTracker | None = None,
) -> Student:
    """Create a tracked student entry."""
    tracker = tracker if tracker is not None else AllocationTracker()
    student = Student(name, program, level, email, phone, student_id, section)
    tracker.allocate(student, STUDENT_SIZE)
    print_line("-", tracker.stream)
    return student


def free_student_entries(
    entries: Iterable[Student],
    tracker: AllocationTracker,
    out: TextIO | None = None,
) -> None:
    """Release every entry, drawing a rule before each."""
    out = out if out is not None else tracker.stream
    for entry in entries:
        print_line("-", out)
        tracker.release(entry)


_PROMPTS = (
    ("NAME", "name"),
    ("PROGRAM", "program"),
    ("LEVEL", "level"),
    ("EMAIL", "email"),
    ("PHONE", "phone"),
    ("ID", "student_id"),
    ("SECTION", "section"),
)


def _read_student(number: int, reader: TokenReader, out: TextIO) -> dict[str, str]:
    values = {}
    for label, key in _PROMPTS:
        out.write(f"==> ENTER STUDENT {number}'s {label}: ")
        values[key] = reader.read_line()[: FIELD_CAPACITY[key] - 1]
    return values


def _run(reader: TokenReader, out: TextIO) -> None:
    tracker = AllocationTracker(out)

    print_line("*", out)
    out.write("==> ENTER NUMBER OF NODES TO CREATE: ")
    n = reader.next_int()
    reader.discard_line()
    print_line("-", out)
    out.write("==> ENTER NUMBER OF NODES TO FREE: ")
    m = reader.next_int()
    reader.discard_line()
    print_line("-", out)

    entries: list[Student] = []
    for number in range(1, n + 1):
        values = _read_student(number, reader, out)
        print_line("-", out)
        entries.append(create_student_entry(tracker=tracker, **values))

    out.write(f"==> FREEING {m} STUDENT ENTRIES\n")
    print_line("-", out)

    to_free = max(m, 0)
    for entry in entries[:to_free]:
        tracker.release(entry)
        print_line("-", out)

    out.write(f"==> FREEING REMAINING {n - m} STUDENT ENTRIES (FIX-UP)\n")
    free_student_entries(entries[to_free:], tracker, out)

    print_line("*", out)


def main(argv: Sequence[str] | None = None) -> int:
    """Create student entries from standard input, then release them in two passes."""
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