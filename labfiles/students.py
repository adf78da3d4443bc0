"""Fixed-size student records stored in a memory-mapped binary file."""

from __future__ import annotations

import mmap
import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, TextIO

MAX_STUDENTS = 100
NAME_SIZE = 64
SURNAME_SIZE = 128
ID_SIZE = 8

_RECORD = struct.Struct(f"<{NAME_SIZE}s{SURNAME_SIZE}sBB{ID_SIZE}s")
RECORD_SIZE = _RECORD.size
DEFAULT_PATH = "students.bin"


class PositionError(IndexError):
    """A position lies outside the table."""

    def __init__(self, pos: int) -> None:
        super().__init__(f"wrong position: {pos}")
        self.pos = pos


class SlotBusyError(ValueError):
    """A slot that should be free already holds a student."""

    def __init__(self, pos: int) -> None:
        super().__init__(f"position {pos} is already busy.")
        self.pos = pos


class SlotEmptyError(LookupError):
    """A slot that should hold a student is empty."""

    def __init__(self, pos: int) -> None:
        super().__init__(f"position {pos} is empty.")
        self.pos = pos


def _encode(value: str, size: int, field: str) -> bytes:
    raw = value.encode("utf-8")
    if len(raw) >= size:
        raise ValueError(f"{field} must be shorter than {size} bytes")
    return raw


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class Student:
    """One student record."""

    name: str
    surname: str
    course: int
    group: int
    id: str

    def pack(self) -> bytes:
        """Return the fixed-size binary form of this record."""
        for label, number in (("course", self.course), ("group", self.group)):
            if not 0 <= number <= 255:
                raise ValueError(f"{label} must be between 0 and 255")
        return _RECORD.pack(
            _encode(self.name, NAME_SIZE, "name"),
            _encode(self.surname, SURNAME_SIZE, "surname"),
            self.course,
            self.group,
            _encode(self.id, ID_SIZE, "id"),
        )

    @classmethod
    def unpack(cls, data: bytes) -> Student:
        """Build a record from its binary form."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
        name, surname, course, group, ident = _RECORD.unpack(data)
        return cls(_decode(name), _decode(surname), course, group, _decode(ident))

    def describe(self) -> str:
        """Return the one-line description of the record."""
        return (
            f"Name: {self.name}, LastName: {self.surname}, "
            f"Course: {self.course}, Group: {self.group}, ID: {self.id}"
        )


class StudentTable:
    """A table of student slots backed by a memory-mapped file."""

    def __init__(self, handle: BinaryIO, view: mmap.mmap) -> None:
        self._handle: BinaryIO | None = handle
        self._view: mmap.mmap | None = view
        self.capacity = MAX_STUDENTS

    @classmethod
    def open(cls, path: str | Path) -> StudentTable:
        """Map an existing student file for reading and writing."""
        handle = open(path, "r+b")
        try:
            size = Path(path).stat().st_size
            if size < RECORD_SIZE * MAX_STUDENTS:
                raise ValueError(
                    f"file holds {size} bytes, a table needs "
                    f"{RECORD_SIZE * MAX_STUDENTS}"
                )
            view = mmap.mmap(handle.fileno(), 0)
        except BaseException:
            handle.close()
            raise
        return cls(handle, view)

    @property
    def closed(self) -> bool:
        return self._view is None

    def _mapping(self) -> mmap.mmap:
        if self._view is None:
            raise ValueError("student table is closed")
        return self._view

    def _resolve(self, pos: int) -> int:
        if pos < 0:
            pos += self.capacity
        if not 0 <= pos < self.capacity:
            raise PositionError(pos)
        return pos

    def _slot(self, pos: int) -> slice:
        start = pos * RECORD_SIZE
        return slice(start, start + RECORD_SIZE)

    def _is_empty(self, pos: int) -> bool:
        return self._mapping()[pos * RECORD_SIZE] == 0

    def add(self, student: Student, pos: int) -> None:
        """Put a student into a free slot; negative positions count from the end."""
        view = self._mapping()
        pos = self._resolve(pos)
        if not self._is_empty(pos):
            raise SlotBusyError(pos)
        view[self._slot(pos)] = student.pack()

    def remove(self, pos: int) -> None:
        """Clear an occupied slot."""
        view = self._mapping()
        pos = self._resolve(pos)
        if self._is_empty(pos):
            raise SlotEmptyError(pos)
        view[self._slot(pos)] = bytes(RECORD_SIZE)

    def get(self, pos: int) -> Student:
        """Return the student in an occupied slot."""
        view = self._mapping()
        pos = self._resolve(pos)
        if self._is_empty(pos):
            raise SlotEmptyError(pos)
        return Student.unpack(view[self._slot(pos)])

    def occupied(self) -> Iterator[tuple[int, Student]]:
        """Yield (position, student) for every occupied slot in order."""
        self._mapping()
        for pos in range(self.capacity):
            if not self._is_empty(pos):
                yield pos, self.get(pos)

    def close(self) -> None:
        """Flush and unmap the file."""
        if self._view is None:
            raise ValueError("student table is closed")
        self._view.flush()
        self._view.close()
        self._view = None
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> StudentTable:
        return self

    def __exit__(self, *args: object) -> None:
        if not self.closed:
            self.close()


def sample_students() -> list[Student]:
    """Return the ten sample students written by create_sample_file."""
    return [
        Student(
            name=f"Student{i + 1}",
            surname=f"Surname{i + 1}",
            course=i % 5 + 1,
            group=i % 3 + 1,
            id=f"{i + 1:04d}",
        )
        for i in range(10)
    ]


def create_sample_file(path: str | Path) -> int:
    """Write a full table holding the sample students; return bytes written."""
    records = [student.pack() for student in sample_students()]
    records.extend(bytes(RECORD_SIZE) for _ in range(MAX_STUDENTS - len(records)))
    data = b"".join(records)
    Path(path).write_bytes(data)
    return len(data)


_MENU = "1. Add student\n2. Rem student\n3. Print row\n4. Print file\n5. Close"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str) -> str:
    print(prompt, end="", flush=True)
    return next(tokens)


def _print_rows(table: StudentTable) -> None:
    for _, student in table.occupied():
        print(student.describe())


def main(argv: list[str] | None = None) -> int:
    """Run the interactive student table menu."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_PATH
    written = create_sample_file(path)
    print(f"Written {written} bytes to the file.")
    tokens = _tokens(sys.stdin)

    with StudentTable.open(path) as table:
        while True:
            print(_MENU)
            try:
                raw_choice = next(tokens)
            except StopIteration:
                break
            try:
                choice = int(raw_choice)
            except ValueError:
                choice = 0
            try:
                if choice == 1:
                    name = _ask(tokens, "Name: ")
                    surname = _ask(tokens, "Last name: ")
                    course = int(_ask(tokens, "Course: "))
                    group = int(_ask(tokens, "Group: "))
                    ident = _ask(tokens, "ID: ")
                    pos = int(_ask(tokens, "Position: "))
                    table.add(Student(name, surname, course, group, ident), pos)
                elif choice == 2:
                    table.remove(int(_ask(tokens, "Position: ")))
                elif choice == 3:
                    print(table.get(int(_ask(tokens, "Position: "))).describe())
                elif choice == 4:
                    _print_rows(table)
                elif choice == 5:
                    table.close()
                    print("Exiting...")
                    break
                else:
                    print("Wrong option. Try again...")
            except StopIteration:
                print()
                break
            except (PositionError, SlotBusyError, SlotEmptyError, ValueError) as exc:
                print(exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())