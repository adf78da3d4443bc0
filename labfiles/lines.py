"""Line-oriented editing of a text file: insert, delete and print lines."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import TextIO

_CHUNK = re.compile(r"[^\n]*\n|[^\n]+")

_MENU = (
    "Select operation:\n1. Open file.\n2. Insert line.\n3. Delete line.\n"
    "4. Print line.\n5. Print file.\n6. Close file.\n0. Exit."
)


class FileNotOpenError(RuntimeError):
    """An operation needs the file to be open, and it is not."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"file is not open: {path}")
        self.path = path


def _chunks(content: str) -> list[str]:
    """Split content into lines, each keeping its newline if it has one."""
    return _CHUNK.findall(content)


def _texts(content: str) -> list[str]:
    return [chunk.rstrip("\n") for chunk in _chunks(content)]


def _check_position(pos: int) -> None:
    if pos < -1:
        raise ValueError(f"invalid position: {pos}")


def insert_line(content: str, text: str, pos: int) -> str:
    """Insert text as a line before line pos (1-based).

    Position 0 puts it first and -1 appends it; a position past the last
    line leaves the content unchanged.
    """
    if not text:
        raise ValueError("line cannot be empty")
    _check_position(pos)
    line = text + "\n"
    parts: list[str] = []
    for number, chunk in enumerate(_chunks(content), start=1):
        if number == pos:
            parts.append(line)
        parts.append(chunk)
    result = "".join(parts)
    if pos == -1:
        result += line
    elif pos == 0:
        result = line + result
    return result


def _drop_last(content: str) -> str:
    # Works from the count of newlines, not the count of lines, so text after
    # the last newline goes too, and a single-line file gains a blank first line.
    rows = content.count("\n")
    if rows >= 2:
        return "".join(text + "\n" for text in _texts(content)[: rows - 1])
    if rows == 1:
        rest = content[1:] if content.startswith("\n") else content
        return "\n" + "".join(text + "\n" for text in _texts(rest))
    return "".join(text + "\n" for text in _texts(content))


def remove_line(content: str, pos: int) -> str:
    """Remove line pos (1-based); 0 removes the first line and -1 the last."""
    _check_position(pos)
    if pos == -1:
        return _drop_last(content)
    target = 1 if pos == 0 else pos
    return "".join(
        chunk
        for number, chunk in enumerate(_chunks(content), start=1)
        if number != target
    )


def get_line(content: str, pos: int) -> str | None:
    """Return line pos (1-based) without its newline, or None if there is none."""
    _check_position(pos)
    texts = _texts(content)
    if 1 <= pos <= len(texts):
        return texts[pos - 1]
    return None


class LineFile:
    """A text file opened for line edits, created if it does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._handle: TextIO | None = None

    @property
    def closed(self) -> bool:
        return self._handle is None

    def open(self) -> LineFile:
        """Open the file for reading and writing, creating it if needed."""
        self.close()
        fd = os.open(self.path, os.O_RDWR | os.O_CREAT, 0o600)
        self._handle = os.fdopen(
            fd, "r+", encoding="utf-8", errors="surrogateescape", newline=""
        )
        return self

    def close(self) -> None:
        """Close the file if it is open."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> LineFile:
        if self.closed:
            self.open()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _file(self) -> TextIO:
        if self._handle is None:
            raise FileNotOpenError(self.path)
        return self._handle

    def _write(self, content: str) -> None:
        handle = self._file()
        handle.seek(0)
        handle.write(content)
        handle.truncate()
        handle.flush()

    def add_row(self, text: str, pos: int) -> None:
        """Insert a line into the file; see insert_line for positions."""
        self._write(insert_line(self.text(), text, pos))

    def remove_row(self, pos: int) -> None:
        """Remove a line from the file; see remove_line for positions."""
        self._write(remove_line(self.text(), pos))

    def row(self, pos: int) -> str | None:
        """Return one line of the file, or None if there is no such line."""
        return get_line(self.text(), pos)

    def text(self) -> str:
        """Return the whole content of the file."""
        handle = self._file()
        handle.seek(0)
        return handle.read()


def _read_line(prompt: str) -> str | None:
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    return line if line else None


def _read_position() -> int | None:
    raw = _read_line("Enter position: ")
    try:
        pos = int(raw.strip()) if raw is not None else None
    except ValueError:
        pos = None
    if pos is None or pos < -1:
        print("Error: invalid position.")
        return None
    return pos


def main(argv: list[str] | None = None) -> int:
    """Run the interactive line editor on the file named in argv."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: lines <file path>")
        return 1
    lines = LineFile(args[0])
    try:
        while True:
            print(_MENU)
            raw = sys.stdin.readline()
            if not raw:
                return 0
            option = raw[:1]
            try:
                if option == "1":
                    try:
                        lines.open()
                    except OSError as exc:
                        print(f"Error opening file: {lines.path} ({exc.strerror})")
                    else:
                        print(f"File '{lines.path}' successfully opened.")
                elif option == "2":
                    text = (_read_line("Enter line: ") or "").removesuffix("\n")
                    if not text:
                        print("Error: line cannot be empty.")
                        return 1
                    pos = _read_position()
                    if pos is None:
                        return 1
                    lines.add_row(text, pos)
                elif option == "3":
                    pos = _read_position()
                    if pos is None:
                        return 1
                    lines.remove_row(pos)
                elif option == "4":
                    pos = _read_position()
                    if pos is None:
                        return 1
                    found = lines.row(pos)
                    if found is not None:
                        print(found)
                elif option == "5":
                    print(lines.text())
                elif option == "6":
                    lines.close()
                elif option == "0":
                    return 0
            except FileNotOpenError as exc:
                print(f"Error: {exc}")
    finally:
        lines.close()


if __name__ == "__main__":
    sys.exit(main())