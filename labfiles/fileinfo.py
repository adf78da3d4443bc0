"""Report the size, type and timestamps of a file, then print its content."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

_TIME_FORMAT = "%d.%m.%Y %H:%M:%S"


class FileKind(Enum):
    """The type of a file system entry, with its printed description."""

    REGULAR = "Regular file."
    DIRECTORY = "Directory."
    CHARACTER = "Character device."
    BLOCK = "Block device."
    FIFO = "FIFO (named pipe)."
    SYMLINK = "Symbolic link."
    SOCKET = "Socket."
    UNKNOWN = "Unknown type file."


_KIND_TESTS = (
    (stat.S_ISREG, FileKind.REGULAR),
    (stat.S_ISDIR, FileKind.DIRECTORY),
    (stat.S_ISCHR, FileKind.CHARACTER),
    (stat.S_ISBLK, FileKind.BLOCK),
    (stat.S_ISFIFO, FileKind.FIFO),
    (stat.S_ISLNK, FileKind.SYMLINK),
    (stat.S_ISSOCK, FileKind.SOCKET),
)


def file_kind(mode: int) -> FileKind:
    """Classify a stat mode value."""
    for test, kind in _KIND_TESTS:
        if test(mode):
            return kind
    return FileKind.UNKNOWN


@dataclass(frozen=True)
class FileInfo:
    """What stat tells about a file."""

    name: str
    size: int
    kind: FileKind
    created: datetime
    accessed: datetime
    modified: datetime

    def describe(self) -> str:
        """Return the multi-line report for the file."""
        return "\n".join(
            [
                f"File Name: {self.name}",
                f"File size: {self.size} bytes "
                f"({self.size / 1024.0:.2f} KiB, "
                f"{self.size / (1024.0 * 1024.0):.2f} MiB)",
                self.kind.value,
                f"Creation Time: {self.created.strftime(_TIME_FORMAT)}",
                f"Last Access Time: {self.accessed.strftime(_TIME_FORMAT)}",
                f"Last Write Time: {self.modified.strftime(_TIME_FORMAT)}",
            ]
        )


def file_info(path: str | Path) -> FileInfo:
    """Stat a file, following symbolic links; raises OSError on failure."""
    result = os.stat(path)
    return FileInfo(
        name=os.fspath(path),
        size=result.st_size,
        kind=file_kind(result.st_mode),
        created=datetime.fromtimestamp(result.st_ctime),
        accessed=datetime.fromtimestamp(result.st_atime),
        modified=datetime.fromtimestamp(result.st_mtime),
    )


def read_text(path: str | Path) -> str:
    """Return the content of a file as text."""
    with open(path, "rb") as handle:
        return handle.read().decode("utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    """Print information about the file named in argv, then its content."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: fileinfo <file path>")
        return 1
    path = args[0]
    try:
        print(file_info(path).describe())
    except OSError as exc:
        print(f"Error getting file information: {exc.strerror}", file=sys.stderr)
    try:
        print(read_text(path), end="")
    except OSError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())