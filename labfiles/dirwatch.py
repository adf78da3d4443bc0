"""List a directory, then print changes made inside it as they happen."""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer


class ChangeKind(Enum):
    """The kind of a change, with its printed label."""

    ADDED = "Added"
    DELETED = "Deleted"
    EDITED = "Edited"
    RENAMED_OLD = "Renamed (old)"
    RENAMED_NEW = "Renamed (new)"


@dataclass(frozen=True)
class Change:
    """One change to an entry, named relative to the watched directory."""

    kind: ChangeKind
    name: str

    def describe(self) -> str:
        """Return the change as one printed line."""
        return f"{self.kind.value}: {self.name}"


def list_directory(path: str | Path) -> list[tuple[str, bool]]:
    """Return (name, is_directory) for each entry, sorted by name."""
    with os.scandir(path) as entries:
        found = [(entry.name, entry.is_dir(follow_symlinks=False)) for entry in entries]
    return sorted(found)


def format_entry(name: str, is_dir: bool) -> str:
    """Return the listing line of one entry."""
    return f"{'[Folder]' if is_dir else '[File]'}: {name}"


class ChangeHandler(FileSystemEventHandler):
    """Turn file system events into Change values passed to a callback."""

    def __init__(self, root: str | Path, callback: Callable[[Change], None]) -> None:
        super().__init__()
        self.root = os.path.realpath(os.fspath(root))
        self.callback = callback

    def _name(self, raw: str | bytes) -> str:
        return os.path.relpath(os.path.realpath(os.fsdecode(raw)), self.root)

    def _emit(self, kind: ChangeKind, raw: str | bytes) -> None:
        name = self._name(raw)
        if name != os.curdir:
            self.callback(Change(kind, name))

    def on_created(self, event: FileSystemEvent) -> None:
        self._emit(ChangeKind.ADDED, event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._emit(ChangeKind.DELETED, event.src_path)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._emit(ChangeKind.EDITED, event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._emit(ChangeKind.RENAMED_OLD, event.src_path)
        self._emit(ChangeKind.RENAMED_NEW, event.dest_path)


def watch_directory(
    path: str | Path,
    callback: Callable[[Change], None],
    stop: threading.Event | None = None,
) -> None:
    """Pass changes under path to callback until stop is set."""
    if not os.path.isdir(path):
        raise NotADirectoryError(f"not a directory: {path}")
    stop = stop if stop is not None else threading.Event()
    observer = Observer()
    observer.schedule(ChangeHandler(path, callback), os.fspath(path), recursive=True)
    observer.start()
    try:
        while not stop.wait(0.2):
            if not observer.is_alive():
                break
    finally:
        observer.stop()
        observer.join()


def main(argv: list[str] | None = None) -> int:
    """List the directory named in argv, then print changes until interrupted."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: dirwatch <directory path>")
        return 1
    directory = args[0]
    try:
        entries = list_directory(directory)
    except OSError:
        print(f"There is no catalog: {directory}")
        return 1
    for name, is_dir in entries:
        print(format_entry(name, is_dir))
    try:
        watch_directory(directory, lambda change: print(change.describe(), flush=True))
    except KeyboardInterrupt:
        pass
    except OSError as exc:
        print(f"Error: the tracking folder could not be opened: {directory} ({exc})")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())