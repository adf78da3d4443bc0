import queue
import threading
import time

import pytest
from watchdog.events import (
    DirModifiedEvent,
    FileCreatedEvent,
    FileDeletedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from labfiles.dirwatch import (
    Change,
    ChangeHandler,
    ChangeKind,
    format_entry,
    list_directory,
    main,
    watch_directory,
)


def test_list_directory(tmp_path):
    (tmp_path / "b.txt").write_text("x")
    (tmp_path / "a_dir").mkdir()
    assert list_directory(tmp_path) == [("a_dir", True), ("b.txt", False)]


def test_list_directory_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_directory(tmp_path / "absent")


def test_format_entry():
    assert format_entry("docs", True) == "[Folder]: docs"
    assert format_entry("notes.txt", False) == "[File]: notes.txt"


def test_change_describe():
    assert Change(ChangeKind.ADDED, "x.txt").describe() == "Added: x.txt"
    assert Change(ChangeKind.RENAMED_OLD, "y").describe() == "Renamed (old): y"


def _handler(tmp_path):
    seen = []
    return ChangeHandler(tmp_path, seen.append), seen


def test_handler_created_deleted_modified(tmp_path):
    handler, seen = _handler(tmp_path)
    handler.on_created(FileCreatedEvent(str(tmp_path / "a.txt")))
    handler.on_deleted(FileDeletedEvent(str(tmp_path / "b.txt")))
    handler.on_modified(FileModifiedEvent(str(tmp_path / "c.txt")))
    assert seen == [
        Change(ChangeKind.ADDED, "a.txt"),
        Change(ChangeKind.DELETED, "b.txt"),
        Change(ChangeKind.EDITED, "c.txt"),
    ]


def test_handler_moved(tmp_path):
    handler, seen = _handler(tmp_path)
    handler.on_moved(FileMovedEvent(str(tmp_path / "old"), str(tmp_path / "new")))
    assert seen == [
        Change(ChangeKind.RENAMED_OLD, "old"),
        Change(ChangeKind.RENAMED_NEW, "new"),
    ]


def test_handler_ignores_root(tmp_path):
    handler, seen = _handler(tmp_path)
    handler.on_modified(DirModifiedEvent(str(tmp_path)))
    assert seen == []


def test_watch_directory_reports_added_file(tmp_path):
    changes = queue.Queue()
    stop = threading.Event()
    worker = threading.Thread(target=watch_directory, args=(tmp_path, changes.put, stop))
    worker.start()
    try:
        time.sleep(0.5)
        (tmp_path / "fresh.txt").write_text("data")
        deadline = time.monotonic() + 10
        found = False
        while time.monotonic() < deadline and not found:
            try:
                change = changes.get(timeout=0.5)
            except queue.Empty:
                continue
            found = change == Change(ChangeKind.ADDED, "fresh.txt")
        assert found
    finally:
        stop.set()
        worker.join(timeout=10)
    assert not worker.is_alive()


def test_watch_directory_rejects_missing(tmp_path):
    with pytest.raises(NotADirectoryError):
        watch_directory(tmp_path / "absent", print, threading.Event())


def test_main_missing_directory(tmp_path, capsys):
    missing = tmp_path / "absent"
    assert main([str(missing)]) == 1
    assert capsys.readouterr().out == f"There is no catalog: {missing}\n"


def test_main_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.startswith("usage:")