import os
import stat
from datetime import datetime

import pytest

from labfiles.fileinfo import FileInfo, FileKind, file_info, file_kind, main, read_text


@pytest.mark.parametrize(
    "mode, kind",
    [
        (stat.S_IFREG | 0o644, FileKind.REGULAR),
        (stat.S_IFDIR | 0o755, FileKind.DIRECTORY),
        (stat.S_IFCHR, FileKind.CHARACTER),
        (stat.S_IFBLK, FileKind.BLOCK),
        (stat.S_IFIFO, FileKind.FIFO),
        (stat.S_IFLNK, FileKind.SYMLINK),
        (stat.S_IFSOCK, FileKind.SOCKET),
        (0, FileKind.UNKNOWN),
    ],
)
def test_file_kind(mode, kind):
    assert file_kind(mode) is kind


@pytest.mark.parametrize(
    "mode, text",
    [
        (stat.S_IFREG | 0o644, "Regular file."),
        (stat.S_IFIFO, "FIFO (named pipe)."),
        (0, "Unknown type file."),
    ],
)
def test_kind_texts(mode, text):
    assert file_kind(mode).value == text


def test_file_info_regular(tmp_path):
    target = tmp_path / "data.txt"
    target.write_bytes(b"x" * 2048)
    stamp = 1_600_000_000
    os.utime(target, (stamp, stamp))
    info = file_info(target)
    assert info.name == str(target)
    assert info.size == 2048
    assert info.kind is FileKind.REGULAR
    assert info.modified == datetime.fromtimestamp(stamp)
    assert info.accessed == datetime.fromtimestamp(stamp)


def test_file_info_directory(tmp_path):
    assert file_info(tmp_path).kind is FileKind.DIRECTORY


def test_file_info_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_info(tmp_path / "absent")


def test_describe_layout():
    moment = datetime(2024, 3, 5, 7, 8, 9)
    info = FileInfo("a.txt", 2048, FileKind.REGULAR, moment, moment, moment)
    lines = info.describe().splitlines()
    assert lines[0] == "File Name: a.txt"
    assert lines[1] == "File size: 2048 bytes (2.00 KiB, 0.00 MiB)"
    assert lines[2] == "Regular file."
    assert lines[3] == "Creation Time: 05.03.2024 07:08:09"
    assert lines[4].startswith("Last Access Time: ")
    assert lines[5].startswith("Last Write Time: ")
    assert len(lines) == 6


def test_read_text_round_trip(tmp_path):
    target = tmp_path / "t.txt"
    target.write_text("first\nsecond\n", encoding="utf-8")
    assert read_text(target) == "first\nsecond\n"


def test_read_text_missing(tmp_path):
    with pytest.raises(OSError):
        read_text(tmp_path / "absent")


def test_main_prints_info_and_content(tmp_path, capsys):
    target = tmp_path / "t.txt"
    target.write_text("hello\n", encoding="utf-8")
    assert main([str(target)]) == 0
    out = capsys.readouterr().out
    assert f"File Name: {target}" in out
    assert "Regular file." in out
    assert out.endswith("hello\n")


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent")]) == 0
    err = capsys.readouterr().err
    assert "Error getting file information" in err
    assert "Error opening file" in err


def test_main_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.startswith("Usage:")