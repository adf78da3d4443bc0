# labfiles

Four small command-line file tools. Each one can also be used as a library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `labfiles-students [PATH]`

This command keeps a binary file of 100 fixed-size student slots. `PATH` defaults to `students.bin`. On start it writes, or overwrites, the file with ten sample students and reports how many bytes it wrote. A menu then lets you:

- add a student at a position
- remove the student at a position
- print one row
- print every occupied row
- close the table

Positions count from 0. A negative position counts from the end.

Each record holds a name, a surname, a course, a group and an ID. The name must be under 64 bytes, the surname under 128 bytes and the ID under 8 bytes, all in UTF-8. Course and group must each be between 0 and 255.

From Python:

```python
from labfiles.students import Student, StudentTable, create_sample_file

create_sample_file("students.bin")
with StudentTable.open("students.bin") as table:
    table.add(Student("Ann", "Lee", 2, 1, "0042"), 50)
    for pos, student in table.occupied():
        print(pos, student.describe())
```

Errors:

- `PositionError` is raised when a position is out of range.
- `SlotBusyError` is raised when you add to a slot that is already taken.
- `SlotEmptyError` is raised when you remove or read an empty slot.
- `StudentTable.open` raises `ValueError` if the file is too small to hold a full table.

`Student.pack()` and `Student.unpack(data)` convert a record to and from its binary form. `sample_students()` returns the ten sample records.

### `labfiles-lines PATH`

This is an interactive line editor for a text file. The menu lets you:

- open the file, creating it if it is missing
- insert a line
- delete a line
- print one line
- print the whole file
- close the file
- exit

Lines count from 1. When inserting, position `0` puts the line first and `-1` appends it. A position past the last line leaves the file unchanged. When deleting, `0` removes the first line and `-1` removes the last one.

The same rules are available as pure functions on strings: `insert_line(content, text, pos)`, `remove_line(content, pos)` and `get_line(content, pos)`. `get_line` returns `None` when the line does not exist. A position below `-1` raises `ValueError`, and so does an empty line passed to `insert_line`.

`LineFile` applies these functions to a file on disk:

```python
from labfiles.lines import LineFile

with LineFile("notes.txt") as lines:
    lines.add_row("hello", -1)
    print(lines.row(1))
    print(lines.text())
```

Using `LineFile` while it is closed raises `FileNotOpenError`.

### `labfiles-info PATH`

This command prints information about a file, then its contents:

- the file's name
- its size in bytes, KiB and MiB
- its kind: regular file, directory, character or block device, FIFO, symbolic link or socket
- its `st_ctime`, access and modification times, in the format `DD.MM.YYYY HH:MM:SS`

The `st_ctime` line is labelled "Creation Time"; on Unix this is the time of the last status change. Symbolic links are followed. The contents are decoded as UTF-8, and invalid bytes are replaced.

In Python, use `file_info(path)`, which returns a `FileInfo`, then `FileInfo.describe()`. `file_kind(mode)` classifies a stat mode, and `read_text(path)` returns a file's text.

This command does not inspect executables or report their binary format.

### `labfiles-watch DIRECTORY`

This command lists the entries of a directory, sorted by name and marked `[Folder]` or `[File]`. It then watches the directory and everything below it until you interrupt it. Changes are printed with the path relative to the directory, prefixed by one of:

- `Added:`
- `Deleted:`
- `Edited:`
- `Renamed (old):`
- `Renamed (new):`

From Python:

```python
import threading
from labfiles.dirwatch import list_directory, watch_directory

print(list_directory("."))
stop = threading.Event()
watch_directory(".", lambda change: print(change.describe()), stop)
```

`watch_directory` hands each `Change` to the callback and returns once `stop` is set. It raises `NotADirectoryError` if the path is not a directory.