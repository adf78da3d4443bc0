[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labfiles"
version = "0.1.0"
description = "Small file tools: a fixed-slot student record file, a line editor, file information and a directory watcher"
requires-python = ">=3.10"
keywords = ["files", "records", "mmap", "line-editor", "file-info", "directory-watch"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]
dependencies = [
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
labfiles-students = "labfiles.students:main"
labfiles-lines = "labfiles.lines:main"
labfiles-info = "labfiles.fileinfo:main"
labfiles-watch = "labfiles.dirwatch:main"

[tool.hatch.build.targets.wheel]
packages = ["labfiles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
