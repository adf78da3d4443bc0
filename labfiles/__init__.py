"""File tools: a memory-mapped student record table, a line editor, file information and directory watching."""

__version__ = "0.1.0"