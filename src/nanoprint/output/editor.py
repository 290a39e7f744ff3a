"""
Line-level patching of text files.

Editor.TXT.edit_line("docs", "notes", Line(0, "new title"), Line(4, ""))
reads docs/notes.txt and writes docs/notes_copy.txt with lines 0 and 4
replaced. The original file is left untouched.
"""

from enum import Enum
from pathlib import Path
from typing import NamedTuple


class Line(NamedTuple):
    """Replacement content for a 0-based line number."""

    number: int
    content: str


class Editor(Enum):
    """Editable file types, keyed by extension."""

    HTML = ".html"
    TXT = ".txt"
    XML = ".xml"

    @property
    def extension(self) -> str:
        return self.value

    def edit_line(self, path: str, file_name: str, *lines: Line) -> Path:
        """
        Copy a file, swapping the given lines.

        Args:
            path: Directory holding the file
            file_name: File name without extension
            *lines: Replacements in strictly ascending line order

        Returns:
            Path of the written "<file_name>_copy" file.

        Raises:
            ValueError: line numbers are not strictly ascending
        """
        numbers = [line.number for line in lines]
        if any(a >= b for a, b in zip(numbers, numbers[1:])):
            raise ValueError(f"lines must be in strictly ascending order, got {numbers}")
        replacements = {line.number: line.content for line in lines}

        source = Path(path) / f"{file_name}{self.extension}"
        target = Path(path) / f"{file_name}_copy{self.extension}"

        with open(source, encoding="utf-8") as reader, \
                open(target, "w", encoding="utf-8") as writer:
            for number, text in enumerate(reader):
                text = replacements.get(number, text.rstrip("\n"))
                writer.write(text + "\n")

        return target
