"""
Tabular export to files.

Usage:
    Export.TO_CSV.save("out", "report",
                       ["ID", "Name"], ["1", "Alice"], ["2", "Bob"])

Without overwrite an existing "report.csv" is kept and the data goes to
"report_copy.csv", then "report_copy1.csv", "report_copy2.csv", ...
"""

import csv
from enum import Enum
from pathlib import Path
from typing import Sequence

from .printer import Printer


def _free_path(directory: Path, file_name: str, extension: str) -> Path:
    """Return the first non-existing path following the _copy naming scheme."""
    candidate = directory / f"{file_name}{extension}"
    if not candidate.exists():
        return candidate

    copy_name = f"{file_name}_copy"
    candidate = directory / f"{copy_name}{extension}"
    index = 0
    while candidate.exists():
        index += 1
        candidate = directory / f"{copy_name}{index}{extension}"
    return candidate


class Export(Enum):
    """Supported export file types."""

    TO_CSV = ".csv"

    @property
    def extension(self) -> str:
        return self.value

    def save(self, directory: str, file_name: str, *rows: Sequence[str],
             overwrite: bool = False) -> Path:
        """
        Write rows to `<directory>/<file_name><extension>`.

        Args:
            directory: Target directory; created if missing
            file_name: File name without extension
            *rows: Rows of cell values, header row first if any
            overwrite: Replace an existing file instead of picking a _copy name

        Returns:
            The path actually written.
        """
        target_dir = Path(directory)
        target_dir.mkdir(parents=True, exist_ok=True)

        if overwrite:
            output_path = target_dir / f"{file_name}{self.extension}"
        else:
            output_path = _free_path(target_dir, file_name, self.extension)

        with open(output_path, "w", newline="", encoding="utf-8") as file:
            csv.writer(file).writerows(rows)

        Printer.GREEN.ln(f"CSV file [{output_path.name}] \n created successfully at: {target_dir}")
        return output_path
