"""Project-wide state shared by all readers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from etranspile.tools import Log


@dataclass
class Project:
    """Directories, entry points and readers of the project being compiled."""

    input_dir: str = ""
    entry_file: str = ""
    entry_function: str = ""
    associate_files: dict[str, bool] = field(default_factory=dict)
    readers: list[Any] = field(default_factory=list)

    def set_input_dir(self, directory: str) -> None:
        self.input_dir = directory
        Log.write_line("Project Directory: " + directory)

    def add_reader(self, reader: Any) -> None:
        self.readers.append(reader)

    def add_processed_file(self, file_name: str, exists: bool) -> None:
        """Record a processed file; an existing record is kept."""
        self.associate_files.setdefault(file_name, exists)

    def was_processed(self, file_name: str) -> bool:
        return file_name in self.associate_files

    def print_readers(self) -> None:
        Log.write_line("All Readers: ")
        print(f"count: {len(self.readers)}")
        for reader in self.readers:
            print(f"{reader.data.file_name} ptr: {hex(id(reader))}")