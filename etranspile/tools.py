"""Text helpers and the diagnostic logger."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from etranspile.model import FileData


def trim_text(text: str, separators: Iterable[str]) -> list[str]:
    """Split ``text`` on any of the separator characters, dropping empty pieces."""
    seps = set(separators)
    pieces: list[str] = []
    current: list[str] = []
    for char in text:
        if char in seps:
            if current:
                pieces.append("".join(current))
                current.clear()
        else:
            current.append(char)
    if current:
        pieces.append("".join(current))
    return pieces


def contains(items: Iterable[str], item: str) -> bool:
    """Return whether ``item`` occurs in ``items``."""
    return item in items


@dataclass
class Log:
    """Prints messages and diagnostics tied to a file and its current line."""

    parent: FileData = field(default_factory=FileData)
    hide_error: bool = False
    hide_warning: bool = False
    hide_suggest: bool = False
    hide_info: bool = False

    @staticmethod
    def write(message: str) -> None:
        print(message, end=" ")

    @staticmethod
    def write_line(message: str) -> None:
        print(message)

    def _report(self, kind: str, message: str, details: str) -> None:
        print()
        print(f"{kind}: {self.parent.file_name} Line: {self.parent.current_line}")
        print(message)
        if details:
            print(details)

    def err(self, message: str, details: str = "") -> None:
        if not self.hide_error:
            self._report("error", message, details)

    def warn(self, message: str, details: str = "") -> None:
        if not self.hide_warning:
            self._report("warning", message, details)

    def suggest(self, message: str, details: str = "") -> None:
        if not self.hide_suggest:
            self._report("suggestion", message, details)

    def info(self, message: str, details: str = "") -> None:
        if not self.hide_info:
            self._report("info", message, details)