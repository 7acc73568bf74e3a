"""State of one find-and-copy session: keywords, found files, checks and copy log."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from typing import Iterable

from .scanner import FileEntry, scan_directory


@dataclass(frozen=True)
class CopyResult:
    """Outcome of copying one file."""

    source: str
    destination: str
    success: bool

    @property
    def status(self) -> str:
        return "copied" if self.success else "failed"


class Session:
    """Keywords, the files a query found, which of them are checked, and copy results."""

    def __init__(self) -> None:
        self.keywords: list[str] = []
        self.entries: list[FileEntry] = []
        self.copy_log: list[CopyResult] = []
        self._checked: set[int] = set()

    def add_keyword(self, keyword: str) -> None:
        """Add a keyword; after the first, new keywords go in second place."""
        self.keywords.insert(1, keyword)

    def remove_keywords(self, indices: Iterable[int]) -> None:
        """Remove the keywords at the given positions."""
        doomed = set(indices)
        for index in doomed:
            if not 0 <= index < len(self.keywords):
                raise IndexError(f"no keyword at position {index}")
        self.keywords = [kw for pos, kw in enumerate(self.keywords) if pos not in doomed]

    def query(self, root: str | os.PathLike) -> list[FileEntry]:
        """Replace the found files with a fresh scan of root."""
        self.entries = []
        self._checked = set()
        if os.fspath(root) == "":
            raise ValueError("no input folder selected")
        self.entries = scan_directory(root, self.keywords)
        return self.entries

    def _require(self, index: int) -> None:
        if not 0 <= index < len(self.entries):
            raise IndexError(f"no entry at position {index}")

    def select_all(self) -> None:
        self._checked = set(range(len(self.entries)))

    def invert_selection(self) -> None:
        self._checked = set(range(len(self.entries))) - self._checked

    def clear_selection(self) -> None:
        self._checked = set()

    def set_checked(self, index: int, checked: bool) -> None:
        self._require(index)
        if checked:
            self._checked.add(index)
        else:
            self._checked.discard(index)

    def checked_entries(self) -> list[FileEntry]:
        return [entry for pos, entry in enumerate(self.entries) if pos in self._checked]

    def copy_checked(self, output_dir: str | os.PathLike) -> list[CopyResult]:
        """Copy every checked file into output_dir, overwriting existing files.

        Returns this run's results in the order processed; the session's
        copy log keeps all results, newest first.
        """
        if os.fspath(output_dir) == "":
            raise ValueError("no output folder selected")
        results = []
        for entry in self.checked_entries():
            destination = os.path.join(output_dir, entry.output_name())
            try:
                shutil.copy2(entry.path, destination)
                success = True
            except OSError:
                success = False
            result = CopyResult(entry.path, destination, success)
            results.append(result)
            self.copy_log.insert(0, result)
        return results