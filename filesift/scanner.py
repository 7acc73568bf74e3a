"""Recursive directory scan that lists files by stem and extension."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

from .matching import include


@dataclass(frozen=True)
class FileEntry:
    """One listed file: its name split at a dot, its size and its full path."""

    name: str
    extension: str
    size: int
    path: str

    def size_label(self) -> str:
        """Size in whole kilobytes, as ``<n>k``."""
        return f"{self.size // 1024}k"

    def output_name(self) -> str:
        """File name used when copying the entry elsewhere."""
        return f"{self.name}.{self.extension}"


def split_name(filename: str) -> list[tuple[str, str]]:
    """Every (stem, extension) split of filename at a dot, last dot first.

    A name without a dot has no split and so is never listed.
    """
    splits = [
        (filename[:pos], filename[pos + 1:])
        for pos, char in enumerate(filename)
        if char == "."
    ]
    splits.reverse()
    return splits


def _match_count(filename: str, keywords: list[str]) -> int:
    """Number of times a file is listed under the given keyword list."""
    count = 0
    position = 0
    while position < len(keywords):
        if include(filename, keywords[position]):
            count += 1
            # The keyword cursor doubles as the character cursor of the
            # name split, so after a hit it has run past the file name.
            position = len(filename)
        position += 1
    return count


def _scan(directory: str, keywords: list[str], rows: list[FileEntry]) -> None:
    index = 0
    try:
        with os.scandir(directory) as listing:
            children = sorted(listing, key=lambda child: child.name)
    except OSError:
        return
    for child in children:
        try:
            is_dir = child.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            _scan(child.path, keywords, rows)
            continue
        hits = _match_count(child.name, keywords) if keywords else 1
        if not hits:
            continue
        try:
            size = child.stat().st_size
        except OSError:
            continue
        for _ in range(hits):
            rows[index:index] = [
                FileEntry(stem, extension, size, child.path)
                for stem, extension in split_name(child.name)
            ]
            index += 1


def scan_directory(root: str | os.PathLike, keywords: Iterable[str] = ()) -> list[FileEntry]:
    """List the files under root, recursively, in display order.

    With keywords, only files whose name contains one of them are listed.
    Directories that cannot be read are passed over.
    """
    rows: list[FileEntry] = []
    _scan(os.fspath(root), list(keywords), rows)
    return rows