"""Directory scanning for aggregated imports."""

from __future__ import annotations

import os
from typing import Callable, Iterable, List, Sequence, Tuple

from .config import DEFAULT_EXTENSIONS
from .logging import get_logger

Segments = Tuple[str, ...]


class DirectoryScanner:
    """Lists modules below a directory as extension-less path segments.

    Entries keep the order the listing function returns them in. When
    recursing, the matching files of a directory come before the contents of
    its subdirectories. Filesystem errors are not caught: a directory that
    vanishes or cannot be read aborts the scan.
    """

    def __init__(self, list_entries: Callable[[str], Iterable[str]] | None = None) -> None:
        self._list_entries = list_entries or os.listdir
        self.logger = get_logger("scanner")

    def scan(
        self,
        root: str,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        recursive: bool = False,
    ) -> List[Segments]:
        files: List[Segments] = []
        self._scan_into(root, tuple(extensions), recursive, (), files)
        self.logger.debug("Scanned %s: %d module(s)", root, len(files))
        return files

    def _scan_into(
        self,
        directory: str,
        extensions: Tuple[str, ...],
        recursive: bool,
        prefix: Segments,
        files: List[Segments],
    ) -> None:
        subdirectories: List[Tuple[str, Segments]] = []
        for entry in self._list_entries(directory):
            name, ext = os.path.splitext(entry)
            if ext in extensions:
                files.append(prefix + (name,))
                continue
            if not recursive:
                continue
            full_path = os.path.join(directory, entry)
            if os.path.isdir(full_path):
                subdirectories.append((full_path, prefix + (entry,)))

        for full_path, segments in subdirectories:
            self._scan_into(full_path, extensions, recursive, segments, files)


__all__ = ["DirectoryScanner", "Segments"]
