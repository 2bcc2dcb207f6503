"""Source file enumeration under a project's source directories."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Union

from ..logging_config import get_logger

logger = get_logger(__name__)


def _raise(error: OSError) -> None:
    raise error


class SourceScanner:
    """Find source files, honoring exclude-directory and exclude-file lists.

    Exclusions are exact: a file is dropped when its containing directory
    equals an exclude-dir entry, or its full path equals an exclude-file
    entry. Subdirectories of an excluded directory are still scanned.
    """

    def __init__(
        self,
        exclude_dirs: Iterable[str] = (),
        exclude_files: Iterable[str] = (),
        extension: str = ".elm",
        follow_symlinks: bool = False,
    ):
        self.exclude_dirs = frozenset(os.path.normpath(d) for d in exclude_dirs)
        self.exclude_files = frozenset(os.path.normpath(f) for f in exclude_files)
        self.extension = extension
        self.follow_symlinks = follow_symlinks

    def find_all_files(self, source_dirs: Iterable[Union[str, Path]]) -> list[str]:
        """Return the sorted, deduplicated source files under ``source_dirs``.

        A directory that cannot be scanned is logged and contributes no
        files; the remaining directories are still scanned.
        """
        files: set[str] = set()
        for source_dir in source_dirs:
            files.update(self._files_in(os.path.normpath(str(source_dir))))
        return sorted(files)

    def _files_in(self, source_dir: str) -> list[str]:
        found: list[str] = []
        skipped = 0

        try:
            for dirpath, _dirnames, filenames in os.walk(
                source_dir, onerror=_raise, followlinks=self.follow_symlinks
            ):
                for filename in filenames:
                    if not filename.endswith(self.extension):
                        continue
                    filepath = os.path.join(dirpath, filename)
                    if dirpath in self.exclude_dirs or filepath in self.exclude_files:
                        skipped += 1
                        logger.debug(f"Skipped (excluded): {filepath}")
                        continue
                    found.append(filepath)
        except OSError as e:
            logger.warning(f"Cannot scan source directory {source_dir}: {e}")
            return []

        logger.debug(f"Scanned {source_dir}: {len(found)} files, {skipped} excluded")
        return found
