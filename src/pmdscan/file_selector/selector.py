"""
SourceFileSelector: main entry point for source file selection.

Walks the configured source roots and collects the files matching the include
patterns and none of the exclude patterns.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from pmdscan.file_selector.patterns import PatternSet
from pmdscan.file_selector.types import SelectorConfig

logger = logging.getLogger(__name__)


def _raise_walk_error(error: OSError) -> None:
    raise error


class SourceFileSelector:
    """
    Selects the source files to analyze from main (and optionally test) roots.

    Roots that are missing, are not directories, or are listed in
    `exclude_roots` are skipped silently. Read errors while walking a root
    propagate to the caller.
    """

    def __init__(self, config: SelectorConfig) -> None:
        self._config: SelectorConfig = config
        self._includes: PatternSet = PatternSet(config.effective_include)
        self._excludes: PatternSet = PatternSet(config.effective_exclude)

    @property
    def config(self) -> SelectorConfig:
        return self._config

    def select(self) -> list[Path]:
        """
        Return the selected files, root by root in configuration order.

        Each result is the root joined with the file's path relative to it.
        A file reachable from two overlapping roots is returned twice.
        """
        excluded_roots = self.excluded_root_dirs()
        logger.debug(f"Excluded files: '{self._config.exclude_pattern}'")

        files: list[Path] = []
        for raw_root in self._config.roots_to_scan:
            root = Path(raw_root)
            if not root.is_dir():
                logger.debug(f"Skipping missing source root: {root}")
                continue
            if root in excluded_roots:
                logger.debug(f"Skipping excluded source root: {root}")
                continue
            files.extend(self._walk_root(root))
        return files

    def excluded_root_dirs(self) -> list[Path]:
        """Configured `exclude_roots` that exist and are directories."""
        return [Path(p) for p in self._config.exclude_roots if Path(p).is_dir()]

    def matches(self, rel_path: str) -> bool:
        """Check a root-relative, slash-separated file path against the patterns."""
        return self._includes.match_file(rel_path) and not self._excludes.match_file(rel_path)

    def _walk_root(self, root: Path) -> Iterable[Path]:
        """
        Walk one source root in sorted order, pruning excluded directories
        in-place so they are never entered.
        """
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
            current = Path(dirpath)
            rel_dir = current.relative_to(root).as_posix()
            prefix = "" if rel_dir == "." else rel_dir + "/"

            dirnames[:] = sorted(d for d in dirnames if not self._excludes.match_dir(prefix + d))

            for filename in sorted(filenames):
                if self.matches(prefix + filename):
                    yield current / filename
