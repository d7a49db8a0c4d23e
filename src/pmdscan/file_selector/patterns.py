"""
Ant-style pattern lists and matching.

Files are matched segment by segment against the whole root-relative path:
`*` and `?` stay inside one segment and a `**` segment spans any number of
segments. Directory pruning uses a `pathspec` matcher built from the exclude
patterns that cover a whole subtree (`<dir>/**`).
"""

from __future__ import annotations

import fnmatch
from collections.abc import Iterable
from functools import lru_cache

import pathspec


def split_patterns(patterns: Iterable[str]) -> list[str]:
    """
    Flatten pattern entries into single patterns. Each entry may itself hold a
    comma-separated list (`"**/*.java, **/*.jav"`); blank items are dropped.
    """
    result: list[str] = []
    for entry in patterns:
        for item in entry.split(","):
            item = item.strip()
            if item:
                result.append(item)
    return result


def join_patterns(patterns: Iterable[str]) -> str:
    """Join pattern entries with commas, the way they are passed to a scanner."""
    return ",".join(patterns)


def normalize_pattern(pattern: str) -> str:
    """
    Forward slashes, no leading `./` or `/`, and a trailing `/` expanded to
    `/**` ("everything below").
    """
    p = pattern.strip().replace("\\", "/")
    while p.startswith("./"):
        p = p[2:]
    p = p.lstrip("/")
    while "//" in p:
        p = p.replace("//", "/")
    if p.endswith("/"):
        p += "**"
    return p


def to_gitignore_pattern(pattern: str) -> str:
    """
    Translate an Ant pattern into a gitignore-style line anchored at the
    scanned root. Patterns starting with `**/` already match at any depth.
    """
    p = normalize_pattern(pattern)
    if p == "**" or p.startswith("**/"):
        return p
    return "/" + p


def compile_patterns(patterns: Iterable[str]) -> pathspec.PathSpec:
    """Compile Ant patterns into a single gitignore-style `PathSpec`."""
    lines = [to_gitignore_pattern(p) for p in split_patterns(patterns)]
    return pathspec.PathSpec.from_lines("gitignore", lines)


@lru_cache(maxsize=4096)
def match_path(path: str, pattern: str) -> bool:
    """
    Match a root-relative, slash-separated path against one Ant pattern.

    The pattern must match the path itself. A pattern naming a directory does
    not match the files inside it unless it ends in `/**`.
    """
    pat_norm = normalize_pattern(pattern)
    if not pat_norm:
        return False

    path_segs = tuple(s for s in path.split("/") if s)
    pat_segs = tuple(s for s in pat_norm.split("/") if s)

    @lru_cache(maxsize=None)
    def dp(i: int, j: int) -> bool:
        if j >= len(pat_segs):
            return i >= len(path_segs)

        seg = pat_segs[j]
        if seg == "**":
            # Zero segments, or one more segment with `**` still open.
            if dp(i, j + 1):
                return True
            return i < len(path_segs) and dp(i + 1, j)

        if i >= len(path_segs):
            return False
        if not fnmatch.fnmatchcase(path_segs[i], seg):
            return False
        return dp(i + 1, j + 1)

    return dp(0, 0)


class PatternSet:
    """
    A compiled list of Ant patterns.

    `match_file` tests a file path against every pattern. `match_dir` tells
    whether a directory and everything below it is covered, so a walker can
    skip it without looking inside.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self.patterns: list[str] = [normalize_pattern(p) for p in split_patterns(patterns)]
        subtree_roots = [p[: -len("/**")] for p in self.patterns if p.endswith("/**")]
        self._subtree_spec: pathspec.PathSpec = compile_patterns(subtree_roots)

    def match_file(self, rel_path: str) -> bool:
        return any(match_path(rel_path, p) for p in self.patterns)

    def match_dir(self, rel_dir: str) -> bool:
        return self._subtree_spec.match_file(rel_dir.rstrip("/") + "/")
