"""Configuration types for source file selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pmdscan.file_selector.defaults import DEFAULT_EXCLUDES, DEFAULT_EXTENSION, default_include
from pmdscan.file_selector.patterns import join_patterns, split_patterns


@dataclass
class SelectorConfig:
    """
    Configuration for source file selection.

    `includes=[]` means use `**/*.<extension>`. `DEFAULT_EXCLUDES` are always
    appended to `excludes`; they cannot be replaced. Test roots are scanned
    only when `include_tests` is set.
    """

    main_roots: list[str | Path] = field(default_factory=list)
    test_roots: list[str | Path] = field(default_factory=list)
    exclude_roots: list[str | Path] = field(default_factory=list)
    includes: list[str] = field(default_factory=list)
    excludes: list[str] = field(default_factory=list)
    include_tests: bool = False
    extension: str = DEFAULT_EXTENSION

    def __post_init__(self) -> None:
        self.extension = self.extension.strip().lstrip(".")
        if not self.extension:
            raise ValueError("File extension must not be empty")

    @property
    def include_pattern(self) -> str:
        """Comma-joined includes, or the default `**/*.<extension>` when empty."""
        including = join_patterns(self.includes)
        if not including:
            including = default_include(self.extension)
        return including

    @property
    def exclude_pattern(self) -> str:
        """Comma-joined excludes followed by all default excludes."""
        excluding = join_patterns(self.excludes)
        defaults = join_patterns(DEFAULT_EXCLUDES)
        return f"{excluding},{defaults}" if excluding else defaults

    @property
    def effective_include(self) -> list[str]:
        return split_patterns([self.include_pattern])

    @property
    def effective_exclude(self) -> list[str]:
        return split_patterns([self.exclude_pattern])

    @property
    def roots_to_scan(self) -> list[str | Path]:
        """Main roots, then test roots if `include_tests` is set."""
        if self.include_tests:
            return list(self.main_roots) + list(self.test_roots)
        return list(self.main_roots)
