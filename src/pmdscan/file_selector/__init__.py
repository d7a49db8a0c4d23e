"""
Source file selection over main and test source roots with Ant-style
include/exclude patterns.

Usage::

    from pmdscan.file_selector import SelectorConfig, SourceFileSelector

    config = SelectorConfig(
        main_roots=["src/main/java"],
        test_roots=["src/test/java"],
        excludes=["**/generated/**"],
        include_tests=True,
    )
    files = SourceFileSelector(config).select()
"""

from pmdscan.file_selector.defaults import DEFAULT_EXCLUDES, DEFAULT_EXTENSION, default_include
from pmdscan.file_selector.selector import SourceFileSelector
from pmdscan.file_selector.types import SelectorConfig

__all__ = [
    "DEFAULT_EXCLUDES",
    "DEFAULT_EXTENSION",
    "SelectorConfig",
    "SourceFileSelector",
    "default_include",
]
