"""
Default include and exclude patterns for source file selection.

These patterns use Ant syntax, relative to the scanned source root.
"""

from __future__ import annotations

DEFAULT_EXTENSION: str = "java"

# Always appended to the user's excludes, whatever they configure.
DEFAULT_EXCLUDES: list[str] = [
    # Editor and merge leftovers
    "**/*~",
    "**/#*#",
    "**/.#*",
    "**/%*%",
    "**/._*",
    # CVS
    "**/CVS",
    "**/CVS/**",
    "**/.cvsignore",
    # Subversion
    "**/.svn",
    "**/.svn/**",
    # Arch
    "**/.arch-ids",
    "**/.arch-ids/**",
    # Bazaar
    "**/.bzr",
    "**/.bzr/**",
    # SurroundSCM
    "**/.MySCMServerInfo",
    # Mac
    "**/.DS_Store",
    # Serena Dimensions
    "**/.metadata",
    "**/.metadata/**",
    # Mercurial
    "**/.hg",
    "**/.hg/**",
    # Git
    "**/.git",
    "**/.git/**",
    "**/.gitignore",
    "**/.gitattributes",
    # BitKeeper
    "**/BitKeeper",
    "**/BitKeeper/**",
    "**/ChangeSet",
    "**/ChangeSet/**",
    # darcs
    "**/_darcs",
    "**/_darcs/**",
    "**/.darcsrepo",
    "**/.darcsrepo/**",
    "**/-darcs-backup*",
    "**/.darcs-temp-mail",
]


def default_include(extension: str = DEFAULT_EXTENSION) -> str:
    """The include pattern used when none is configured, e.g. `**/*.java`."""
    return f"**/*.{extension}"
