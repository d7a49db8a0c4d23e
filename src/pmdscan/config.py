"""
Project settings read from TOML.

A project keeps its settings in `.pmdscan.toml`, `pmdscan.toml`, or the
`[tool.pmdscan]` table of `pyproject.toml`, in the project directory or any
directory above it. Paths in the file are relative to the file's directory.
Flags given on the command line win over the file.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, TypeVar, cast

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]


@dataclass
class PmdscanConfig:
    """
    Settings from a config file. `None` marks a key the file does not set,
    so built-in defaults still apply to it.
    """

    # Project
    compile_source_roots: list[str] | None = None
    test_source_roots: list[str] | None = None
    source_directory: str | None = None
    build_directory: str | None = None
    language: str | None = None
    report_plugins: list[str] | None = None
    # Report
    output_directory: str | None = None
    format: str | None = None
    link_xref: bool | None = None
    xref_location: str | None = None
    # File selection
    includes: list[str] | None = None
    excludes: list[str] | None = None
    exclude_roots: list[str] | None = None
    include_tests: bool | None = None
    extension: str | None = None
    # Component descriptor
    component_descriptor: str | None = None
    attachment_classifier: str | None = None


_CONFIG_FILENAMES = (".pmdscan.toml", "pmdscan.toml", "pyproject.toml")

# Short or Maven-style spellings; other keys only swap `-` for `_`.
_KEY_ALIASES: dict[str, str] = {
    "source-roots": "compile_source_roots",
    "test-roots": "test_source_roots",
    "include": "includes",
    "exclude": "excludes",
    "link-xref": "link_xref",
    "linkXRef": "link_xref",
    "xref": "xref_location",
}

_VALID_FIELDS = {f.name for f in fields(PmdscanConfig)}


def find_config_file(start_dir: Path) -> Path | None:
    """
    The nearest config file at or above `start_dir`, or `None`.

    Within one directory the dedicated files are preferred, and a
    `pyproject.toml` counts only when it has a `[tool.pmdscan]` table.
    """
    start = start_dir.resolve()
    for directory in (start, *start.parents):
        for filename in _CONFIG_FILENAMES:
            candidate = directory / filename
            if not candidate.is_file():
                continue
            if filename != "pyproject.toml" or _has_tool_table(candidate):
                return candidate
    return None


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text())
    except (tomllib.TOMLDecodeError, OSError):
        return False
    return "pmdscan" in data.get("tool", {})


def load_config(config_path: Path) -> PmdscanConfig:
    """Read `config_path`. Malformed TOML raises `tomllib.TOMLDecodeError`."""
    data = tomllib.loads(config_path.read_text())
    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("pmdscan", {})
    return _parse_config_data(data)


def _parse_config_data(data: dict[str, Any]) -> PmdscanConfig:
    # [project], [report] and [files] tables are optional groupings.
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            flat.update(cast(dict[str, Any], value))
        else:
            flat[key] = value

    settings: dict[str, Any] = {}
    for key, value in flat.items():
        name = _KEY_ALIASES.get(key, key.replace("-", "_"))
        if name in _VALID_FIELDS:
            settings[name] = value
    return PmdscanConfig(**settings)


_T = TypeVar("_T")


def merge_cli_with_config(
    cli_opts: _T,
    config: PmdscanConfig | None,
    explicit_flags: set[str],
) -> _T:
    """
    Copy the settings `config` defines onto `cli_opts`, except for options
    named in `explicit_flags`, which were given on the command line.
    """
    if config is None:
        return cli_opts

    for cfg_field in fields(PmdscanConfig):
        name = cfg_field.name
        value = getattr(config, name)
        if value is None or name in explicit_flags or not hasattr(cli_opts, name):
            continue
        setattr(cli_opts, name, value)

    return cli_opts


_PATH_FIELDS = (
    "source_directory",
    "build_directory",
    "output_directory",
    "xref_location",
    "component_descriptor",
)
_PATH_LIST_FIELDS = ("compile_source_roots", "test_source_roots", "exclude_roots")


def resolve_config_paths(config: PmdscanConfig, basedir: Path) -> PmdscanConfig:
    """Return a copy of `config` with its paths resolved against `basedir`."""
    updates: dict[str, Any] = {}
    for name in _PATH_FIELDS:
        value = getattr(config, name)
        if value is not None:
            updates[name] = str(basedir / value)
    for name in _PATH_LIST_FIELDS:
        values = getattr(config, name)
        if values is not None:
            updates[name] = [str(basedir / v) for v in values]
    return replace(config, **updates)
