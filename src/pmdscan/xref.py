"""Links from a report's output directory to the source cross-reference."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

# Report plugins known to generate the source cross-reference.
XREF_PLUGIN_ARTIFACT_IDS: frozenset[str] = frozenset({"maven-jxr-plugin", "jxr-maven-plugin"})


def relative_xref_path(output_directory: str | Path, xref_location: str | Path) -> str:
    """
    Relative link from `output_directory` to `xref_location`, always with
    forward slashes, e.g. `./xref` or `../site/xref`.
    """
    xref = Path(xref_location).absolute()
    relative = os.path.relpath(xref.parent, Path(output_directory).absolute())
    return relative.replace(os.sep, "/") + "/" + xref.name


def construct_xref_location(
    output_directory: str | Path,
    xref_location: str | Path,
    report_plugin_ids: Iterable[str] = (),
    link_xref: bool = True,
) -> str | None:
    """
    Return the link to the cross-reference, or `None` if linking is off or
    no cross-reference will exist.

    The link is used if the cross-reference was already generated, or if a
    cross-reference report plugin is configured and will generate it.
    """
    if not link_xref:
        return None

    relative = relative_xref_path(output_directory, xref_location)
    if Path(xref_location).exists():
        return relative
    if any(plugin_id in XREF_PLUGIN_ARTIFACT_IDS for plugin_id in report_plugin_ids):
        return relative

    logger.warning("Unable to locate Source XRef to link to - DISABLED")
    return None
