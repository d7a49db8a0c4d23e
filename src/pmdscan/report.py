"""
Base class for PMD-style reports.

A report gathers the source files to analyze, works out where the source
cross-reference lives, and leaves analysis and rendering to subclasses and
the site renderer.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol

from pmdscan.file_selector import DEFAULT_EXTENSION, SelectorConfig, SourceFileSelector
from pmdscan.project import Project
from pmdscan.xref import construct_xref_location

logger = logging.getLogger(__name__)

REPORT_LANGUAGE = "java"


class ReportFormat(str, Enum):
    """Output formats produced in addition to the HTML report."""

    none = "none"
    csv = "csv"
    xml = "xml"
    txt = "txt"
    html = "html"


class SiteRenderer(Protocol):
    """Renders a report's content into the project site."""

    def render(self, report_name: str, content: str, output_path: Path) -> None: ...


@dataclass
class AbstractPmdReport(ABC):
    """
    Report parameters and shared behavior.

    Directory and source-root parameters left as `None` are taken from the
    project. `format` is a `ReportFormat` name or the full class name of an
    external renderer, which is passed through untouched.
    """

    project: Project
    target_directory: Path | None = None
    output_directory: Path | None = None
    site_renderer: SiteRenderer | None = None
    format: str = ReportFormat.xml.value
    link_xref: bool = True
    xref_location: Path | None = None
    includes: list[str] = field(default_factory=list)
    excludes: list[str] = field(default_factory=list)
    compile_source_roots: list[Path] | None = None
    test_source_roots: list[Path] | None = None
    exclude_roots: list[Path] = field(default_factory=list)
    include_tests: bool = False
    extension: str = DEFAULT_EXTENSION

    def __post_init__(self) -> None:
        if self.target_directory is None:
            self.target_directory = self.project.build_directory
        if self.output_directory is None:
            self.output_directory = self.project.reporting_output_directory
        if self.xref_location is None:
            assert self.output_directory is not None
            self.xref_location = Path(self.output_directory) / "xref"
        if self.compile_source_roots is None:
            self.compile_source_roots = list(self.project.compile_source_roots or [])
        if self.test_source_roots is None:
            self.test_source_roots = list(self.project.test_compile_source_roots or [])

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable report name."""

    @abstractmethod
    def get_description(self) -> str: ...

    @abstractmethod
    def get_output_name(self) -> str:
        """Base name of the report page, without extension."""

    @abstractmethod
    def execute_report(self) -> None:
        """Run the analysis and render the report."""

    def get_project(self) -> Project:
        return self.project

    def get_site_renderer(self) -> SiteRenderer | None:
        return self.site_renderer

    def get_output_directory(self) -> Path:
        assert self.output_directory is not None
        return Path(self.output_directory)

    @property
    def report_format(self) -> ReportFormat | None:
        """The known format, or `None` when `format` names a renderer class."""
        try:
            return ReportFormat(self.format)
        except ValueError:
            return None

    def is_html(self) -> bool:
        return self.format == ReportFormat.html.value

    def construct_xref_location(self) -> str | None:
        """Relative link to the source cross-reference, or `None` if disabled."""
        assert self.xref_location is not None
        return construct_xref_location(
            self.get_output_directory(),
            self.xref_location,
            [plugin.artifact_id for plugin in self.project.report_plugins],
            link_xref=self.link_xref,
        )

    def selector_config(self) -> SelectorConfig:
        return SelectorConfig(
            main_roots=list(self.compile_source_roots or []),
            test_roots=list(self.test_source_roots or []),
            exclude_roots=list(self.exclude_roots),
            includes=list(self.includes),
            excludes=list(self.excludes),
            include_tests=self.include_tests,
            extension=self.extension,
        )

    def get_files_to_process(self) -> list[Path]:
        """The source files the analysis will run on."""
        return SourceFileSelector(self.selector_config()).select()

    def can_generate_report(self) -> bool:
        """
        Reports apply only to Java projects whose source directory exists.
        Callers skip the report otherwise.
        """
        language = self.project.artifact.handler.language
        source_directory = self.project.source_directory
        return (
            language == REPORT_LANGUAGE
            and source_directory is not None
            and Path(source_directory).exists()
        )

    def generate(self) -> bool:
        """Execute the report if it applies. Returns whether it ran."""
        if not self.can_generate_report():
            logger.info(f"Skipping {self.get_name()}: no {REPORT_LANGUAGE} sources to analyze")
            return False
        self.execute_report()
        return True
