"""
The build project model read by reports and tasks.

Paths default to the standard layout under `basedir` (`src/main/java`,
`src/test/java`, `target`, `target/site`). Relative paths are resolved
against `basedir`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ArtifactHandler:
    """How an artifact type is built; `language` is what reports check."""

    language: str = "java"
    extension: str = "jar"


@dataclass
class Artifact:
    group_id: str = "unknown"
    artifact_id: str = "unknown"
    version: str = "0.0.0"
    type: str = "jar"
    handler: ArtifactHandler = field(default_factory=ArtifactHandler)
    file: Path | None = None


@dataclass(frozen=True)
class AttachedArtifact:
    """A secondary file published alongside the main artifact."""

    file: Path
    classifier: str
    type: str = "jar"


@dataclass(frozen=True)
class ReportPlugin:
    artifact_id: str
    group_id: str | None = None


@dataclass
class Project:
    basedir: Path = field(default_factory=lambda: Path("."))
    artifact: Artifact = field(default_factory=Artifact)
    compile_source_roots: list[Path] | None = None
    test_compile_source_roots: list[Path] | None = None
    source_directory: Path | None = None
    build_directory: Path | None = None
    reporting_output_directory: Path | None = None
    report_plugins: list[ReportPlugin] = field(default_factory=list)
    attached_artifacts: list[AttachedArtifact] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Defaults are filled in relative to basedir first, then joined once.
        self.basedir = Path(self.basedir)
        if self.source_directory is None:
            self.source_directory = Path("src/main/java")
        if self.build_directory is None:
            self.build_directory = Path("target")
        if self.reporting_output_directory is None:
            self.reporting_output_directory = Path(self.build_directory) / "site"
        if self.compile_source_roots is None:
            self.compile_source_roots = [self.source_directory]
        if self.test_compile_source_roots is None:
            self.test_compile_source_roots = [Path("src/test/java")]

        self.source_directory = self.basedir / self.source_directory
        self.build_directory = self.basedir / self.build_directory
        self.reporting_output_directory = self.basedir / self.reporting_output_directory
        self.compile_source_roots = [self.basedir / p for p in self.compile_source_roots]
        self.test_compile_source_roots = [self.basedir / p for p in self.test_compile_source_roots]


class ProjectHelper:
    """Registers secondary artifacts on a project."""

    def attach_artifact(
        self, project: Project, file: Path, classifier: str, type: str | None = None
    ) -> AttachedArtifact:
        """
        Attach `file` to the project under `classifier`. The type defaults to
        the project artifact's type. An earlier attachment with the same
        classifier and type is replaced.
        """
        if type is None:
            type = project.artifact.type
        attached = AttachedArtifact(file=Path(file), classifier=classifier, type=type)
        project.attached_artifacts = [
            a
            for a in project.attached_artifacts
            if (a.classifier, a.type) != (attached.classifier, attached.type)
        ]
        project.attached_artifacts.append(attached)
        return attached
