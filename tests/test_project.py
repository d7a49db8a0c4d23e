"""Tests for the project model."""

from __future__ import annotations

from pathlib import Path

import pytest

from pmdscan.file_selector import SelectorConfig, SourceFileSelector
from pmdscan.project import Artifact, AttachedArtifact, Project, ProjectHelper


def test_standard_layout_defaults():
    project = Project(basedir=Path("/work/app"))
    assert project.source_directory == Path("/work/app/src/main/java")
    assert project.build_directory == Path("/work/app/target")
    assert project.reporting_output_directory == Path("/work/app/target/site")
    assert project.compile_source_roots == [Path("/work/app/src/main/java")]
    assert project.test_compile_source_roots == [Path("/work/app/src/test/java")]
    assert project.artifact.handler.language == "java"


def test_relative_paths_resolve_against_basedir():
    project = Project(
        basedir=Path("/work/app"),
        compile_source_roots=[Path("src"), Path("/abs/gen")],
        build_directory=Path("out"),
    )
    assert project.compile_source_roots == [Path("/work/app/src"), Path("/abs/gen")]
    assert project.reporting_output_directory == Path("/work/app/out/site")


def test_default_basedir_keeps_paths_relative():
    project = Project()
    assert project.compile_source_roots == [Path("src/main/java")]


def test_attach_artifact_replaces_same_classifier():
    project = Project()
    helper = ProjectHelper()
    helper.attach_artifact(project, Path("a.xml"), "component")
    helper.attach_artifact(project, Path("other.xml"), "extra")
    helper.attach_artifact(project, Path("b.xml"), "component")
    assert project.attached_artifacts == [
        AttachedArtifact(Path("other.xml"), "extra"),
        AttachedArtifact(Path("b.xml"), "component"),
    ]


def test_attach_artifact_type_defaults_to_project_artifact():
    project = Project(artifact=Artifact(type="pom"))
    helper = ProjectHelper()
    helper.attach_artifact(project, Path("a.xml"), "component")
    helper.attach_artifact(project, Path("b.xml"), "component", type="xml")
    assert project.attached_artifacts == [
        AttachedArtifact(Path("a.xml"), "component", "pom"),
        AttachedArtifact(Path("b.xml"), "component", "xml"),
    ]


def test_relative_basedir_is_joined_once():
    project = Project(basedir=Path("proj"))
    assert project.source_directory == Path("proj/src/main/java")
    assert project.compile_source_roots == [Path("proj/src/main/java")]
    assert project.test_compile_source_roots == [Path("proj/src/test/java")]
    assert project.build_directory == Path("proj/target")
    assert project.reporting_output_directory == Path("proj/target/site")


def test_relative_basedir_finds_sources(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    source = tmp_path / "proj/src/main/java/com/acme"
    source.mkdir(parents=True)
    (source / "App.java").write_text("class App {}\n")
    monkeypatch.chdir(tmp_path)

    project = Project(basedir=Path("proj"))
    selector = SourceFileSelector(SelectorConfig(main_roots=project.compile_source_roots))
    assert selector.select() == [Path("proj/src/main/java/com/acme/App.java")]
