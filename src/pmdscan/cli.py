#!/usr/bin/env python3
"""
pmdscan: Source selection and report plumbing for PMD-style static analysis

Common usage:
  pmdscan --list-files
  pmdscan --list-files src/main/java src/generated/java
  pmdscan --list-files --include-tests --exclude '**/generated/**'
  pmdscan --xref --output-directory target/site
  pmdscan --attach-descriptor --attachment-classifier component

Settings are read from `.pmdscan.toml`, `pmdscan.toml` or `[tool.pmdscan]` in
`pyproject.toml`; command-line flags take precedence.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from strif import atomic_output_file

from pmdscan.attach import DEFAULT_COMPONENT_DESCRIPTOR, AttachComponentDescriptor
from pmdscan.config import (
    find_config_file,
    load_config,
    merge_cli_with_config,
    resolve_config_paths,
)
from pmdscan.file_selector import DEFAULT_EXTENSION
from pmdscan.project import Artifact, ArtifactHandler, Project, ProjectHelper, ReportPlugin
from pmdscan.report import AbstractPmdReport, ReportFormat


@dataclass
class Options:
    """Command-line options for the pmdscan tool."""

    # Project
    compile_source_roots: list[str]
    test_source_roots: list[str] | None
    source_directory: str | None
    build_directory: str | None
    language: str | None
    report_plugins: list[str]
    # Report
    output_directory: str | None
    format: str
    link_xref: bool
    xref_location: str | None
    # File selection
    includes: list[str]
    excludes: list[str]
    exclude_roots: list[str]
    include_tests: bool
    extension: str
    # Component descriptor
    component_descriptor: str | None
    attachment_classifier: str | None
    # Actions
    list_files: bool
    xref: bool
    can_generate: bool
    attach: bool
    output: str
    verbose: bool
    version: bool


def _absolute(path: str | None) -> str | None:
    """Make a command-line path absolute against the current directory."""
    return str(Path(path).absolute()) if path else None


def _absolute_all(paths: list[str]) -> list[str]:
    return [str(Path(p).absolute()) for p in paths]


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns a tuple of (options, explicit_flags) where `explicit_flags` tracks
    which flags the user explicitly passed (for config merge precedence).
    """
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="pmdscan",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "roots",
        nargs="*",
        type=str,
        default=[],
        help="Main source roots (default: the project's source roots, src/main/java)",
    )
    parser.add_argument(
        "--test-root",
        action="append",
        dest="test_roots",
        default=None,
        metavar="DIR",
        help="Test source root (default: src/test/java). Can be repeated",
    )
    parser.add_argument(
        "--exclude-root",
        action="append",
        dest="exclude_roots",
        default=[],
        metavar="DIR",
        help="Source root to skip entirely. Can be repeated",
    )
    parser.add_argument(
        "--include",
        action="append",
        dest="includes",
        default=[],
        metavar="PATTERN",
        help="Ant-style pattern of files to check (default: **/*.java). Can be repeated",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        dest="excludes",
        default=[],
        metavar="PATTERN",
        help="Ant-style pattern of files to skip, in addition to the default excludes. "
        "Can be repeated",
    )
    parser.add_argument(
        "--include-tests",
        action="store_true",
        dest="include_tests",
        help="Also check the test source roots",
    )
    parser.add_argument(
        "--extension",
        type=str,
        default=DEFAULT_EXTENSION,
        help="Source file extension for the default include pattern (default: %(default)s)",
    )
    parser.add_argument(
        "--format",
        type=str,
        default=ReportFormat.xml.value,
        help="Report output format: none, csv, xml, txt, html, or a renderer class name "
        "(default: %(default)s)",
    )
    parser.add_argument(
        "--output-directory",
        type=str,
        dest="output_directory",
        metavar="DIR",
        help="Report output directory (default: target/site)",
    )
    parser.add_argument(
        "--xref-location",
        type=str,
        dest="xref_location",
        metavar="DIR",
        help="Location of the source cross-reference (default: <output-directory>/xref)",
    )
    parser.add_argument(
        "--no-link-xref",
        action="store_true",
        dest="no_link_xref",
        help="Do not link report line numbers to the source cross-reference",
    )
    parser.add_argument(
        "--xref-plugin",
        action="append",
        dest="report_plugins",
        default=[],
        metavar="ARTIFACT_ID",
        help="Report plugin configured for the project (e.g. maven-jxr-plugin). Can be repeated",
    )
    parser.add_argument(
        "--component-descriptor",
        type=str,
        dest="component_descriptor",
        metavar="FILE",
        help=f"Component descriptor to attach (default: {DEFAULT_COMPONENT_DESCRIPTOR})",
    )
    parser.add_argument(
        "--attachment-classifier",
        type=str,
        dest="attachment_classifier",
        metavar="CLASSIFIER",
        help="Attach the descriptor under this classifier instead of making it the artifact file",
    )
    parser.add_argument(
        "--list-files",
        action="store_true",
        dest="list_files",
        help="Print the source files selected for analysis",
    )
    parser.add_argument(
        "--xref",
        action="store_true",
        help="Print the relative link to the source cross-reference",
    )
    parser.add_argument(
        "--can-generate",
        action="store_true",
        dest="can_generate",
        help="Print whether a report can be generated for the project",
    )
    parser.add_argument(
        "--attach-descriptor",
        action="store_true",
        dest="attach",
        help="Attach the component descriptor to the project artifact and print the result",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="-",
        help="Output file for --list-files (use '-' for stdout)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    # Re-parse with sentinel defaults to detect which flags were actually supplied.
    # append actions use None as sentinel (argparse creates a list when the flag is used).
    _SENTINEL = object()
    _tracked_flags: dict[str, str] = {
        # argparse dest name -> Options field name
        "test_roots": "test_source_roots",
        "exclude_roots": "exclude_roots",
        "includes": "includes",
        "excludes": "excludes",
        "include_tests": "include_tests",
        "extension": "extension",
        "format": "format",
        "output_directory": "output_directory",
        "xref_location": "xref_location",
        "no_link_xref": "link_xref",
        "report_plugins": "report_plugins",
        "component_descriptor": "component_descriptor",
        "attachment_classifier": "attachment_classifier",
    }
    _append_flags = {"test_roots", "exclude_roots", "includes", "excludes", "report_plugins"}
    # allow_abbrev=False keeps e.g. `--xref` from being read as `--xref-location`.
    sentinel_parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    sentinel_parser.add_argument("--test-root", dest="test_roots", action="append", default=None)
    sentinel_parser.add_argument(
        "--exclude-root", dest="exclude_roots", action="append", default=None
    )
    sentinel_parser.add_argument("--include", dest="includes", action="append", default=None)
    sentinel_parser.add_argument("--exclude", dest="excludes", action="append", default=None)
    sentinel_parser.add_argument(
        "--include-tests", dest="include_tests", action="store_true", default=_SENTINEL
    )
    sentinel_parser.add_argument("--extension", default=_SENTINEL)
    sentinel_parser.add_argument("--format", default=_SENTINEL)
    sentinel_parser.add_argument("--output-directory", dest="output_directory", default=_SENTINEL)
    sentinel_parser.add_argument("--xref-location", dest="xref_location", default=_SENTINEL)
    sentinel_parser.add_argument(
        "--no-link-xref", dest="no_link_xref", action="store_true", default=_SENTINEL
    )
    sentinel_parser.add_argument(
        "--xref-plugin", dest="report_plugins", action="append", default=None
    )
    sentinel_parser.add_argument(
        "--component-descriptor", dest="component_descriptor", default=_SENTINEL
    )
    sentinel_parser.add_argument(
        "--attachment-classifier", dest="attachment_classifier", default=_SENTINEL
    )
    sentinel_opts, _ = sentinel_parser.parse_known_args(args if args is not None else sys.argv[1:])

    explicit_flags: set[str] = set()
    if opts.roots:
        explicit_flags.add("compile_source_roots")
    for dest_name, field_name in _tracked_flags.items():
        val = getattr(sentinel_opts, dest_name, _SENTINEL)
        if dest_name in _append_flags:
            if val is not None:
                explicit_flags.add(field_name)
        elif val is not _SENTINEL:
            explicit_flags.add(field_name)

    return (
        Options(
            compile_source_roots=_absolute_all(opts.roots),
            test_source_roots=_absolute_all(opts.test_roots) if opts.test_roots else None,
            source_directory=None,
            build_directory=None,
            language=None,
            report_plugins=opts.report_plugins,
            output_directory=_absolute(opts.output_directory),
            format=opts.format,
            link_xref=not opts.no_link_xref,
            xref_location=_absolute(opts.xref_location),
            includes=opts.includes,
            excludes=opts.excludes,
            exclude_roots=_absolute_all(opts.exclude_roots),
            include_tests=opts.include_tests,
            extension=opts.extension,
            component_descriptor=_absolute(opts.component_descriptor),
            attachment_classifier=opts.attachment_classifier,
            list_files=opts.list_files,
            xref=opts.xref,
            can_generate=opts.can_generate,
            attach=opts.attach,
            output=opts.output,
            verbose=opts.verbose,
            version=opts.version,
        ),
        explicit_flags,
    )


def _setup_logging(verbose: bool) -> None:
    """Send pmdscan log records to stderr; debug level with `--verbose`."""
    logger = logging.getLogger("pmdscan")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(console)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


class _ListingReport(AbstractPmdReport):
    """Writes the files a PMD run would analyze, one per line."""

    output: str = "-"

    def get_name(self) -> str:
        return "PMD file listing"

    def get_description(self) -> str:
        return "Source files selected for PMD analysis."

    def get_output_name(self) -> str:
        return "pmd-files"

    def execute_report(self) -> None:
        lines = "".join(f"{path}\n" for path in self.get_files_to_process())
        if self.output == "-":
            sys.stdout.write(lines)
        else:
            with atomic_output_file(self.output, make_parents=True) as tmp_path:
                Path(tmp_path).write_text(lines)


def _build_project(options: Options, basedir: Path) -> Project:
    handler = ArtifactHandler(language=options.language) if options.language else ArtifactHandler()

    def _paths(values: list[str] | None) -> list[Path] | None:
        return [Path(v) for v in values] if values else None

    return Project(
        basedir=basedir,
        artifact=Artifact(handler=handler),
        compile_source_roots=_paths(options.compile_source_roots),
        test_compile_source_roots=_paths(options.test_source_roots),
        source_directory=Path(options.source_directory) if options.source_directory else None,
        build_directory=Path(options.build_directory) if options.build_directory else None,
        reporting_output_directory=(
            Path(options.output_directory) if options.output_directory else None
        ),
        report_plugins=[ReportPlugin(artifact_id=a) for a in options.report_plugins],
    )


def _build_report(options: Options, project: Project) -> _ListingReport:
    report = _ListingReport(
        project=project,
        format=options.format,
        link_xref=options.link_xref,
        xref_location=Path(options.xref_location) if options.xref_location else None,
        includes=options.includes,
        excludes=options.excludes,
        exclude_roots=[Path(p) for p in options.exclude_roots],
        include_tests=options.include_tests,
        extension=options.extension,
    )
    report.output = options.output
    return report


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the pmdscan CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)
    _setup_logging(options.verbose)

    if options.version:
        try:
            version = importlib.metadata.version("pmdscan")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if not (options.list_files or options.xref or options.can_generate or options.attach):
        print(
            "Error: No action specified. Use --list-files, --xref, --can-generate or"
            " --attach-descriptor (see --help).",
            file=sys.stderr,
        )
        return 1

    try:
        cwd = Path.cwd()
        basedir = cwd
        config_path = find_config_file(cwd)
        if config_path:
            # Config paths are relative to the config file's directory
            basedir = config_path.parent
            config = resolve_config_paths(load_config(config_path), basedir)
            merge_cli_with_config(options, config, explicit_flags)

        project = _build_project(options, basedir)
        report = _build_report(options, project)

        if options.can_generate:
            print("true" if report.can_generate_report() else "false")

        if options.xref:
            location = report.construct_xref_location()
            if location is not None:
                print(location)

        if options.list_files:
            report.execute_report()

        if options.attach:
            AttachComponentDescriptor(
                project=project,
                project_helper=ProjectHelper(),
                component_descriptor=(
                    Path(options.component_descriptor)
                    if options.component_descriptor
                    else basedir / DEFAULT_COMPONENT_DESCRIPTOR
                ),
                attachment_classifier=options.attachment_classifier,
            ).execute()
            if project.artifact.file is not None:
                print(f"artifact: {project.artifact.file}")
            for attached in project.attached_artifacts:
                print(f"attached: {attached.classifier} {attached.file}")
    except ValueError as e:
        # Invalid settings, like an empty extension or malformed TOML.
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        # Unreadable source roots and other file errors.
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
