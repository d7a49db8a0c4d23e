"""Tests for CLI help text."""

from __future__ import annotations

import pytest

from pmdscan.cli import main


def _render_help(capsys: pytest.CaptureFixture[str]) -> str:
    """Run `pmdscan --help` via CLI entrypoint and return captured stdout."""
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    return capsys.readouterr().out


def test_help_includes_tagline(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "pmdscan: Source selection and report plumbing for PMD-style static analysis" in out


def test_help_includes_common_usage(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "Common usage:" in out
    assert "pmdscan --list-files" in out
    assert "pmdscan --attach-descriptor --attachment-classifier component" in out


def test_help_mentions_config_files(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "[tool.pmdscan]" in out
