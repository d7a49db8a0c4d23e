"""Tests for cross-reference link resolution."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pmdscan.xref import construct_xref_location, relative_xref_path


def test_relative_xref_path_inside_output_directory(tmp_path: Path):
    site = tmp_path / "site"
    assert relative_xref_path(site, site / "xref") == "./xref"


def test_relative_xref_path_sibling_directory(tmp_path: Path):
    assert relative_xref_path(tmp_path / "site/pmd", tmp_path / "site/xref") == "../xref"


def test_relative_xref_path_relative_inputs(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    assert relative_xref_path("target/site", "target/site/xref-test") == "./xref-test"


def test_existing_xref_is_linked(tmp_path: Path):
    xref = tmp_path / "site" / "xref"
    xref.mkdir(parents=True)
    assert construct_xref_location(tmp_path / "site", xref) == "./xref"


@pytest.mark.parametrize("plugin_id", ["maven-jxr-plugin", "jxr-maven-plugin"])
def test_configured_xref_plugin_is_linked(tmp_path: Path, plugin_id: str):
    site = tmp_path / "site"
    location = construct_xref_location(site, site / "xref", ["maven-pmd-plugin", plugin_id])
    assert location == "./xref"


def test_missing_xref_disables_link_with_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
):
    caplog.set_level(logging.WARNING, logger="pmdscan")
    site = tmp_path / "site"
    assert construct_xref_location(site, site / "xref", ["maven-javadoc-plugin"]) is None
    assert "Unable to locate Source XRef to link to - DISABLED" in caplog.text


def test_link_xref_off(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.WARNING, logger="pmdscan")
    xref = tmp_path / "xref"
    xref.mkdir()
    assert construct_xref_location(tmp_path, xref, link_xref=False) is None
    assert caplog.text == ""
