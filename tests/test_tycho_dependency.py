"""Tests for dependency entry classification."""

import logging
from pathlib import Path

import pytest

from src.tycho_dependency import TychoDependency


def test_snapshot_with_sibling_source(tmp_path: Path) -> None:
    """Verify that a sibling project maps to its compiled output directories."""
    (tmp_path / "mod-b").mkdir()
    dep = TychoDependency(tmp_path / "repo" / "mod-b-1.0.0-SNAPSHOT.jar", tmp_path)

    assert dep.list_dependencies() == [
        tmp_path / "mod-b" / "bin",
        tmp_path / "mod-b" / ".kotlin-eclipse" / "classes",
    ]


def test_snapshot_without_sibling_source(tmp_path: Path) -> None:
    """Verify that a missing sibling falls back to the artifact path."""
    jar = tmp_path / "repo" / "mod-b-1.0.0-SNAPSHOT.jar"
    dep = TychoDependency(jar, tmp_path)
    assert dep.list_dependencies() == [jar]


def test_snapshot_sibling_is_a_file(tmp_path: Path) -> None:
    """Verify that only a directory counts as a sibling source project."""
    (tmp_path / "mod-b").write_text("not a project")
    jar = tmp_path / "mod-b-1.0.0-SNAPSHOT.jar"
    assert TychoDependency(jar, tmp_path).list_dependencies() == [jar]


def test_release_artifact_unchanged(tmp_path: Path) -> None:
    """Verify that a non-SNAPSHOT artifact is returned as is."""
    (tmp_path / "libX").mkdir()
    jar = Path("/home/dev/.m2/repository/libX/2.3/libX-2.3.jar")
    assert TychoDependency(jar, tmp_path).list_dependencies() == [jar]


def test_custom_output_directories(tmp_path: Path) -> None:
    """Verify that the output directory names follow the entry settings."""
    (tmp_path / "mod-b").mkdir()
    dep = TychoDependency(
        tmp_path / "mod-b-2.0.1-SNAPSHOT.jar",
        tmp_path,
        bin_dir="target/classes",
        tooling_classes_dir=("build", "kotlin"),
    )
    assert dep.list_dependencies() == [
        tmp_path / "mod-b" / "target/classes",
        tmp_path / "mod-b" / "build" / "kotlin",
    ]


def test_classification_is_logged(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that source and jar entries are reported."""
    caplog.set_level(logging.INFO)
    (tmp_path / "mod-b").mkdir()
    TychoDependency(tmp_path / "mod-b-1.0.0-SNAPSHOT.jar", tmp_path).list_dependencies()
    TychoDependency(tmp_path / "libX-2.3.jar", tmp_path).list_dependencies()

    assert "found source entry" in caplog.text
    assert "found jar entry" in caplog.text


def test_entries_are_hashable(tmp_path: Path) -> None:
    """Verify that identical entries collapse in a set."""
    jar = tmp_path / "libX-2.3.jar"
    assert len({TychoDependency(jar, tmp_path), TychoDependency(jar, tmp_path)}) == 1


def test_str(tmp_path: Path) -> None:
    """Verify the display form of source and jar entries."""
    (tmp_path / "mod-b").mkdir()
    jar = tmp_path / "libX-2.3.jar"
    assert str(TychoDependency(jar, tmp_path)) == str(jar)
    source = TychoDependency(tmp_path / "mod-b-1.0.0-SNAPSHOT.jar", tmp_path)
    assert str(source) == "mod-b (source)"
