"""Tests for the references folder scanner."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from reference_tree.components.scanner import scan_references
from reference_tree.errors import ReferencesDirectoryNotFoundError


def touch(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).write_text(f"# {name}\n", encoding="utf-8")


class TestScanReferences:
    def test_sorted_by_name(self, tmp_path: Path):
        touch(tmp_path, "zeta.md", "alpha.md", "mid.md")
        assert [s.name for s in scan_references(tmp_path)] == ["alpha.md", "mid.md", "zeta.md"]

    def test_sorted_regardless_of_listing_order(self, tmp_path: Path):
        touch(tmp_path, "b.md", "a.md", "c.md")

        with patch("reference_tree.components.scanner.os.listdir", return_value=["c.md", "a.md", "b.md"]):
            names = [s.name for s in scan_references(tmp_path)]

        assert names == ["a.md", "b.md", "c.md"]

    def test_filters_extension(self, tmp_path: Path):
        touch(tmp_path, "guide.md", "notes.txt", "README", "image.png")
        assert [s.name for s in scan_references(tmp_path)] == ["guide.md"]

    def test_custom_extension(self, tmp_path: Path):
        touch(tmp_path, "guide.md", "notes.txt")
        assert [s.name for s in scan_references(tmp_path, ".txt")] == ["notes.txt"]

    def test_skips_subdirectories(self, tmp_path: Path):
        touch(tmp_path, "top.md")
        (tmp_path / "nested.md").mkdir()
        touch(tmp_path / "nested.md", "inner.md")

        assert [s.name for s in scan_references(tmp_path)] == ["top.md"]

    def test_paths_point_into_directory(self, tmp_path: Path):
        touch(tmp_path, "alpha.md")
        (source,) = scan_references(tmp_path)
        assert source.path == tmp_path / "alpha.md"

    def test_empty_directory(self, tmp_path: Path):
        assert scan_references(tmp_path) == []

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(ReferencesDirectoryNotFoundError, match="References directory not found"):
            scan_references(tmp_path / "references")

    def test_file_instead_of_directory(self, tmp_path: Path):
        target = tmp_path / "references"
        target.write_text("not a folder", encoding="utf-8")
        with pytest.raises(ReferencesDirectoryNotFoundError):
            scan_references(target)

    def test_accepts_str(self, tmp_path: Path):
        touch(tmp_path, "alpha.md")
        assert len(scan_references(os.fspath(tmp_path))) == 1
