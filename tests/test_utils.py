"""Tests for size helpers."""
from __future__ import annotations

from svgoexport.utils import calculate_compression_ratio, folder_svg_size, format_size


class TestFormatSize:
    def test_bytes(self):
        assert format_size(512) == "512 B"

    def test_kilobytes(self):
        assert format_size(1536) == "1.5 KB"

    def test_megabytes(self):
        assert format_size(5 * 1024 * 1024) == "5.00 MB"


class TestCompressionRatio:
    def test_reduction(self):
        assert calculate_compression_ratio(1000, 250) == 0.75

    def test_empty_original(self):
        assert calculate_compression_ratio(0, 0) == 0.0


class TestFolderSvgSize:
    def test_counts_only_top_level_svgs(self, tmp_path):
        (tmp_path / "a.svg").write_bytes(b"x" * 10)
        (tmp_path / "B.SVG").write_bytes(b"x" * 5)
        (tmp_path / "c.png").write_bytes(b"x" * 100)
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "d.svg").write_bytes(b"x" * 1000)

        assert folder_svg_size(tmp_path) == 15

    def test_missing_folder(self, tmp_path):
        assert folder_svg_size(tmp_path / "missing") == 0
