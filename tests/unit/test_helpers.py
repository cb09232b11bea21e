"""Unit tests for shared utility functions."""

import pytest

from suffixpy.processing import write_results
from suffixpy.utils import expand_file_path, format_time

# pylint: disable=missing-function-docstring


class TestFormatTime:
    """Test format_time rendering."""

    def test_milliseconds(self) -> None:
        assert format_time(0.25) == "250.0ms"

    def test_seconds(self) -> None:
        assert format_time(2.5) == "2.50s"

    def test_minutes(self) -> None:
        assert format_time(90) == "1m 30.0s"


class TestExpandFilePath:
    """Test expand_file_path behavior."""

    def test_none_stays_none(self) -> None:
        assert expand_file_path(None) is None

    def test_expands_home_directory(self) -> None:
        assert not expand_file_path("~/words.txt").startswith("~")


class TestWriteResults:
    """Test write_results output handling."""

    def test_creates_parent_directories(self, tmp_path) -> None:
        target = tmp_path / "nested" / "out.txt"
        write_results(["done"], str(target))
        assert target.read_text(encoding="utf-8") == "done\n"

    def test_writes_one_line_per_result(self, tmp_path) -> None:
        target = tmp_path / "out.txt"
        write_results(["a", "", "b"], str(target))
        assert target.read_text(encoding="utf-8") == "a\n\nb\n"

    def test_prints_to_stdout_without_path(self, capsys) -> None:
        write_results(["x"], None)
        assert capsys.readouterr().out == "x\n"

    def test_unwritable_path_raises(self, tmp_path) -> None:
        """When the parent path is a file, the OS error propagates."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(OSError):
            write_results(["x"], str(blocker / "out.txt"))
