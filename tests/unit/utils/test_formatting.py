"""Unit tests for console formatting helpers."""

import pytest
from rmrf.utils.formatting import format_count, print_error, print_success


class TestFormatCount:
    """Tests for format_count function."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, "0 files"), (1, "1 file"), (2, "2 files")],
    )
    def test_pluralises(self, count: int, expected: str) -> None:
        """Only a count of one uses the singular."""
        assert format_count(count, "file") == expected


class TestPrintHelpers:
    """Tests for print_* helpers."""

    def test_print_success_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Success messages go to stdout."""
        print_success("all gone")

        captured = capsys.readouterr()
        assert "all gone" in captured.out
        assert captured.err == ""

    def test_print_error_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Error messages go to stderr with a prefix."""
        print_error("it broke")

        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "it broke" in captured.err
