"""Unit tests for directory listing."""

import asyncio
from pathlib import Path

import pytest
from rmrf.deletion.errors import DeletionIOError, PathNotFoundError, PathPermissionError
from rmrf.deletion.lister import list_entries

from tests.unit.deletion.fakes import RecordingBackend


class TestListEntries:
    """Tests for list_entries coroutine."""

    def test_lists_immediate_children(self, tmp_path: Path) -> None:
        """Only direct children are returned, as bare names."""
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "nested.txt").write_text("n")

        entries = asyncio.run(list_entries(tmp_path))

        assert isinstance(entries, tuple)
        assert sorted(entries) == ["a.txt", "sub"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        """An empty directory yields an empty tuple."""
        assert asyncio.run(list_entries(tmp_path)) == ()

    def test_preserves_backend_order(self, tmp_path: Path) -> None:
        """Entries come back in the order the backend produced them."""
        for name in ["c", "a", "b"]:
            (tmp_path / name).write_text(name)

        entries = asyncio.run(list_entries(tmp_path, RecordingBackend()))

        assert entries == ("a", "b", "c")

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Listing a vanished directory raises PathNotFoundError."""
        with pytest.raises(PathNotFoundError):
            asyncio.run(list_entries(tmp_path / "gone"))

    def test_not_a_directory(self, tmp_path: Path) -> None:
        """Listing a file raises DeletionIOError."""
        target = tmp_path / "file.txt"
        target.write_text("x")

        with pytest.raises(DeletionIOError):
            asyncio.run(list_entries(target))

    def test_permission_denied(self, tmp_path: Path) -> None:
        """An unreadable directory raises PathPermissionError."""
        backend = RecordingBackend()
        backend.fail("listdir", tmp_path, PermissionError(13, "Permission denied"))

        with pytest.raises(PathPermissionError) as exc_info:
            asyncio.run(list_entries(tmp_path, backend))

        assert exc_info.value.path == str(tmp_path)
