"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, object]], Path]:
    """Build a directory tree under tmp_path from a nested dict.

    String values become files with that content, dict values become
    directories. Returns the root the tree was created in.
    """

    def _build(layout: dict[str, object], root: Path | None = None) -> Path:
        base = root or tmp_path
        for name, value in layout.items():
            node = base / name
            if isinstance(value, dict):
                node.mkdir()
                _build(value, node)
            else:
                node.write_text(str(value))
        return base

    return _build


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home
