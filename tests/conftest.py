"""Shared pytest fixtures for filehunt tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path, monkeypatch) -> Path:
    """Point the global config at an empty temp location so ~/.filehunt is never read."""
    config_path = tmp_path / "global-home" / ".filehunt" / "config.json"
    monkeypatch.setattr("filehunt.config.global_config_path", lambda: config_path)
    return config_path


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Create a temporary home directory with no well-known folders yet."""
    home = tmp_path / "home"
    home.mkdir()
    return home
