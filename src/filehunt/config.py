"""Configuration loader for filehunt.

Config priority: project > global > defaults.
All fields optional (zero-config).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_SUBDIR = ".filehunt"

DEFAULT_SKIP_DIRS = [
    "$Recycle.Bin",
    "System Volume Information",
    "Windows",
    "node_modules",
    ".git",
]

DEFAULT_ROOTS = ["Documents", "Desktop", "Downloads", "Pictures", "Music", "Videos"]


class ScanConfig(BaseModel):
    """Limits and filters for building the candidate list."""

    max_depth: int = Field(default=7, ge=1)
    max_total_files: int = Field(default=20_000, ge=1)
    progress_batch: int = Field(default=5, ge=1)
    skip_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_SKIP_DIRS))
    roots: list[str] = Field(default_factory=lambda: list(DEFAULT_ROOTS))


class FilehuntConfig(BaseModel):
    """filehunt configuration with sensible defaults."""

    scan: ScanConfig = Field(default_factory=ScanConfig)


def global_config_path() -> Path:
    return Path.home() / CONFIG_SUBDIR / "config.json"


def _load_json_file(path: Path) -> dict:
    """Load a JSON config file, returning empty dict on any error."""
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        logger.debug("Ignoring unreadable config %s", path, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def _merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(project_root: str | None = None) -> FilehuntConfig:
    """Load config with priority: project > global > defaults."""
    global_conf = _load_json_file(global_config_path())

    project_conf: dict = {}
    if project_root:
        project_conf = _load_json_file(Path(project_root) / CONFIG_SUBDIR / "config.json")

    merged = _merge(global_conf, project_conf)
    try:
        return FilehuntConfig(**merged)
    except ValidationError:
        logger.warning("Invalid filehunt config, falling back to defaults", exc_info=True)
        return FilehuntConfig()
