"""Scan the user's well-known folders (Documents, Desktop, ...) under one global cap."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from filehunt.config import FilehuntConfig, load_config
from filehunt.errors import NoAccessibleRootsError, NoFilesFoundError
from filehunt.scanner.scanner import ProgressSink, notify, scan_directory

logger = logging.getLogger(__name__)


def resolve_home() -> Path:
    """Home directory, or the filesystem root when none can be determined."""
    try:
        return Path.home()
    except RuntimeError:
        return Path(os.path.abspath(os.sep))


def accessible_roots(home: Path, names: list[str]) -> list[Path]:
    """Existing, readable directories among ``home / name`` for each name."""
    roots: list[Path] = []
    for name in names:
        candidate = home / name
        try:
            if candidate.is_dir() and os.access(candidate, os.R_OK | os.X_OK):
                roots.append(candidate)
        except OSError:
            logger.debug("Cannot access %s", candidate, exc_info=True)
    return roots


async def scan_known_roots(
    on_progress: ProgressSink | None = None,
    *,
    home: Path | None = None,
    config: FilehuntConfig | None = None,
) -> list[str]:
    """Build the candidate list from the well-known user folders.

    Roots are scanned in order; each one gets whatever is left of the global
    file cap, and scanning stops once the cap is reached.

    Raises:
        NoAccessibleRootsError: none of the folders exist or are readable.
        NoFilesFoundError: every folder was scanned and no file was found.
    """
    scan_conf = (config or load_config()).scan
    roots = accessible_roots(home or resolve_home(), scan_conf.roots)

    if not roots:
        raise NoAccessibleRootsError("No accessible directories found")

    all_files: list[str] = []
    seen: set[str] = set()
    total = len(roots)

    for i, root in enumerate(roots):
        notify(on_progress, f"Scanning {root.name}... ({i + 1}/{total})", len(all_files))

        if len(all_files) >= scan_conf.max_total_files:
            break

        result = await scan_directory(
            root,
            max_depth=scan_conf.max_depth,
            max_files=scan_conf.max_total_files - len(all_files),
            skip_names=scan_conf.skip_dirs,
            on_progress=on_progress,
            progress_batch=scan_conf.progress_batch,
        )

        if result.root_failed:
            logger.info("Skipped %s: directory could not be listed", root)
            notify(on_progress, f"Skipped {root.name} (access denied)", len(all_files))
            continue

        for path in result.files:
            if path not in seen:
                seen.add(path)
                all_files.append(path)

        if result.skipped:
            logger.debug("%s: %d unreadable entries skipped", root, len(result.skipped))
        notify(
            on_progress,
            f"Completed {root.name} - Found {len(result.files)} files",
            len(all_files),
        )

    if not all_files:
        raise NoFilesFoundError("No files found in any accessible directories")

    logger.info("Collected %d candidate files from %d folders", len(all_files), total)
    return all_files
