"""Bounded depth-first directory scan that collects regular files."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from filehunt.config import DEFAULT_SKIP_DIRS
from filehunt.scanner.types import ScanResult, SkippedEntry

logger = logging.getLogger(__name__)

ProgressSink = Callable[[str, int], None]

DEFAULT_MAX_DEPTH = 10
DEFAULT_MAX_FILES = 20_000
DEFAULT_PROGRESS_BATCH = 5


@dataclass
class _ScanState:
    """Accumulator handed down each recursive step and handed back."""

    files: list[str] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)


@dataclass(frozen=True)
class _Limits:
    max_depth: int
    max_files: int
    skip_names: frozenset[str]
    progress_batch: int
    on_progress: ProgressSink | None


def notify(sink: ProgressSink | None, label: str, count: int) -> None:
    """Call the progress sink; a failing sink never interrupts a scan."""
    if sink is None:
        return
    try:
        sink(label, count)
    except Exception:
        logger.debug("Progress sink failed for %s", label, exc_info=True)


def _list_dir(path: str) -> list[os.DirEntry]:
    with os.scandir(path) as it:
        return list(it)


async def _walk(path: str, depth: int, state: _ScanState, limits: _Limits) -> _ScanState:
    if depth >= limits.max_depth or len(state.files) >= limits.max_files:
        return state

    if depth == 0:
        notify(limits.on_progress, path, len(state.files))

    try:
        entries = await asyncio.to_thread(_list_dir, path)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", path, exc)
        state.skipped.append(SkippedEntry(path=path, kind="directory", reason=str(exc)))
        return state

    for entry in entries:
        if len(state.files) >= limits.max_files:
            break

        try:
            is_file = entry.is_file(follow_symlinks=False)
            is_dir = not is_file and entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            logger.debug("Skipping unreadable entry %s: %s", entry.path, exc)
            state.skipped.append(SkippedEntry(path=entry.path, kind="entry", reason=str(exc)))
            continue

        if is_file:
            state.files.append(entry.path)
            count = len(state.files)
            if count % limits.progress_batch == 0 or depth == 0:
                notify(limits.on_progress, entry.path, count)
        elif is_dir and entry.name not in limits.skip_names:
            state = await _walk(entry.path, depth + 1, state, limits)

    return state


async def scan_directory(
    root: str | os.PathLike[str],
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_files: int = DEFAULT_MAX_FILES,
    skip_names: Iterable[str] | None = None,
    on_progress: ProgressSink | None = None,
    progress_batch: int = DEFAULT_PROGRESS_BATCH,
) -> ScanResult:
    """Collect regular files under ``root``.

    Descends at most ``max_depth`` levels (the root itself is level 0) and
    stops once ``max_files`` files have been collected across the whole tree.
    Directories named in ``skip_names`` are never entered. Directories or
    entries that cannot be read are recorded in ``ScanResult.skipped`` and the
    scan carries on.

    ``on_progress(label, count)`` is called when the root is entered, for
    every file found directly in the root, and for every ``progress_batch``-th
    file below it.
    """
    root_path = os.path.abspath(os.fspath(root))
    limits = _Limits(
        max_depth=max_depth,
        max_files=max_files,
        skip_names=frozenset(DEFAULT_SKIP_DIRS if skip_names is None else skip_names),
        progress_batch=max(1, progress_batch),
        on_progress=on_progress,
    )

    state = await _walk(root_path, 0, _ScanState(), limits)
    logger.debug(
        "Scanned %s: %d files, %d skipped", root_path, len(state.files), len(state.skipped)
    )
    return ScanResult(root=root_path, files=state.files, skipped=state.skipped)
