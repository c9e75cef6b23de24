"""Types for filesystem scanning."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

SkippedKind = Literal["directory", "entry"]


class SkippedEntry(BaseModel):
    """A directory or entry that could not be read and was left out."""

    path: str
    kind: SkippedKind
    reason: str


class ScanResult(BaseModel):
    """Files discovered by one scan, in discovery order, plus what was skipped."""

    root: str
    files: list[str] = []
    skipped: list[SkippedEntry] = []

    @property
    def root_failed(self) -> bool:
        """True when the top-level directory itself could not be listed."""
        return any(s.kind == "directory" and s.path == self.root for s in self.skipped)
