"""Errors surfaced to the host when a game cannot be set up."""

from __future__ import annotations


class FilehuntError(Exception):
    """Base class for filehunt failures the host should present to the player."""

    pass


class NoAccessibleRootsError(FilehuntError):
    """None of the well-known user directories exist or can be read."""

    pass


class NoFilesFoundError(FilehuntError):
    """Scanning finished without discovering a single file."""

    pass


class EmptyCandidateSetError(FilehuntError):
    """A target was requested from an empty candidate list."""

    pass
