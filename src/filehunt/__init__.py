"""filehunt: guess the randomly chosen file on your own disk."""

from importlib.metadata import PackageNotFoundError, version

from filehunt.engine import calculate_distance, compare_guesses, select_target_file
from filehunt.errors import (
    EmptyCandidateSetError,
    FilehuntError,
    NoAccessibleRootsError,
    NoFilesFoundError,
)
from filehunt.scanner import scan_known_roots

try:
    __version__ = version("filehunt")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "EmptyCandidateSetError",
    "FilehuntError",
    "NoAccessibleRootsError",
    "NoFilesFoundError",
    "calculate_distance",
    "compare_guesses",
    "scan_known_roots",
    "select_target_file",
]


def main() -> None:
    """Entry point: run the MCP server."""
    from filehunt.server import serve

    serve()
