"""filehunt_* tools — play a game through the MCP server."""

from __future__ import annotations

import logging

from filehunt.errors import FilehuntError
from filehunt.game.session import GameSession
from filehunt.game.types import GuessResult
from filehunt.server import mcp

logger = logging.getLogger(__name__)

_session = GameSession()

_FEEDBACK = {
    "first": "First guess!",
    "closer": "Closer!",
    "farther": "Farther!",
    "same": "Same distance",
}


def _log_progress(label: str, count: int) -> None:
    logger.debug("scan: %s (%d files)", label, count)


def format_guess_result(result: GuessResult) -> str:
    if not result.valid:
        return f"Invalid guess: {result.error}"
    if result.correct:
        return "You found it!"

    lines = [_FEEDBACK[result.verdict or "first"]]
    distance = result.distance
    if distance is not None and distance.method == "alphabetical":
        lines.append(f"Same folder as the target (letter distance: {distance.magnitude})")
    elif distance is not None:
        lines.append(
            f"Different folder (depth {distance.guess_depth} vs target depth "
            f"{distance.target_depth}, difference: {distance.magnitude})"
        )
    if result.game_over:
        lines.append(f"Out of guesses! The hidden file was: {result.target}")
    else:
        lines.append(f"Guesses remaining: {result.guesses_remaining}")
    return "\n".join(lines)


@mcp.tool()
async def filehunt_start() -> str:
    """Scan the well-known user folders and hide a new random file."""
    try:
        count = await _session.start(_log_progress)
    except FilehuntError as e:
        return f"Could not start a game: {e}"
    return f"Game started. Hidden one file among {count} candidates."


@mcp.tool()
async def filehunt_guess(path: str) -> str:
    """Guess the hidden file by absolute path."""
    return format_guess_result(_session.check_guess(path))


@mcp.tool()
async def filehunt_status() -> str:
    """List the guesses made in the current game."""
    status = _session.status
    if status == "idle":
        return "No game in progress. Call filehunt_start() first."
    if status == "won":
        header = "Game won! Call filehunt_reset() to play again."
    elif status == "lost":
        header = f"Game lost. The hidden file was: {_session.reveal_target()}"
    else:
        header = (
            f"Game in progress ({_session.file_count} candidates). "
            f"Guesses remaining: {_session.guesses_remaining}"
        )
    guesses = _session.guesses
    if not guesses:
        return f"{header}\nNo guesses yet."
    lines = [header, "Guesses:"]
    for i, record in enumerate(guesses, 1):
        lines.append(f"{i}. {record.path}: {_FEEDBACK[record.verdict]}")
    return "\n".join(lines)


@mcp.tool()
async def filehunt_reveal() -> str:
    """Give up and show the hidden file."""
    target = _session.reveal_target()
    if target is None:
        return "No game in progress."
    return f"The hidden file was: {target}"


@mcp.tool()
async def filehunt_reset() -> str:
    """Hide a new file, reusing the previous scan when possible."""
    try:
        count = await _session.reset(_log_progress)
    except FilehuntError as e:
        return f"Could not reset the game: {e}"
    return f"New game started. Hidden one file among {count} candidates."
