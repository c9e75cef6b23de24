"""filehunt MCP server — FastMCP over stdio."""

import logging

from mcp.server.fastmcp import FastMCP

mcp = FastMCP(
    "filehunt",
    instructions="\n".join([
        "filehunt hides one random file from the user's Documents, Desktop, Downloads,",
        "Pictures, Music and Videos folders. The player guesses file paths and is told",
        "whether each guess is closer to or farther from the hidden file than the last one.",
        "",
        "Tools:",
        "- filehunt_start(): Scan the folders and hide a new file. Call once before guessing.",
        "  Each game allows 10 wrong guesses; finding the file or running out ends it.",
        "- filehunt_guess(path): Submit a guess. Same folder as the target is always closer",
        "  than a different folder; within a folder, closeness is by first letter.",
        "- filehunt_status(): Show the guesses made so far.",
        "- filehunt_reveal(): Give up and show the hidden file.",
        "- filehunt_reset(): Hide a new file, reusing the last scan.",
    ]),
)

# Tool registrations are in tools/*.py — imported below
import filehunt.tools.game  # noqa: E402, F401


def serve() -> None:
    """Start MCP server on stdio."""
    # stdout carries the MCP protocol
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    mcp.run(transport="stdio")
