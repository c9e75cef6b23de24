"""Types for a single game of filehunt."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from filehunt.engine.compare import Verdict
from filehunt.engine.distance import Distance

GameStatus = Literal["idle", "active", "won", "lost"]


class GuessRecord(BaseModel, frozen=True):
    """One resolved guess in the order it was made."""

    path: str
    verdict: Verdict


class GuessResult(BaseModel):
    """Outcome of checking a guess, ready for display.

    ``target`` is only filled in when the guess used up the last try.
    """

    valid: bool
    correct: bool = False
    verdict: Verdict | None = None
    distance: Distance | None = None
    error: str | None = None
    guesses_remaining: int = 0
    game_over: bool = False
    target: str | None = None
