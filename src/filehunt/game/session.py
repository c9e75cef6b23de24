"""Game session: candidate list, current target, and guess history."""

from __future__ import annotations

import logging
import os
import random
from collections.abc import Awaitable, Callable, Sequence

from filehunt.engine.compare import compare_guesses
from filehunt.engine.distance import calculate_distance
from filehunt.engine.select import select_target_file
from filehunt.game.types import GameStatus, GuessRecord, GuessResult
from filehunt.scanner.roots import scan_known_roots
from filehunt.scanner.scanner import ProgressSink

logger = logging.getLogger(__name__)

DEFAULT_MAX_GUESSES = 10

Scanner = Callable[[ProgressSink | None], Awaitable[list[str]]]


class GameSession:
    """Holds one player's game between calls from the host.

    A game allows ``max_guesses`` wrong guesses. Finding the target wins and
    running out of guesses loses; either way the game is over until the next
    ``start()`` or ``reset()``. The candidate list survives ``reset()`` so a
    new round does not rescan.
    """

    def __init__(
        self,
        scanner: Scanner | None = None,
        rng: random.Random | None = None,
        max_guesses: int = DEFAULT_MAX_GUESSES,
    ) -> None:
        if max_guesses < 1:
            raise ValueError("max_guesses must be at least 1")
        self._scanner: Scanner = scanner or scan_known_roots
        self._rng = rng or random.Random()
        self._max_guesses = max_guesses
        self._files: list[str] = []
        self._target: str | None = None
        self._guesses: list[GuessRecord] = []
        self._status: GameStatus = "idle"

    @property
    def file_count(self) -> int:
        return len(self._files)

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def in_progress(self) -> bool:
        return self._status == "active"

    @property
    def guesses_remaining(self) -> int:
        if self._status != "active":
            return 0
        return self._max_guesses - len(self._guesses)

    @property
    def guesses(self) -> Sequence[GuessRecord]:
        return tuple(self._guesses)

    def _new_round(self) -> None:
        self._guesses = []
        self._target = select_target_file(self._files, self._rng)
        self._status = "active"

    async def start(self, on_progress: ProgressSink | None = None) -> int:
        """Scan the well-known folders and pick a new target.

        Scan failures (NoAccessibleRootsError, NoFilesFoundError) propagate
        and leave the session without a target.
        """
        self._files = []
        self._target = None
        self._guesses = []
        self._status = "idle"

        self._files = await self._scanner(on_progress)
        self._new_round()
        logger.info("New game started with %d candidate files", len(self._files))
        return len(self._files)

    async def reset(self, on_progress: ProgressSink | None = None) -> int:
        """Start a new round, rescanning only when no candidates are cached."""
        if not self._files:
            return await self.start(on_progress)

        self._new_round()
        logger.info("Game reset, reusing %d candidate files", len(self._files))
        return len(self._files)

    def reveal_target(self) -> str | None:
        return self._target

    def check_guess(self, guess_path: str) -> GuessResult:
        """Validate ``guess_path`` and score it against the target.

        Invalid paths do not use up a guess. A correct guess ends the game
        without being added to the history.
        """
        if self._status != "active" or self._target is None:
            return GuessResult(valid=False, error="No game in progress")

        guess = os.path.abspath(os.path.expanduser(guess_path))
        if not os.path.exists(guess):
            return GuessResult(
                valid=False, error="File does not exist", guesses_remaining=self.guesses_remaining
            )
        if not os.path.isfile(guess):
            return GuessResult(
                valid=False, error="Path is not a file", guesses_remaining=self.guesses_remaining
            )

        if os.path.normcase(guess) == os.path.normcase(self._target):
            self._status = "won"
            logger.info("Target found after %d wrong guesses", len(self._guesses))
            return GuessResult(valid=True, correct=True, game_over=True)

        previous = self._guesses[-1].path if self._guesses else None
        verdict = compare_guesses(guess, previous, self._target)
        self._guesses.append(GuessRecord(path=guess, verdict=verdict))

        remaining = self._max_guesses - len(self._guesses)
        lost = remaining <= 0
        if lost:
            self._status = "lost"
            logger.info("Out of guesses, target was %s", self._target)

        return GuessResult(
            valid=True,
            verdict=verdict,
            distance=calculate_distance(guess, self._target),
            guesses_remaining=max(0, remaining),
            game_over=lost,
            target=self._target if lost else None,
        )
