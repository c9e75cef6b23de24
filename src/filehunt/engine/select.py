"""Random target selection."""

from __future__ import annotations

import random
from collections.abc import Sequence

from filehunt.errors import EmptyCandidateSetError


def select_target_file(candidates: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick one candidate uniformly at random.

    Pass a seeded ``random.Random`` to make the pick reproducible.
    """
    if not candidates:
        raise EmptyCandidateSetError("No files available to select as target")
    generator = rng or random.Random()
    return candidates[generator.randrange(len(candidates))]
