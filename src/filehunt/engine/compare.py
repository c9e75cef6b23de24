"""Sequential guess comparison."""

from __future__ import annotations

from typing import Literal

from filehunt.engine.distance import calculate_distance

Verdict = Literal["first", "closer", "farther", "same"]


def compare_guesses(new_guess: str, previous_guess: str | None, target: str) -> Verdict:
    """Tell whether ``new_guess`` is closer to ``target`` than ``previous_guess``.

    Distances of the same method are compared by magnitude. When the methods
    differ, the alphabetical (same-folder) guess always wins, whatever the
    magnitudes are.
    """
    if not previous_guess:
        return "first"

    new_distance = calculate_distance(new_guess, target)
    previous_distance = calculate_distance(previous_guess, target)

    if new_distance.method == previous_distance.method:
        if new_distance.magnitude < previous_distance.magnitude:
            return "closer"
        if new_distance.magnitude > previous_distance.magnitude:
            return "farther"
        return "same"

    if new_distance.method == "alphabetical":
        return "closer"
    return "farther"
