"""Pure game engine: path helpers, distance metric, guess comparison, target selection."""

from filehunt.engine.compare import Verdict, compare_guesses
from filehunt.engine.distance import AlphabeticalDistance, DepthDistance, Distance, calculate_distance
from filehunt.engine.paths import depth_of, parent_of
from filehunt.engine.select import select_target_file

__all__ = [
    "AlphabeticalDistance",
    "DepthDistance",
    "Distance",
    "Verdict",
    "calculate_distance",
    "compare_guesses",
    "depth_of",
    "parent_of",
    "select_target_file",
]
