"""Distance between a guessed path and the target path.

Two modes:
  - alphabetical: both files live in the same folder (case-insensitive);
    distance is the gap between the first letters of the file names.
  - depth: different folders; distance is the gap between directory depths.
"""

from __future__ import annotations

import os
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from filehunt.engine.paths import depth_of, parent_of

class AlphabeticalDistance(BaseModel):
    """Guess and target share a folder."""

    method: Literal["alphabetical"] = "alphabetical"
    magnitude: int = Field(ge=0)
    guess_parent: str
    target_parent: str


class DepthDistance(BaseModel):
    """Guess and target live in different folders."""

    method: Literal["depth"] = "depth"
    magnitude: int = Field(ge=0)
    guess_depth: int = Field(ge=0)
    target_depth: int = Field(ge=0)


Distance = Annotated[Union[AlphabeticalDistance, DepthDistance], Field(discriminator="method")]


def _first_code_point(path: str) -> int:
    name = os.path.basename(os.path.normpath(path)).casefold()
    return ord(name[0]) if name else 0


def calculate_distance(guess: str, target: str) -> Distance:
    """Score ``guess`` against ``target``. Never raises for well-formed strings."""
    guess_parent = parent_of(guess)
    target_parent = parent_of(target)

    if guess_parent.casefold() == target_parent.casefold():
        return AlphabeticalDistance(
            magnitude=abs(_first_code_point(guess) - _first_code_point(target)),
            guess_parent=guess_parent,
            target_parent=target_parent,
        )

    guess_depth = depth_of(guess)
    target_depth = depth_of(target)
    return DepthDistance(
        magnitude=abs(guess_depth - target_depth),
        guess_depth=guess_depth,
        target_depth=target_depth,
    )
