from __future__ import annotations

from typing import Optional, Protocol

import numpy as np

from .exceptions import EmptyDistributionError
from .frequency import EntryList


class RandomSource(Protocol):
    """Anything that returns uniform floats in [0, 1) from ``random()``.

    ``numpy.random.Generator`` satisfies this.
    """

    def random(self) -> float:
        ...


def make_random_source(seed: Optional[int] = None) -> np.random.Generator:
    """Seeded sources repeat the same draws; ``seed=None`` draws fresh OS entropy."""
    return np.random.default_rng(seed)


def sample_character(entries: EntryList, random_source: RandomSource) -> str:
    """
    Draw one character from a finalized entry list by inverse-CDF sampling.

    Returns the character of the first entry whose cumulative probability
    exceeds the draw. If rounding left the last cumulative value below the
    draw, the last entry's character is returned.
    """
    if len(entries) == 0:
        raise EmptyDistributionError("cannot sample from an empty entry list")

    r = float(random_source.random())
    last = None
    for entry in entries:
        if entry.cumulative_probability > r:
            return entry.character
        last = entry
    return last.character
