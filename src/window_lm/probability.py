"""
Turns raw follow-character counts into probabilities.

For each list the probability of an entry is its count over the list's
total count, and the cumulative probability is the running sum of those
probabilities in list order. The running sum is left as accumulated, so
the last value is 1.0 only up to rounding error.
"""

from __future__ import annotations

import logging

import numpy as np

from .exceptions import EmptyDistributionError
from .frequency import EntryList
from .window_table import WindowTable

logger = logging.getLogger(__name__)


def calculate_probabilities(entries: EntryList) -> None:
    """Set ``probability`` and ``cumulative_probability`` on every entry in place."""
    counts = np.fromiter((entry.count for entry in entries), dtype=np.int64, count=len(entries))
    total_count = int(counts.sum())
    if total_count <= 0:
        raise EmptyDistributionError(
            f"cannot compute probabilities for a list with total count {total_count}"
        )

    probabilities = counts / total_count
    # cumsum adds left to right, matching a plain running total
    cumulative = np.cumsum(probabilities)

    for entry, p, cp in zip(entries, probabilities, cumulative):
        entry.probability = float(p)
        entry.cumulative_probability = float(cp)


def finalize_table(table: WindowTable) -> None:
    """Compute probabilities for every list in ``table``."""
    for _, entries in table.items():
        calculate_probabilities(entries)
    logger.debug(f"Finalized probabilities for {len(table)} windows")
