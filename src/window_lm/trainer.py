from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Optional

from .config import validate_window_length
from .window_table import WindowTable

logger = logging.getLogger(__name__)


def train_windows(
    characters: Iterable[str],
    window_length: int,
    *,
    table: Optional[WindowTable] = None,
) -> WindowTable:
    """
    Count which character follows each window of ``window_length`` characters.

    The stream is read once, left to right. The first ``window_length``
    characters only fill the window; every later character is counted
    against the current window and then slides into it. Streams shorter
    than ``window_length + 1`` leave the table empty.

    Args:
        characters: Any iterable of single characters (str, CharacterSource, ...)
        window_length: Size of the context window
        table: Existing table to add counts to (a new one by default)

    Returns:
        The populated WindowTable (probabilities not yet computed)
    """
    validate_window_length(window_length)
    table = table if table is not None else WindowTable()

    window = deque(maxlen=window_length)
    consumed = 0
    recorded = 0

    for c in characters:
        if len(c) != 1:
            raise ValueError(f"expected single characters, got {c!r}")
        consumed += 1

        if len(window) < window_length:
            window.append(c)
            continue

        table.get_or_create("".join(window)).update(c)
        recorded += 1
        # maxlen drops the oldest character
        window.append(c)

    logger.debug(
        f"Consumed {consumed} characters, recorded {recorded} transitions "
        f"over {len(table)} windows"
    )
    return table
