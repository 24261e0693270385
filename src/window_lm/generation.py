from __future__ import annotations

import logging

from .config import validate_window_length
from .sampling import RandomSource, sample_character
from .window_table import WindowTable

logger = logging.getLogger(__name__)


def generate_text(
    table: WindowTable,
    window_length: int,
    seed_text: str,
    target_length: int,
    random_source: RandomSource,
) -> str:
    """
    Extend ``seed_text`` one sampled character at a time.

    The lookup key is the last ``window_length`` characters of the text so
    far (the whole text while it is shorter). Generation stops early, and
    returns what it has, as soon as the key was never seen in training.
    The result never exceeds ``target_length`` characters.

    Args:
        table: Finalized WindowTable
        window_length: Window length the table was trained with
        seed_text: Text to start from; always kept verbatim
        target_length: Maximum length of the result
        random_source: Source of uniform draws in [0, 1)

    Returns:
        The generated text
    """
    validate_window_length(window_length)
    if target_length < 0:
        raise ValueError(f"target_length must be >= 0, got {target_length}")

    generated = list(seed_text)
    while len(generated) < target_length:
        window = "".join(generated[-window_length:])
        entries = table.get(window)
        if not entries:
            logger.debug(f"Stopping at length {len(generated)}: window {window!r} has no observed followers")
            break
        generated.append(sample_character(entries, random_source))

    if len(generated) > target_length:
        generated = generated[:target_length]
    return "".join(generated)
