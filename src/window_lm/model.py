"""
Character-level sliding-window language model.

Training counts, for every window of ``window_length`` consecutive
characters in a corpus, which characters follow it. Generation extends a
seed text by repeatedly sampling the next character from the counts of
the text's trailing window.

Usage:
    model = LanguageModel(window_length=3, seed=20)
    model.train_file("corpus.txt")
    print(model.generate("The", 200))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from .config import ModelConfig, validate_window_length
from .frequency import EntryList
from .generation import generate_text
from .probability import calculate_probabilities, finalize_table
from .sampling import RandomSource, make_random_source, sample_character
from .sources import CharacterSource
from .text_cleaning import CleanTextConfig
from .trainer import train_windows
from .window_table import WindowTable

logger = logging.getLogger(__name__)


class LanguageModel:
    """
    Learns follow-character distributions per window and samples text from them.

    Attributes:
        window_length: Number of preceding characters used as context
        table: WindowTable holding all training statistics
    """

    def __init__(
        self,
        window_length: int,
        seed: Optional[int] = None,
        random_source: Optional[RandomSource] = None,
    ):
        """
        Args:
            window_length: Context size, a positive integer
            seed: Makes generation repeatable; ignored if random_source is given
            random_source: Object providing ``random()`` draws in [0, 1)

        Raises:
            InvalidConfigurationError: If window_length is not a positive integer
        """
        self.window_length = validate_window_length(window_length)
        self.table = WindowTable()
        self._random = random_source if random_source is not None else make_random_source(seed)

    @classmethod
    def from_config(cls, config: ModelConfig) -> "LanguageModel":
        return cls(config.window_length, seed=config.seed)

    def train(self, source: Iterable[str]) -> None:
        """
        Count every window/follower pair in ``source``, then compute probabilities.

        The model is left unchanged if reading ``source`` fails.
        """
        counted = train_windows(source, self.window_length)
        self.table.merge(counted)
        finalize_table(self.table)
        logger.info(f"Trained window-{self.window_length} model: {len(self.table)} windows")

    def train_file(
        self,
        path: str | Path,
        encoding: str = "utf-8",
        cleaning: Optional[CleanTextConfig] = None,
    ) -> None:
        self.train(CharacterSource.from_file(path, encoding=encoding, cleaning=cleaning))

    def calculate_probabilities(self, entries: EntryList) -> None:
        calculate_probabilities(entries)

    def get_random_char(self, entries: EntryList) -> str:
        return sample_character(entries, self._random)

    def generate(self, initial_text: str, text_length: int) -> str:
        """
        Generate text starting from ``initial_text``.

        If the trailing window of ``initial_text`` was never observed in
        training, ``initial_text`` is returned unchanged.

        Args:
            initial_text: Text to start with
            text_length: Maximum length of the returned text

        Returns:
            Text of at most ``text_length`` characters
        """
        return generate_text(self.table, self.window_length, initial_text, text_length, self._random)

    def __str__(self) -> str:
        return self.table.describe()

    def __repr__(self) -> str:
        return f"LanguageModel(window_length={self.window_length}, windows={len(self.table)})"
