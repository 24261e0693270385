"""
Character sources for training.

A ``CharacterSource`` wraps any iterable of characters and offers both
Python iteration and the explicit ``is_empty`` / ``read_char`` pair. Each
source is consumed once.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .text_cleaning import CleanTextConfig, clean_text

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class CharacterSource:
    """Sequential, single-pass stream of characters."""

    def __init__(self, characters: Iterable[str]):
        self._iterator = iter(characters)
        self._pending = _EXHAUSTED
        self._advance()

    def _advance(self) -> None:
        self._pending = next(self._iterator, _EXHAUSTED)

    def is_empty(self) -> bool:
        return self._pending is _EXHAUSTED

    def read_char(self) -> str:
        """Return the next character; raises EOFError once the source is exhausted."""
        if self._pending is _EXHAUSTED:
            raise EOFError("character source is exhausted")
        c = self._pending
        self._advance()
        return c

    def __iter__(self) -> Iterator[str]:
        while not self.is_empty():
            yield self.read_char()

    @classmethod
    def from_text(cls, text: str) -> "CharacterSource":
        return cls(text)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        encoding: str = "utf-8",
        cleaning: Optional[CleanTextConfig] = None,
    ) -> "CharacterSource":
        """
        Open a text file as a character source.

        Without ``cleaning`` the file is streamed line by line; with it the
        whole file is read and cleaned up front.

        Raises:
            FileNotFoundError: If ``path`` does not exist
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"corpus file not found: {path}")

        if cleaning is not None:
            text = path.read_text(encoding=encoding)
            logger.info(f"Read {len(text)} characters from {path}")
            return cls(clean_text(text, cleaning))

        logger.info(f"Streaming characters from {path}")
        return cls(_stream_file(path, encoding))


def _stream_file(path: Path, encoding: str) -> Iterator[str]:
    # newline="" keeps line endings exactly as stored
    with open(path, "r", encoding=encoding, newline="") as f:
        for line in f:
            yield from line
