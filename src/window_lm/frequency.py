"""
Follow-character statistics for a single window.

An ``EntryList`` keeps one ``FrequencyEntry`` per distinct character seen
after a window, in the order the characters were first observed. The
cumulative probabilities are computed and read in that order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass
class FrequencyEntry:
    """
    Counts and probabilities for one follow-character.

    Attributes:
        character: The observed follow-character
        count: Number of times it followed the window
        probability: count / total count of the owning list
        cumulative_probability: Running sum of probabilities up to this entry
    """

    character: str
    count: int = 0
    probability: float = 0.0
    cumulative_probability: float = 0.0

    def __str__(self) -> str:
        return f"({self.character} {self.count} {self.probability} {self.cumulative_probability})"


class EntryList:
    """Insertion-ordered list of FrequencyEntry objects with distinct characters."""

    def __init__(self):
        self._entries: List[FrequencyEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FrequencyEntry]:
        return iter(self._entries)

    def __contains__(self, character: str) -> bool:
        return self.index_of(character) != -1

    def __str__(self) -> str:
        return "(" + " ".join(str(entry) for entry in self._entries) + ")"

    def __repr__(self) -> str:
        return f"EntryList{self}"

    def index_of(self, character: str) -> int:
        """Return the position of ``character`` in the list, or -1."""
        for i, entry in enumerate(self._entries):
            if entry.character == character:
                return i
        return -1

    def find(self, character: str) -> Optional[FrequencyEntry]:
        i = self.index_of(character)
        return self._entries[i] if i != -1 else None

    def get(self, index: int) -> FrequencyEntry:
        """Return the entry at ``index``; negative indices are not accepted."""
        if index < 0 or index >= len(self._entries):
            raise IndexError(f"entry index {index} out of range for list of size {len(self._entries)}")
        return self._entries[index]

    def update(self, character: str, count: int = 1) -> FrequencyEntry:
        """
        Record ``count`` more observations of ``character``.

        A character seen for the first time is appended with that count.

        Returns:
            The updated entry
        """
        entry = self.find(character)
        if entry is None:
            entry = FrequencyEntry(character)
            self._entries.append(entry)
        entry.count += count
        return entry

    def total_count(self) -> int:
        return sum(entry.count for entry in self._entries)

    def characters(self) -> List[str]:
        return [entry.character for entry in self._entries]
