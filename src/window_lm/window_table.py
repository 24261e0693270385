from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from .frequency import EntryList


class WindowTable:
    """
    Maps each observed window to the ordered list of characters that followed it.

    Windows are kept in first-observed order so the debug output is stable.
    There is no removal operation.
    """

    def __init__(self):
        self._lists: Dict[str, EntryList] = {}

    def get_or_create(self, window: str) -> EntryList:
        """Return the entry list for ``window``, creating an empty one on first access."""
        entries = self._lists.get(window)
        if entries is None:
            entries = EntryList()
            self._lists[window] = entries
        return entries

    def get(self, window: str) -> Optional[EntryList]:
        """Return the entry list for ``window`` or None if it was never observed."""
        return self._lists.get(window)

    def __contains__(self, window: str) -> bool:
        return window in self._lists

    def __len__(self) -> int:
        return len(self._lists)

    def windows(self) -> List[str]:
        return list(self._lists)

    def items(self) -> Iterator[Tuple[str, EntryList]]:
        return iter(self._lists.items())

    def merge(self, other: "WindowTable") -> None:
        """Add the counts of ``other`` to this table, keeping first-observed order."""
        for window, entries in other.items():
            target = self.get_or_create(window)
            for entry in entries:
                target.update(entry.character, entry.count)

    def describe(self) -> str:
        """One ``"<window> : <entries>"`` line per window."""
        return "".join(f"{window} : {entries}\n" for window, entries in self._lists.items())

    def __str__(self) -> str:
        return self.describe()
