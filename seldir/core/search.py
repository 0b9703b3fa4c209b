from __future__ import annotations

from typing import Sequence

from seldir.core.navigation import NavigationController
from seldir.services.file_listing import Entry


def find_entry(entries: Sequence[Entry], query: str) -> int | None:
    """Index of the best case-insensitive match for ``query``.

    An exact name match wins over a prefix match anywhere in the list.
    """
    needle = query.casefold()
    if not needle:
        return None
    prefix_hit: int | None = None
    for index, entry in enumerate(entries):
        name = entry.name.casefold()
        if name == needle:
            return index
        if prefix_hit is None and name.startswith(needle):
            prefix_hit = index
    return prefix_hit


class SearchEngine:
    """Jump-to search over the current pane; entries are never filtered out."""

    def __init__(self, navigation: NavigationController) -> None:
        self._navigation = navigation
        self.query = ""

    def update(self, query: str) -> bool:
        self.query = query
        return self._jump(query)

    def submit(self, query: str | None = None) -> bool:
        """Jump for ``query`` and report whether the search may close."""
        if query is not None:
            self.query = query
        if not self.query:
            return True
        matched = self._jump(self.query)
        if matched:
            self.query = ""
        return matched

    def cancel(self) -> None:
        self.query = ""

    def _jump(self, query: str) -> bool:
        index = find_entry(self._navigation.state.current.entries, query)
        if index is None:
            return False
        self._navigation.select_index(index)
        return True
