from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Iterable

from seldir.services.file_listing import Entry


class PaneId(Enum):
    PREVIOUS = "previous"
    CURRENT = "current"
    NEXT = "next"


class PaneModel:
    """Ordered entries of one column plus its selection cursor.

    ``selected_index`` is ``None`` whenever the pane is empty. A non-empty pane
    may also carry ``None`` after a refresh could not re-find the entry that
    was selected before; callers never get a guessed replacement.
    """

    def __init__(self, pane_id: PaneId, entries: Iterable[Entry] = ()) -> None:
        self.pane_id = pane_id
        self._entries: tuple[Entry, ...] = tuple(entries)
        self._selected_index: int | None = None

    def __repr__(self) -> str:
        return (
            f"PaneModel({self.pane_id.value}, entries={len(self._entries)}, "
            f"selected={self._selected_index})"
        )

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._entries

    @property
    def selected_index(self) -> int | None:
        return self._selected_index

    @property
    def selected(self) -> Entry | None:
        if self._selected_index is None:
            return None
        return self._entries[self._selected_index]

    @property
    def is_empty(self) -> bool:
        return not self._entries

    @property
    def position(self) -> tuple[int, int] | None:
        """1-based position of the selection and the entry count."""
        if self._selected_index is None:
            return None
        return self._selected_index + 1, len(self._entries)

    def set_entries(self, entries: Iterable[Entry]) -> None:
        self._entries = tuple(entries)
        self._selected_index = None

    def clear(self) -> None:
        self.set_entries(())

    def select_index(self, index: int) -> None:
        if 0 <= index < len(self._entries):
            self._selected_index = index

    def select_first(self) -> None:
        self.select_index(0)

    def select_last(self) -> None:
        self.select_index(len(self._entries) - 1)

    def select_matching(self, predicate: Callable[[Entry], bool]) -> bool:
        for index, entry in enumerate(self._entries):
            if predicate(entry):
                self._selected_index = index
                return True
        self._selected_index = None
        return False

    def select_path(self, path: Path | None) -> bool:
        if path is None:
            self._selected_index = None
            return False
        return self.select_matching(lambda entry: entry.path == path)

    def move_selection(self, delta: int) -> None:
        if not self._entries:
            return
        last = len(self._entries) - 1
        if self._selected_index is None:
            self._selected_index = 0 if delta >= 0 else last
            return
        self._selected_index = max(0, min(last, self._selected_index + delta))
