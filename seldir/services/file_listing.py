from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from seldir.core.logging import get_logger

logger = get_logger(__name__)


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"
    UNREADABLE = "unreadable"


@dataclass(frozen=True)
class Entry:
    path: Path
    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


def _classify(entry: os.DirEntry[str]) -> EntryKind | None:
    try:
        stat_result = entry.stat(follow_symlinks=False)
    except OSError:
        return None
    mode = stat_result.st_mode
    if stat.S_ISLNK(mode):
        return None
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.UNREADABLE


def _sort_key(item: Entry) -> tuple[int, str]:
    return (0 if item.is_dir else 1, item.name)


def is_entry_visible(name: str, *, show_hidden: bool) -> bool:
    return show_hidden or not name.startswith(".")


def list_directory(directory: Path, show_hidden: bool = False) -> list[Entry]:
    """Return the visible children of ``directory`` in display order.

    Directories come first, then everything else, each group ordered by name
    codepoints. Symlinks and entries whose metadata cannot be read are left
    out. An unreadable directory lists as empty.
    """
    rows: list[Entry] = []
    try:
        with os.scandir(directory) as scan:
            for item in scan:
                if not is_entry_visible(item.name, show_hidden=show_hidden):
                    continue
                kind = _classify(item)
                if kind is None:
                    continue
                rows.append(Entry(path=directory / item.name, name=item.name, kind=kind))
    except OSError as exc:
        logger.debug("Unable to list %s: %s", directory, exc)
        return []
    rows.sort(key=_sort_key)
    return rows


def is_listable(directory: Path) -> bool:
    try:
        with os.scandir(directory):
            return True
    except OSError:
        return False


def snapshot_directory(path: Path, *, show_hidden: bool = False) -> tuple[str, ...]:
    return tuple(
        f"{entry.name}:{entry.kind.value}"
        for entry in list_directory(path, show_hidden)
    )


class DirectoryLister:
    """Callable seam over ``list_directory`` so controllers can be fed fakes."""

    def list(self, path: Path, show_hidden: bool) -> list[Entry]:
        return list_directory(path, show_hidden)

    def is_listable(self, path: Path) -> bool:
        return is_listable(path)
