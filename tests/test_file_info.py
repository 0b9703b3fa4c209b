import stat
from pathlib import Path

from seldir.services.file_info import (
    build_entry_stats,
    display_path,
    format_bytes,
    format_position,
    symbolic_permissions,
)
from seldir.services.file_listing import Entry, EntryKind


def test_symbolic_permissions():
    assert symbolic_permissions(stat.S_IFREG | 0o644) == "-rw-r--r--"
    assert symbolic_permissions(stat.S_IFDIR | 0o755) == "drwxr-xr-x"


def test_format_position():
    assert format_position((3, 12)) == "3/12"
    assert format_position(None) == ""


def test_format_bytes():
    assert format_bytes(0) == "0 B"
    assert format_bytes(2048) == "2.0 KB"


def test_display_path(tree: Path):
    entry = Entry(tree / "z.txt", "z.txt", EntryKind.FILE)

    assert display_path(tree, entry) == str(tree / "z.txt")
    assert display_path(tree, None) == str(tree)


def test_build_entry_stats_for_file_and_directory(tree: Path):
    (tree / "z.txt").chmod(0o640)

    file_stats = build_entry_stats(Entry(tree / "z.txt", "z.txt", EntryKind.FILE))
    dir_stats = build_entry_stats(Entry(tree / "b", "b", EntryKind.DIRECTORY))

    assert file_stats.permissions == "-rw-r-----"
    assert file_stats.size == "4 B"
    assert file_stats.modified
    assert dir_stats.permissions.startswith("d")
    assert dir_stats.size == ""


def test_build_entry_stats_for_vanished_entry(tree: Path):
    stats = build_entry_stats(Entry(tree / "gone", "gone", EntryKind.FILE))

    assert stats.error
    assert stats.permissions == ""
