import os
from pathlib import Path

import pytest

from seldir.services.file_listing import (
    DirectoryLister,
    EntryKind,
    is_listable,
    list_directory,
    snapshot_directory,
)


def names(entries):
    return [entry.name for entry in entries]


def test_listing_orders_directories_before_files(tree: Path):
    assert names(list_directory(tree, show_hidden=False)) == ["b", "c", "z.txt"]


def test_entries_carry_absolute_paths_and_kinds(tree: Path):
    entries = list_directory(tree)
    assert [entry.path for entry in entries] == [tree / "b", tree / "c", tree / "z.txt"]
    assert [entry.kind for entry in entries] == [
        EntryKind.DIRECTORY,
        EntryKind.DIRECTORY,
        EntryKind.FILE,
    ]
    assert all(entry.path.is_absolute() for entry in entries)


def test_hidden_entries_only_listed_when_requested(tree: Path):
    (tree / ".profile").write_text("", encoding="utf-8")
    hidden_off = names(list_directory(tree, show_hidden=False))
    hidden_on = names(list_directory(tree, show_hidden=True))

    assert not any(name.startswith(".") for name in hidden_off)
    assert hidden_on == [".hidden", "b", "c", ".profile", "z.txt"]
    assert [name for name in hidden_on if not name.startswith(".")] == hidden_off


def test_names_sort_by_codepoint_within_kind(tmp_path: Path):
    for name in ("beta", "Alpha", "alpha", "_under"):
        (tmp_path / name).write_text("", encoding="utf-8")
    for name in ("zdir", "Bdir"):
        (tmp_path / name).mkdir()

    listed = list_directory(tmp_path)

    assert names(listed) == ["Bdir", "zdir", "Alpha", "_under", "alpha", "beta"]
    kinds = [entry.kind for entry in listed]
    assert kinds.index(EntryKind.FILE) == 2
    assert EntryKind.DIRECTORY not in kinds[2:]


def test_symlinks_are_never_listed(tree: Path):
    os.symlink(tree / "b", tree / "link_to_dir")
    os.symlink(tree / "z.txt", tree / "link_to_file")
    os.symlink(tree / "missing", tree / "dangling")

    assert names(list_directory(tree, show_hidden=True)) == [".hidden", "b", "c", "z.txt"]


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs named pipes")
def test_special_files_are_listed_as_unreadable(tree: Path):
    os.mkfifo(tree / "pipe")

    entries = {entry.name: entry.kind for entry in list_directory(tree)}

    assert entries["pipe"] is EntryKind.UNREADABLE
    assert names(list_directory(tree)) == ["b", "c", "pipe", "z.txt"]


def test_missing_directory_lists_empty(tmp_path: Path):
    assert list_directory(tmp_path / "gone") == []
    assert not is_listable(tmp_path / "gone")


def test_file_path_lists_empty(tree: Path):
    assert list_directory(tree / "z.txt") == []
    assert not is_listable(tree / "z.txt")


def test_permission_denied_lists_empty(tree: Path, monkeypatch):
    def deny(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(os, "scandir", deny)

    assert list_directory(tree / "b") == []
    assert not is_listable(tree / "b")
    assert DirectoryLister().list(tree / "b", False) == []


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="root can read any directory",
)
def test_mode_zero_directory_lists_empty(tree: Path):
    locked = tree / "b"
    locked.chmod(0)
    try:
        assert list_directory(locked) == []
        assert not is_listable(locked)
    finally:
        locked.chmod(0o755)


def test_snapshot_tracks_names_and_kinds(tree: Path):
    before = snapshot_directory(tree)
    assert before == ("b:directory", "c:directory", "z.txt:file")

    (tree / "new.txt").write_text("", encoding="utf-8")

    assert snapshot_directory(tree) != before


def test_lister_delegates(tree: Path):
    lister = DirectoryLister()
    assert names(lister.list(tree, False)) == ["b", "c", "z.txt"]
    assert lister.is_listable(tree)
