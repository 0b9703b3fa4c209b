from pathlib import Path

import pytest

from seldir.core.errors import NavigationInvariantError
from seldir.core.navigation import NavigationController
from seldir.core.preview import PreviewDispatcher, PreviewKind, PreviewRequest
from seldir.core.state import WorkingDirectory
from seldir.services.file_listing import DirectoryLister


def names(pane):
    return [entry.name for entry in pane.entries]


def start(directory: Path, renderer=None, **kwargs) -> NavigationController:
    return NavigationController.start(
        directory, preview=PreviewDispatcher(renderer), **kwargs
    )


def select(nav: NavigationController, name: str) -> None:
    index = names(nav.state.current).index(name)
    nav.select_index(index)


def test_start_populates_three_panes(tree: Path):
    nav = start(tree)

    assert names(nav.state.current) == ["b", "c", "z.txt"]
    assert nav.state.current.selected.name == "b"
    assert nav.state.previous.selected.path == tree
    assert names(nav.state.next) == ["inner.txt"]


def test_enter_child_moves_into_selected_directory(tree: Path):
    nav = start(tree)
    select(nav, "b")

    assert nav.enter_child()

    assert nav.working_directory == tree / "b"
    assert names(nav.state.previous) == ["b", "c", "z.txt"]
    assert nav.state.previous.selected.name == "b"
    assert names(nav.state.current) == ["inner.txt"]
    assert nav.state.current.selected_index == 0


def test_enter_child_on_file_is_noop(tree: Path, renderer):
    nav = start(tree, renderer)
    select(nav, "z.txt")
    before = nav.state.current.entries

    assert not nav.enter_child()
    assert nav.working_directory == tree
    assert nav.state.current.entries is before


def test_enter_child_into_empty_directory(tree: Path, renderer):
    (tree / "c" / "deep").rmdir()
    nav = start(tree, renderer)
    select(nav, "c")

    assert nav.enter_child()

    assert nav.working_directory == tree / "c"
    assert nav.state.current.is_empty
    assert nav.state.current.selected_index is None
    assert nav.state.next.is_empty


def test_enter_child_with_empty_current_is_noop(tree: Path):
    nav = start(tree / "c" / "deep")

    assert nav.state.current.selected_index is None
    assert not nav.enter_child()
    assert nav.working_directory == tree / "c" / "deep"


def test_enter_child_refuses_unlistable_directory(tree: Path):
    class LockedLister(DirectoryLister):
        def is_listable(self, path: Path) -> bool:
            return path != tree / "b"

    nav = start(tree, lister=LockedLister())
    select(nav, "b")

    assert not nav.enter_child()
    assert nav.working_directory == tree
    assert nav.state.next.is_empty


def test_enter_then_parent_round_trips(tree: Path):
    nav = start(tree)
    select(nav, "c")
    entries_before = names(nav.state.current)

    nav.enter_child()
    assert nav.go_to_parent()

    assert nav.working_directory == tree
    assert names(nav.state.current) == entries_before
    assert nav.state.current.selected.name == "c"
    assert nav.state.previous.selected.path == tree
    assert names(nav.state.next) == ["deep"]


def test_parent_falls_back_to_no_selection_when_origin_vanished(tree: Path):
    gone = tree / "gone"
    gone.mkdir()
    nav = start(gone)
    gone.rmdir()

    assert nav.go_to_parent()

    assert nav.working_directory == tree
    assert not nav.state.current.is_empty
    assert nav.state.current.selected_index is None
    assert nav.state.next.is_empty


def test_parent_from_hidden_directory_does_not_guess(tree: Path):
    nav = start(tree / ".hidden", show_hidden=False)

    nav.go_to_parent()

    assert ".hidden" not in names(nav.state.current)
    assert nav.state.current.selected_index is None


def test_parent_at_root_is_noop():
    nav = start(Path("/"))
    state = nav.state
    snapshot = [(pane.entries, pane.selected_index) for pane in state.panes]

    assert not nav.go_to_parent()

    assert nav.working_directory == Path("/")
    assert [(pane.entries, pane.selected_index) for pane in state.panes] == snapshot
    assert state.previous.is_empty


def test_parent_into_root_clears_previous_pane(tree: Path):
    nav = start(tree)
    while nav.go_to_parent():
        pass

    assert nav.working_directory == Path("/")
    assert nav.state.previous.is_empty
    assert nav.state.current.selected is not None


def test_toggle_hidden_twice_restores_entries(tree: Path):
    nav = start(tree / "b")
    before = [names(pane) for pane in nav.state.panes]

    nav.toggle_hidden()
    assert ".hidden" in names(nav.state.previous)
    nav.toggle_hidden()

    assert [names(pane) for pane in nav.state.panes] == before
    assert nav.state.previous.selected.name == "b"


def test_toggle_hidden_keeps_selection_by_path(tree: Path):
    nav = start(tree)
    select(nav, "z.txt")

    nav.toggle_hidden()

    assert names(nav.state.current) == [".hidden", "b", "c", "z.txt"]
    assert nav.state.current.selected.name == "z.txt"


def test_toggle_hidden_drops_hidden_selection(tree: Path):
    nav = start(tree, show_hidden=True)
    select(nav, ".hidden")

    nav.toggle_hidden()

    assert nav.state.current.selected_index is None
    assert nav.state.next.is_empty


def test_file_selection_goes_to_preview_renderer(tree: Path, renderer):
    (tree / "paper.pdf").write_bytes(b"%PDF-1.4")
    nav = start(tree, renderer)

    select(nav, "z.txt")
    assert nav.state.next.is_empty
    assert renderer.requests[-1] == PreviewRequest(tree / "z.txt", PreviewKind.TEXT)

    select(nav, "paper.pdf")
    assert renderer.requests[-1].kind is PreviewKind.PDF

    clears = renderer.clears
    select(nav, "b")
    assert names(nav.state.next) == ["inner.txt"]
    assert nav.state.next.selected_index == 0
    assert renderer.clears == clears + 1


def test_move_selection_refreshes_next_pane(tree: Path):
    nav = start(tree)

    nav.move_selection(1)
    assert nav.state.current.selected.name == "c"
    assert names(nav.state.next) == ["deep"]

    nav.select_last()
    assert nav.state.current.selected.name == "z.txt"
    nav.select_first()
    assert nav.state.current.selected.name == "b"


def test_change_callback_fires_on_selection_change(tree: Path):
    nav = start(tree)
    calls = []
    nav.set_change_callback(lambda: calls.append(nav.state.current.selected_index))

    nav.move_selection(1)
    nav.move_selection(0)

    assert calls == [1]


def test_reload_picks_up_external_changes(tree: Path):
    nav = start(tree)
    select(nav, "c")
    (tree / "a_new").mkdir()

    nav.reload()

    assert names(nav.state.current) == ["a_new", "b", "c", "z.txt"]
    assert nav.state.current.selected.name == "c"


def test_exit_path(tree: Path):
    nav = start(tree)
    select(nav, "c")
    assert nav.exit_path() == tree / "c"

    select(nav, "z.txt")
    assert nav.exit_path() == tree

    empty = start(tree / "c" / "deep")
    assert empty.exit_path() == tree / "c" / "deep"


def test_working_directory_must_be_absolute():
    with pytest.raises(NavigationInvariantError):
        WorkingDirectory(Path("relative/dir"))
