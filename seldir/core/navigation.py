from __future__ import annotations

from pathlib import Path
from typing import Callable

from seldir.core.errors import NavigationInvariantError
from seldir.core.logging import get_logger, log_event
from seldir.core.pane import PaneModel
from seldir.core.path_navigation import parent_directory
from seldir.core.preview import PreviewDispatcher
from seldir.core.state import BrowserState, WorkingDirectory
from seldir.services.file_listing import DirectoryLister, Entry

logger = get_logger(__name__)


class NavigationController:
    """Keeps the previous, current and next panes in step with the cwd.

    Every operation replaces a pane's entries before selecting in it, so a
    pane never mixes old and new listings. Invalid moves (entering a file,
    an unreadable directory, or ascending past root) are silent no-ops.
    """

    def __init__(
        self,
        state: BrowserState,
        *,
        lister: DirectoryLister | None = None,
        preview: PreviewDispatcher | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.state = state
        self.lister = lister or DirectoryLister()
        self.preview = preview or PreviewDispatcher()
        self._on_change = on_change

    @classmethod
    def start(
        cls,
        directory: Path,
        *,
        show_hidden: bool = False,
        lister: DirectoryLister | None = None,
        preview: PreviewDispatcher | None = None,
    ) -> NavigationController:
        state = BrowserState(WorkingDirectory(directory), show_hidden=show_hidden)
        controller = cls(state, lister=lister, preview=preview)
        controller.load()
        return controller

    @property
    def working_directory(self) -> Path:
        return self.state.working_directory.path

    def set_change_callback(self, callback: Callable[[], None] | None) -> None:
        self._on_change = callback

    def load(self) -> None:
        """Populate all panes for the working directory from scratch."""
        self._populate_current()
        self.state.current.select_first()
        self._populate_previous()
        self.refresh_on_selection_change()

    def enter_child(self) -> bool:
        selected = self.state.current.selected
        if selected is None or not selected.is_dir:
            return False
        if not self.lister.is_listable(selected.path):
            return False

        origin = self.working_directory
        self._set_working_directory(selected.path)
        self._populate_current()
        self.state.current.select_first()
        self._populate_previous()
        self.refresh_on_selection_change()
        log_event(
            logger,
            "navigate.enter",
            origin=str(origin),
            target=str(self.working_directory),
        )
        return True

    def go_to_parent(self) -> bool:
        origin = self.working_directory
        parent = parent_directory(origin)
        if parent is None:
            return False

        self._set_working_directory(parent)
        self._populate_current()
        self.state.current.select_path(origin)
        self._populate_previous()
        self.refresh_on_selection_change()
        log_event(
            logger,
            "navigate.parent",
            origin=str(origin),
            target=str(self.working_directory),
            restored=self.state.current.selected is not None,
        )
        return True

    def toggle_hidden(self) -> None:
        self.state.show_hidden = not self.state.show_hidden
        self.reload()
        log_event(logger, "navigate.toggle_hidden", show_hidden=self.state.show_hidden)

    def reload(self) -> None:
        """Re-list every pane for its unchanged directory, keeping selections by path."""
        current_path = _selected_path(self.state.current)
        self._populate_current()
        self.state.current.select_path(current_path)
        self._populate_previous()
        self.refresh_on_selection_change()

    def move_selection(self, delta: int) -> None:
        before = self.state.current.selected_index
        self.state.current.move_selection(delta)
        if self.state.current.selected_index != before:
            self.refresh_on_selection_change()

    def select_first(self) -> None:
        self.select_index(0)

    def select_last(self) -> None:
        self.select_index(len(self.state.current) - 1)

    def select_index(self, index: int) -> None:
        before = self.state.current.selected_index
        self.state.current.select_index(index)
        if self.state.current.selected_index != before:
            self.refresh_on_selection_change()

    def refresh_on_selection_change(self) -> None:
        item = self.state.current.selected
        next_pane = self.state.next
        if item is not None and self.preview.wants_listing(item):
            if self.lister.is_listable(item.path):
                next_pane.set_entries(self.lister.list(item.path, self.state.show_hidden))
                next_pane.select_first()
            else:
                next_pane.clear()
            self.preview.clear()
        else:
            next_pane.clear()
            self.preview.dispatch_file(item)
        self._changed()

    def exit_path(self) -> Path:
        selected = self.state.current.selected
        if selected is not None and selected.is_dir:
            return selected.path
        return self.working_directory

    def _populate_current(self) -> None:
        self.state.current.set_entries(
            self.lister.list(self.working_directory, self.state.show_hidden)
        )

    def _populate_previous(self) -> None:
        previous = self.state.previous
        parent = parent_directory(self.working_directory)
        if parent is None:
            previous.clear()
            return
        previous.set_entries(self.lister.list(parent, self.state.show_hidden))
        previous.select_path(self.working_directory)

    def _set_working_directory(self, path: Path) -> None:
        if not path.is_absolute():
            raise NavigationInvariantError(
                "Refusing to move to a relative path", detail=str(path)
            )
        self.state.working_directory = WorkingDirectory(path)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()


def _selected_path(pane: PaneModel) -> Path | None:
    entry: Entry | None = pane.selected
    return entry.path if entry is not None else None
