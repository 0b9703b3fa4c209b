from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Label

from seldir.core.state import BrowserState, BrowserStateStore
from seldir.services.file_info import build_entry_stats, format_position


class StatusBar(Horizontal):
    """Permissions, modification time and cursor position of the selection."""

    def __init__(self, *, state_store: BrowserStateStore) -> None:
        super().__init__(id="status_bar")
        self._state_store = state_store
        self._state_subscription = self._handle_state_update
        self.permissions_label = Label("", id="status_permissions")
        self.modified_label = Label("", id="status_modified")
        self.position_label = Label("", id="status_position")

    def compose(self) -> ComposeResult:
        yield self.permissions_label
        yield self.modified_label
        yield self.position_label

    def on_mount(self) -> None:
        self._state_store.subscribe(self._state_subscription)

    def on_unmount(self) -> None:
        self._state_store.unsubscribe(self._state_subscription)

    def _handle_state_update(self, state: BrowserState) -> None:
        current = state.current
        self.position_label.update(format_position(current.position))
        entry = current.selected
        if entry is None:
            self.permissions_label.update("")
            self.modified_label.update("")
            return
        stats = build_entry_stats(entry)
        if stats.error:
            self.permissions_label.update("")
            self.modified_label.update(Text(stats.error, style="dim"))
            return
        self.permissions_label.update(stats.permissions)
        detail = f" {stats.modified}"
        if stats.size:
            detail = f"{detail}  {stats.size}"
        self.modified_label.update(Text(detail))
