from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Label

from seldir.core.state import BrowserState, BrowserStateStore
from seldir.services.file_info import display_path


class TopBar(Horizontal):
    """Path of the highlighted entry, plus a hidden-files marker."""

    def __init__(self, *, state_store: BrowserStateStore) -> None:
        super().__init__(id="top_bar")
        self._state_store = state_store
        self._state_subscription = self._handle_state_update
        self.path_label = Label("", id="top_bar_path")
        self.hidden_label = Label("", id="top_bar_hidden")

    def compose(self) -> ComposeResult:
        yield self.path_label
        yield self.hidden_label

    def on_mount(self) -> None:
        self._state_store.subscribe(self._state_subscription)

    def on_unmount(self) -> None:
        self._state_store.unsubscribe(self._state_subscription)

    def _handle_state_update(self, state: BrowserState) -> None:
        self.path_label.update(
            Text(display_path(state.working_directory.path, state.current.selected))
        )
        self.hidden_label.update("[dim]hidden shown[/dim]" if state.show_hidden else "")
