from __future__ import annotations

from rich.text import Text
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from seldir.core.pane import PaneId, PaneModel
from seldir.core.state import BrowserState, BrowserStateStore
from seldir.services.file_listing import Entry, EntryKind


class PaneColumn(OptionList):
    """Read-only view of one PaneModel; the keyboard belongs to the app."""

    COMPONENT_CLASSES = {
        "pane-column--dir",
        "pane-column--special",
    }
    DEFAULT_CSS = """
    PaneColumn > .pane-column--dir {
        color: $accent;
        text-style: bold;
    }
    PaneColumn > .pane-column--special {
        color: $text-muted;
    }
    """

    def __init__(
        self,
        pane_id: PaneId,
        *,
        state_store: BrowserStateStore,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id, compact=True, classes=f"pane_column pane_{pane_id.value}")
        self.can_focus = False
        self.pane_id = pane_id
        self._state_store = state_store
        self._state_subscription = self._handle_state_update
        self._entries: tuple[Entry, ...] | None = None

    def on_mount(self) -> None:
        self._state_store.subscribe(self._state_subscription)

    def on_unmount(self) -> None:
        self._state_store.unsubscribe(self._state_subscription)

    def _pane(self, state: BrowserState) -> PaneModel:
        if self.pane_id is PaneId.PREVIOUS:
            return state.previous
        if self.pane_id is PaneId.CURRENT:
            return state.current
        return state.next

    def _handle_state_update(self, state: BrowserState) -> None:
        self.show_pane(self._pane(state))

    def _render_entry(self, entry: Entry) -> Text:
        text = Text(entry.name, no_wrap=True, overflow="ellipsis")
        if entry.kind is EntryKind.DIRECTORY:
            text.stylize(self.get_component_rich_style("pane-column--dir"))
        elif entry.kind is EntryKind.UNREADABLE:
            text.stylize(self.get_component_rich_style("pane-column--special"))
        return text

    def show_pane(self, pane: PaneModel) -> None:
        if pane.entries is not self._entries:
            self._entries = pane.entries
            self.clear_options()
            self.add_options([Option(self._render_entry(entry)) for entry in pane.entries])
        self.highlighted = pane.selected_index
        if pane.selected_index is not None:
            self.scroll_to_highlight()
