from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Input, Label


class SearchBar(Horizontal):
    """Hidden ``search:`` prompt shown while search mode is active.

    The input only accepts focus while the bar is open, so normal-mode keys
    reach the app instead of an invisible field.
    """

    def __init__(self, id: str | None = None) -> None:
        super().__init__(id=id or "search_bar")
        self.display = False
        self.input = Input(id="search_input", compact=True)
        self.input.can_focus = False

    def compose(self) -> ComposeResult:
        yield Label("search: ", id="search_label")
        yield self.input

    def open(self) -> None:
        self.display = True
        self.input.value = ""
        self.input.can_focus = True
        self.input.focus()

    def close(self) -> None:
        self.display = False
        self.input.value = ""
        self.input.can_focus = False
        self.screen.set_focus(None)
