from __future__ import annotations

from enum import Enum

from seldir.core.modes import ModeAction, ModeState, ModeTransition
from seldir.core.navigation import NavigationController
from seldir.core.search import SearchEngine


class DispatchResult(Enum):
    HANDLED = "handled"
    IGNORED = "ignored"
    QUIT = "quit"
    CANCEL = "cancel"


MOVE_DOWN_KEYS = frozenset({"j", "down"})
MOVE_UP_KEYS = frozenset({"k", "up"})
ENTER_KEYS = frozenset({"l", "right", "enter"})
PARENT_KEYS = frozenset({"h", "left"})
# Terminals deliver ctrl+h as backspace.
TOGGLE_HIDDEN_KEYS = frozenset({"ctrl+h", "backspace", "."})
QUIT_KEYS = frozenset({"q"})
CANCEL_KEYS = frozenset({"escape"})


class KeyDispatcher:
    """Single entry point turning key names into core transitions.

    Keys are Textual key names for special keys (``"down"``, ``"ctrl+h"``)
    and the typed character for printable ones (``"G"``, ``"/"``).
    """

    def __init__(self, navigation: NavigationController, search: SearchEngine) -> None:
        self.navigation = navigation
        self.search = search

    @property
    def modes(self) -> ModeState:
        return self.navigation.state.mode

    def dispatch(self, key: str) -> DispatchResult:
        transition = self.modes.press(key)
        if transition.consumed:
            self._apply(transition)
            return DispatchResult.HANDLED
        if self.modes.search_active:
            return DispatchResult.IGNORED

        if key in MOVE_DOWN_KEYS:
            self.navigation.move_selection(1)
        elif key in MOVE_UP_KEYS:
            self.navigation.move_selection(-1)
        elif key in ENTER_KEYS:
            self.navigation.enter_child()
        elif key in PARENT_KEYS:
            self.navigation.go_to_parent()
        elif key in TOGGLE_HIDDEN_KEYS:
            self.navigation.toggle_hidden()
        elif key in QUIT_KEYS:
            return DispatchResult.QUIT
        elif key in CANCEL_KEYS:
            return DispatchResult.CANCEL
        else:
            return DispatchResult.IGNORED
        return DispatchResult.HANDLED

    def search_changed(self, query: str) -> bool:
        if not self.modes.search_active:
            return False
        return self.search.update(query)

    def search_submitted(self, query: str) -> bool:
        """Returns True when the search bar should close."""
        matched = self.search.submit(query)
        transition = self.modes.submit_search(matched)
        return transition.action is ModeAction.END_SEARCH

    def _apply(self, transition: ModeTransition) -> None:
        action = transition.action
        if action is ModeAction.SELECT_FIRST:
            self.navigation.select_first()
        elif action is ModeAction.SELECT_LAST:
            self.navigation.select_last()
        elif action in (ModeAction.BEGIN_SEARCH, ModeAction.END_SEARCH):
            self.search.cancel()
