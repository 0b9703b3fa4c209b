from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

GOTO_KEY = "g"
GOTO_BOTTOM_KEYS = frozenset({"G", "e"})
SEARCH_KEY = "/"
ESCAPE_KEY = "escape"


class Mode(Enum):
    NORMAL = "normal"
    PENDING_GOTO = "pending_goto"
    SEARCH_ACTIVE = "search_active"


class ModeAction(Enum):
    NONE = "none"
    SELECT_FIRST = "select_first"
    SELECT_LAST = "select_last"
    BEGIN_SEARCH = "begin_search"
    END_SEARCH = "end_search"


@dataclass(frozen=True)
class ModeTransition:
    action: ModeAction = ModeAction.NONE
    consumed: bool = False


class ModeState:
    """Transient interaction modes.

    Normal --g--> PendingGoTo --g--> Normal (first entry)
    PendingGoTo --G/e--> Normal (last entry), any other key cancels.
    Normal --/--> SearchActive --escape or matching submit--> Normal
    """

    def __init__(self) -> None:
        self._mode = Mode.NORMAL

    def __repr__(self) -> str:
        return f"ModeState({self._mode.value})"

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def search_active(self) -> bool:
        return self._mode is Mode.SEARCH_ACTIVE

    def press(self, key: str) -> ModeTransition:
        if self._mode is Mode.PENDING_GOTO:
            self._mode = Mode.NORMAL
            if key == GOTO_KEY:
                return ModeTransition(ModeAction.SELECT_FIRST, consumed=True)
            if key in GOTO_BOTTOM_KEYS:
                return ModeTransition(ModeAction.SELECT_LAST, consumed=True)
            return ModeTransition(consumed=True)

        if self._mode is Mode.SEARCH_ACTIVE:
            if key == ESCAPE_KEY:
                self._mode = Mode.NORMAL
                return ModeTransition(ModeAction.END_SEARCH, consumed=True)
            return ModeTransition()

        if key == GOTO_KEY:
            self._mode = Mode.PENDING_GOTO
            return ModeTransition(consumed=True)
        if key == SEARCH_KEY:
            self._mode = Mode.SEARCH_ACTIVE
            return ModeTransition(ModeAction.BEGIN_SEARCH, consumed=True)
        return ModeTransition()

    def submit_search(self, matched: bool) -> ModeTransition:
        if self._mode is not Mode.SEARCH_ACTIVE or not matched:
            return ModeTransition()
        self._mode = Mode.NORMAL
        return ModeTransition(ModeAction.END_SEARCH, consumed=True)

    def reset(self) -> None:
        self._mode = Mode.NORMAL
