from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from seldir.core.errors import NavigationInvariantError
from seldir.core.modes import ModeState
from seldir.core.pane import PaneId, PaneModel


@dataclass(frozen=True, slots=True)
class WorkingDirectory:
    path: Path

    def __post_init__(self) -> None:
        if not self.path.is_absolute():
            raise NavigationInvariantError(
                "Working directory must be absolute", detail=str(self.path)
            )


@dataclass(slots=True)
class BrowserState:
    working_directory: WorkingDirectory
    show_hidden: bool = False
    previous: PaneModel = field(default_factory=lambda: PaneModel(PaneId.PREVIOUS))
    current: PaneModel = field(default_factory=lambda: PaneModel(PaneId.CURRENT))
    next: PaneModel = field(default_factory=lambda: PaneModel(PaneId.NEXT))
    mode: ModeState = field(default_factory=ModeState)

    @property
    def panes(self) -> tuple[PaneModel, PaneModel, PaneModel]:
        return (self.previous, self.current, self.next)


class BrowserStateStore:
    """Holds the BrowserState and fans out change notifications."""

    def __init__(self, state: BrowserState) -> None:
        self._state = state
        self._listeners: set[Callable[[BrowserState], None]] = set()

    @property
    def state(self) -> BrowserState:
        return self._state

    def subscribe(self, callback: Callable[[BrowserState], None]) -> None:
        self._listeners.add(callback)
        callback(self._state)

    def unsubscribe(self, callback: Callable[[BrowserState], None]) -> None:
        self._listeners.discard(callback)

    def notify(self) -> None:
        for callback in list(self._listeners):
            callback(self._state)
