from __future__ import annotations

import threading
from pathlib import Path
from typing import Callable

from textual.timer import Timer
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver, ObservedWatch

from seldir.core.logging import get_logger

logger = get_logger(__name__)

LISTING_EVENTS = frozenset({"created", "deleted", "moved"})


class DirectoryChangeHandler(FileSystemEventHandler):
    """Forwards events that can change a listing; content edits are ignored."""

    def __init__(self, on_change: Callable[[], None]) -> None:
        super().__init__()
        self._on_change = on_change

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.event_type in LISTING_EVENTS:
            self._on_change()


class DirectoryWatcher:
    """Reloads the browser when the working directory changes on disk.

    Watchdog events arrive on the observer thread. They are handed to the
    UI thread through ``call_from_thread``, where a debounce timer collapses
    bursts into one snapshot comparison and at most one reload.
    """

    def __init__(
        self,
        *,
        call_from_thread: Callable[[Callable[[], None]], object | None],
        refresh_callback: Callable[[], None],
        snapshot_func: Callable[[Path], tuple[str, ...]],
        timer_factory: Callable[[float, Callable[[], None]], Timer],
        debounce_seconds: float = 0.5,
    ) -> None:
        self._call_from_thread = call_from_thread
        self._refresh_callback = refresh_callback
        self._snapshot_func = snapshot_func
        self._timer_factory = timer_factory
        self._debounce_seconds = debounce_seconds

        self._observer: BaseObserver | None = None
        self._watch: ObservedWatch | None = None
        self._directory: Path | None = None
        self._snapshot: tuple[str, ...] | None = None
        self._timer: Timer | None = None
        self._pending = threading.Event()

    @property
    def directory(self) -> Path | None:
        return self._directory

    def start(self, directory: Path) -> None:
        if directory == self._directory and self._watch is not None:
            return
        if self._observer is None:
            self._observer = Observer()
            self._observer.daemon = True
            self._observer.start()
        self._unschedule()
        self._directory = directory
        try:
            self._watch = self._observer.schedule(
                DirectoryChangeHandler(self._on_change), str(directory), recursive=False
            )
        except OSError as exc:
            logger.debug("Not watching %s: %s", directory, exc)
        self.update_snapshot(directory)

    def stop(self) -> None:
        self._cancel_timer()
        self._unschedule()
        if self._observer is not None:
            self._observer.stop()
            self._observer.join(timeout=1)
            self._observer = None
        self._directory = None

    def update_snapshot(self, directory: Path) -> None:
        self._snapshot = self._snapshot_func(directory)

    def _unschedule(self) -> None:
        if self._observer is None or self._watch is None:
            return
        try:
            self._observer.unschedule(self._watch)
        except (KeyError, OSError):
            pass
        self._watch = None

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _on_change(self) -> None:
        # Observer thread: coalesce until the UI thread has taken the event.
        if self._pending.is_set():
            return
        self._pending.set()
        try:
            self._call_from_thread(self._schedule_refresh)
        except RuntimeError:
            self._pending.clear()
            raise

    def _schedule_refresh(self) -> None:
        self._pending.clear()
        self._cancel_timer()
        self._timer = self._timer_factory(self._debounce_seconds, self._refresh)

    def _refresh(self) -> None:
        self._timer = None
        if self._directory is None:
            return
        snapshot = self._snapshot_func(self._directory)
        if snapshot == self._snapshot:
            return
        self._snapshot = snapshot
        self._refresh_callback()
