from __future__ import annotations

from pathlib import Path
from typing import Any

from textual import events, on
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Input

from seldir.core.fs_watcher import DirectoryWatcher
from seldir.core.keymap import DispatchResult, KeyDispatcher
from seldir.core.logging import get_logger
from seldir.core.navigation import NavigationController
from seldir.core.pane import PaneId
from seldir.core.search import SearchEngine
from seldir.core.settings_store import SettingsStore
from seldir.core.state import BrowserState, BrowserStateStore
from seldir.services.file_listing import snapshot_directory
from seldir.themes.themes import DEFAULT_ACCENT, THEME_NAME, build_theme
from seldir.widgets import (
    PanelPreviewRenderer,
    PaneColumn,
    PreviewPanel,
    SearchBar,
    StatusBar,
    TopBar,
)

logger = get_logger(__name__)


def _key_name(event: events.Key) -> str:
    if event.is_printable and event.character:
        return event.character
    return event.key


class Seldir(App[Path | None]):
    """Three-column directory picker. Exits with the chosen path or None."""

    TITLE = "seldir"
    CSS_PATH = Path(__file__).parent / "styles" / "index.tcss"
    ENABLE_COMMAND_PALETTE = False
    AUTO_FOCUS = None

    def __init__(
        self,
        navigation: NavigationController,
        *,
        accent_color: str = DEFAULT_ACCENT,
        settings_store: SettingsStore | None = None,
        settings: dict[str, Any] | None = None,
        watch: bool = True,
    ) -> None:
        super().__init__()
        self.navigation = navigation
        self.search = SearchEngine(navigation)
        self.dispatcher = KeyDispatcher(navigation, self.search)
        self.state_store = BrowserStateStore(navigation.state)
        self.settings_store = settings_store
        self.settings = settings
        self._accent_theme = build_theme(accent_color)
        self._watch_enabled = watch
        self._watcher: DirectoryWatcher | None = None

        self.top_bar = TopBar(state_store=self.state_store)
        self.previous_column = PaneColumn(
            PaneId.PREVIOUS, state_store=self.state_store, id="pane_previous"
        )
        self.current_column = PaneColumn(
            PaneId.CURRENT, state_store=self.state_store, id="pane_current"
        )
        self.next_column = PaneColumn(
            PaneId.NEXT, state_store=self.state_store, id="pane_next"
        )
        self.preview_panel = PreviewPanel()
        self.search_bar = SearchBar()
        self.status_bar = StatusBar(state_store=self.state_store)

    def compose(self) -> ComposeResult:
        with Vertical(id="app_main_container"):
            yield self.top_bar
            yield Horizontal(
                self.previous_column,
                self.current_column,
                self.next_column,
                self.preview_panel,
                id="columns",
            )
            yield self.search_bar
            yield self.status_bar

    def on_mount(self) -> None:
        self.register_theme(self._accent_theme)
        self.theme = THEME_NAME
        self.navigation.preview.renderer = PanelPreviewRenderer(self.preview_panel)
        self.navigation.set_change_callback(self.state_store.notify)
        self.state_store.subscribe(self._handle_state_update)
        self.navigation.refresh_on_selection_change()
        self.screen.set_focus(None)
        if self._watch_enabled:
            self._watcher = DirectoryWatcher(
                call_from_thread=self.call_from_thread,
                refresh_callback=self._handle_external_change,
                snapshot_func=self._snapshot,
                timer_factory=self.set_timer,
            )
            self._watcher.start(self.navigation.working_directory)

    def on_unmount(self) -> None:
        if self._watcher is not None:
            self._watcher.stop()
            self._watcher = None

    def _snapshot(self, path: Path) -> tuple[str, ...]:
        return snapshot_directory(path, show_hidden=self.navigation.state.show_hidden)

    def _handle_external_change(self) -> None:
        logger.debug("Reloading %s after filesystem change", self.navigation.working_directory)
        self.navigation.reload()

    def _handle_state_update(self, state: BrowserState) -> None:
        selected = state.current.selected
        show_listing = selected is None or selected.is_dir
        self.next_column.display = show_listing
        self.preview_panel.display = not show_listing
        if self._watcher is not None and self._watcher.directory != state.working_directory.path:
            self._watcher.start(state.working_directory.path)

    def on_key(self, event: events.Key) -> None:
        key = _key_name(event)
        if self.dispatcher.modes.search_active and key != "escape":
            return
        was_searching = self.dispatcher.modes.search_active
        show_hidden = self.navigation.state.show_hidden
        result = self.dispatcher.dispatch(key)
        if result is DispatchResult.IGNORED:
            return
        event.stop()
        event.prevent_default()
        if result is DispatchResult.QUIT:
            self.exit(self.navigation.exit_path())
            return
        if result is DispatchResult.CANCEL:
            self.exit(None)
            return
        searching = self.dispatcher.modes.search_active
        if searching and not was_searching:
            self.search_bar.open()
        elif was_searching and not searching:
            self.search_bar.close()
        if show_hidden != self.navigation.state.show_hidden:
            self._remember_show_hidden()

    @on(Input.Changed, "#search_input")
    def _on_search_changed(self, event: Input.Changed) -> None:
        self.dispatcher.search_changed(event.value)

    @on(Input.Submitted, "#search_input")
    def _on_search_submitted(self, event: Input.Submitted) -> None:
        if self.dispatcher.search_submitted(event.value):
            self.search_bar.close()
        else:
            self.bell()

    def _remember_show_hidden(self) -> None:
        if self.settings_store is None or self.settings is None:
            return
        try:
            self.settings_store.update_show_hidden(
                self.settings, self.navigation.state.show_hidden
            )
        except OSError as exc:
            logger.warning("Unable to save settings: %s", exc)
