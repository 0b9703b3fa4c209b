from __future__ import annotations

from rich.text import Text
from textual import on
from textual.containers import VerticalScroll
from textual.widgets import Static
from textual.worker import Worker, WorkerState

from seldir.core.preview import PreviewRequest
from seldir.core.worker_groups import WorkerGroup
from seldir.services.preview_renderer import PreviewResult, build_preview


class PreviewPanel(VerticalScroll):
    """Next-column stand-in for files; renders previews off the UI thread.

    Each request bumps a token and results carrying an older token are
    dropped.
    """

    def __init__(self, id: str | None = None) -> None:
        super().__init__(id=id or "preview_panel")
        self.can_focus = False
        self._content = Static("", id="preview_panel_content")
        self._token = 0

    def compose(self):
        yield self._content

    def request_preview(self, request: PreviewRequest) -> None:
        self._token += 1
        token = self._token
        self.border_title = request.path.name
        self._content.update(Text("Loading…", style="dim"))
        self.run_worker(
            lambda request=request, token=token: build_preview(request, token),
            group=WorkerGroup.PREVIEW,
            exclusive=True,
            thread=True,
        )

    def clear_preview(self) -> None:
        self._token += 1
        self.border_title = ""
        self._content.update("")

    def show_result(self, result: PreviewResult) -> None:
        if result.token != self._token:
            return
        self.border_title = result.title
        if result.error:
            self._content.update(Text(f"Preview unavailable: {result.error}", style="dim"))
        else:
            self._content.update(Text("\n".join(result.lines)))
        self.scroll_to(y=0, animate=False)

    @on(Worker.StateChanged)
    def _on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        worker = event.worker
        if worker.group != WorkerGroup.PREVIEW:
            return
        if event.state is WorkerState.SUCCESS:
            result = worker.result
            if isinstance(result, PreviewResult):
                self.show_result(result)
        elif event.state is WorkerState.ERROR:
            error = worker.error or RuntimeError("Preview failed.")
            self._content.update(Text(f"Preview unavailable: {error}", style="dim"))


class PanelPreviewRenderer:
    """``PreviewRenderer`` that draws into a PreviewPanel."""

    def __init__(self, panel: PreviewPanel) -> None:
        self._panel = panel

    def render(self, request: PreviewRequest) -> None:
        self._panel.request_preview(request)

    def clear(self) -> None:
        self._panel.clear_preview()
