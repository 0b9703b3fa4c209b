from .pane_column import PaneColumn
from .preview_panel import PanelPreviewRenderer, PreviewPanel
from .search_bar import SearchBar
from .status_bar import StatusBar
from .top_bar import TopBar

__all__ = [
    "PaneColumn",
    "PanelPreviewRenderer",
    "PreviewPanel",
    "SearchBar",
    "StatusBar",
    "TopBar",
]
