from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from seldir.services.file_listing import Entry, EntryKind

IMAGE_SUFFIXES = frozenset(
    {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp", ".tif", ".tiff", ".ico", ".svg"}
)


class PreviewKind(Enum):
    PDF = "pdf"
    IMAGE = "image"
    TEXT = "text"


@dataclass(frozen=True)
class PreviewRequest:
    path: Path
    kind: PreviewKind


class PreviewRenderer(Protocol):
    def render(self, request: PreviewRequest) -> None: ...

    def clear(self) -> None: ...


class NullPreviewRenderer:
    def render(self, request: PreviewRequest) -> None:
        return None

    def clear(self) -> None:
        return None


def preview_kind_for(path: Path) -> PreviewKind:
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        return PreviewKind.PDF
    if suffix in IMAGE_SUFFIXES:
        return PreviewKind.IMAGE
    return PreviewKind.TEXT


class PreviewDispatcher:
    """Routes the selected entry to a directory listing or the renderer."""

    def __init__(self, renderer: PreviewRenderer | None = None) -> None:
        self.renderer: PreviewRenderer = renderer or NullPreviewRenderer()

    def wants_listing(self, entry: Entry | None) -> bool:
        return entry is not None and entry.kind is EntryKind.DIRECTORY

    def request_for(self, entry: Entry) -> PreviewRequest | None:
        if entry.kind is not EntryKind.FILE:
            return None
        return PreviewRequest(entry.path, preview_kind_for(entry.path))

    def dispatch_file(self, entry: Entry | None) -> PreviewRequest | None:
        request = self.request_for(entry) if entry is not None else None
        if request is None:
            self.renderer.clear()
            return None
        self.renderer.render(request)
        return request

    def clear(self) -> None:
        self.renderer.clear()
