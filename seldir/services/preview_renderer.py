from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from seldir.core.preview import PreviewKind, PreviewRequest
from seldir.services.file_info import format_bytes

TEXT_PREVIEW_BYTES = 64 * 1024
TEXT_PREVIEW_LINES = 200
PDF_PREVIEW_PAGES = 2


@dataclass(frozen=True)
class PreviewResult:
    path: Path
    title: str
    lines: list[str]
    token: int = 0
    error: str | None = None


def build_preview(request: PreviewRequest, token: int = 0) -> PreviewResult:
    if request.kind is PreviewKind.PDF:
        return _pdf_preview(request.path, token)
    if request.kind is PreviewKind.IMAGE:
        return _image_preview(request.path, token)
    return _text_preview(request.path, token)


def _text_preview(path: Path, token: int) -> PreviewResult:
    try:
        with path.open("rb") as handle:
            raw = handle.read(TEXT_PREVIEW_BYTES)
    except OSError as exc:
        return PreviewResult(path, path.name, [], token, error=str(exc))
    if b"\x00" in raw:
        return PreviewResult(path, path.name, ["Binary file"], token)
    text = raw.decode("utf-8", errors="replace")
    lines = text.splitlines()[:TEXT_PREVIEW_LINES]
    return PreviewResult(path, path.name, lines, token)


def _pdf_preview(path: Path, token: int) -> PreviewResult:
    try:
        reader = PdfReader(str(path))
        page_count = len(reader.pages)
        metadata = reader.metadata or {}
        lines = [f"Pages: {page_count}"]
        for key, label in (("/Title", "Title"), ("/Author", "Author")):
            value = metadata.get(key)
            if value:
                lines.append(f"{label}: {value}")
        lines.append("")
        for page in reader.pages[:PDF_PREVIEW_PAGES]:
            lines.extend((page.extract_text() or "").splitlines())
    except (OSError, PyPdfError, ValueError) as exc:
        return PreviewResult(path, path.name, [], token, error=str(exc))
    return PreviewResult(path, path.name, lines[:TEXT_PREVIEW_LINES], token)


def _image_preview(path: Path, token: int) -> PreviewResult:
    try:
        size = path.stat().st_size
    except OSError as exc:
        return PreviewResult(path, path.name, [], token, error=str(exc))
    suffix = path.suffix.lstrip(".").upper() or "Image"
    return PreviewResult(
        path,
        path.name,
        [f"{suffix} image", format_bytes(size)],
        token,
    )
