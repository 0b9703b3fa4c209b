from __future__ import annotations

import os
from pathlib import Path

import pytest

from seldir.core.preview import PreviewRequest


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """/a with subdirectories b, c, a hidden directory and z.txt."""
    root = Path(os.path.realpath(tmp_path)) / "a"
    (root / "b").mkdir(parents=True)
    (root / "c").mkdir()
    (root / ".hidden").mkdir()
    (root / "z.txt").write_text("zed\n", encoding="utf-8")
    (root / "b" / "inner.txt").write_text("inner\n", encoding="utf-8")
    (root / "c" / "deep").mkdir()
    return root


class RecordingRenderer:
    def __init__(self) -> None:
        self.requests: list[PreviewRequest] = []
        self.clears = 0

    def render(self, request: PreviewRequest) -> None:
        self.requests.append(request)

    def clear(self) -> None:
        self.clears += 1


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
