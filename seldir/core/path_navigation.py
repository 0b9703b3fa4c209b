from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import TypeVar

_PathT = TypeVar("_PathT", bound=PurePath)


def parent_directory(path: _PathT) -> _PathT | None:
    parent = path.parent
    if parent == path:
        return None
    return parent


def can_navigate_up(path: PurePath) -> bool:
    return parent_directory(path) is not None


def canonical_directory(candidate: Path | str) -> Path:
    """Absolute, symlink-free form of ``candidate``."""
    return Path(os.path.realpath(Path(candidate).expanduser()))


def resolve_start_directory(*candidates: Path | str | None) -> Path:
    for candidate in candidates:
        if not candidate:
            continue
        try:
            path = canonical_directory(candidate)
        except (OSError, TypeError, ValueError):
            continue
        if path.is_dir():
            return path
    return canonical_directory(Path.cwd())
