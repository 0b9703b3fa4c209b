from __future__ import annotations

import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from seldir.services.file_listing import Entry


@dataclass(frozen=True)
class EntryStats:
    path: Path
    permissions: str
    modified: str
    size: str
    error: str | None = None


def build_entry_stats(entry: Entry) -> EntryStats:
    try:
        stat_result = entry.path.lstat()
    except OSError as exc:
        return EntryStats(
            path=entry.path,
            permissions="",
            modified="",
            size="",
            error=str(exc),
        )
    return EntryStats(
        path=entry.path,
        permissions=symbolic_permissions(stat_result.st_mode),
        modified=_format_timestamp(stat_result.st_mtime),
        size="" if entry.is_dir else format_bytes(stat_result.st_size),
    )


def symbolic_permissions(mode: int) -> str:
    """``ls -l`` style permission string, e.g. ``drwxr-xr-x``."""
    return stat.filemode(mode)


def format_position(position: tuple[int, int] | None) -> str:
    if position is None:
        return ""
    index, total = position
    return f"{index}/{total}"


def display_path(directory: Path, entry: Entry | None) -> str:
    if entry is None:
        return str(directory)
    return str(directory / entry.name)


def _format_timestamp(value: float) -> str:
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc).strftime("%d-%m-%Y %H:%M")
    except (OSError, OverflowError, ValueError):
        return "Unknown"


def format_bytes(value: int) -> str:
    size = float(value)
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if size < 1024.0:
            if unit == "B":
                return f"{int(size)} {unit}"
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} PB"
