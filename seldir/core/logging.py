from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, TextIO

LOG_FORMATS = {
    "json": "%(message)s",
    "text": "%(asctime)s %(levelname)s %(name)s %(message)s",
}


def get_logger(name: str = "seldir") -> logging.Logger:
    return logging.getLogger(name)


def _build_handler(stream: TextIO | None, log_file: Path | None) -> logging.Handler:
    if stream is not None:
        return logging.StreamHandler(stream)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_file, encoding="utf-8")
    # stdout and stderr belong to the UI and the exit handoff.
    return logging.NullHandler()


def configure_logging(
    *,
    level: str = "info",
    format_name: str = "json",
    stream: TextIO | None = None,
    log_dir: Path | None = None,
    filename: str = "seldir.log",
) -> logging.Handler:
    """Attach a single handler to the ``seldir`` logger.

    Without ``stream`` or ``log_dir`` log records are dropped.
    """
    logger = get_logger()
    level_value = getattr(logging, level.strip().upper(), logging.INFO)
    logger.setLevel(level_value)

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    log_file = log_dir / filename if log_dir is not None else None
    handler = _build_handler(stream, log_file)
    handler.setFormatter(
        logging.Formatter(LOG_FORMATS.get(format_name, LOG_FORMATS["text"]))
    )
    logger.addHandler(handler)
    logger.propagate = False
    return handler


def log_event(logger: logging.Logger, event: str, **fields: Any) -> None:
    """Emit one structured record, e.g. ``{"event": "navigate.enter", ...}``."""
    payload = {"event": event, **fields}
    logger.info(json.dumps(payload, sort_keys=True, default=str))
