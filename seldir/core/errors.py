from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning", "information"]

# Codes whose severity does not depend on where they are raised.
SEVERITY_OVERRIDES: dict[str, Severity] = {
    "navigation_invariant": "error",
    "output_file_unwritable": "error",
}


@dataclass
class SeldirError(Exception):
    """User-facing failure carrying a stable ``code`` for logs and tests."""

    code: str
    message: str
    detail: str | None = None
    severity: Severity = "error"

    def __str__(self) -> str:
        return f"{self.message} ({self.detail})" if self.detail else self.message


class NavigationInvariantError(SeldirError):
    """Raised when browser state would become invalid.

    This is a programming error. User-facing no-ops such as entering a file
    never raise it.
    """

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(code="navigation_invariant", message=message, detail=detail)


def format_error(error: BaseException) -> tuple[str, Severity]:
    """Return ``("[code] message (detail)", severity)`` for display."""
    if not isinstance(error, SeldirError):
        return str(error), "error"
    severity = SEVERITY_OVERRIDES.get(error.code, error.severity)
    return f"[{error.code}] {error}", severity


def wrap_error(
    error: BaseException,
    *,
    code: str,
    message: str,
    severity: Severity = "error",
) -> SeldirError:
    """Turn a library exception into a :class:`SeldirError`, keeping its text."""
    if isinstance(error, SeldirError):
        return error
    return SeldirError(code=code, message=message, detail=str(error), severity=severity)
