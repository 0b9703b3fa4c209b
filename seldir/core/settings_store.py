from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from seldir.core.logging import get_logger
from seldir.core.settings_model import CURRENT_SCHEMA_VERSION, SettingsModel

logger = get_logger(__name__)

# Version 0 files kept preferences at the top level.
_LEGACY_PREFERENCE_KEYS = {
    "accent_color": "accentColor",
    "show_hidden": "showHidden",
    "startup_path": "startupPath",
}


class SettingsStore:
    """JSON-backed user preferences for seldir."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        """Return normalized settings, upgrading the file on disk if needed.

        A missing file yields defaults and is not created. A corrupt file is
        backed up and replaced with defaults.
        """
        raw = self._read_raw()
        settings = self._normalize(self._migrate(raw))
        if raw is not None and raw != settings:
            self._backup_raw_settings()
            self.save(settings)
        return settings

    def read(self) -> dict[str, Any]:
        """Return normalized settings without touching the file."""
        return self._normalize(self._migrate(self._read_raw()))

    def save(self, settings: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(settings, indent=4), encoding="utf-8")

    def update_show_hidden(self, settings: dict[str, Any], value: bool) -> None:
        settings.setdefault("userPreferences", {})["showHidden"] = bool(value)
        self.save(settings)

    def update_accent_color(self, settings: dict[str, Any], color: str) -> None:
        settings.setdefault("userPreferences", {})["accentColor"] = str(color)
        self.save(settings)

    def _read_raw(self) -> Any:
        if not self._path.exists():
            return None
        try:
            return json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable settings %s: %s", self._path, exc)
            return {}

    def _migrate(self, data: Any) -> dict[str, Any]:
        if not isinstance(data, dict):
            return {}
        version = data.get("schemaVersion")
        if isinstance(version, int) and version >= CURRENT_SCHEMA_VERSION:
            return data
        upgraded = {
            key: value for key, value in data.items() if key not in _LEGACY_PREFERENCE_KEYS
        }
        preferences = dict(upgraded.get("userPreferences") or {})
        for legacy, current in _LEGACY_PREFERENCE_KEYS.items():
            if legacy in data:
                preferences.setdefault(current, data[legacy])
        upgraded["userPreferences"] = preferences
        upgraded["schemaVersion"] = CURRENT_SCHEMA_VERSION
        return upgraded

    def _normalize(self, data: dict[str, Any]) -> dict[str, Any]:
        try:
            model = SettingsModel.model_validate(data)
        except ValidationError as exc:
            logger.warning("Resetting invalid settings %s: %s", self._path, exc)
            model = SettingsModel()
        return model.model_dump()

    def _backup_raw_settings(self) -> None:
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
        backup_path = self._path.with_name(f"{self._path.stem}.bak-{timestamp}.json")
        try:
            backup_path.write_bytes(self._path.read_bytes())
        except OSError as exc:
            logger.warning("Unable to back up settings to %s: %s", backup_path, exc)
