from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_path

APP_NAME = "seldir"
APP_AUTHOR = "seldir"
SETTINGS_FILENAME = "settings.json"


def settings_path() -> Path:
    return Path(user_config_path(APP_NAME, APP_AUTHOR)) / SETTINGS_FILENAME
