from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

CURRENT_SCHEMA_VERSION = 1


class UserPreferences(BaseModel):
    model_config = ConfigDict(extra="allow")

    accentColor: str = "red"
    showHidden: bool = False
    startupPath: str = ""


class SettingsModel(BaseModel):
    """Shape of ``settings.json``. Unknown keys are preserved."""

    model_config = ConfigDict(extra="allow")

    schemaVersion: int = CURRENT_SCHEMA_VERSION
    userPreferences: UserPreferences = Field(default_factory=UserPreferences)
