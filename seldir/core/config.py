from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SELDIR_", case_sensitive=False)

    log_level: str = "info"
    log_format: str = "json"
    log_dir: Path | None = None
    accent_color: str | None = None
    output_file: Path | None = None
    watch: bool = True


@lru_cache
def get_runtime_config() -> RuntimeConfig:
    return RuntimeConfig()
