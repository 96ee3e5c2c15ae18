"""Application settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_SEED_PATH = Path(__file__).resolve().parent / "data" / "seed_crops.json"


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration — all values sourced from env vars or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Seed dataset ────────────────────────────────────────────────────────
    # Records live in process memory only; edits are lost on restart.
    seed_data_path: Path = _DEFAULT_SEED_PATH

    # ── HTTP ────────────────────────────────────────────────────────────────
    cors_allow_origins: list[str] = ["*"]

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.json


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
