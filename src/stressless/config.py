"""Centralised application settings loaded from environment / .env file."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

_DB_DIR = _PROJECT_ROOT / "data"
_DEFAULT_DB_URL = f"sqlite+aiosqlite:///{_DB_DIR / 'stressless.db'}"


class Settings(BaseSettings):
    """All runtime configuration for StressLess.

    Values are read from environment variables first, then from a *.env* file
    located at the project root.
    """

    model_config = SettingsConfigDict(
        env_file=str(_PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Storage ───────────────────────────────────────────────
    database_url: str = _DEFAULT_DB_URL
    storage_key: str = "stressData"

    # ── Logging ───────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ── Scoring ───────────────────────────────────────────────
    score_noise_amplitude: float = 0.25
    score_fallback: float = 5.0

    # ── Insights ──────────────────────────────────────────────
    insights_max: int = 3
    insights_trend_window_days: int = 7
    insights_emit_stable_trend: bool = False

    # ── Simulated sensor ──────────────────────────────────────
    sensor_initial_heart_rate: float = 75.0
    sensor_step_count: int = 4200


@lru_cache
def get_settings() -> Settings:
    """Return a cached :class:`Settings` singleton."""
    return Settings()
