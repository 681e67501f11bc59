"""Application settings and configuration management."""

import os
from functools import lru_cache

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


class Settings:
    """Application settings loaded from environment variables."""

    # API Keys
    GOOGLE_API_KEY: str = os.getenv("GOOGLE_API_KEY", "")

    # App settings
    DEFAULT_INSPECTOR: str = os.getenv("DEFAULT_INSPECTOR", "")

    # Classification thresholds (inclusive upper bounds of each tier)
    HIGH_RISK_THRESHOLD: float = _env_float("HIGH_RISK_THRESHOLD", 2.5)
    MODERATE_THRESHOLD: float = _env_float("MODERATE_THRESHOLD", 3.5)

    # A dimension score at or below this value counts as "low" in the heat table
    LOW_SCORE_CUTOFF: int = _env_int("LOW_SCORE_CUTOFF", 2)

    # LLM settings (Gemini)
    LLM_MODEL: str = os.getenv("LLM_MODEL", "gemini-2.5-flash")
    LLM_MAX_TOKENS: int = _env_int("LLM_MAX_TOKENS", 4096)
    LLM_TEMPERATURE: float = _env_float("LLM_TEMPERATURE", 0.3)

    # Background narrative requests
    NARRATIVE_WORKERS: int = _env_int("NARRATIVE_WORKERS", 2)

    @property
    def has_google_key(self) -> bool:
        return bool(self.GOOGLE_API_KEY)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
