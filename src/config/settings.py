"""
Rock Paper Scissors - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from src.engine.base import DEFAULT_SCORE_DELAY, DEFAULT_TOTAL_ROUNDS, MatchConfig

_SECRET_KEYS = ("TOTAL_ROUNDS", "SCORE_DELAY", "RNG_SEED", "DEBUG", "LOG_LEVEL")

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets.toml outside Streamlit Cloud
        pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Match
    total_rounds: int = Field(default=DEFAULT_TOTAL_ROUNDS, gt=0)
    score_delay: float = Field(default=DEFAULT_SCORE_DELAY, ge=0)
    rng_seed: int | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {value!r}.")
        return level

    def to_match_config(self) -> MatchConfig:
        """Match configuration for a new controller."""
        return MatchConfig(total_rounds=self.total_rounds, score_delay=self.score_delay)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Set the root log level and format from settings."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level
    logging.basicConfig(level=level, format=_LOG_FORMAT, force=True)
    logging.getLogger(__name__).debug(
        "Logging configured at %s", logging.getLevelName(logging.getLogger().level)
    )
