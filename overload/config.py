from __future__ import annotations

import logging
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Engine caps
    MAX_SETS_PER_EXERCISE: int = 5
    MIN_SETS_PER_EXERCISE: int = 1
    MAX_WEEKLY_SETS_ADDED: int = 2
    FATIGUE_SETS_REMOVED: int = 2
    MAX_FATIGUE_SETS_PER_EXERCISE: int = 2
    MIN_ADJUSTABLE_WEIGHT: float = 5.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]


def configure_logging(settings: Settings | None = None) -> None:
    s = settings or get_settings()
    level = getattr(logging, s.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("overload").setLevel(level)
