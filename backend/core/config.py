from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Backend
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    APP_DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Lexicon (None = the lexicon shipped with languages.russian)
    LEXICON_PATH: Path | None = None

    # Oddity generator: chance that each modifier category contributes a word
    PROBABILITY_ODDITY: float = Field(0.2, ge=0.0, le=1.0)
    PROBABILITY_SIZE: float = Field(0.3, ge=0.0, le=1.0)
    PROBABILITY_SHAPE: float = Field(0.3, ge=0.0, le=1.0)
    PROBABILITY_FEEL: float = Field(0.1, ge=0.0, le=1.0)
    PROBABILITY_COLOR: float = Field(0.2, ge=0.0, le=1.0)
    PROBABILITY_MATERIAL: float = Field(0.7, ge=0.0, le=1.0)
    PROBABILITY_WITH: float = Field(0.1, ge=0.0, le=1.0)

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
