from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Pronunciation sink
    TTS_LANGUAGE_TAG: str = "de-DE"

    # Rendering of gaps in the source data (missing plural, missing conjugated form)
    MISSING_FORM_PLACEHOLDER: str = "—"

    # The irregular-verb badge is computed but hidden unless enabled
    SHOW_IRREGULAR_BADGE: bool = False

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
