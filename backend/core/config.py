"""Runtime configuration helpers for the transcription gateway."""

from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    AWS_REGION: str = "us-east-1"
    TRANSCRIBE_LANGUAGE_CODE: str = "en-US"
    TRANSCRIPTION_JOB_PREFIX: str = "transcription-job"

    POLL_MAX_ATTEMPTS: int = 20
    POLL_INITIAL_DELAY_MS: int = 1000
    POLL_MAX_DELAY_MS: int = 5000
    POLL_BACKOFF_FACTOR: float = 1.25
    POLL_DOUBLE_WAIT: bool = False

    TRANSCRIPT_FETCH_TIMEOUT_MS: int = 5000

    DISPATCH_MEDIA_URI: str = ""
    DISPATCH_OUTPUT_BUCKET: str = ""
    DISPATCH_OUTPUT_KEY: Optional[str] = None

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def TRANSCRIPT_FETCH_TIMEOUT_SECONDS(self) -> float:
        return self.TRANSCRIPT_FETCH_TIMEOUT_MS / 1000


_settings: Optional[Settings] = None


def set_settings(settings: Settings) -> None:
    """Set the singleton settings instance used across the application."""

    global _settings
    _settings = settings


def get_settings() -> Settings:
    """Return the active settings instance, loading it from the environment if needed."""

    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


__all__ = ["Settings", "get_settings", "set_settings"]
