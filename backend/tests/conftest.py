"""Test configuration utilities shared across the backend suite."""

from __future__ import annotations

import os
import pathlib
import sys

import pytest

TESTS_DIR = pathlib.Path(__file__).resolve().parent
ROOT = TESTS_DIR.parent
for _path in (ROOT, TESTS_DIR):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))


_DEFAULT_ENV = {
    "AWS_REGION": "us-east-1",
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "testing",
    "AWS_SECRET_ACCESS_KEY": "testing",
    "TRANSCRIBE_LANGUAGE_CODE": "en-US",
    "DISPATCH_MEDIA_URI": "s3://input-bucket/audio/sample.mp3",
    "DISPATCH_OUTPUT_BUCKET": "arn:aws:s3:::output-bucket",
}


for _key, _value in _DEFAULT_ENV.items():
    os.environ.setdefault(_key, _value)


from core.config import Settings  # noqa: E402
from fakes import SleepRecorder  # noqa: E402
from services.transcription_service.service import TranscriptionService  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def build_service(settings: Settings, sleeper: SleepRecorder):
    def _build(client, session=None, **overrides) -> TranscriptionService:
        active = settings.model_copy(update=overrides) if overrides else settings
        return TranscriptionService.from_settings(active, client=client, session=session, sleep=sleeper)

    return _build
