"""Domain logic tying submission, polling and transcript retrieval together."""

from __future__ import annotations

import logging
from typing import Optional

from core.config import Settings

from .errors import ConfigurationError
from .fetcher import TranscriptFetcher
from .poller import StatusPoller
from .schemas import TranscriptionJob
from .submission import JobSubmitter
from .utils import normalize_bucket_name


LOGGER = logging.getLogger(__name__)


class TranscriptionService:
    """High level API used by the Lambda handlers and the HTTP router."""

    def __init__(
        self,
        *,
        submitter: JobSubmitter,
        poller: StatusPoller,
        fetcher: TranscriptFetcher,
        settings: Settings,
    ) -> None:
        self._submitter = submitter
        self._poller = poller
        self._fetcher = fetcher
        self._settings = settings

    @classmethod
    def from_settings(cls, settings: Settings, *, client, session=None, sleep=None) -> "TranscriptionService":
        submitter = JobSubmitter(
            client,
            language_code=settings.TRANSCRIBE_LANGUAGE_CODE,
            job_prefix=settings.TRANSCRIPTION_JOB_PREFIX,
        )
        poller_kwargs = {"sleep": sleep} if sleep is not None else {}
        poller = StatusPoller(
            submitter.describe,
            max_attempts=settings.POLL_MAX_ATTEMPTS,
            initial_delay_ms=settings.POLL_INITIAL_DELAY_MS,
            max_delay_ms=settings.POLL_MAX_DELAY_MS,
            backoff_factor=settings.POLL_BACKOFF_FACTOR,
            double_wait=settings.POLL_DOUBLE_WAIT,
            **poller_kwargs,
        )
        fetcher = TranscriptFetcher(session, timeout_seconds=settings.TRANSCRIPT_FETCH_TIMEOUT_SECONDS)
        return cls(submitter=submitter, poller=poller, fetcher=fetcher, settings=settings)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def transcribe(self, media_uri: str) -> str:
        """Start a job for ``media_uri``, wait for it and return the transcript text."""

        job = self._submitter.start(media_uri)
        finished = self._poller.wait(job.job_name)
        return self._fetcher.fetch(finished.transcript_uri or "")

    def dispatch(self) -> TranscriptionJob:
        """Start a job for the configured media and return without waiting."""

        media_uri = self._settings.DISPATCH_MEDIA_URI.strip()
        if not media_uri:
            raise ConfigurationError(detail="DISPATCH_MEDIA_URI is not configured")
        try:
            bucket = normalize_bucket_name(self._settings.DISPATCH_OUTPUT_BUCKET)
        except ValueError as exc:
            raise ConfigurationError(detail=f"DISPATCH_OUTPUT_BUCKET: {exc}") from exc

        job = self._submitter.start(
            media_uri,
            output_bucket=bucket,
            output_key=self._settings.DISPATCH_OUTPUT_KEY or None,
        )
        LOGGER.info("Dispatched transcription job %s with status %s", job.job_name, job.status)
        return job


__all__ = ["TranscriptionService"]
