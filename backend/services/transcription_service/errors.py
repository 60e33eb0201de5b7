"""Error taxonomy for the transcription handlers.

Every error carries the human ``message`` and optional ``detail`` that end up
in the 500 response body, so handlers can format them without inspecting the
concrete type.
"""

from __future__ import annotations

GENERIC_ERROR_MESSAGE = "Error processing transcription job."


class TranscriptionError(Exception):
    """Base class for failures surfaced to the caller."""

    default_message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None, detail: str = "") -> None:
        self.message = message or self.default_message
        self.detail = detail or ""
        super().__init__(self.message if not self.detail else f"{self.message} {self.detail}")


class ValidationError(TranscriptionError):
    """The inbound request is missing, malformed or lacks the audio URI."""

    default_message = "Invalid transcription request."


class ConfigurationError(TranscriptionError):
    """A setting required by the requested operation is not configured."""


class SubmissionError(TranscriptionError):
    """AWS Transcribe rejected the job creation request."""


class StatusQueryError(TranscriptionError):
    """Reading the job status from AWS Transcribe failed."""


class JobFailedError(TranscriptionError):
    default_message = "Transcription job failed."

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(detail=reason)


class PollTimeoutError(TranscriptionError):
    default_message = "Transcription job timed out."

    def __init__(self, job_name: str, attempts: int) -> None:
        self.job_name = job_name
        self.attempts = attempts
        super().__init__()


class FetchError(TranscriptionError):
    """The transcript document could not be downloaded or parsed."""

    def __init__(self, detail: str, uri: str | None = None) -> None:
        self.uri = uri
        super().__init__(detail=detail)


class UnexpectedError(TranscriptionError):
    """Anything the handlers did not anticipate."""


__all__ = [
    "ConfigurationError",
    "FetchError",
    "GENERIC_ERROR_MESSAGE",
    "JobFailedError",
    "PollTimeoutError",
    "StatusQueryError",
    "SubmissionError",
    "TranscriptionError",
    "UnexpectedError",
    "ValidationError",
]
