"""Lambda-style handlers that never raise past the invocation boundary."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Optional

from .errors import GENERIC_ERROR_MESSAGE, ConfigurationError, TranscriptionError, UnexpectedError
from .responses import (
    COMPLETED_MESSAGE,
    STARTED_MESSAGE,
    dispatch_response,
    error_response,
    success_response,
)
from .service import TranscriptionService
from .validation import parse_transcription_request


LOGGER = logging.getLogger(__name__)


def _log_event(event: Any) -> None:
    try:
        LOGGER.info("Received event: %s", json.dumps(event, default=str))
    except (TypeError, ValueError):
        LOGGER.info("Received event of type %s", type(event).__name__)


def _guarded(operation: Callable[[], Dict[str, Any]]) -> Dict[str, Any]:
    try:
        return operation()
    except TranscriptionError as exc:
        LOGGER.warning("Transcription request failed: %s", exc)
        return error_response(exc.message, exc.detail)
    except Exception as exc:
        LOGGER.error("Error processing transcription job", exc_info=True)
        unexpected = UnexpectedError(GENERIC_ERROR_MESSAGE, detail=str(exc))
        return error_response(unexpected.message, unexpected.detail)


def _resolve(
    service: Optional[TranscriptionService],
    service_factory: Optional[Callable[[], TranscriptionService]],
) -> TranscriptionService:
    if service is not None:
        return service
    if service_factory is None:
        raise ConfigurationError(detail="No transcription service available")
    return service_factory()


def transcribe_handler(
    event: Dict[str, Any],
    _context: Any,
    *,
    service: Optional[TranscriptionService] = None,
    service_factory: Optional[Callable[[], TranscriptionService]] = None,
) -> Dict[str, Any]:
    """Validate the request, run the job to completion and return its transcript.

    ``service_factory`` is invoked inside the error boundary, so bootstrap
    failures become a 500 response like any other error.
    """

    _log_event(event)

    def _run() -> Dict[str, Any]:
        request = parse_transcription_request(event)
        active = _resolve(service, service_factory)
        transcript = active.transcribe(request.audio_file_url)
        return success_response(COMPLETED_MESSAGE, transcript)

    return _guarded(_run)


def dispatch_handler(
    event: Dict[str, Any],
    _context: Any,
    *,
    service: Optional[TranscriptionService] = None,
    service_factory: Optional[Callable[[], TranscriptionService]] = None,
) -> Dict[str, Any]:
    """Start a job for the configured media and acknowledge immediately."""

    _log_event(event)

    def _run() -> Dict[str, Any]:
        job = _resolve(service, service_factory).dispatch()
        return dispatch_response(STARTED_MESSAGE, job)

    return _guarded(_run)


__all__ = ["dispatch_handler", "transcribe_handler"]
