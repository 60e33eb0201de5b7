"""Entry points for the AWS Lambda functions.

The kernel, and with it the boto3 client and HTTP session, is bootstrapped on
the first invocation and reused by every warm invocation of the process.
Bootstrapping happens inside the handlers' error boundary.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from kernel import Kernel
from kernel.runtime import get_kernel, has_kernel

from . import handlers
from .deps import resolve_transcription_service
from .errors import ConfigurationError
from .service import TranscriptionService


LOGGER = logging.getLogger(__name__)


def _kernel() -> Kernel:
    if has_kernel():
        return get_kernel()
    from main import kernel

    logging.getLogger().setLevel(kernel.settings.LOG_LEVEL.upper())
    return kernel


def _service() -> TranscriptionService:
    try:
        return resolve_transcription_service(_kernel())
    except ValueError as exc:
        # Covers pydantic settings validation as well as rejected poll/fetch limits.
        LOGGER.error("Transcription service could not be configured", exc_info=True)
        raise ConfigurationError(detail=str(exc)) from exc


def transcribe(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    return handlers.transcribe_handler(event, context, service_factory=_service)


def dispatch(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    return handlers.dispatch_handler(event, context, service_factory=_service)


__all__ = ["dispatch", "transcribe"]
