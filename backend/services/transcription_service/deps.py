"""Dependency helpers for the transcription service."""

from __future__ import annotations

from kernel import CAPABILITY_HTTP_SESSION, CAPABILITY_SETTINGS, CAPABILITY_TRANSCRIBE_CLIENT, Kernel
from kernel.runtime import get_kernel

from .service import TranscriptionService

CAPABILITY_NAME = "capability.transcriptions.service"


def register_transcription_service(kernel: Kernel) -> None:
    def _factory(k: Kernel) -> TranscriptionService:
        return TranscriptionService.from_settings(
            k.resolve(CAPABILITY_SETTINGS),
            client=k.resolve(CAPABILITY_TRANSCRIBE_CLIENT),
            session=k.resolve(CAPABILITY_HTTP_SESSION),
        )

    kernel.register_capability(CAPABILITY_NAME, _factory)


def resolve_transcription_service(kernel: Kernel) -> TranscriptionService:
    return kernel.resolve(CAPABILITY_NAME)


def get_transcription_service() -> TranscriptionService:
    """FastAPI dependency resolving the shared transcription service."""

    return resolve_transcription_service(get_kernel())
