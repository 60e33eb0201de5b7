"""Kernel package exposing the runtime entrypoints."""

from .kernel import CAPABILITY_HTTP_SESSION, CAPABILITY_SETTINGS, CAPABILITY_TRANSCRIBE_CLIENT, Kernel
from .plugin import ServicePlugin

__all__ = [
    "CAPABILITY_HTTP_SESSION",
    "CAPABILITY_SETTINGS",
    "CAPABILITY_TRANSCRIBE_CLIENT",
    "Kernel",
    "ServicePlugin",
]
