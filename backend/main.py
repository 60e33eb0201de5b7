"""Application entry point bootstrapping the microkernel and plugins."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI

from kernel import Kernel
from services.transcription_service.plugin import TranscriptionPlugin


def _env_flag(value: str | None) -> bool:
    if value is None:
        return False
    return value.lower() in {"1", "true", "yes", "on"}


def create_kernel() -> Kernel:
    debug = _env_flag(os.getenv("DEBUG"))
    kernel = Kernel(debug=debug)
    kernel.register_plugin(TranscriptionPlugin())
    return kernel


kernel = create_kernel()
app: FastAPI = kernel.app


@app.get("/api/")
def root():
    return {"message": "Transcribe gateway is running"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=kernel.settings.LOG_LEVEL.upper())
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
