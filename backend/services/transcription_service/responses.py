"""Builders for the ``{statusCode, body}`` payloads returned to the Lambda host."""

from __future__ import annotations

import json
from typing import Any, Dict

from .schemas import TranscriptionJob

COMPLETED_MESSAGE = "Transcription job completed successfully."
STARTED_MESSAGE = "Transcription job started successfully."


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {"statusCode": status_code, "body": json.dumps(body)}


def success_response(message: str, transcription: str) -> Dict[str, Any]:
    return _response(200, {"message": message, "transcription": transcription})


def dispatch_response(message: str, job: TranscriptionJob) -> Dict[str, Any]:
    return _response(200, {"message": message, "jobName": job.job_name, "jobStatus": job.status})


def error_response(message: str, error: str = "") -> Dict[str, Any]:
    return _response(500, {"message": message, "error": error or ""})


__all__ = [
    "COMPLETED_MESSAGE",
    "STARTED_MESSAGE",
    "dispatch_response",
    "error_response",
    "success_response",
]
