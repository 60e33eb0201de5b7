"""Parsing of the inbound Lambda event into a transcription request."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError
from .schemas import TranscriptionRequest

MISSING_BODY_MESSAGE = "Request body is missing."
MALFORMED_BODY_MESSAGE = "Invalid JSON format in request body."
MISSING_FIELD_MESSAGE = "Missing audioFileUrl in request."


def _decode_body(event: Dict[str, Any]) -> Any:
    body = event.get("body")
    if body is None or body == "":
        raise ValidationError(MISSING_BODY_MESSAGE)
    if isinstance(body, dict):
        return body
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8", errors="replace")
    if not isinstance(body, str):
        raise ValidationError(MALFORMED_BODY_MESSAGE, detail=f"Unsupported body type {type(body).__name__}")

    if event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise ValidationError(MALFORMED_BODY_MESSAGE, detail=str(exc)) from exc

    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise ValidationError(MALFORMED_BODY_MESSAGE, detail=str(exc)) from exc


def parse_transcription_request(event: Dict[str, Any]) -> TranscriptionRequest:
    """Extract the audio URI from an API Gateway style event.

    The body may arrive as a JSON string, an already decoded mapping, or a
    base64 string when the gateway flags ``isBase64Encoded``. The three
    failure modes (missing body, malformed body, missing ``audioFileUrl``)
    raise ``ValidationError`` with distinct messages.
    """

    if not isinstance(event, dict):
        raise ValidationError(MISSING_BODY_MESSAGE)
    data = _decode_body(event)
    if not isinstance(data, dict):
        raise ValidationError(MALFORMED_BODY_MESSAGE, detail="Request body must be a JSON object")

    url = data.get("audioFileUrl")
    if not isinstance(url, str) or not url.strip():
        raise ValidationError(MISSING_FIELD_MESSAGE)
    try:
        return TranscriptionRequest(audioFileUrl=url.strip())
    except PydanticValidationError as exc:
        raise ValidationError(MISSING_FIELD_MESSAGE, detail=str(exc)) from exc


__all__ = [
    "MALFORMED_BODY_MESSAGE",
    "MISSING_BODY_MESSAGE",
    "MISSING_FIELD_MESSAGE",
    "parse_transcription_request",
]
