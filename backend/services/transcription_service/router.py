from __future__ import annotations

import json
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from .deps import get_transcription_service
from .handlers import dispatch_handler, transcribe_handler
from .service import TranscriptionService


router = APIRouter(tags=["Transcriptions"])


def _to_http(result: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=result["statusCode"], content=json.loads(result["body"]))


@router.post("/transcriptions")
async def create_transcription(
    request: Request,
    service: TranscriptionService = Depends(get_transcription_service),
):
    raw_body = await request.body()
    event = {
        "httpMethod": "POST",
        "path": request.url.path,
        "body": raw_body.decode("utf-8", errors="replace") if raw_body else None,
    }
    result = await run_in_threadpool(lambda: transcribe_handler(event, None, service=service))
    return _to_http(result)


@router.post("/transcriptions/dispatch")
async def dispatch_transcription(
    request: Request,
    service: TranscriptionService = Depends(get_transcription_service),
):
    event = {"httpMethod": "POST", "path": request.url.path}
    result = await run_in_threadpool(lambda: dispatch_handler(event, None, service=service))
    return _to_http(result)
