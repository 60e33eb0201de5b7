"""In-memory stand-ins for the Transcribe client and the HTTP session."""

from __future__ import annotations

import json
from typing import Any, Dict, List

import requests


def make_response(status_code: int = 200, body: Any = None, *, url: str = "https://x/out.json") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if body is None:
        body = b""
    elif isinstance(body, (dict, list)):
        body = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        body = body.encode("utf-8")
    response._content = body
    response._content_consumed = True
    return response


class FakeSession:
    """Stands in for ``requests.Session``; returns queued responses or raises queued errors."""

    def __init__(self, *outcomes) -> None:
        self.outcomes = list(outcomes)
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, timeout: float | None = None, stream: bool = False):
        self.calls.append({"url": url, "timeout": timeout})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeTranscribeClient:
    """Records Transcribe calls and replays a scripted list of job statuses."""

    def __init__(self, statuses=None, *, transcript_uri: str = "https://x/out.json", failure_reason: str | None = None):
        self.statuses = list(statuses or ["COMPLETED"])
        self.transcript_uri = transcript_uri
        self.failure_reason = failure_reason
        self.start_calls: List[Dict[str, Any]] = []
        self.get_calls: List[str] = []
        self.events: List[str] = []

    def start_transcription_job(self, **kwargs):
        self.start_calls.append(kwargs)
        self.events.append("start")
        return {
            "TranscriptionJob": {
                "TranscriptionJobName": kwargs["TranscriptionJobName"],
                "TranscriptionJobStatus": "IN_PROGRESS",
                "LanguageCode": kwargs.get("LanguageCode"),
                "Media": kwargs.get("Media", {}),
            }
        }

    def get_transcription_job(self, TranscriptionJobName: str):
        self.get_calls.append(TranscriptionJobName)
        self.events.append("get")
        status = self.statuses.pop(0) if self.statuses else "IN_PROGRESS"
        job: Dict[str, Any] = {
            "TranscriptionJobName": TranscriptionJobName,
            "TranscriptionJobStatus": status,
        }
        if status == "COMPLETED":
            job["Transcript"] = {"TranscriptFileUri": self.transcript_uri}
        if status == "FAILED" and self.failure_reason:
            job["FailureReason"] = self.failure_reason
        return {"TranscriptionJob": job}


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)



class DrippingResponse:
    """Streams a body one small chunk at a time and remembers whether it was closed."""

    def __init__(self, chunks, status_code: int = 200) -> None:
        self.chunks = list(chunks)
        self.status_code = status_code
        self.closed = False
        self.chunks_read = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False

    def close(self) -> None:
        self.closed = True

    def raise_for_status(self) -> None:
        return None

    def iter_content(self, chunk_size: int = 1):
        for chunk in self.chunks:
            self.chunks_read += 1
            yield chunk


class SteppingClock:
    """Monotonic clock that advances by ``step`` seconds every time it is read."""

    def __init__(self, step: float) -> None:
        self.step = step
        self.now = 0.0

    def __call__(self) -> float:
        current = self.now
        self.now += self.step
        return current
