"""Download of the transcript document published by a completed job."""

from __future__ import annotations

import json
import logging
import time
from typing import Callable, List, Optional
from urllib.parse import urlparse

import requests

from .errors import FetchError
from .utils import extract_transcript_text


LOGGER = logging.getLogger(__name__)

TIMEOUT_DETAIL = "Request timed out"
NETWORK_DETAIL = "Failed to fetch transcript from HTTPS URL"
PARSE_DETAIL = "Failed to parse transcript JSON"
SHAPE_DETAIL = "Transcript document is missing results.transcripts[0].transcript"
UNSUPPORTED_URI_DETAIL = "Unsupported transcript URI"

CHUNK_SIZE = 8192


class TranscriptFetcher:
    """Fetches ``results.transcripts[0].transcript`` from a result document URL.

    ``timeout_seconds`` is a single deadline for the whole download: it is
    passed to requests for the connect and each socket read, and the body is
    streamed so the total elapsed time is checked after every chunk. Once the
    deadline passes the response is closed and ``FetchError`` is raised.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        timeout_seconds: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._session = session or requests.Session()
        self.timeout_seconds = timeout_seconds
        self._clock = clock

    def _download(self, uri: str) -> bytes:
        deadline = self._clock() + self.timeout_seconds
        with self._session.get(uri, timeout=self.timeout_seconds, stream=True) as response:
            response.raise_for_status()
            chunks: List[bytes] = []
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if self._clock() > deadline:
                    LOGGER.error("Transcript download exceeded %.1fs", self.timeout_seconds)
                    raise FetchError(TIMEOUT_DETAIL, uri=uri)
                chunks.append(chunk)
            return b"".join(chunks)

    def fetch(self, uri: str) -> str:
        if urlparse(uri or "").scheme not in {"http", "https"}:
            raise FetchError(UNSUPPORTED_URI_DETAIL, uri=uri)

        try:
            body = self._download(uri)
        except requests.exceptions.Timeout as exc:
            LOGGER.error("Transcript fetch timed out after %.1fs", self.timeout_seconds)
            raise FetchError(TIMEOUT_DETAIL, uri=uri) from exc
        except requests.exceptions.RequestException as exc:
            LOGGER.error("Transcript fetch failed", exc_info=True)
            raise FetchError(NETWORK_DETAIL, uri=uri) from exc

        try:
            payload = json.loads(body)
        except ValueError as exc:
            LOGGER.error("Transcript document is not valid JSON")
            raise FetchError(PARSE_DETAIL, uri=uri) from exc

        text = extract_transcript_text(payload)
        if text is None:
            LOGGER.error("Transcript document has an unexpected shape")
            raise FetchError(SHAPE_DETAIL, uri=uri)
        LOGGER.info("Transcript fetched (%d characters)", len(text))
        return text


__all__ = ["TranscriptFetcher"]
