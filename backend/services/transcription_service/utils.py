from __future__ import annotations

import re
import time
import uuid
from typing import Any, Dict, Optional

MAX_JOB_NAME_LENGTH = 200
_JOB_NAME_INVALID_CHARS = re.compile(r"[^0-9a-zA-Z._-]")


def build_job_name(prefix: str, *, now_ms: Optional[int] = None) -> str:
    """Return a Transcribe job name unique even for jobs started in the same millisecond."""

    timestamp = now_ms if now_ms is not None else int(time.time() * 1000)
    clean_prefix = _JOB_NAME_INVALID_CHARS.sub("-", prefix).strip("-") or "transcription-job"
    job_name = f"{clean_prefix}-{timestamp}-{uuid.uuid4().hex[:8]}"
    return job_name[-MAX_JOB_NAME_LENGTH:]


def normalize_bucket_name(bucket_identifier: str) -> str:
    """Return a usable bucket name extracted from an ARN or URI string."""

    bucket = bucket_identifier.strip()
    if not bucket:
        raise ValueError("S3 bucket identifier cannot be empty")

    if bucket.startswith("arn:"):
        # Standard bucket ARNs look like ``arn:aws:s3:::bucket-name``.
        if ":::" in bucket:
            bucket = bucket.split(":::")[-1]
        else:
            bucket = bucket.rsplit(":", 1)[-1]
    elif bucket.startswith("s3://"):
        bucket = bucket[5:]
    if "/" in bucket:
        bucket = bucket.split("/", 1)[0]

    if not bucket:
        raise ValueError("Could not determine S3 bucket name from identifier")

    return bucket


def extract_transcript_text(payload: Any) -> Optional[str]:
    """Return ``results.transcripts[0].transcript`` or None when the shape is wrong."""

    if not isinstance(payload, dict):
        return None
    results = payload.get("results")
    if not isinstance(results, dict):
        return None
    transcripts = results.get("transcripts")
    if not isinstance(transcripts, list) or not transcripts:
        return None
    first: Dict[str, Any] = transcripts[0] if isinstance(transcripts[0], dict) else {}
    text = first.get("transcript")
    if not isinstance(text, str):
        return None
    return text
