from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class JobStatus(str, Enum):
    QUEUED = "QUEUED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    # Never reported by AWS; inferred when the poll budget runs out.
    TIMED_OUT = "TIMED_OUT"

    @property
    def is_terminal(self) -> bool:
        return self in {JobStatus.COMPLETED, JobStatus.FAILED, JobStatus.TIMED_OUT}


class TranscriptionRequest(BaseModel):
    """Body accepted by the synchronous transcription endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    audio_file_url: str = Field(..., alias="audioFileUrl", min_length=1)


class TranscriptionJob(BaseModel):
    """Snapshot of a job as reported by AWS Transcribe."""

    job_name: str
    status: str = JobStatus.IN_PROGRESS.value
    language_code: Optional[str] = None
    media_uri: Optional[str] = None
    failure_reason: Optional[str] = None
    transcript_uri: Optional[str] = None

    @classmethod
    def from_aws(cls, payload: Dict[str, Any]) -> "TranscriptionJob":
        job = payload.get("TranscriptionJob", {})
        return cls(
            job_name=job.get("TranscriptionJobName", ""),
            status=job.get("TranscriptionJobStatus", JobStatus.IN_PROGRESS.value),
            language_code=job.get("LanguageCode"),
            media_uri=job.get("Media", {}).get("MediaFileUri"),
            failure_reason=job.get("FailureReason"),
            transcript_uri=job.get("Transcript", {}).get("TranscriptFileUri"),
        )

    @property
    def job_status(self) -> Optional[JobStatus]:
        """Status reported by AWS, or None for values this client does not know."""

        try:
            status = JobStatus(self.status)
        except ValueError:
            return None
        # TIMED_OUT is only ever inferred locally.
        return None if status is JobStatus.TIMED_OUT else status

    @property
    def is_completed(self) -> bool:
        return self.job_status is JobStatus.COMPLETED

    @property
    def is_failed(self) -> bool:
        return self.job_status is JobStatus.FAILED


__all__ = ["JobStatus", "TranscriptionJob", "TranscriptionRequest"]
