"""Thin wrapper around the AWS Transcribe job operations."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .errors import StatusQueryError, SubmissionError
from .schemas import TranscriptionJob
from .utils import build_job_name


LOGGER = logging.getLogger(__name__)


def _client_error_detail(exc: Exception) -> str:
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        message = error.get("Message") or str(exc)
        code = error.get("Code")
        return f"{code}: {message}" if code else message
    return str(exc)


class JobSubmitter:
    """Starts and describes Transcribe jobs using a shared boto3 client."""

    def __init__(
        self,
        client,
        *,
        language_code: str = "en-US",
        job_prefix: str = "transcription-job",
        job_name_factory: Optional[Callable[[str], str]] = None,
    ) -> None:
        self._client = client
        self._language_code = language_code
        self._job_prefix = job_prefix
        self._job_name_factory = job_name_factory or build_job_name

    def start(
        self,
        media_uri: str,
        *,
        language_code: Optional[str] = None,
        output_bucket: Optional[str] = None,
        output_key: Optional[str] = None,
    ) -> TranscriptionJob:
        job_name = self._job_name_factory(self._job_prefix)
        job_args: Dict[str, Any] = {
            "TranscriptionJobName": job_name,
            "LanguageCode": language_code or self._language_code,
            "Media": {"MediaFileUri": media_uri},
        }
        if output_bucket:
            job_args["OutputBucketName"] = output_bucket
            if output_key:
                job_args["OutputKey"] = output_key
        else:
            job_args["Settings"] = {
                "ShowSpeakerLabels": False,
                "ChannelIdentification": False,
            }

        LOGGER.info("Starting transcription job %s for %s", job_name, media_uri)
        try:
            response = self._client.start_transcription_job(**job_args)
        except (ClientError, BotoCoreError) as exc:
            LOGGER.error("Transcription job %s failed to start", job_name, exc_info=True)
            raise SubmissionError(detail=_client_error_detail(exc)) from exc

        job = TranscriptionJob.from_aws(response)
        if not job.job_name:
            job = job.model_copy(update={"job_name": job_name})
        return job

    def describe(self, job_name: str) -> TranscriptionJob:
        try:
            response = self._client.get_transcription_job(TranscriptionJobName=job_name)
        except (ClientError, BotoCoreError) as exc:
            LOGGER.error("Error retrieving transcription job %s", job_name, exc_info=True)
            raise StatusQueryError(detail=_client_error_detail(exc)) from exc
        return TranscriptionJob.from_aws(response)


__all__ = ["JobSubmitter"]
