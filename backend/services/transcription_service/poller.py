"""Polling of a Transcribe job with multiplicative backoff."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterator

from .errors import JobFailedError, PollTimeoutError
from .schemas import JobStatus, TranscriptionJob


LOGGER = logging.getLogger(__name__)

DEFAULT_FAILURE_REASON = "Unknown failure"


def backoff_delays(
    initial_ms: float,
    factor: float,
    maximum_ms: float,
    attempts: int,
) -> Iterator[float]:
    """Yield ``attempts`` delays in milliseconds: initial, then x factor, capped at maximum."""

    delay = min(float(initial_ms), float(maximum_ms))
    for _ in range(attempts):
        yield delay
        delay = min(delay * factor, float(maximum_ms))


class StatusPoller:
    """Waits for a job to reach COMPLETED or FAILED within a fixed attempt budget.

    Each attempt sleeps for the current delay and then queries the job. With
    ``double_wait`` the same delay is slept again after the query, which
    reproduces the older two-waits-per-attempt timing. Statuses other
    than COMPLETED and FAILED (QUEUED, IN_PROGRESS, anything new) keep the
    loop going.
    """

    def __init__(
        self,
        describe: Callable[[str], TranscriptionJob],
        *,
        max_attempts: int = 20,
        initial_delay_ms: float = 1000,
        max_delay_ms: float = 5000,
        backoff_factor: float = 1.25,
        double_wait: bool = False,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._describe = describe
        self.max_attempts = max_attempts
        self.initial_delay_ms = initial_delay_ms
        self.max_delay_ms = max_delay_ms
        self.backoff_factor = backoff_factor
        self.double_wait = double_wait
        self._sleep = sleep

    def delays(self) -> Iterator[float]:
        return backoff_delays(
            self.initial_delay_ms,
            self.backoff_factor,
            self.max_delay_ms,
            self.max_attempts,
        )

    def wait(self, job_name: str) -> TranscriptionJob:
        for attempt, delay_ms in enumerate(self.delays(), start=1):
            self._sleep(delay_ms / 1000)
            job = self._describe(job_name)
            if self.double_wait:
                self._sleep(delay_ms / 1000)

            LOGGER.debug("Job %s attempt %d status %s", job_name, attempt, job.status)
            status = job.job_status
            if status is None or not status.is_terminal:
                continue
            if status is JobStatus.FAILED:
                reason = job.failure_reason or DEFAULT_FAILURE_REASON
                LOGGER.error("Transcription job %s failed: %s", job_name, reason)
                raise JobFailedError(reason)
            LOGGER.info("Transcription job %s %s after %d attempts", job_name, status.value, attempt)
            return job

        LOGGER.error(
            "Transcription job %s %s after %d attempts",
            job_name,
            JobStatus.TIMED_OUT.value,
            self.max_attempts,
        )
        raise PollTimeoutError(job_name, self.max_attempts)


__all__ = ["StatusPoller", "backoff_delays"]
