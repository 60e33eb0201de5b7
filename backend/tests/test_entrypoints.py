"""Tests for the kernel wiring, the Lambda entry points and the HTTP router."""

from __future__ import annotations

import json

import pytest

from core.config import Settings
from kernel import CAPABILITY_HTTP_SESSION, CAPABILITY_TRANSCRIBE_CLIENT, Kernel
from kernel.runtime import get_kernel, reset_kernel
from services.transcription_service import lambda_entry
from services.transcription_service.deps import get_transcription_service, resolve_transcription_service
from services.transcription_service.plugin import TranscriptionPlugin
from services.transcription_service.service import TranscriptionService

from fakes import FakeSession, FakeTranscribeClient, make_response


class _FakeKernel(Kernel):
    """Kernel whose AWS client and HTTP session are replaced with fakes."""

    def __init__(self, client, session, **kwargs):
        self._fake_client = client
        self._fake_session = session
        super().__init__(**kwargs)

    def _bootstrap_infrastructure(self) -> None:
        super()._bootstrap_infrastructure()
        self._capability_cache[CAPABILITY_TRANSCRIBE_CLIENT] = self._fake_client
        self._capability_cache[CAPABILITY_HTTP_SESSION] = self._fake_session


@pytest.fixture
def fake_kernel(settings):
    client = FakeTranscribeClient(["COMPLETED"])
    session = FakeSession(make_response(200, {"results": {"transcripts": [{"transcript": "from lambda"}]}}))
    fast = settings.model_copy(update={"POLL_INITIAL_DELAY_MS": 0, "POLL_MAX_DELAY_MS": 0})
    kernel = _FakeKernel(client, session, settings=fast)
    kernel.register_plugin(TranscriptionPlugin())
    yield kernel
    reset_kernel()


def test_kernel_creates_transcribe_client_once():
    kernel = Kernel(settings=Settings(AWS_REGION="eu-west-1"))
    try:
        client = kernel.resolve(CAPABILITY_TRANSCRIBE_CLIENT)
        assert client is kernel.resolve(CAPABILITY_TRANSCRIBE_CLIENT)
        assert client.meta.region_name == "eu-west-1"
        assert client.meta.service_model.service_name == "transcribe"
    finally:
        reset_kernel()


def test_kernel_rejects_duplicate_plugins(fake_kernel):
    with pytest.raises(ValueError):
        fake_kernel.register_plugin(TranscriptionPlugin())


def test_service_is_shared_between_invocations(fake_kernel):
    first = get_transcription_service()
    assert isinstance(first, TranscriptionService)
    assert first is resolve_transcription_service(fake_kernel)


def test_lambda_transcribe_uses_active_kernel(fake_kernel):
    assert get_kernel() is fake_kernel
    response = lambda_entry.transcribe({"body": json.dumps({"audioFileUrl": "s3://b/a.mp3"})}, None)
    assert response["statusCode"] == 200
    assert json.loads(response["body"])["transcription"] == "from lambda"


def test_lambda_dispatch_uses_active_kernel(fake_kernel):
    response = lambda_entry.dispatch({}, None)
    assert response["statusCode"] == 200
    assert json.loads(response["body"])["jobName"].startswith("transcription-job-")


def test_router_returns_handler_status_and_body(fake_kernel):
    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    client = TestClient(fake_kernel.app)

    ok = client.post("/api/transcriptions", json={"audioFileUrl": "s3://b/a.mp3"})
    assert ok.status_code == 200
    assert ok.json() == {"message": "Transcription job completed successfully.", "transcription": "from lambda"}

    missing = client.post("/api/transcriptions")
    assert missing.status_code == 500
    assert missing.json() == {"message": "Request body is missing.", "error": ""}

    dispatched = client.post("/api/transcriptions/dispatch")
    assert dispatched.status_code == 200
    assert dispatched.json()["message"] == "Transcription job started successfully."


@pytest.mark.parametrize("entry", [lambda_entry.transcribe, lambda_entry.dispatch])
def test_lambda_bootstrap_failure_becomes_error_response(settings, entry):
    broken = settings.model_copy(update={"POLL_MAX_ATTEMPTS": 0})
    kernel = _FakeKernel(FakeTranscribeClient(), FakeSession(), settings=broken)
    kernel.register_plugin(TranscriptionPlugin())
    try:
        response = entry({"body": json.dumps({"audioFileUrl": "s3://b/a.mp3"})}, None)
    finally:
        reset_kernel()

    assert response["statusCode"] == 500
    body = json.loads(response["body"])
    assert body["message"] == "Error processing transcription job."
    assert "max_attempts" in body["error"]


def test_lambda_rejects_bad_body_before_bootstrap(monkeypatch):
    def _explode():
        raise AssertionError("service should not be resolved")

    monkeypatch.setattr(lambda_entry, "_service", _explode)
    response = lambda_entry.transcribe({"body": "{oops"}, None)

    assert response["statusCode"] == 500
    assert json.loads(response["body"])["message"] == "Invalid JSON format in request body."
