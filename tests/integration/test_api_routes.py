"""Tests for the FastAPI surface."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from clipgen.core.exceptions import InitiationError, OperationFailedError
from clipgen.main import app
from clipgen.models.schemas import GenerationResult


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def coordinator():
    coordinator = MagicMock()
    coordinator.run = AsyncMock(return_value=GenerationResult(video_asset="data:video/mp4;base64,AAAA"))
    with patch("clipgen.api.routes_video.get_coordinator", return_value=coordinator):
        yield coordinator


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_generate_returns_result(client, coordinator):
    """Test a successful generation request."""
    response = client.post("/videos/generate", json={"prompt": "a sunset"})

    assert response.status_code == 200
    assert response.json() == {"video_asset": "data:video/mp4;base64,AAAA", "audio_asset": None}
    request = coordinator.run.await_args.args[0]
    assert request.aspect_ratio.value == "16:9"
    assert request.language_code.value == "en"


@pytest.mark.parametrize(
    "error, fragment",
    [
        (InitiationError("Failed to initiate video generation: denied"), "Failed to initiate video generation"),
        (OperationFailedError("Video generation failed: quota exceeded"), "quota exceeded"),
    ],
)
def test_generate_video_failure_is_502(client, coordinator, error, fragment):
    """Test that video failures come back as 502 with the message."""
    coordinator.run.side_effect = error

    response = client.post("/videos/generate", json={"prompt": "a sunset", "narration_text": "Hello"})

    assert response.status_code == 502
    assert fragment in response.json()["detail"]


@pytest.mark.parametrize(
    "payload",
    [
        {"prompt": ""},
        {"prompt": "   "},
        {"prompt": "a sunset", "aspect_ratio": "21:9"},
        {"prompt": "a sunset", "language_code": "fr"},
        {},
    ],
)
def test_generate_rejects_invalid_requests(client, coordinator, payload):
    """Test request validation."""
    response = client.post("/videos/generate", json=payload)

    assert response.status_code == 422
    coordinator.run.assert_not_called()


def test_styles_and_languages(client):
    styles = client.get("/videos/styles").json()
    languages = client.get("/videos/languages").json()

    assert styles[0] == {
        "id": "style-1",
        "name": "Cinematic",
        "description": "A dramatic, moody, and realistic cinematic style.",
    }
    assert {language["code"] for language in languages} == {"en", "hi", "te"}
