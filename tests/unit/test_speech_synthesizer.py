"""Tests for Speech Synthesizer service."""

import asyncio
import base64
from unittest.mock import AsyncMock

import pytest

from clipgen.models.schemas import LanguageCode, MediaReference
from clipgen.services.audio_encoder import read_wav_header
from clipgen.services.speech_synthesizer import SpeechSynthesizer, decode_data_uri, select_voice

PCM = b"\x01\x00\x02\x00" * 100


def pcm_media(pcm: bytes = PCM) -> MediaReference:
    payload = base64.b64encode(pcm).decode("ascii")
    return MediaReference(
        url=f"data:audio/L16;codec=pcm;rate=24000;base64,{payload}",
        content_type="audio/L16;codec=pcm;rate=24000",
    )


@pytest.fixture
def speech_backend():
    backend = AsyncMock()
    backend.speak.return_value = pcm_media()
    return backend


@pytest.fixture
def speech_synthesizer(settings, mock_logger, speech_backend):
    """Create SpeechSynthesizer instance for testing."""
    return SpeechSynthesizer(settings, mock_logger, backend=speech_backend)


@pytest.mark.parametrize(
    "language, voice",
    [
        ("en", "Algenib"),
        ("hi", "hi-IN-Neural2-A"),
        ("te", "te-IN-Wavenet-A"),
        (LanguageCode.HINDI, "hi-IN-Neural2-A"),
        ("fr", "Algenib"),
        (None, "Algenib"),
    ],
)
def test_select_voice(language, voice):
    """Test language to voice mapping, with default fallback."""
    assert select_voice(language) == voice


def test_synthesize_returns_wav_data_uri(speech_synthesizer, speech_backend):
    """Test that PCM from the endpoint comes back as a WAV data URI."""
    audio = asyncio.run(speech_synthesizer.synthesize("Hello", LanguageCode.TELUGU))

    assert audio.startswith("data:audio/wav;base64,")
    wav_bytes = base64.b64decode(audio.split(",", 1)[1])
    header = read_wav_header(wav_bytes)
    assert (header.channels, header.sample_rate, header.bit_depth) == (1, 24000, 16)
    assert wav_bytes.endswith(PCM)

    speech_backend.speak.assert_awaited_once_with("Hello", "te-IN-Wavenet-A")


def test_synthesize_no_media_returns_none(speech_synthesizer, speech_backend, mock_logger):
    """Test that a response without media gives no audio and a warning."""
    speech_backend.speak.return_value = None

    outcome = asyncio.run(speech_synthesizer.synthesize_outcome("Hello", "hi"))

    assert outcome.audio is None
    assert not outcome.ok
    assert "no media" in outcome.failure
    mock_logger.warning.assert_called()


def test_synthesize_swallows_endpoint_errors(speech_synthesizer, speech_backend, mock_logger):
    """Test that endpoint exceptions never reach the caller."""
    speech_backend.speak.side_effect = ConnectionError("network down")

    outcome = asyncio.run(speech_synthesizer.synthesize_outcome("Hello"))

    assert outcome.audio is None
    assert "network down" in outcome.failure
    mock_logger.warning.assert_called()


def test_synthesize_swallows_encoding_errors(speech_synthesizer, speech_backend):
    """Test that a payload with a partial frame is reported as a failure, not raised."""
    speech_backend.speak.return_value = pcm_media(b"\x00\x01\x02")

    outcome = asyncio.run(speech_synthesizer.synthesize_outcome("Hello"))

    assert outcome.audio is None
    assert "EncodingError" in outcome.failure


def test_synthesize_rejects_non_data_uri(speech_synthesizer, speech_backend):
    """Test that a plain URL instead of a data URI yields no audio."""
    speech_backend.speak.return_value = MediaReference(url="https://example.com/audio.pcm")

    assert asyncio.run(speech_synthesizer.synthesize("Hello")) is None


def test_decode_data_uri_splits_on_first_comma():
    """Test that only the first comma separates header from payload."""
    payload = base64.b64encode(b"abc").decode("ascii")

    assert decode_data_uri(f"data:audio/L16;rate=24000;base64,{payload}") == b"abc"
