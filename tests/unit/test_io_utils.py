"""Tests for I/O and error formatting utilities."""

import pytest

from clipgen.core.exceptions import DownloadError, GenerationTimeoutError, OperationFailedError
from clipgen.utils.error_handler import format_error_message, get_fallback_suggestion
from clipgen.utils.io_utils import create_run_output_dir, parse_data_uri, slugify, write_data_uri


def test_slugify():
    assert slugify("A Sunset over the Sea!") == "a-sunset-over-the-sea"
    assert slugify("!!!") == "clip"


def test_create_run_output_dir(tmp_path):
    output_dir = create_run_output_dir(str(tmp_path), "a-sunset")

    assert output_dir.exists()
    assert output_dir.name.endswith("_a-sunset")


def test_parse_data_uri():
    mime_type, data = parse_data_uri("data:video/mp4;base64,bXA0")

    assert mime_type == "video/mp4"
    assert data == b"mp4"


@pytest.mark.parametrize("value", ["https://example.com/v.mp4", "data:text/plain,hello"])
def test_parse_data_uri_rejects_non_base64(value):
    with pytest.raises(ValueError):
        parse_data_uri(value)


def test_write_data_uri_picks_extension(tmp_path):
    video_path = write_data_uri("data:video/mp4;base64,bXA0", tmp_path, "video")
    audio_path = write_data_uri("data:audio/wav;base64,UklGRg==", tmp_path, "narration")

    assert video_path.name == "video.mp4"
    assert video_path.read_bytes() == b"mp4"
    assert audio_path.name == "narration.wav"


def test_format_error_message():
    message = format_error_message(
        "Generating video",
        OperationFailedError("Video generation failed: quota exceeded"),
        context={"aspect_ratio": "16:9"},
        suggestion="Wait",
    )

    assert "Generating video failed (aspect_ratio=16:9)" in message
    assert "OperationFailedError: Video generation failed: quota exceeded" in message
    assert "Suggestion: Wait" in message


def test_fallback_suggestions():
    assert "quota" in get_fallback_suggestion("Video Generation", OperationFailedError("quota exceeded")).lower()
    assert "VIDEO_POLL_TIMEOUT_SECONDS" in get_fallback_suggestion(
        "Video Generation", GenerationTimeoutError("too slow")
    )
    assert "downloaded" in get_fallback_suggestion("Video Generation", DownloadError("404"))
    assert "no narration" in get_fallback_suggestion("Narration", RuntimeError("boom"))
    assert get_fallback_suggestion("Thumbnails", RuntimeError("boom")) is None
