"""Tests for settings validation and settings-driven logging."""

import pytest
from loguru import logger as loguru_logger
from pydantic import ValidationError

from clipgen.core.config import Settings
from clipgen.core.logging_config import configure_logging, get_logger, setup_logging


@pytest.mark.parametrize(
    "overrides",
    [
        {"video_poll_interval_seconds": 0},
        {"video_poll_interval_seconds": -1.0},
        {"video_poll_backoff_factor": 0},
        {"video_poll_backoff_factor": 0.5},
        {"video_poll_timeout_seconds": 0},
        {"video_poll_max_interval_seconds": 0},
        {"download_timeout_seconds": 0},
    ],
)
def test_poll_settings_reject_busy_loop_values(overrides):
    """Test that values which would hammer the status endpoint are refused."""
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_poll_timeout_can_be_unset():
    """Test that an unset timeout means waiting indefinitely."""
    settings = Settings(video_poll_timeout_seconds=None, video_poll_backoff_factor=1.5)

    assert settings.video_poll_timeout_seconds is None
    assert settings.video_poll_backoff_factor == 1.5


def test_configure_logging_writes_log_file(tmp_path):
    """Test that the log level and log file come from settings."""
    log_path = tmp_path / "logs" / "clipgen.log"
    settings = Settings(log_level="warning", log_file=str(log_path))

    try:
        configure_logging(settings)
        logger = get_logger(__name__, request_id="clip_abc")
        logger.info("below the configured level")
        logger.warning("download retried")
        loguru_logger.remove()

        content = log_path.read_text()
        assert "download retried" in content
        assert "clip_abc" in content
        assert "below the configured level" not in content
    finally:
        setup_logging()
