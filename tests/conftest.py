"""Shared pytest fixtures and configuration."""

from unittest.mock import MagicMock

import pytest

from clipgen.core.config import Settings
from clipgen.core.logging_config import get_logger


@pytest.fixture
def settings():
    """Create test settings instance."""
    return Settings(
        gemini_api_key="test-key",
        video_poll_interval_seconds=5.0,
        video_poll_backoff_factor=1.0,
        video_poll_timeout_seconds=900.0,
    )


@pytest.fixture
def logger():
    """Create test logger instance."""
    return get_logger(__name__)


@pytest.fixture
def mock_logger():
    """Logger double for asserting on warnings and errors."""
    return MagicMock()
