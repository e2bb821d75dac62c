"""Exception types raised by the generation pipeline."""

from typing import Optional


class ClipGenError(Exception):
    """Base class for all clip generation errors."""


class ConfigurationError(ClipGenError):
    """A required setting (such as an API key) is missing."""


class EncodingError(ClipGenError):
    """Raw PCM audio could not be wrapped into a WAV container."""


class SpeechSynthesisError(ClipGenError):
    """Narration could not be produced. Always recovered inside the audio path."""


class VideoGenerationError(ClipGenError):
    """Fatal failure on the video path. Aborts the whole request."""


class InitiationError(VideoGenerationError):
    """Submitting the video job to the provider failed."""


class ProtocolViolationError(VideoGenerationError):
    """The provider answered with a well-formed but unusable response."""


class PollError(VideoGenerationError):
    """A status check failed while waiting for the video operation."""


class OperationFailedError(VideoGenerationError):
    """The provider reported that the video operation itself failed."""

    def __init__(self, message: str, provider_message: Optional[str] = None):
        super().__init__(message)
        self.provider_message = provider_message


class DownloadError(VideoGenerationError):
    """Fetching the finished video failed or returned an empty body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GenerationTimeoutError(VideoGenerationError, TimeoutError):
    """The video operation did not finish within the configured wait budget."""

    def __init__(self, message: str, waited_seconds: float = 0.0):
        super().__init__(message)
        self.waited_seconds = waited_seconds
