"""Video Synthesizer - submits a Veo job, polls it to completion and downloads the clip."""

import asyncio
import base64
import time
from typing import Any, Optional

import httpx

from clipgen.core.config import Settings
from clipgen.core.exceptions import (
    DownloadError,
    GenerationTimeoutError,
    InitiationError,
    OperationFailedError,
    PollError,
    ProtocolViolationError,
)
from clipgen.models.schemas import AspectRatio, LongRunningOperation, MediaReference
from clipgen.services.credentials import CredentialProvider, SettingsCredentialProvider
from clipgen.services.genai_gateway import GenAIVideoBackend, VideoBackend

DEFAULT_VIDEO_CONTENT_TYPE = "video/mp4"


class VideoSynthesizer:
    """Drives one video generation from prompt to data URI."""

    def __init__(
        self,
        settings: Settings,
        logger: Any,
        backend: Optional[VideoBackend] = None,
        credentials: Optional[CredentialProvider] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize video synthesizer.

        Args:
            settings: Application settings
            logger: Logger instance
            backend: Generation and status endpoints (defaults to Veo via google-genai)
            credentials: Supplies the key appended to download URLs
            http_client: Optional shared HTTP client for downloads
        """
        self.settings = settings
        self.logger = logger
        self.backend = backend or GenAIVideoBackend(settings)
        self.credentials = credentials or SettingsCredentialProvider(settings)
        self.http_client = http_client
        self.poll_interval = getattr(settings, "video_poll_interval_seconds", 5.0)
        self.backoff_factor = getattr(settings, "video_poll_backoff_factor", 1.0)
        self.max_poll_interval = getattr(settings, "video_poll_max_interval_seconds", 30.0)
        self.poll_timeout = getattr(settings, "video_poll_timeout_seconds", None)
        self._sleep = asyncio.sleep

    def compose_prompt(self, prompt: str, style_description: Optional[str] = None) -> str:
        style = style_description or getattr(self.settings, "default_style", "a cinematic film")
        return f"{prompt}, in the style of {style}"

    async def generate(
        self,
        prompt: str,
        style_description: Optional[str] = None,
        aspect_ratio: Any = AspectRatio.LANDSCAPE,
    ) -> str:
        """
        Generate a video clip.

        Args:
            prompt: Description of the clip
            style_description: Visual style (defaults to settings.default_style)
            aspect_ratio: Requested aspect ratio

        Returns:
            ``data:<content type>;base64,...`` of the downloaded video

        Raises:
            InitiationError: If the job could not be submitted
            ProtocolViolationError: If no operation or no video was returned
            PollError: If a status check failed
            OperationFailedError: If the provider reported a failed operation
            GenerationTimeoutError: If the wait budget ran out
            DownloadError: If the video could not be downloaded
        """
        full_prompt = self.compose_prompt(prompt, style_description)
        ratio = getattr(aspect_ratio, "value", aspect_ratio)
        self.logger.info(f"Submitting video generation ({ratio}): {full_prompt[:120]}")

        operation = await self._submit(full_prompt, ratio)
        operation = await self._wait_for_completion(operation)

        if operation.error:
            self.logger.error(f"Video generation failed: {operation.error.message}")
            raise OperationFailedError(
                f"Video generation failed: {operation.error.message}",
                provider_message=operation.error.message,
            )

        media = operation.first_media()
        if media is None:
            raise ProtocolViolationError("Failed to find the generated video in the operation output.")

        return await self._download(media)

    async def _submit(self, full_prompt: str, aspect_ratio: str) -> LongRunningOperation:
        try:
            operation = await self.backend.submit(full_prompt, aspect_ratio)
        except Exception as e:
            self.logger.error(f"Error calling video generation API: {e}")
            raise InitiationError(f"Failed to initiate video generation: {e}") from e

        if operation is None:
            raise ProtocolViolationError("Expected the model to return an operation for video generation.")

        self.logger.info(f"Video operation submitted: {operation.name}")
        return operation

    async def _wait_for_completion(self, operation: LongRunningOperation) -> LongRunningOperation:
        """Poll the status endpoint until the operation is done or the wait budget runs out."""
        interval = self.poll_interval
        waited = 0.0
        started = time.monotonic()
        checks = 0

        while not operation.done:
            elapsed = max(waited, time.monotonic() - started)
            if self.poll_timeout is not None and elapsed >= self.poll_timeout:
                self.logger.error(f"Video operation {operation.name} still running after {elapsed:.0f}s")
                raise GenerationTimeoutError(
                    f"Video generation did not finish within {self.poll_timeout:.0f} seconds",
                    waited_seconds=elapsed,
                )

            # Never sleep past the end of the wait budget
            delay = interval
            if self.poll_timeout is not None:
                delay = min(interval, self.poll_timeout - elapsed)

            await self._sleep(delay)
            waited += delay
            checks += 1

            try:
                operation = await self.backend.check(operation)
            except Exception as e:
                self.logger.error(f"Error polling for video completion: {e}")
                raise PollError(f"Failed to check video generation status: {e}") from e

            self.logger.debug(f"Video operation status check {checks}: done={operation.done}")
            interval = min(interval * self.backoff_factor, max(self.max_poll_interval, self.poll_interval))

        self.logger.info(f"Video operation finished after {checks} status checks")
        return operation

    async def _download(self, media: MediaReference) -> str:
        content_type = media.content_type or DEFAULT_VIDEO_CONTENT_TYPE

        # Inline results need no download
        if media.url.startswith("data:"):
            return media.url

        try:
            url = httpx.URL(media.url).copy_merge_params({"key": self.credentials.get_api_key()})
        except Exception as e:
            raise DownloadError(f"Failed to build download URL for {media.url}: {e}") from e

        self.logger.info(f"Downloading generated video from {media.url}")
        try:
            if self.http_client is not None:
                response = await self.http_client.get(url)
            else:
                timeout = getattr(self.settings, "download_timeout_seconds", 120.0)
                async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
                    response = await client.get(url)
        except httpx.HTTPError as e:
            raise DownloadError(f"Failed to download video from {media.url}: {e}") from e

        if not response.is_success or not response.content:
            raise DownloadError(
                f"Failed to download video from {media.url}. Status: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        payload = base64.b64encode(response.content).decode("ascii")
        self.logger.info(f"Downloaded video: {len(response.content)} bytes ({content_type})")
        return f"data:{content_type};base64,{payload}"
