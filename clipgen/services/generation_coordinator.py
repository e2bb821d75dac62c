"""Generation Coordinator - runs video and narration side by side and merges the outcomes."""

import asyncio
from typing import Any, Optional

from clipgen.core.config import Settings
from clipgen.models.schemas import GenerationRequest, GenerationResult
from clipgen.services.speech_synthesizer import SpeechSynthesizer
from clipgen.services.video_synthesizer import VideoSynthesizer


class GenerationCoordinator:
    """Produces a GenerationResult for one request."""

    def __init__(
        self,
        settings: Settings,
        logger: Any,
        video_synthesizer: Optional[VideoSynthesizer] = None,
        speech_synthesizer: Optional[SpeechSynthesizer] = None,
    ):
        """
        Initialize the coordinator.

        Args:
            settings: Application settings
            logger: Logger instance
            video_synthesizer: Video path (built from settings if omitted)
            speech_synthesizer: Narration path (built from settings if omitted)
        """
        self.settings = settings
        self.logger = logger
        self.video_synthesizer = video_synthesizer or VideoSynthesizer(settings, logger)
        self.speech_synthesizer = speech_synthesizer or SpeechSynthesizer(settings, logger)

    async def run(self, request: GenerationRequest) -> GenerationResult:
        """
        Generate video and narration concurrently.

        Both tasks always run to completion; a failure in one never cancels the
        other. A video failure is re-raised as the result of the whole request.
        A narration failure only drops the audio.
        """
        self.logger.info(
            f"Starting generation: aspect={request.aspect_ratio.value}, "
            f"language={request.language_code.value}, narration={'yes' if request.narration_text else 'no'}"
        )

        video_task = asyncio.create_task(
            self.video_synthesizer.generate(
                request.prompt,
                style_description=request.style_description,
                aspect_ratio=request.aspect_ratio,
            )
        )
        audio_task = asyncio.create_task(self._narrate(request))

        video_result, audio_result = await asyncio.gather(video_task, audio_task, return_exceptions=True)

        if isinstance(video_result, BaseException):
            self.logger.error(f"Video generation failed: {video_result}")
            raise video_result

        audio_asset = None
        if isinstance(audio_result, BaseException):
            self.logger.warning(f"Audio generation failed: {audio_result}")
        else:
            audio_asset = audio_result

        self.logger.info(f"Generation complete (audio: {'yes' if audio_asset else 'no'})")
        return GenerationResult(video_asset=video_result, audio_asset=audio_asset)

    async def _narrate(self, request: GenerationRequest) -> Optional[str]:
        if not request.narration_text:
            return None
        return await self.speech_synthesizer.synthesize(request.narration_text, request.language_code)
