"""Speech Synthesizer - best-effort narration audio for a generated clip."""

import base64
import binascii
from typing import Any, Optional

from clipgen.core.config import Settings
from clipgen.core.exceptions import SpeechSynthesisError
from clipgen.models.schemas import LanguageCode, SpeechOutcome
from clipgen.services.audio_encoder import encode_wav
from clipgen.services.genai_gateway import GenAISpeechBackend, SpeechBackend
from clipgen.utils.error_handler import format_error_message, get_fallback_suggestion

DEFAULT_VOICE = "Algenib"

VOICE_BY_LANGUAGE = {
    LanguageCode.ENGLISH.value: DEFAULT_VOICE,
    LanguageCode.HINDI.value: "hi-IN-Neural2-A",
    LanguageCode.TELUGU.value: "te-IN-Wavenet-A",
}


def select_voice(language_code: Any) -> str:
    """Map a language code to a prebuilt voice; unknown codes get the default voice."""
    code = getattr(language_code, "value", language_code)
    return VOICE_BY_LANGUAGE.get(code, DEFAULT_VOICE)


def decode_data_uri(url: str) -> bytes:
    """Decode the base64 payload that follows the first comma of a data URI."""
    _, sep, payload = url.partition(",")
    if not sep:
        raise SpeechSynthesisError("Media URL is not a data URI")
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise SpeechSynthesisError(f"Media payload is not valid base64: {e}") from e


class SpeechSynthesizer:
    """Turns narration text into a WAV data URI. Never raises to its caller."""

    def __init__(self, settings: Settings, logger: Any, backend: Optional[SpeechBackend] = None):
        """
        Initialize speech synthesizer.

        Args:
            settings: Application settings
            logger: Logger instance
            backend: Speech endpoint (defaults to Gemini TTS)
        """
        self.settings = settings
        self.logger = logger
        self.backend = backend or GenAISpeechBackend(settings)

    async def synthesize(self, text: str, language_code: Any = LanguageCode.ENGLISH) -> Optional[str]:
        """
        Generate narration audio.

        Args:
            text: Narration text
            language_code: Narration language (en, hi, te)

        Returns:
            ``data:audio/wav;base64,...`` or None if narration could not be produced
        """
        outcome = await self.synthesize_outcome(text, language_code)
        return outcome.audio

    async def synthesize_outcome(self, text: str, language_code: Any = LanguageCode.ENGLISH) -> SpeechOutcome:
        """Like synthesize(), but keeps the failure reason."""
        voice = select_voice(language_code)
        self.logger.info(f"Generating narration with voice {voice} for {len(text)} characters...")

        try:
            media = await self.backend.speak(text, voice)
            if media is None or not media.url:
                self.logger.warning("TTS generation returned no media URL.")
                return SpeechOutcome(failure="TTS generation returned no media URL")

            pcm = decode_data_uri(media.url)
            wav_base64 = await encode_wav(pcm)
        except Exception as e:
            self.logger.warning(
                format_error_message(
                    "Generating narration",
                    e,
                    context={"voice": voice},
                    suggestion=get_fallback_suggestion("Narration", e),
                )
            )
            return SpeechOutcome(failure=f"{type(e).__name__}: {e}")

        self.logger.info(f"Narration generated ({len(pcm)} bytes of PCM)")
        return SpeechOutcome(audio=f"data:audio/wav;base64,{wav_base64}")
