"""Gemini API gateway - adapts google-genai calls to the pipeline's operation and media models."""

import base64
from typing import Any, Optional, Protocol

from google import genai
from google.genai import types

from clipgen.core.config import Settings
from clipgen.core.exceptions import ConfigurationError
from clipgen.models.schemas import (
    ContentPart,
    LongRunningOperation,
    MediaReference,
    OperationError,
    OperationOutput,
)


class VideoBackend(Protocol):
    """Generation and status endpoints for long-running video jobs."""

    async def submit(self, prompt: str, aspect_ratio: str) -> Optional[LongRunningOperation]: ...

    async def check(self, operation: LongRunningOperation) -> LongRunningOperation: ...


class SpeechBackend(Protocol):
    """Speech endpoint returning audio as a data URI media reference."""

    async def speak(self, text: str, voice: str) -> Optional[MediaReference]: ...


def build_client(settings: Settings) -> genai.Client:
    """Create a google-genai client from settings."""
    api_key = getattr(settings, "gemini_api_key", None)
    if not api_key:
        raise ConfigurationError("GEMINI_API_KEY not configured. Set GEMINI_API_KEY in .env file.")
    return genai.Client(api_key=api_key)


def to_operation(raw: Any) -> Optional[LongRunningOperation]:
    """
    Convert a google-genai video operation into a LongRunningOperation.

    Generated videos become output parts with a media reference. Videos returned
    inline (no URI) are carried as data URIs.
    """
    if raw is None:
        return None

    error = None
    raw_error = getattr(raw, "error", None)
    if raw_error:
        if isinstance(raw_error, dict):
            error = OperationError(
                message=str(raw_error.get("message") or raw_error),
                code=raw_error.get("code"),
            )
        else:
            error = OperationError(message=str(raw_error))

    output = None
    response = getattr(raw, "response", None) or getattr(raw, "result", None)
    if response is not None:
        parts = []
        for generated in getattr(response, "generated_videos", None) or []:
            video = getattr(generated, "video", None)
            if video is None:
                continue
            mime_type = getattr(video, "mime_type", None)
            uri = getattr(video, "uri", None)
            video_bytes = getattr(video, "video_bytes", None)
            if uri:
                parts.append(ContentPart(media=MediaReference(url=uri, content_type=mime_type)))
            elif video_bytes:
                payload = base64.b64encode(video_bytes).decode("ascii")
                content_type = mime_type or "video/mp4"
                parts.append(
                    ContentPart(
                        media=MediaReference(
                            url=f"data:{content_type};base64,{payload}", content_type=content_type
                        )
                    )
                )
        output = OperationOutput(content=parts)

    return LongRunningOperation(
        name=getattr(raw, "name", None),
        done=bool(getattr(raw, "done", False)),
        error=error,
        output=output,
        raw=raw,
    )


class GenAIVideoBackend:
    """Veo video generation through the google-genai async client."""

    def __init__(self, settings: Settings, client: Optional[genai.Client] = None):
        self.settings = settings
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = build_client(self.settings)
        return self._client

    async def submit(self, prompt: str, aspect_ratio: str) -> Optional[LongRunningOperation]:
        raw = await self.client.aio.models.generate_videos(
            model=self.settings.video_model,
            prompt=prompt,
            config=types.GenerateVideosConfig(aspect_ratio=aspect_ratio, number_of_videos=1),
        )
        return to_operation(raw)

    async def check(self, operation: LongRunningOperation) -> LongRunningOperation:
        raw = await self.client.aio.operations.get(operation.raw)
        refreshed = to_operation(raw)
        if refreshed is None:
            raise RuntimeError(f"Status check returned nothing for operation {operation.name}")
        return refreshed


class GenAISpeechBackend:
    """Gemini TTS through the google-genai async client."""

    def __init__(self, settings: Settings, client: Optional[genai.Client] = None):
        self.settings = settings
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = build_client(self.settings)
        return self._client

    async def speak(self, text: str, voice: str) -> Optional[MediaReference]:
        response = await self.client.aio.models.generate_content(
            model=self.settings.tts_model,
            contents=text,
            config=types.GenerateContentConfig(
                response_modalities=["AUDIO"],
                speech_config=types.SpeechConfig(
                    voice_config=types.VoiceConfig(
                        prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice)
                    )
                ),
            ),
        )

        for candidate in getattr(response, "candidates", None) or []:
            content = getattr(candidate, "content", None)
            for part in getattr(content, "parts", None) or []:
                inline_data = getattr(part, "inline_data", None)
                data = getattr(inline_data, "data", None) if inline_data is not None else None
                if data:
                    mime_type = getattr(inline_data, "mime_type", None) or "audio/L16;codec=pcm;rate=24000"
                    payload = base64.b64encode(data).decode("ascii")
                    return MediaReference(url=f"data:{mime_type};base64,{payload}", content_type=mime_type)
        return None
