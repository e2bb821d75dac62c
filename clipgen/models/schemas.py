"""Pydantic models and schemas for the clip generation pipeline."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================================
# Enums
# ============================================================================


class AspectRatio(str, Enum):
    """Frame shape requested from the video model."""

    LANDSCAPE = "16:9"
    PORTRAIT = "9:16"
    SQUARE = "1:1"
    FOUR_FIVE = "4:5"
    TWO_THREE = "2:3"


class LanguageCode(str, Enum):
    """Narration language."""

    ENGLISH = "en"
    HINDI = "hi"
    TELUGU = "te"


# ============================================================================
# Request / Result Models
# ============================================================================


class GenerationRequest(BaseModel):
    """A request for a video clip with optional narration."""

    prompt: str = Field(..., min_length=1, max_length=4000, description="Description of the video to generate")
    narration_text: Optional[str] = Field(default=None, description="Text to be spoken as narration")
    style_description: Optional[str] = Field(default=None, description="Visual style of the clip")
    aspect_ratio: AspectRatio = Field(default=AspectRatio.LANDSCAPE, description="Video aspect ratio")
    language_code: LanguageCode = Field(default=LanguageCode.ENGLISH, description="Narration language")

    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must not be blank")
        return value

    @field_validator("narration_text", "style_description")
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        """Treat empty or whitespace-only text as not provided."""
        if value is not None and not value.strip():
            return None
        return value


class GenerationResult(BaseModel):
    """Combined outcome of one generation request."""

    video_asset: str = Field(..., description="Data URI of the generated video")
    audio_asset: Optional[str] = Field(default=None, description="Data URI of the narration (WAV), if any")


# ============================================================================
# Long-Running Operation Models
# ============================================================================


class MediaReference(BaseModel):
    """Pointer to a generated media asset."""

    url: str = Field(..., description="Download URL or data URI")
    content_type: Optional[str] = Field(default=None, description="MIME type, if known")


class ContentPart(BaseModel):
    """One part of an operation's output."""

    text: Optional[str] = None
    media: Optional[MediaReference] = None


class OperationOutput(BaseModel):
    """Output message of a finished operation."""

    content: list[ContentPart] = Field(default_factory=list)


class OperationError(BaseModel):
    """Error reported by the provider for a failed operation."""

    message: str = Field(default="Unknown error")
    code: Optional[int] = None


class LongRunningOperation(BaseModel):
    """
    Provider-side job handle.

    Lifecycle: SUBMITTED -> POLLING (repeated status checks) -> DONE_SUCCESS | DONE_ERROR.
    The handle is terminal once ``done`` is true. ``raw`` keeps the provider's own
    operation object so the status endpoint can refresh it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: Optional[str] = None
    done: bool = False
    error: Optional[OperationError] = None
    output: Optional[OperationOutput] = None
    raw: Any = Field(default=None, exclude=True, repr=False)

    def first_media(self) -> Optional[MediaReference]:
        """Return the first output part carrying a media reference."""
        if not self.output:
            return None
        for part in self.output.content:
            if part.media and part.media.url:
                return part.media
        return None


# ============================================================================
# Speech Models
# ============================================================================


class SpeechOutcome(BaseModel):
    """Either a narration data URI or the reason synthesis produced nothing."""

    audio: Optional[str] = None
    failure: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.audio is not None


# ============================================================================
# Catalog Models
# ============================================================================


class StyleOption(BaseModel):
    """A selectable visual style."""

    id: str
    name: str
    description: str


class LanguageOption(BaseModel):
    """A supported narration language and the voice used for it."""

    code: LanguageCode
    name: str
    voice: str
