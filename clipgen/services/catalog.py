"""Static catalogs of visual styles and narration languages."""

from typing import Optional

from clipgen.models.schemas import LanguageCode, LanguageOption, StyleOption
from clipgen.services.speech_synthesizer import select_voice

STYLES = [
    StyleOption(id="style-1", name="Cinematic", description="A dramatic, moody, and realistic cinematic style."),
    StyleOption(id="style-2", name="Anime", description="A vibrant and colorful anime art style."),
    StyleOption(id="style-3", name="Watercolor", description="A soft, blended, and artistic watercolor style."),
    StyleOption(id="style-4", name="3D Render", description="A clean, polished, and modern 3D render style."),
    StyleOption(id="style-5", name="Fantasy", description="An epic and magical fantasy art style."),
    StyleOption(id="style-6", name="Vintage Film", description="A retro, grainy, and nostalgic vintage film style."),
]

LANGUAGE_NAMES = {
    LanguageCode.ENGLISH: "English",
    LanguageCode.HINDI: "Hindi",
    LanguageCode.TELUGU: "Telugu",
}


def list_styles() -> list[StyleOption]:
    return list(STYLES)


def find_style(key: str) -> Optional[StyleOption]:
    """Look up a style by id or name (case-insensitive)."""
    wanted = key.strip().lower()
    for style in STYLES:
        if wanted in (style.id.lower(), style.name.lower()):
            return style
    return None


def resolve_style(value: Optional[str]) -> Optional[str]:
    """
    Turn a catalog id into its style name.

    Names and free-form descriptions pass through unchanged so they reach the
    prompt exactly as the user typed them.
    """
    if not value:
        return None
    style = find_style(value)
    if style and value.strip().lower() == style.id.lower():
        return style.name
    return value


def list_languages() -> list[LanguageOption]:
    return [
        LanguageOption(code=code, name=LANGUAGE_NAMES[code], voice=select_voice(code))
        for code in LanguageCode
    ]
