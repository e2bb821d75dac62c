"""Tests for style and language catalogs."""

from clipgen.models.schemas import LanguageCode
from clipgen.services.catalog import find_style, list_languages, list_styles, resolve_style


def test_list_styles():
    """Test that the catalog exposes the six styles in order."""
    styles = list_styles()

    assert [style.name for style in styles] == [
        "Cinematic",
        "Anime",
        "Watercolor",
        "3D Render",
        "Fantasy",
        "Vintage Film",
    ]
    assert all(style.description for style in styles)


def test_find_style_by_id_or_name():
    assert find_style("style-2").name == "Anime"
    assert find_style("vintage film").id == "style-6"
    assert find_style("Steampunk") is None


def test_resolve_style():
    """Test that ids map to names and everything else passes through."""
    assert resolve_style("style-4") == "3D Render"
    assert resolve_style("Watercolor") == "Watercolor"
    assert resolve_style("a noir detective film") == "a noir detective film"
    assert resolve_style(None) is None


def test_list_languages():
    """Test that every language has a voice."""
    languages = {language.code: language for language in list_languages()}

    assert set(languages) == set(LanguageCode)
    assert languages[LanguageCode.HINDI].voice == "hi-IN-Neural2-A"
    assert languages[LanguageCode.ENGLISH].name == "English"
