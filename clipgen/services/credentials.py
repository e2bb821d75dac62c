"""Credential providers for the provider's download endpoint."""

from typing import Optional, Protocol

from clipgen.core.config import Settings
from clipgen.core.exceptions import ConfigurationError


class CredentialProvider(Protocol):
    """Supplies the access key appended to media download URLs."""

    def get_api_key(self) -> str: ...


class SettingsCredentialProvider:
    """Reads the Gemini API key from application settings."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def get_api_key(self) -> str:
        api_key = getattr(self.settings, "gemini_api_key", None)
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY not configured. Set GEMINI_API_KEY in .env file.")
        return api_key


class StaticCredentialProvider:
    """Fixed key, mainly for scripts and tests."""

    def __init__(self, api_key: Optional[str]):
        self._api_key = api_key

    def get_api_key(self) -> str:
        if not self._api_key:
            raise ConfigurationError("No API key supplied")
        return self._api_key
