"""Application configuration using pydantic-settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be configured via environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================================================
    # Application Settings
    # ========================================================================
    app_name: str = Field(default="Narrated Clip Generator", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_file: Optional[str] = Field(default=None, description="Optional path of a rotating log file")

    # ========================================================================
    # Provider Credentials & Models
    # ========================================================================
    gemini_api_key: Optional[str] = Field(
        default=None,
        description="Gemini API key. Used by the provider client and appended to video download URLs.",
    )
    video_model: str = Field(default="veo-3.0-generate-preview", description="Video generation model")
    tts_model: str = Field(default="gemini-2.5-flash-preview-tts", description="Text-to-speech model")

    # ========================================================================
    # Video Generation Settings
    # ========================================================================
    default_style: str = Field(
        default="a cinematic film",
        description="Style used in the composed prompt when the request gives none",
    )
    video_poll_interval_seconds: float = Field(
        default=5.0, gt=0, description="Wait between operation status checks (default: 5s)"
    )
    video_poll_backoff_factor: float = Field(
        default=1.0,
        ge=1.0,
        description="Multiplier applied to the poll interval after each check (1.0 = fixed interval)",
    )
    video_poll_max_interval_seconds: float = Field(
        default=30.0, gt=0, description="Upper bound for the poll interval when backoff is enabled"
    )
    video_poll_timeout_seconds: Optional[float] = Field(
        default=900.0,
        gt=0,
        description="Maximum time to wait for a video operation to finish (unset to wait indefinitely)",
    )
    download_timeout_seconds: float = Field(
        default=120.0, gt=0, description="HTTP timeout for downloading the finished video"
    )

    # ========================================================================
    # Output Settings
    # ========================================================================
    output_dir: str = Field(default="outputs/clips", description="Directory for CLI output files")


# Global settings instance
settings = Settings()
