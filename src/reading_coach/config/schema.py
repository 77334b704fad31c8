"""Configuration schema and validation using Pydantic.

This module defines the settings schema that validates and coerces
configuration values from the environment (and an optional .env file) into
the correct types with proper defaults.
"""

from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from reading_coach.constants import (
    DEFAULT_VOICE_NAME,
    EVALUATION_MODEL,
    SPEECH_MODEL,
    SUGGESTION_MODEL,
)


class CoachSettings(BaseSettings):
    """Pydantic settings schema for the reading coach.

    Values come from ``GEMINI_*`` environment variables. The API key is also
    read from the bare ``API_KEY`` variable used by the web front end. The
    instance is frozen: it is built once at startup and only read afterwards.
    """

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=None,  # Only used when explicitly requested
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # --- Core Configuration Fields ---

    api_key: str | None = Field(
        default=None,
        description="Process-wide default Gemini API key",
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
        repr=False,
    )

    speech_model: str = Field(
        default=SPEECH_MODEL,
        description="Model used for passage narration",
        min_length=1,
    )

    evaluation_model: str = Field(
        default=EVALUATION_MODEL,
        description="Model used for schema-constrained reading evaluation",
        min_length=1,
    )

    suggestion_model: str = Field(
        default=SUGGESTION_MODEL,
        description="Model used for free-text lesson suggestions",
        min_length=1,
    )

    voice_name: str = Field(
        default=DEFAULT_VOICE_NAME,
        description="Prebuilt voice for speech synthesis",
        min_length=1,
    )

    # --- Validation Rules ---

    @field_validator("api_key", mode="before")
    @classmethod
    def blank_key_is_missing(cls, v: Any) -> Any:
        """Treat empty or whitespace-only keys as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary with the API key masked."""
        return {
            "api_key": "[SET]" if self.api_key else "[NOT SET]",
            "speech_model": self.speech_model,
            "evaluation_model": self.evaluation_model,
            "suggestion_model": self.suggestion_model,
            "voice_name": self.voice_name,
        }
