"""AI reading coach: narration, oral-reading evaluation and lesson suggestions."""

import importlib.metadata
import logging

from reading_coach.coach import ReadingCoach, create_coach
from reading_coach.config import CoachSettings, get_settings, load_settings
from reading_coach.core.types import Failure, GenerationResponse, Result, Success
from reading_coach.credentials import CredentialResolver
from reading_coach.exceptions import (
    AuthError,
    MissingKeyError,
    NetworkError,
    ReadingCoachError,
    SchemaViolationError,
    TransportError,
)
from reading_coach.pipeline.adapters import AdapterFactory, GenerationAdapter
from reading_coach.schemas import ReadingError, ReadingResult, ScoreSet

# Version handling
try:
    __version__ = importlib.metadata.version("gemini-reading-coach")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Set up a null handler for the library's root logger.
# This prevents 'No handler found' errors if the consuming app has no logging configured.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API
__all__ = [  # noqa: RUF022
    # Capabilities
    "ReadingCoach",
    "create_coach",
    # Configuration
    "CoachSettings",
    "CredentialResolver",
    "get_settings",
    "load_settings",
    # Provider seam
    "AdapterFactory",
    "GenerationAdapter",
    "GenerationResponse",
    # Result types
    "ReadingResult",
    "ReadingError",
    "ScoreSet",
    "Result",
    "Success",
    "Failure",
    # Exceptions
    "ReadingCoachError",
    "MissingKeyError",
    "TransportError",
    "NetworkError",
    "AuthError",
    "SchemaViolationError",
]
