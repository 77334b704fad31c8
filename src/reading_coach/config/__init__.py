"""Configuration for the reading coach.

The process-wide configuration is resolved once from the environment and
then passed explicitly into `ReadingCoach`. Tests and embedding applications
can build their own `CoachSettings` and skip the environment entirely.
"""

from functools import cache
import logging
from pathlib import Path

from .schema import CoachSettings

log = logging.getLogger(__name__)


def load_settings(env_file: str | Path | None = None) -> CoachSettings:
    """Build settings from the environment and an optional .env file.

    Args:
        env_file: Optional path to a .env file read before the environment.

    Returns:
        A frozen CoachSettings instance.
    """
    if env_file is not None:
        return CoachSettings(_env_file=env_file)  # type: ignore[call-arg]
    return CoachSettings()


@cache
def warn_missing_api_key() -> None:
    """Report a missing default API key, at most once per process."""
    log.warning(
        "API_KEY environment variable not set. Please provide a personal API Key."
    )


@cache
def get_settings() -> CoachSettings:
    """Return the process-wide settings, resolving them on first use.

    A missing default API key is reported here; it does not block startup
    because callers may still supply a key per call.
    """
    settings = load_settings()
    if not settings.api_key:
        warn_missing_api_key()
    return settings


__all__ = ["CoachSettings", "get_settings", "load_settings", "warn_missing_api_key"]
