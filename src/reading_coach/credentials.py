"""API key resolution for individual capability calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from reading_coach.core.types import Failure, Result, Success
from reading_coach.exceptions import MissingKeyError

if TYPE_CHECKING:
    from reading_coach.config import CoachSettings


def _usable(key: str | None) -> str | None:
    if key is None:
        return None
    key = key.strip()
    return key or None


@dataclass(frozen=True, slots=True)
class CredentialResolver:
    """Decides which API key a call uses.

    A per-call override always wins; otherwise the process-wide default is
    used. When neither is usable `resolve` returns None and the caller must
    not touch the network.
    """

    default_key: str | None = None

    @classmethod
    def from_settings(cls, settings: CoachSettings) -> CredentialResolver:
        return cls(default_key=settings.api_key)

    def resolve(self, override: str | None = None) -> str | None:
        return _usable(override) or _usable(self.default_key)

    @property
    def has_default(self) -> bool:
        return _usable(self.default_key) is not None

    def require(self, override: str | None = None) -> Result[str, MissingKeyError]:
        """Like `resolve`, but reports a missing key as a `Failure`."""
        key = self.resolve(override)
        if key is None:
            return Failure(MissingKeyError("API Key is not available"))
        return Success(key)
