import pytest

from reading_coach.config import CoachSettings
from reading_coach.core.types import Failure, Success
from reading_coach.credentials import CredentialResolver
from reading_coach.exceptions import MissingKeyError

pytestmark = pytest.mark.unit


class TestCredentialResolver:
    """Per-call override versus process-wide default key."""

    def test_override_wins_over_default(self):
        resolver = CredentialResolver(default_key="default-key")
        assert resolver.resolve("user-key") == "user-key"

    def test_falls_back_to_default(self):
        resolver = CredentialResolver(default_key="default-key")
        assert resolver.resolve() == "default-key"
        assert resolver.resolve(None) == "default-key"

    def test_blank_override_counts_as_absent(self):
        resolver = CredentialResolver(default_key="default-key")
        assert resolver.resolve("   ") == "default-key"
        assert resolver.resolve("") == "default-key"

    def test_nothing_configured_resolves_to_none(self):
        resolver = CredentialResolver()
        assert resolver.resolve() is None
        assert resolver.resolve("") is None
        assert not resolver.has_default

    def test_require_reports_missing_key_as_failure(self):
        outcome = CredentialResolver().require()
        assert isinstance(outcome, Failure)
        assert isinstance(outcome.error, MissingKeyError)

    def test_require_returns_resolved_key(self):
        outcome = CredentialResolver(default_key="k").require("override")
        assert outcome == Success("override")

    def test_from_settings_uses_settings_key(self):
        resolver = CredentialResolver.from_settings(CoachSettings(api_key="abc"))
        assert resolver.resolve() == "abc"
        assert resolver.has_default
