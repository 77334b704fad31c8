"""The primary user-facing entry point: three AI-backed reading capabilities.

Every capability is a total function. Whatever happens (no API key, an
unreachable service, a rejected key, an unparseable reply) the caller gets a
well-formed value back and never an exception:

- `synthesize_speech` returns base64 audio or None.
- `evaluate_reading` always returns a complete `ReadingResult`.
- `suggest_lesson` always returns a non-empty sentence.

Each call makes at most one model request. There is no retry, timeout,
caching or shared mutable state; callers that need resilience wrap the calls.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import TYPE_CHECKING

from reading_coach.config import CoachSettings, get_settings, warn_missing_api_key
from reading_coach.constants import (
    MISSING_KEY_FEEDBACK,
    MISSING_KEY_SUGGESTION,
    SUGGESTION_FAILED,
)
from reading_coach.core.types import Failure, Result, Success
from reading_coach.credentials import CredentialResolver
from reading_coach.exceptions import ReadingCoachError
from reading_coach.pipeline.result_builder import ResultBuilder, classify_failure
from reading_coach.prompts import (
    EvaluationPromptBuilder,
    SpeechPromptBuilder,
    SuggestionPromptBuilder,
)
from reading_coach.schemas import ReadingResult, evaluation_config, speech_config

if TYPE_CHECKING:
    from google.genai import types

    from reading_coach.core.types import GenerationResponse
    from reading_coach.pipeline.adapters.base import AdapterFactory

log = logging.getLogger(__name__)


def _default_adapter_factory(api_key: str):  # defer import until needed
    from reading_coach.pipeline.adapters.gemini import GoogleGenAIAdapter

    return GoogleGenAIAdapter(api_key)


class ReadingCoach:
    """Speech synthesis, reading evaluation and lesson suggestion.

    Args:
        settings: Frozen configuration holding the default API key and the
            model id of each capability.
        adapter_factory: Builds a provider adapter for a resolved API key.
            Defaults to the google-genai adapter.
    """

    def __init__(
        self,
        settings: CoachSettings,
        *,
        adapter_factory: AdapterFactory | None = None,
    ) -> None:
        self.settings = settings
        self._credentials = CredentialResolver.from_settings(settings)
        if not self._credentials.has_default:
            warn_missing_api_key()
        self._adapter_factory = adapter_factory or _default_adapter_factory
        self._results = ResultBuilder()
        self._speech_prompts = SpeechPromptBuilder()
        self._evaluation_prompts = EvaluationPromptBuilder()
        self._suggestion_prompts = SuggestionPromptBuilder()

    # --- Public capabilities ---

    async def synthesize_speech(
        self, text: str, api_key: str | None = None
    ) -> str | None:
        """Read a passage aloud in a gentle teacher's voice.

        Returns:
            Base64-encoded audio, or None when no audio could be produced.
        """
        key = self._credentials.require(api_key)
        if isinstance(key, Failure):
            log.error("%s for TTS.", key.error)
            return None

        outcome = await self._call(
            key.value,
            model_name=self.settings.speech_model,
            contents=self._speech_prompts.create_prompt(text),
            config=speech_config(self.settings.voice_name),
        )
        if isinstance(outcome, Success):
            outcome = self._results.build_audio(outcome.value)
        if isinstance(outcome, Failure):
            log.error(
                "Error generating speech: %s", outcome.error, exc_info=outcome.error
            )
            return None
        return outcome.value

    async def evaluate_reading(
        self,
        original_text: str,
        student_transcript: str,
        api_key: str | None = None,
    ) -> ReadingResult:
        """Grade a child's reading of `original_text`.

        Returns:
            The model's evaluation, or a zero-scored result whose feedback
            explains what went wrong.
        """
        key = self._credentials.require(api_key)
        if isinstance(key, Failure):
            log.error("%s for analysis.", key.error)
            return ReadingResult.degraded(MISSING_KEY_FEEDBACK)

        outcome = await self._call(
            key.value,
            model_name=self.settings.evaluation_model,
            contents=self._evaluation_prompts.create_prompt(
                original_text, student_transcript
            ),
            config=evaluation_config(),
        )
        if isinstance(outcome, Success):
            outcome = self._results.build_reading_result(outcome.value)
        if isinstance(outcome, Failure):
            log.error(
                "Error analyzing reading: %s", outcome.error, exc_info=outcome.error
            )
            return ReadingResult.degraded(classify_failure(outcome.error))
        return outcome.value

    async def suggest_lesson(
        self,
        learner_name: str,
        candidate_titles: Sequence[str],
        api_key: str | None = None,
    ) -> str:
        """Suggest one of `candidate_titles` to the learner in one sentence.

        Raises:
            ValueError: If `candidate_titles` is empty.
        """
        # Argument errors raise even when no key is configured.
        prompt = self._suggestion_prompts.create_prompt(learner_name, candidate_titles)

        key = self._credentials.require(api_key)
        if isinstance(key, Failure):
            log.error("%s for suggestion.", key.error)
            return MISSING_KEY_SUGGESTION

        outcome = await self._call(
            key.value,
            model_name=self.settings.suggestion_model,
            contents=prompt,
        )
        if isinstance(outcome, Success):
            outcome = self._results.build_suggestion(outcome.value)
        if isinstance(outcome, Failure):
            log.error(
                "Error getting quick suggestion: %s",
                outcome.error,
                exc_info=outcome.error,
            )
            return SUGGESTION_FAILED
        return outcome.value

    # --- Internal helpers ---

    async def _call(
        self,
        api_key: str,
        *,
        model_name: str,
        contents: str,
        config: types.GenerateContentConfig | None = None,
    ) -> Result[GenerationResponse, ReadingCoachError]:
        """Issue the single model request of a capability call."""
        try:
            adapter = self._adapter_factory(api_key)
            try:
                response = await adapter.generate(
                    model_name=model_name, contents=contents, config=config
                )
            finally:
                await adapter.aclose()
            return Success(response)
        except ReadingCoachError as e:
            return Failure(e)
        except Exception as e:  # Defensive normalization
            log.debug("Adapter raised an untyped error", exc_info=True)
            return Failure(ReadingCoachError(f"Model call failed: {e}"))

    def __repr__(self) -> str:
        return (
            f"<ReadingCoach speech={self.settings.speech_model!r} "
            f"evaluation={self.settings.evaluation_model!r} "
            f"suggestion={self.settings.suggestion_model!r} "
            f"default_key={'set' if self._credentials.has_default else 'missing'}>"
        )


def create_coach(
    settings: CoachSettings | None = None,
    *,
    adapter_factory: AdapterFactory | None = None,
) -> ReadingCoach:
    """Create a coach from explicit settings or the process-wide ones."""
    if settings is None:
        settings = get_settings()
    return ReadingCoach(settings, adapter_factory=adapter_factory)


__all__ = ["ReadingCoach", "create_coach"]
