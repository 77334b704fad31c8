"""Response contracts for the reading coach capabilities.

Two views of the same evaluation contract live here:

- Pydantic models (`ScoreSet`, `ReadingError`, `ReadingResult`) used to decode
  and validate what the model actually returned.
- The `google.genai` schema and generation configs sent with each request so
  the service constrains its output to that shape in the first place.

Field names on the wire are camelCase (``overallFeedback``); the Python
attributes are snake_case. Dump with ``by_alias=True`` to get the wire form.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from google.genai import types
from pydantic import (
    BaseModel,
    ConfigDict,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from reading_coach.constants import DEFAULT_VOICE_NAME, SCORE_MAX, SCORE_MIN

log = logging.getLogger(__name__)

ErrorType = Literal["mispronounced", "skipped", "added"]

_CONTRACT_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="ignore",
)


class ScoreSet(BaseModel):
    """Four integer scores, 0-10 by convention.

    The range is requested in the prompt but not enforced here: out-of-range
    values pass through unchanged and are reported by `out_of_range`.
    """

    model_config = _CONTRACT_CONFIG

    accuracy: int
    fluency: int
    pronunciation: int
    overall: int

    @classmethod
    def zero(cls) -> ScoreSet:
        return cls(accuracy=0, fluency=0, pronunciation=0, overall=0)

    def out_of_range(self) -> tuple[str, ...]:
        """Names of the axes whose value falls outside 0-10."""
        return tuple(
            name
            for name in ("accuracy", "fluency", "pronunciation", "overall")
            if not SCORE_MIN <= getattr(self, name) <= SCORE_MAX
        )


class ReadingError(BaseModel):
    """One word the child misread, skipped, or added."""

    model_config = _CONTRACT_CONFIG

    type: ErrorType
    original_word: str | None = None
    student_word: str | None = None
    context_sentence: str

    @model_validator(mode="before")
    @classmethod
    def clear_impossible_words(cls, data: Any) -> Any:
        """An added word has no original, a skipped word has no reading."""
        if not isinstance(data, dict):
            return data
        kind = data.get("type")
        if not isinstance(kind, str):
            return data
        forbidden = {"added": "originalWord", "skipped": "studentWord"}.get(kind)
        if forbidden is None:
            return data
        snake = "original_word" if forbidden == "originalWord" else "student_word"
        if data.get(forbidden) is None and data.get(snake) is None:
            return data
        log.warning("Clearing %s on a '%s' reading error", forbidden, kind)
        return {k: v for k, v in data.items() if k not in (forbidden, snake)}


_reading_error_adapter: TypeAdapter[ReadingError] = TypeAdapter(ReadingError)


class ReadingResult(BaseModel):
    """Evaluation of one reading attempt; always returned, even on failure."""

    model_config = _CONTRACT_CONFIG

    scores: ScoreSet
    overall_feedback: str
    errors: tuple[ReadingError, ...] = ()

    @field_validator("errors", mode="before")
    @classmethod
    def drop_unusable_errors(cls, value: Any) -> Any:
        """Keep the valid entries of the error list and drop the rest.

        A list that is not a list at all is left for normal validation to
        reject, which fails the whole result.
        """
        if not isinstance(value, list | tuple):
            return value
        kept: list[ReadingError] = []
        for index, item in enumerate(value):
            try:
                kept.append(_reading_error_adapter.validate_python(item))
            except ValidationError as e:
                log.warning(
                    "Dropping reading error #%d that does not match the contract: %s",
                    index,
                    e.errors(include_url=False),
                )
        return kept

    @classmethod
    def degraded(cls, message: str) -> ReadingResult:
        """Zero scores, no errors, and an explanatory message for the child."""
        return cls(scores=ScoreSet.zero(), overall_feedback=message, errors=())


# --- Request-side contract for google.genai ---

EVALUATION_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "overallFeedback": types.Schema(type=types.Type.STRING),
        "scores": types.Schema(
            type=types.Type.OBJECT,
            properties={
                "fluency": types.Schema(type=types.Type.INTEGER),
                "pronunciation": types.Schema(type=types.Type.INTEGER),
                "accuracy": types.Schema(type=types.Type.INTEGER),
                "overall": types.Schema(type=types.Type.INTEGER),
            },
            required=["fluency", "pronunciation", "accuracy", "overall"],
        ),
        "errors": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "type": types.Schema(type=types.Type.STRING),
                    "originalWord": types.Schema(type=types.Type.STRING),
                    "studentWord": types.Schema(type=types.Type.STRING),
                    "contextSentence": types.Schema(type=types.Type.STRING),
                },
                required=["type", "contextSentence"],
            ),
        ),
    },
    required=["overallFeedback", "scores", "errors"],
)


def evaluation_config() -> types.GenerateContentConfig:
    """Force JSON output that conforms to the evaluation schema."""
    return types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=EVALUATION_RESPONSE_SCHEMA,
    )


def speech_config(voice_name: str = DEFAULT_VOICE_NAME) -> types.GenerateContentConfig:
    """Ask for audio output spoken by a single prebuilt voice."""
    return types.GenerateContentConfig(
        response_modalities=["AUDIO"],
        speech_config=types.SpeechConfig(
            voice_config=types.VoiceConfig(
                prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice_name),
            ),
        ),
    )
