"""Result builders that turn raw model responses into capability values.

Each builder returns a `Result` rather than raising: `Success` carries the
validated value, `Failure` carries a `SchemaViolationError` describing why the
response was unusable. The coach decides what degraded value to return.

"Trust, but verify": schema-constrained decoding makes a well-formed reply
likely, not certain, so every evaluation payload is decoded and validated
again with pydantic before it reaches a caller.
"""

from __future__ import annotations

import logging
import re

from pydantic import ValidationError

from reading_coach.constants import (
    EVALUATION_FAILED_FEEDBACK,
    MALFORMED_RESPONSE_FEEDBACK,
    WRAPPING_QUOTES,
)
from reading_coach.core.types import Failure, GenerationResponse, Result, Success
from reading_coach.exceptions import ReadingCoachError, SchemaViolationError
from reading_coach.schemas import ReadingResult

log = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


class ResultBuilder:
    """Validate and normalize the response of each capability."""

    def build_reading_result(
        self, response: GenerationResponse
    ) -> Result[ReadingResult, SchemaViolationError]:
        text = (response.text or "").strip()
        if not text:
            return Failure(SchemaViolationError("Model returned an empty evaluation"))

        fenced = _CODE_FENCE.match(text)
        if fenced:
            text = fenced.group(1)

        try:
            result = ReadingResult.model_validate_json(text)
        except ValidationError as e:
            return Failure(
                SchemaViolationError(
                    f"Evaluation does not match the response contract: "
                    f"{e.errors(include_url=False)}"
                )
            )
        except (TypeError, ValueError) as e:
            return Failure(
                SchemaViolationError(f"Evaluation could not be decoded: {e}")
            )

        anomalies = result.scores.out_of_range()
        if anomalies:
            log.warning(
                "Scores outside 0-10 passed through unchanged: %s",
                {name: getattr(result.scores, name) for name in anomalies},
            )
        return Success(result)

    def build_audio(
        self, response: GenerationResponse
    ) -> Result[str, SchemaViolationError]:
        if not response.inline_data:
            return Failure(SchemaViolationError("Model returned no audio payload"))
        log.debug("Received %d base64 chars of audio", len(response.inline_data))
        return Success(response.inline_data)

    def build_suggestion(
        self, response: GenerationResponse
    ) -> Result[str, SchemaViolationError]:
        text = strip_wrapping_quotes((response.text or "").strip())
        if not text:
            return Failure(SchemaViolationError("Model returned an empty suggestion"))
        return Success(text)


def strip_wrapping_quotes(text: str) -> str:
    """Remove one quote character at the very start and one at the very end.

    Only the outermost character on each side is touched; quotes inside the
    sentence are left alone.
    """
    if text[:1] in WRAPPING_QUOTES:
        text = text[1:]
    if text[-1:] in WRAPPING_QUOTES:
        text = text[:-1]
    return text


def classify_failure(error: ReadingCoachError) -> str:
    """Pick the child-facing message for a failed evaluation.

    A response that could not be decoded gets the "unexpected response"
    message; every transport problem gets the generic one.
    """
    if isinstance(error, SchemaViolationError):
        return MALFORMED_RESPONSE_FEEDBACK
    return EVALUATION_FAILED_FEEDBACK
