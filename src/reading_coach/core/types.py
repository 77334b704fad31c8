"""Core data types that flow through the pipeline.

The Result pair makes failures a predictable part of the data flow: each
pipeline step returns `Success` or `Failure` instead of raising, and the coach
folds a `Failure` into the degraded value of its capability.
"""

from __future__ import annotations

import dataclasses
import typing

# --- Result Monad for Robust Error Handling ---

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure", bound=Exception)


@dataclasses.dataclass(frozen=True, slots=True)
class Success(typing.Generic[TSuccess]):
    """A successful result in the pipeline."""

    value: TSuccess


@dataclasses.dataclass(frozen=True, slots=True)
class Failure(typing.Generic[TFailure]):
    """A failure in the pipeline, containing the error."""

    error: TFailure


Result = Success[TSuccess] | Failure[TFailure]


# --- Provider-neutral response ---


@dataclasses.dataclass(frozen=True, slots=True)
class GenerationResponse:
    """What the pipeline needs from one model response.

    Attributes:
        text: Concatenated text of the first candidate, or None when absent.
        inline_data: Base64 payload of the first inline blob, or None.
        raw: The provider object, kept for debugging only.
    """

    text: str | None = None
    inline_data: str | None = None
    raw: typing.Any = dataclasses.field(default=None, compare=False, repr=False)
