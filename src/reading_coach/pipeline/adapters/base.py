"""Adapter seam between the coach and a model provider.

Adapters are injected through a factory that receives the resolved API key,
so tests can swap in fakes and no SDK client exists before a key is known.
An adapter must raise only `TransportError` subclasses.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from google.genai import types

from reading_coach.core.types import GenerationResponse


@runtime_checkable
class GenerationAdapter(Protocol):
    """Performs one generation request and returns a neutral response."""

    async def generate(
        self,
        *,
        model_name: str,
        contents: str,
        config: types.GenerateContentConfig | None = None,
    ) -> GenerationResponse: ...

    async def aclose(self) -> None:
        """Release transport resources; called once the request has finished."""


AdapterFactory = Callable[[str], GenerationAdapter]
