"""Test doubles for the provider adapter seam."""

from typing import Any

from reading_coach.core.types import GenerationResponse


class SpyAdapter:
    """Records every request and replays a canned response or error."""

    def __init__(
        self,
        response: GenerationResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        self.response = response or GenerationResponse()
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = 0

    async def generate(
        self,
        *,
        model_name: str,
        contents: str,
        config: Any = None,
    ) -> GenerationResponse:
        self.calls.append(
            {"model_name": model_name, "contents": contents, "config": config}
        )
        if self.error is not None:
            raise self.error
        return self.response

    async def aclose(self) -> None:
        self.closed += 1


class SpyAdapterFactory:
    """Adapter factory that remembers which keys it was asked for."""

    def __init__(self, adapter: SpyAdapter) -> None:
        self.adapter = adapter
        self.keys: list[str] = []

    def __call__(self, api_key: str) -> SpyAdapter:
        self.keys.append(api_key)
        return self.adapter

    @property
    def call_count(self) -> int:
        return len(self.adapter.calls)
