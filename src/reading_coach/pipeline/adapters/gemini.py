"""google-genai implementation of `GenerationAdapter`.

Errors from the SDK are translated into typed transport errors here, so the
rest of the pipeline branches on exception type instead of message text.
"""

from __future__ import annotations

import base64
import logging

from google import genai
from google.genai import errors, types
import httpx

from reading_coach.core.types import GenerationResponse
from reading_coach.exceptions import AuthError, NetworkError, TransportError

log = logging.getLogger(__name__)

_AUTH_STATUS_CODES = frozenset({401, 403})


class GoogleGenAIAdapter:
    """Calls the Gemini API asynchronously through ``client.aio``."""

    def __init__(self, api_key: str, *, client: genai.Client | None = None) -> None:
        self._owns_client = client is None
        self._client = client or genai.Client(api_key=api_key)

    async def generate(
        self,
        *,
        model_name: str,
        contents: str,
        config: types.GenerateContentConfig | None = None,
    ) -> GenerationResponse:
        log.debug("Calling model '%s' with %d prompt chars", model_name, len(contents))
        try:
            response = await self._client.aio.models.generate_content(
                model=model_name,
                contents=contents,
                config=config,
            )
        except errors.APIError as e:
            if e.code in _AUTH_STATUS_CODES:
                raise AuthError(f"API key rejected ({e.code}): {e.message}") from e
            raise TransportError(f"Model call failed ({e.code}): {e.message}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Model service unreachable: {e}") from e
        except Exception as e:  # Defensive normalization
            raise TransportError(f"Provider call failed: {e}") from e

        return to_generation_response(response)

    async def aclose(self) -> None:
        """Close the async transport of a client this adapter created."""
        if self._owns_client:
            await self._client.aio.aclose()


def to_generation_response(
    response: types.GenerateContentResponse,
) -> GenerationResponse:
    """Project the SDK response onto the fields the pipeline reads."""
    parts = _first_candidate_parts(response)

    texts = [p.text for p in parts if p.text and not p.thought]
    text = "".join(texts) if texts else None

    inline_data: str | None = None
    for part in parts:
        if part.inline_data is not None and part.inline_data.data:
            data = part.inline_data.data
            if isinstance(data, bytes):
                data = base64.b64encode(data).decode("ascii")
            inline_data = data
            break

    return GenerationResponse(text=text, inline_data=inline_data, raw=response)


def _first_candidate_parts(response: types.GenerateContentResponse) -> list[types.Part]:
    if not response.candidates:
        return []
    content = response.candidates[0].content
    if content is None or not content.parts:
        return []
    return list(content.parts)
