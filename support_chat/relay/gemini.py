"""Async client for the Gemini generateContent REST endpoint.

Sends a single request per question and extracts the first candidate's text.
Failures are converted to typed RelayError subclasses; nothing is retried.
"""

import logging
from typing import Any

import httpx

from support_chat.relay.config import RelayConfig
from support_chat.relay.exceptions import (
    MalformedResponseError,
    QuotaExceededError,
    UpstreamConnectionError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

QUOTA_STATUS_CODE = 429
QUOTA_MARKERS = ("resource_exhausted", "quota")


def extract_text(data: Any) -> str:
    """Return ``candidates[0].content.parts[0].text`` from a response body.

    Raises:
        MalformedResponseError: If any field along the path is missing.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedResponseError(f"Unexpected Gemini response shape: missing {e}") from e

    if not isinstance(text, str):
        raise MalformedResponseError("Unexpected Gemini response shape: text is not a string")
    return text


def _is_quota_failure(status_code: int, body: str) -> bool:
    lowered = body.lower()
    return status_code == QUOTA_STATUS_CODE or any(m in lowered for m in QUOTA_MARKERS)


class GeminiClient:
    """Client for one-shot Gemini content generation.

    Args:
        config: Relay configuration with key, model and timeout.
        transport: Optional httpx transport, used by tests to stub the API.
    """

    def __init__(
        self,
        config: RelayConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self._config.base_url}/models/{self._config.model_name}:generateContent"

    async def generate(self, payload: dict[str, Any]) -> str:
        """Send a generateContent request and return the answer text.

        Args:
            payload: Request body built by ``build_payload``.

        Returns:
            Text of the first candidate.

        Raises:
            UpstreamConnectionError: If the API cannot be reached.
            QuotaExceededError: If the API reports quota or rate limit exhaustion.
            UpstreamError: For any other non-success status.
            MalformedResponseError: If a success body lacks the answer text.
        """
        async with httpx.AsyncClient(
            timeout=self._config.timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(
                    self.endpoint,
                    params={"key": self._config.api_key},
                    json=payload,
                )
            except httpx.RequestError as e:
                raise UpstreamConnectionError(f"Connection failed: {e}") from e

        if not response.is_success:
            body = response.text
            logger.warning(f"Gemini API returned HTTP {response.status_code}")
            if _is_quota_failure(response.status_code, body):
                raise QuotaExceededError(body, status_code=response.status_code)
            raise UpstreamError(body, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Gemini response is not valid JSON: {e}") from e

        return extract_text(data)
