"""HTTP client the chat widget uses to reach the query endpoint."""

import logging
import os

import httpx

from support_chat.models.schemas import ErrorKind, ErrorResponse, QueryResponse

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:8000"
QUERY_PATH = "/api/query"


class RelayFailure(Exception):
    """Raised when the query endpoint does not return an answer."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.INTERNAL) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind


def _parse_failure(response: httpx.Response) -> RelayFailure:
    try:
        error = ErrorResponse.model_validate(response.json())
    except ValueError:
        return RelayFailure(f"HTTP {response.status_code}")
    return RelayFailure(error.error, error.kind)


async def query_relay(
    message: str,
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Send one message to the query endpoint and return the answer.

    Args:
        message: The user's message.
        base_url: API base URL. Defaults to the API_BASE_URL environment variable.
        transport: Optional httpx transport (tests, in-process calls).

    Returns:
        The answer text.

    Raises:
        RelayFailure: For every failure, including connection and URL errors.
    """
    url = base_url or os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL)
    try:
        async with httpx.AsyncClient(base_url=url, transport=transport, timeout=None) as client:
            response = await client.post(QUERY_PATH, json={"message": message})
    except httpx.RequestError as e:
        raise RelayFailure(f"Connection failed: {e}", ErrorKind.CONNECTION) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"Request to {url} failed: {e}")
        raise RelayFailure(str(e)) from e

    if not response.is_success:
        raise _parse_failure(response)

    try:
        answer = QueryResponse.model_validate(response.json())
    except ValueError as e:
        raise RelayFailure(f"Invalid response from server: {e}") from e

    if not answer.text:
        raise RelayFailure("")
    return answer.text
