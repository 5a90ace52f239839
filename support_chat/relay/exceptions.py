"""Exceptions raised while relaying a question to the model.

Each class carries the ErrorKind of the boundary that raised it, so callers
never have to inspect message text to classify a failure.
"""

from support_chat.models.schemas import ErrorKind


class RelayError(Exception):
    """Base exception for all relay failures."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigError(RelayError):
    """Raised when required configuration (the API key) is missing."""

    kind = ErrorKind.CONFIG


class KnowledgeLoadError(RelayError):
    """Raised when the knowledge directory cannot be read."""

    kind = ErrorKind.KNOWLEDGE


class UpstreamError(RelayError):
    """Raised when the Gemini API answers with a non-success status."""

    kind = ErrorKind.UPSTREAM


class QuotaExceededError(UpstreamError):
    """Raised when the Gemini API rejects the call for quota or rate limits."""

    kind = ErrorKind.QUOTA_EXCEEDED


class MalformedResponseError(RelayError):
    """Raised when a success response lacks the expected fields."""

    kind = ErrorKind.MALFORMED_RESPONSE


class UpstreamConnectionError(RelayError):
    """Raised when the Gemini API cannot be reached."""

    kind = ErrorKind.CONNECTION
