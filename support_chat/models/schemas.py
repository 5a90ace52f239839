from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Role(str, Enum):
    """Speaker of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class ErrorKind(str, Enum):
    """Discriminant attached to every failure returned by the relay."""

    CONFIG = "config_error"
    KNOWLEDGE = "knowledge_error"
    UPSTREAM = "upstream_error"
    QUOTA_EXCEEDED = "quota_exceeded"
    MALFORMED_RESPONSE = "malformed_response"
    CONNECTION = "connection_error"
    INVALID_REQUEST = "invalid_request"
    INTERNAL = "internal_error"


class ChatMessage(BaseModel):
    """A single chat message in the conversation.

    Attributes:
        role: The speaker (user or assistant).
        content: The message text.
    """

    role: Role
    content: str


class QueryRequest(BaseModel):
    """Request payload for the query endpoint.

    Attributes:
        message: User's question. Only the latest message is sent.
    """

    message: str = Field(..., min_length=1)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class QueryResponse(BaseModel):
    """Successful answer from the model."""

    text: str


class ErrorResponse(BaseModel):
    """Failure envelope returned with a non-200 status.

    Attributes:
        error: Human readable message (raw upstream body for upstream failures).
        kind: Which boundary produced the failure.
    """

    error: str
    kind: ErrorKind = ErrorKind.INTERNAL
