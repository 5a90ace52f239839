"""Pydantic models for API requests and responses.

Models:
    - ChatMessage: Individual message in conversation
    - QueryRequest: Incoming question payload
    - QueryResponse: Answer text from the model
    - ErrorResponse: Failure envelope with a typed error kind
"""

from support_chat.models.schemas import (
    ChatMessage,
    ErrorKind,
    ErrorResponse,
    QueryRequest,
    QueryResponse,
    Role,
)

__all__ = [
    "ChatMessage",
    "ErrorKind",
    "ErrorResponse",
    "QueryRequest",
    "QueryResponse",
    "Role",
]
