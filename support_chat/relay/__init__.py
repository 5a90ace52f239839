"""Query relay between the chat widget and the Gemini API.

Responsibilities:
    - Loading the knowledge documents and the system prompt from disk
    - Assembling the grounded prompt and generation settings
    - Calling the Gemini API and extracting the answer text
    - Classifying failures into typed errors

Maintains clean separation from the HTTP layer.
"""

from support_chat.relay.config import RelayConfig, get_relay_config
from support_chat.relay.exceptions import (
    ConfigError,
    KnowledgeLoadError,
    MalformedResponseError,
    QuotaExceededError,
    RelayError,
    UpstreamConnectionError,
    UpstreamError,
)
from support_chat.relay.knowledge import KnowledgeBase, load_knowledge
from support_chat.relay.service import RelayService, get_relay_service

__all__ = [
    "ConfigError",
    "KnowledgeBase",
    "KnowledgeLoadError",
    "MalformedResponseError",
    "QuotaExceededError",
    "RelayConfig",
    "RelayError",
    "RelayService",
    "UpstreamConnectionError",
    "UpstreamError",
    "get_relay_config",
    "get_relay_service",
    "load_knowledge",
]
