"""Relay service answering one question from the bundled knowledge documents.

Every call is stateless: the documents are re-read from disk, a fresh prompt
is assembled and a single Gemini request is made. Conversation history is
never sent.
"""

import logging

import httpx

from support_chat.relay.config import RelayConfig, get_relay_config
from support_chat.relay.exceptions import ConfigError
from support_chat.relay.gemini import GeminiClient
from support_chat.relay.knowledge import load_knowledge
from support_chat.relay.prompt import build_payload

logger = logging.getLogger(__name__)


class RelayService:
    """Service turning a user message into a knowledge-grounded answer."""

    def __init__(
        self,
        config: RelayConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the relay service.

        Args:
            config: Optional relay configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport for the Gemini client.
        """
        self._config = config or get_relay_config()
        self._client = GeminiClient(self._config, transport=transport)

    async def answer(self, message: str) -> str:
        """Answer a message using only the knowledge documents.

        Args:
            message: The user's latest message.

        Returns:
            The model's answer text.

        Raises:
            ConfigError: If no API key is configured. Raised before any
                file or network access.
            RelayError: Any other relay failure (see relay.exceptions).
        """
        if not self._config.api_key:
            raise ConfigError("API Key is missing")

        knowledge = load_knowledge(
            self._config.knowledge_dir,
            marker=self._config.system_prompt_marker,
            suffix=self._config.knowledge_suffix,
        )
        payload = build_payload(
            knowledge,
            message,
            temperature=self._config.temperature,
            max_output_tokens=self._config.max_output_tokens,
        )

        logger.info(
            f"Sending question to {self._config.model_name} "
            f"with {len(knowledge.documents)} knowledge documents"
        )
        return await self._client.generate(payload)


# Module-level singleton instance
_relay_service: RelayService | None = None


def get_relay_service() -> RelayService:
    """Get or create the global relay service.

    Returns:
        The RelayService instance.

    Raises:
        ConfigError: If the environment holds invalid relay settings.
    """
    global _relay_service
    if _relay_service is None:
        try:
            config = get_relay_config()
        except ValueError as e:
            raise ConfigError(f"Invalid relay configuration: {e}") from e
        _relay_service = RelayService(config=config)
    return _relay_service
