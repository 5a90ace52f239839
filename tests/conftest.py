"""Pytest fixtures and shared test configuration.

Fixtures:
    - knowledge_dir: Temporary directory with a system prompt and one document
    - relay_config: RelayConfig pointing at knowledge_dir with a test key
    - upstream: Recording stub of the Gemini API (httpx.MockTransport)
    - make_service: Factory for RelayService instances wired to the stub
    - relay_service: Default RelayService used by async_client
    - async_client: HTTPX client for API testing, relay wired to the stub
"""

import json
from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from support_chat.api import app
from support_chat.relay.config import RelayConfig
from support_chat.relay.service import RelayService, get_relay_service


def gemini_answer(text: str) -> dict:
    """Build a minimal successful generateContent body."""
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


class FakeGemini:
    """Stand-in for the Gemini API that records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: dict | str = gemini_answer("Default answer")
        self.error: Exception | None = None

    def respond_with(self, status_code: int, body: dict | str) -> None:
        self.status_code = status_code
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def knowledge_dir(tmp_path: Path) -> Path:
    """Return a knowledge directory with System_Prompt.md and Other.md.

    Returns:
        Path to the populated directory.
    """
    directory = tmp_path / "knowledge"
    directory.mkdir()
    (directory / "System_Prompt.md").write_text("S", encoding="utf-8")
    (directory / "Other.md").write_text("O", encoding="utf-8")
    return directory


@pytest.fixture
def relay_config(knowledge_dir: Path) -> RelayConfig:
    """Relay configuration using the temporary knowledge directory."""
    return RelayConfig(
        api_key="test-gemini-key",
        model_name="gemini-test",
        base_url="https://gemini.test/v1beta",
        knowledge_dir=knowledge_dir,
    )


@pytest.fixture
def upstream() -> FakeGemini:
    """Recording stub of the Gemini API."""
    return FakeGemini()


@pytest.fixture
def make_service(
    relay_config: RelayConfig, upstream: FakeGemini
) -> Callable[..., RelayService]:
    """Factory for RelayService instances wired to the stub API."""

    def factory(**overrides) -> RelayService:
        config = relay_config.model_copy(update=overrides)
        return RelayService(config=config, transport=upstream.transport)

    return factory


@pytest.fixture
def relay_service(make_service: Callable[..., RelayService]) -> RelayService:
    """RelayService with a configured key, wired to the stub API."""
    return make_service()


@pytest.fixture
async def async_client(relay_service: RelayService) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient whose relay talks to the stub API.
    """
    app.dependency_overrides[get_relay_service] = lambda: relay_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
