"""Pytest fixtures and shared test configuration.

Fixtures:
    - chat_config: ChatConfig with a fake key and fixed model
    - gemini_reply: Factory for generateContent success bodies
    - make_client: GeminiClient wired to an httpx.MockTransport handler
    - async_client: HTTPX client for the FastAPI app
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from chatbot.agent.config import ChatConfig
from chatbot.agent.gemini_client import GeminiClient
from chatbot.api import app

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def chat_config() -> ChatConfig:
    """Return a config that never touches the real API.

    Returns:
        ChatConfig with a test key and the default model.
    """
    return ChatConfig(
        api_key="test-key-12345",
        base_url="https://gemini.test/v1beta",
        model_name="gemini-2.0-flash",
        request_timeout=5.0,
    )


@pytest.fixture
def gemini_reply() -> Callable[[str], dict[str, Any]]:
    """Build a successful generateContent body with the given text."""

    def _reply(text: str) -> dict[str, Any]:
        return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}

    return _reply


@pytest.fixture
def make_client(chat_config: ChatConfig) -> Callable[[Handler], GeminiClient]:
    """Create GeminiClient instances backed by a mock transport."""

    def _make(handler: Handler) -> GeminiClient:
        return GeminiClient(chat_config, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
