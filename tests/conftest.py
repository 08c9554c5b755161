"""
Pytest configuration and shared fixtures.

Provider HTTP traffic is served by httpx.MockTransport, so no test ever
reaches the network.
"""
import json
from typing import List, Union

import httpx
import pytest

from uzlatin.config import Settings
from uzlatin.services.provider import OpenAIChatProvider

API_URL = "https://provider.test/v1/chat/completions"


def _chat_response(content: str, status_code: int = 200) -> httpx.Response:
    """Build a chat completions response carrying content."""
    return httpx.Response(
        status_code,
        json={"choices": [{"message": {"role": "assistant", "content": content}}]},
    )


class ScriptedTransport(httpx.MockTransport):
    """MockTransport replaying a fixed list of responses or exceptions."""

    def __init__(self, script: List[Union[httpx.Response, Exception]]):
        self.script = list(script)
        self.requests: List[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.script:
            raise AssertionError("Provider called more times than scripted")
        step = self.script.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    def payloads(self) -> List[dict]:
        """Decoded JSON bodies of every request sent so far."""
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def make_provider():
    """Factory: make_provider(*steps) -> (provider, transport)."""
    def _make(*steps):
        transport = ScriptedTransport(list(steps))
        provider = OpenAIChatProvider(
            api_key="test-key",
            api_url=API_URL,
            timeout=5.0,
            transport=transport,
        )
        return provider, transport
    return _make


@pytest.fixture
def test_settings():
    """Settings with a fake key and no client token."""
    return Settings(
        openai_api_key="test-key",
        openai_api_url=API_URL,
        default_model="gpt-4o-mini",
        client_token=None,
        _env_file=None,
    )


@pytest.fixture
def chat_response():
    """Factory for chat completions responses: chat_response(content, status_code=200)."""
    return _chat_response
