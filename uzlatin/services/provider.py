"""
OpenAI-compatible chat completions client.

The translation provider is only used through a single request/response
shape: a model, a temperature and a list of chat messages go in, the
generated text comes back at choices[0].message.content.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

# Status reported when the provider could not be reached at all
NETWORK_ERROR_STATUS = 502


class ProviderTransportError(Exception):
    """Raised when the provider answers with a non-success status or is unreachable."""

    def __init__(self, status_code: int, detail: str = ""):
        super().__init__(f"Provider error {status_code}: {detail[:200]}")
        self.status_code = status_code
        self.detail = detail


class OpenAIChatProvider:
    """Client for an OpenAI-compatible /chat/completions endpoint"""

    def __init__(
        self,
        api_key: str,
        api_url: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Args:
            api_key: Bearer credential for the provider
            api_url: Full chat completions URL
            timeout: Transport timeout per call, in seconds
            transport: Optional httpx transport (tests plug a MockTransport in here)
        """
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self.transport = transport

    async def create_completion(self, payload: Dict[str, Any]) -> Any:
        """
        POST a chat completions payload and return the decoded JSON body.

        Raises:
            ProviderTransportError: on non-2xx status, network failure or invalid JSON
        """
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Provider unreachable: {e}")
            raise ProviderTransportError(NETWORK_ERROR_STATUS, str(e)) from e

        if response.is_error:
            logger.error(f"Provider returned HTTP {response.status_code}: {response.text[:500]}")
            raise ProviderTransportError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise ProviderTransportError(NETWORK_ERROR_STATUS, f"Invalid JSON from provider: {e}") from e

    async def complete(
        self,
        system_prompt: str,
        text: str,
        model: str,
        temperature: float
    ) -> str:
        """
        Run one system + user exchange and return the generated text.

        Returns:
            Content of the first choice, or "" when the body has none
        """
        messages: List[Dict[str, str]] = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": text},
        ]
        payload = {
            "model": model,
            "temperature": temperature,
            "messages": messages,
        }

        logger.debug(f"Requesting completion from {model} (temperature={temperature})")
        data = await self.create_completion(payload)
        return extract_content(data)


def extract_content(data: Dict[str, Any]) -> str:
    """Pull the generated text out of a chat completions response body."""
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    message = choices[0].get("message", "") if isinstance(choices[0], dict) else ""
    if isinstance(message, dict):
        content = message.get("content")
        return "" if content is None else str(content)
    return str(message or "")
