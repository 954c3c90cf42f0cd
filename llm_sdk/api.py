"""
Chat completion client and its HTTP transport
"""

import logging
import os
from typing import Optional, Protocol

import httpx

from .exceptions import TransportError
from .request import ChatCompletionRequest
from .response import ChatCompletionResponse, decode_response

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com"
CHAT_COMPLETIONS_PATH = "/v1/chat/completions"
DEFAULT_TIMEOUT = 60.0


class Transport(Protocol):
    """Sends an encoded request body and returns the raw reply body"""

    async def send(self, body: bytes) -> bytes:
        ...

    async def close(self) -> None:
        ...


class HttpxTransport:
    """
    POSTs request bodies to the chat completions endpoint.

    Args:
        api_key: bearer token (defaults to OPENAI_API_KEY env var)
        base_url: service root (defaults to OPENAI_BASE_URL env var or https://api.openai.com)
        timeout: seconds (defaults to LLM_SDK_TIMEOUT env var or 60)
        transport: httpx transport override, e.g. httpx.MockTransport
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if api_key is None:
            api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise RuntimeError("No API key given. Pass api_key or set OPENAI_API_KEY.")
        if base_url is None:
            base_url = os.getenv("OPENAI_BASE_URL", DEFAULT_BASE_URL)
        if timeout is None:
            timeout = float(os.getenv("LLM_SDK_TIMEOUT", DEFAULT_TIMEOUT))

        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    async def send(self, body: bytes) -> bytes:
        try:
            response = await self.client.post(CHAT_COMPLETIONS_PATH, content=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"{CHAT_COMPLETIONS_PATH} returned {e.response.status_code}",
                status_code=e.response.status_code,
                body=e.response.content,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"{CHAT_COMPLETIONS_PATH} failed: {e}") from e
        return response.content

    async def close(self) -> None:
        await self.client.aclose()


class LlmSdk:
    """Sends chat completion requests and decodes the replies"""

    def __init__(self, api_key: Optional[str] = None, transport: Optional[Transport] = None):
        self.transport = transport if transport is not None else HttpxTransport(api_key=api_key)

    async def chat_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """
        Raises:
            TransportError: from the transport, unmodified
            DecodeError: if the reply does not match the response schema
        """
        body = request.encode()
        logger.debug(f"Sending {len(request.messages)} messages to {request.model.value}")

        raw = await self.transport.send(body)
        response = decode_response(raw)

        logger.info(
            f"Completion {response.id}: {len(response.choices)} choices, "
            f"{response.usage.total_tokens} tokens"
        )
        return response

    async def close(self) -> None:
        await self.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
