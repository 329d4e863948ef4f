import logging
from typing import Any

import openai
from openai import AsyncOpenAI

from ...config import DEFAULT_BASE_URL, DEFAULT_MODEL
from ...errors import ChatResponseError, ChatStatusError, ChatTransportError
from ..base import LLMProvider
from ..models import ChatMessage, LLMResponse

logger = logging.getLogger(__name__)

USAGE_KEYS = ("prompt_tokens", "completion_tokens", "total_tokens")


def extract_content(payload: Any) -> str:
    """Return choices[0].message.content, or "" if any segment is missing."""
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    if content is None:
        return ""
    return content if isinstance(content, str) else str(content)


def _extract_usage(payload: Any) -> dict[str, int] | None:
    usage = payload.get("usage") if isinstance(payload, dict) else None
    if not isinstance(usage, dict):
        return None
    return {
        key: usage[key]
        for key in USAGE_KEYS
        if isinstance(usage.get(key), int) and not isinstance(usage.get(key), bool)
    }


class DeepSeekProvider(LLMProvider):
    """DeepSeek chat provider using the OpenAI-compatible API.

    Hidden design decisions:
    - DeepSeek API client initialization (via OpenAI SDK)
    - Message format conversion
    - Single attempt per request: the SDK's own retries are disabled
    - Lenient reply extraction from the raw JSON body, so a response
      without choices degrades to an empty reply instead of an error
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        **client_kwargs: Any
    ):
        """Initialize DeepSeek provider.

        Args:
            api_key: DeepSeek API key, sent as a bearer token
            model: Default model to use ('deepseek-chat' or 'deepseek-reasoner')
            base_url: API base URL; requests go to {base_url}/chat/completions
            **client_kwargs: Additional kwargs for AsyncOpenAI client
                (e.g. http_client)
        """
        self._model = model
        client_kwargs.setdefault("max_retries", 0)
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion using DeepSeek.

        Args:
            messages: Conversation history
            model: Model to use (overrides default)
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature, omitted from the body when None
            **kwargs: Additional DeepSeek-specific parameters

        Returns:
            LLMResponse with generated content ("" when absent)

        Raises:
            ChatStatusError: Non-2xx HTTP status
            ChatTransportError: Connection failure or timeout
            ChatResponseError: Body is not JSON
        """
        model_to_use = model or self._model

        deepseek_messages = [
            {"role": msg.role, "content": msg.content}
            for msg in messages
        ]
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        if temperature is not None:
            kwargs["temperature"] = temperature

        logger.debug(
            "POST chat completion model=%s messages=%d max_tokens=%s",
            model_to_use, len(deepseek_messages), max_tokens
        )

        try:
            raw = await self._client.chat.completions.with_raw_response.create(
                model=model_to_use,
                messages=deepseek_messages,
                **kwargs
            )
        except openai.APIStatusError as e:
            logger.debug("Chat completion failed with HTTP %s", e.status_code)
            raise ChatStatusError(e.status_code, e.message) from e
        except openai.APIConnectionError as e:
            raise ChatTransportError(str(e)) from e

        http_response = raw.http_response
        logger.debug("Chat completion returned HTTP %s", http_response.status_code)

        try:
            payload = http_response.json()
        except ValueError as e:
            raise ChatResponseError(f"Response body is not valid JSON: {e}") from e

        usage = _extract_usage(payload)
        if usage:
            logger.debug("Token usage: %s", usage)

        response_model = payload.get("model") if isinstance(payload, dict) else None
        return LLMResponse(
            content=extract_content(payload),
            model=response_model if isinstance(response_model, str) else model_to_use,
            usage=usage
        )

    async def close(self) -> None:
        """Close the DeepSeek client.

        Note: Uses the OpenAI SDK's async close for proper cleanup.
        See: https://github.com/openai/openai-python#async-usage
        """
        await self._client.close()
