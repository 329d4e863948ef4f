from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse


class LLMProvider(ABC):
    """Abstract base class for chat completion providers.

    Implementations hide:
    - API client setup and authentication
    - Request/response format conversion
    - Translation of client errors into dsprompt.errors.ChatError

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            response = await provider.chat_completion(messages)
    """

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion with a single request.

        Args:
            messages: Messages forming the conversation
            model: Model to use (None uses provider's default)
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature (None leaves it to the server)
            **kwargs: Provider-specific parameters

        Returns:
            LLMResponse containing the reply text and metadata

        Raises:
            ChatStatusError: Non-2xx HTTP status
            ChatTransportError: Connection failure or timeout
            ChatResponseError: Undecodable response body
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "LLMProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
