from .base import LLMProvider
from .models import ChatMessage, LLMResponse
from .providers import DeepSeekProvider

__all__ = [
    "LLMProvider",
    "ChatMessage",
    "LLMResponse",
    "DeepSeekProvider",
]
