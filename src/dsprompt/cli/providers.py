"""Provider factory for the CLI.

Hides how a chat provider is built from the loaded settings.
"""

from ..config import Settings
from ..llm import DeepSeekProvider, LLMProvider


def get_llm(settings: Settings) -> LLMProvider:
    """Create the DeepSeek provider described by settings.

    Args:
        settings: Loaded configuration

    Returns:
        Provider bound to the configured credential, model and base URL
    """
    return DeepSeekProvider(
        api_key=settings.api_key,
        model=settings.model,
        base_url=settings.base_url,
    )
