"""One prompt, one request, one reply.

This is the boundary where chat failures stop propagating: every error is
reported on the console and the reply becomes an empty string.
"""

import logging

from rich.console import Console
from rich.markup import escape

from .errors import ChatStatusError, ChatTransportError, InputTooLongError
from .llm import ChatMessage, LLMProvider
from .messages import message
from .status import report_status

logger = logging.getLogger(__name__)


def check_prompt_length(prompt: str, max_input_length: int) -> None:
    """Raise InputTooLongError if the prompt is over the limit."""
    if len(prompt) > max_input_length:
        raise InputTooLongError(len(prompt), max_input_length)


async def complete(
    provider: LLMProvider,
    prompt: str,
    max_output_tokens: int,
    console: Console,
    language: str = "en",
) -> str:
    """Send a prompt as a single user message and return the reply text.

    Args:
        provider: Provider holding the credential and endpoint
        prompt: User text
        max_output_tokens: max_tokens for the request
        console: Console for diagnostics
        language: Language of the diagnostics

    Returns:
        The reply, or "" after any failure (already reported on console)
    """
    messages = [ChatMessage(role="user", content=prompt)]
    try:
        response = await provider.chat_completion(messages, max_tokens=max_output_tokens)
    except ChatStatusError as e:
        report_status(e.status_code, console, language)
        return ""
    except ChatTransportError as e:
        console.print(f"[red]{escape(message('network_error', language, error=e))}[/red]")
        return ""
    except Exception as e:
        logger.debug("Chat completion failed unexpectedly", exc_info=True)
        console.print(f"[red]{escape(message('unknown_error', language, error=e))}[/red]")
        return ""
    return response.content
