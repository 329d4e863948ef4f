"""
dsprompt: send a prompt to the DeepSeek chat API from the command line and
print the reply with markdown punctuation stripped.
"""

__version__ = "0.1.0"

from .chat import check_prompt_length, complete
from .config import Settings, load_settings
from .errors import (
    ChatError,
    ChatResponseError,
    ChatStatusError,
    ChatTransportError,
    ConfigError,
    DsPromptError,
    InputTooLongError,
)
from .status import describe_status
from .text import strip_markdown

__all__ = [
    "ChatError",
    "ChatResponseError",
    "ChatStatusError",
    "ChatTransportError",
    "ConfigError",
    "DsPromptError",
    "InputTooLongError",
    "Settings",
    "check_prompt_length",
    "complete",
    "describe_status",
    "load_settings",
    "strip_markdown",
]
