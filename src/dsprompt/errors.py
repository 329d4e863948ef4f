"""Exception types raised across dsprompt.

Only ConfigError is allowed to end the process; every other error is
caught at the boundary where it occurs and turned into a console line.
"""


class DsPromptError(Exception):
    """Base class for dsprompt errors."""


class ConfigError(DsPromptError):
    """Configuration file missing, unparsable or without a credential."""


class InputTooLongError(DsPromptError):
    """Prompt longer than the configured input limit."""

    def __init__(self, length: int, limit: int):
        super().__init__(f"Prompt has {length} characters, limit is {limit}")
        self.length = length
        self.limit = limit


class ChatError(DsPromptError):
    """Base class for chat completion failures."""


class ChatStatusError(ChatError):
    """The API answered with a non-2xx status code."""

    def __init__(self, status_code: int, message: str = ""):
        msg = f"HTTP {status_code}"
        if message:
            msg += f": {message}"
        super().__init__(msg)
        self.status_code = status_code


class ChatTransportError(ChatError):
    """Connection failure or timeout before a response arrived."""


class ChatResponseError(ChatError):
    """The response body could not be decoded."""
