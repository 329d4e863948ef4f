"""CLI configuration constants.

Centralizes magic numbers and configuration values for the CLI module.
"""

import logging


class LogLevel:
    """Log level names accepted in the environment.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def from_string(cls, level_str: str | None) -> int:
        """Convert string to log level. Returns WARNING if missing or invalid."""
        if not level_str:
            return cls.WARNING
        return cls._from_string.get(level_str.strip().lower(), cls.WARNING)


# Environment variable holding the log level (may be set in .env)
LOG_LEVEL_ENV = "DSPROMPT_LOG_LEVEL"

# Loading indicator
SPINNER_FRAMES = ("/", "-", "\\", "|")
SPINNER_INTERVAL = 0.1  # Seconds between frames
