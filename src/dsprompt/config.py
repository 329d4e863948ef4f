"""Settings loaded from config.json.

Hides the file location, its JSON key names and the fallback rules for
optional values. The file is read once at startup; the returned Settings
object is immutable for the rest of the process.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from .errors import ConfigError

CONFIG_FILE = Path("config.json")

DEFAULT_MODEL = "deepseek-chat"
DEFAULT_BASE_URL = "https://api.deepseek.com/v1"
DEFAULT_MAX_INPUT_LENGTH = 500
DEFAULT_MAX_OUTPUT_TOKENS = 1000
SUPPORTED_LANGUAGES = ("en", "zh")


class Settings(BaseModel):
    """Runtime settings for one dsprompt session."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_key: str = Field(alias="apiKey", description="DeepSeek bearer token")
    max_input_length: int = Field(
        default=DEFAULT_MAX_INPUT_LENGTH,
        alias="maxInputLength",
        description="Longest prompt accepted, in characters"
    )
    max_output_tokens: int = Field(
        default=DEFAULT_MAX_OUTPUT_TOKENS,
        alias="maxOutputTokens",
        description="max_tokens sent with each request; also the reply warning threshold"
    )
    model: str = Field(default=DEFAULT_MODEL, description="Chat model identifier")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="baseUrl", description="API base URL")
    language: Literal["en", "zh"] = Field(default="en", description="Console message language")

    @field_validator("api_key")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("apiKey must not be empty")
        return value

    @field_validator("max_input_length", "max_output_tokens", mode="before")
    @classmethod
    def _positive_int_or_default(cls, value: Any, info: ValidationInfo) -> int:
        default = cls.model_fields[info.field_name].default
        if isinstance(value, bool):
            return default
        if isinstance(value, str):
            try:
                value = int(value)
            except ValueError:
                return default
        if isinstance(value, int) and value > 0:
            return value
        return default

    @field_validator("language", mode="before")
    @classmethod
    def _known_language_or_default(cls, value: Any) -> str:
        return value if value in SUPPORTED_LANGUAGES else "en"


def load_settings(path: Path = CONFIG_FILE) -> Settings:
    """Read and validate the configuration file.

    Args:
        path: Location of the JSON file

    Returns:
        Validated Settings

    Raises:
        ConfigError: If the file is missing or unreadable, is not a JSON
            object, or carries no usable apiKey
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e.strerror or e}") from e

    try:
        return Settings.model_validate_json(raw)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid {path}: {details}") from e
