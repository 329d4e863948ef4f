"""Pytest configuration and shared fixtures."""
import io
import json
import os
from collections.abc import Callable

import httpx
import pytest
from rich.console import Console

from dsprompt.llm import DeepSeekProvider

Handler = Callable[[httpx.Request], httpx.Response]


def chat_response(content: str | None = "Hello!", **extra) -> dict:
    """Build a chat completion body in the DeepSeek response shape."""
    body = {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "model": "deepseek-chat",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 3, "total_tokens": 8},
    }
    body.update(extra)
    return body


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response | Exception):
        self._response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self._response, Exception):
            raise self._response
        # Fresh copy per call; a Response object is single-use
        return httpx.Response(
            self._response.status_code,
            headers=self._response.headers,
            content=self._response.content,
        )

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "deepseek": os.getenv("DEEPSEEK_API_KEY")
    }


@pytest.fixture
def make_provider() -> Callable[[Handler], DeepSeekProvider]:
    """Return a factory for providers that talk to an in-process transport."""
    def _make(handler: Handler, api_key: str = "sk-test", **kwargs) -> DeepSeekProvider:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return DeepSeekProvider(api_key=api_key, http_client=http_client, **kwargs)

    return _make


@pytest.fixture
def console_output() -> tuple[Console, io.StringIO]:
    """Return a non-terminal console and the buffer it writes to."""
    buffer = io.StringIO()
    return Console(file=buffer, soft_wrap=True, color_system=None), buffer


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Chdir into an empty directory and return a config.json writer."""
    monkeypatch.chdir(tmp_path)

    def _write(config: dict | str) -> None:
        text = config if isinstance(config, str) else json.dumps(config)
        (tmp_path / "config.json").write_text(text, encoding="utf-8")

    return _write
