from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from storage_assistant.core import credentials


class FakeTransport:
    """Stands in for genai.Client; records every client built and request sent."""

    def __init__(self) -> None:
        self.response: Any = SimpleNamespace(text=None)
        self.configs: list = []
        self.calls: list = []
        self.models = self

    def reply(self, text: str | None) -> "FakeTransport":
        self.response = SimpleNamespace(text=text)
        return self

    def fail(self, exc: BaseException) -> "FakeTransport":
        self.response = exc
        return self

    def __call__(self, config):
        self.configs.append(config)
        return self

    def generate_content(self, *, model: str, contents: Any, config: Any = None):
        self.calls.append(SimpleNamespace(model=model, contents=contents, config=config))
        if isinstance(self.response, BaseException):
            raise self.response
        return self.response


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep real credentials and host config out of every test."""
    for name in (
        "API_KEY",
        "GEMINI_MODEL",
        "GEMINI_HTTP_TIMEOUT_MS",
        "LOG_LEVEL",
        "STORAGE_ASSISTANT_DOTENV",
    ):
        monkeypatch.delenv(name, raising=False)
    credentials.clear_runtime_config()
    yield
    credentials.clear_runtime_config()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()
