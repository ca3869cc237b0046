from __future__ import annotations

import copy
import os
import socket
from typing import Any, Callable

import pytest

# Test-safe defaults, applied before quizapp.settings is imported.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("MOCK_MODE", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from quizapp.errors import GenerationError  # noqa: E402
from quizapp.main import app  # noqa: E402
from quizapp.services.llm import build_text_client, get_client_factory  # noqa: E402
from quizapp.settings import Settings, get_settings  # noqa: E402


class NetworkBlockedError(RuntimeError):
    pass


def _blocked(*_args: Any, **_kwargs: Any) -> Any:
    raise NetworkBlockedError("Network access is disabled during tests.")


@pytest.fixture(autouse=True)
def _disable_network(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent accidental outbound network calls in unit tests."""

    if os.getenv("ALLOW_NETWORK") == "1":
        return
    monkeypatch.setattr(socket, "create_connection", _blocked)
    monkeypatch.setattr(socket, "getaddrinfo", _blocked)


_QUESTION = {
    "question": "Which pigment absorbs most of the light used in photosynthesis?",
    "options": [
        {"label": "A", "text": "Chlorophyll"},
        {"label": "B", "text": "Melanin"},
        {"label": "C", "text": "Hemoglobin"},
        {"label": "D", "text": "Keratin"},
    ],
    "correctAnswer": "A",
    "explanation": "Chlorophyll absorbs red and blue light. That energy drives the light reactions.",
    "sources": [
        {"title": "Wikipedia - Chlorophyll", "url": "https://en.wikipedia.org/wiki/Chlorophyll"},
    ],
}


@pytest.fixture
def make_questions() -> Callable[..., list]:
    def _make(n: int = 5) -> list:
        out = []
        for i in range(n):
            q = copy.deepcopy(_QUESTION)
            q["question"] = f"Q{i + 1}: {q['question']}"
            out.append(q)
        return out

    return _make


class FakeTextClient:
    """Stands in for TextClient; records every prompt it receives."""

    model = "fake-model"

    def __init__(self, reply: str = "", error: Exception | None = None, chunks: list[str] | None = None):
        self.reply = reply
        self.error = error
        self.chunks = chunks or []
        self.prompts: list[str] = []
        self.options: list[dict] = []

    async def generate(self, prompt: str, model: str | None = None, **options) -> str:
        self.prompts.append(prompt)
        self.options.append(options)
        if self.error is not None:
            raise self.error
        return self.reply

    async def stream(self, prompt: str, model: str | None = None):
        self.prompts.append(prompt)
        for c in self.chunks:
            yield c
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_client() -> FakeTextClient:
    return FakeTextClient()


@pytest.fixture
def app_settings() -> Settings:
    return Settings(_env_file=None, OPENAI_API_KEY="test-key", MOCK_MODE=False, STREAM_DELAY_MS=0)


@pytest.fixture
def client(app_settings: Settings, fake_client: FakeTextClient):
    """TestClient whose settings and text client are injected, never read from the environment."""

    def _factory(s: Settings) -> FakeTextClient:
        # real configuration check, so a missing key still fails
        build_text_client(s)
        return fake_client

    app.dependency_overrides[get_settings] = lambda: app_settings
    app.dependency_overrides[get_client_factory] = lambda: _factory
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def upstream_error() -> GenerationError:
    return GenerationError("Resource has been exhausted (e.g. check quota).")
