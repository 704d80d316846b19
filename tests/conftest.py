"""
Pytest fixtures for Citemap tests. The Gemini client is replaced by a fake so
no request leaves the process.
"""

from __future__ import annotations

import pytest

VALID_KEY = "AIzaSyTestKey1234567890"


class FakeLLM:
    """Stands in for GeminiLLM; records prompts and replays a reply or error."""

    def __init__(self, reply: str = "1. Main research themes: testing", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings():
    from citemap.core.settings import Settings

    return Settings(GEMINI_API_KEY=VALID_KEY, _env_file=None)


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def app(settings, fake_llm):
    from citemap.main import create_app

    return create_app(settings, llm=fake_llm)


@pytest.fixture
def client(app):
    """FastAPI TestClient over an app wired to the fake LLM."""
    from fastapi.testclient import TestClient

    return TestClient(app, raise_server_exceptions=False)
