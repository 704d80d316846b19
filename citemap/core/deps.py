from __future__ import annotations

from fastapi import Request

from citemap.core.settings import Settings
from citemap.services.llm_client import GeminiLLM


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_llm(request: Request) -> GeminiLLM:
    return request.app.state.llm
