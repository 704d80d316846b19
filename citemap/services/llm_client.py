from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


class EmptyResponseError(RuntimeError):
    """The model answered without any text (blocked or empty candidate)."""


@dataclass(frozen=True)
class LLMConfig:
    provider: str
    model: str
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    gemini_api_key: Optional[str] = None


class GeminiLLM:
    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        from google import genai
        from google.genai import types

        self._types = types
        self.client = genai.Client(api_key=api_key)
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def generate_text(self, prompt: str) -> str:
        logger.debug("generate_content model=%s prompt_chars=%d", self.model, len(prompt))

        resp = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=self._types.GenerateContentConfig(
                temperature=self.temperature,
                max_output_tokens=self.max_tokens,
            ),
        )

        txt = resp.text
        if not txt:
            raise EmptyResponseError(f"Model {self.model} returned no text")
        return txt


def build_llm(cfg: LLMConfig) -> GeminiLLM:
    provider = (cfg.provider or "").lower().strip()

    if provider == "gemini":
        if not cfg.gemini_api_key:
            raise ValueError("GEMINI_API_KEY is missing. Add it to .env")
        return GeminiLLM(
            api_key=cfg.gemini_api_key,
            model=cfg.model,
            temperature=cfg.temperature,
            max_tokens=cfg.max_tokens,
        )

    raise ValueError(f"Unsupported llm provider: {cfg.provider}. Use provider: gemini")


def llm_config_from_settings(settings) -> LLMConfig:
    return LLMConfig(
        provider=settings.llm_provider,
        model=settings.llm_model,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        gemini_api_key=settings.GEMINI_API_KEY,
    )
