from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from citemap.errors import ConfigError

API_KEY_PREFIX = "AI"
VERSION = "1.0.0"


def _load_yaml_config() -> dict:
    root = Path(__file__).resolve().parents[2]  # project root
    cfg_path = root / "config.yaml"
    if not cfg_path.exists():
        return {}
    with open(cfg_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _yaml_overrides(cfg: dict) -> dict[str, Any]:
    llm = (cfg.get("llm") or {})
    server = (cfg.get("server") or {})
    client = (cfg.get("client") or {})

    mapping = {
        "llm_provider": llm.get("provider"),
        "llm_model": llm.get("model"),
        "llm_temperature": llm.get("temperature"),
        "llm_max_tokens": llm.get("max_tokens"),
        "cors_origins": server.get("cors_origins"),
        "log_level": server.get("log_level"),
        "api_url": client.get("api_url"),
    }
    return {k: v for k, v in mapping.items() if v is not None}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    # Credential
    GEMINI_API_KEY: Optional[str] = None

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    # LLM
    llm_provider: str = "gemini"
    llm_model: str = "gemini-2.0-flash"
    llm_temperature: Optional[float] = None
    llm_max_tokens: Optional[int] = None

    # Browser client
    api_url: str = "http://localhost:3001"

    def __init__(self, **kwargs):
        overrides = _yaml_overrides(_load_yaml_config())
        overrides.update(kwargs)
        super().__init__(**overrides)


def api_key_status(key: Optional[str]) -> str:
    if not key:
        return "missing"
    return "valid format" if key.startswith(API_KEY_PREFIX) else "invalid format"


def api_key_prefix(key: Optional[str]) -> Optional[str]:
    """Short diagnostic form of the credential; at most 10 characters are shown."""
    if not key:
        return None
    return key[:10] + "..."


def validate_api_key(settings: Settings) -> None:
    status = api_key_status(settings.GEMINI_API_KEY)
    if status == "missing":
        raise ConfigError("GEMINI_API_KEY is not set in .env file")
    if status == "invalid format":
        raise ConfigError(
            f'Invalid GEMINI_API_KEY format. It should start with "{API_KEY_PREFIX}"'
        )
