from __future__ import annotations

from unittest.mock import patch

import pytest

from citemap.core import settings as settings_mod
from citemap.core.settings import Settings, api_key_prefix, api_key_status, validate_api_key
from citemap.errors import ConfigError


def test_api_key_status():
    assert api_key_status(None) == "missing"
    assert api_key_status("") == "missing"
    assert api_key_status("sk-123") == "invalid format"
    assert api_key_status("ai-lowercase") == "invalid format"
    assert api_key_status("AIzaSyAbc") == "valid format"


def test_api_key_prefix_never_exposes_more_than_ten_chars():
    key = "AIzaSy0123456789abcdef"
    assert api_key_prefix(key) == "AIzaSy0123..."
    assert api_key_prefix("AIshort") == "AIshort..."
    assert api_key_prefix(None) is None


def test_validate_api_key_messages():
    with pytest.raises(ConfigError, match="is not set"):
        validate_api_key(Settings(GEMINI_API_KEY=None, _env_file=None))
    with pytest.raises(ConfigError, match='should start with "AI"'):
        validate_api_key(Settings(GEMINI_API_KEY="sk-wrong", _env_file=None))
    validate_api_key(Settings(GEMINI_API_KEY="AIzaOk", _env_file=None))


def test_env_is_read(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "AIzaFromEnv")
    monkeypatch.setenv("PORT", "4010")
    s = Settings(_env_file=None)
    assert s.GEMINI_API_KEY == "AIzaFromEnv"
    assert s.PORT == 4010


def test_defaults_without_yaml(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    with patch.object(settings_mod, "_load_yaml_config", return_value={}):
        s = Settings(GEMINI_API_KEY="AIza", _env_file=None)
    assert s.PORT == 3001
    assert s.llm_provider == "gemini"
    assert s.llm_model == "gemini-2.0-flash"
    assert s.llm_temperature is None
    assert s.cors_origins == ["*"]


def test_yaml_layer_and_kwarg_precedence():
    cfg = {
        "llm": {"model": "gemini-1.5-pro", "temperature": 0.4, "max_tokens": 1200},
        "server": {"log_level": "DEBUG", "cors_origins": ["http://localhost:5173"]},
        "client": {"api_url": "http://gateway:3001"},
    }
    with patch.object(settings_mod, "_load_yaml_config", return_value=cfg):
        s = Settings(GEMINI_API_KEY="AIza", llm_temperature=0.0, _env_file=None)
    assert s.llm_model == "gemini-1.5-pro"
    assert s.llm_temperature == 0.0
    assert s.llm_max_tokens == 1200
    assert s.log_level == "DEBUG"
    assert s.cors_origins == ["http://localhost:5173"]
    assert s.api_url == "http://gateway:3001"


def test_settings_are_frozen(settings):
    with pytest.raises(Exception):
        settings.GEMINI_API_KEY = "AIzaOther"
