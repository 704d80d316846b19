"""
Startup gate: a missing or malformed key must stop the process before uvicorn
binds the port.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from citemap.core.settings import Settings
from citemap.main import run


@pytest.mark.parametrize("key", [None, "", "sk-wrong-prefix"])
def test_run_exits_before_serving_on_bad_key(key):
    settings = Settings(GEMINI_API_KEY=key, _env_file=None)
    with patch("uvicorn.run") as mock_uvicorn, patch("citemap.main.create_app") as mock_create:
        with pytest.raises(SystemExit) as exc_info:
            run(settings)

    assert exc_info.value.code == 1
    mock_create.assert_not_called()
    mock_uvicorn.assert_not_called()


def test_run_serves_on_configured_port():
    settings = Settings(GEMINI_API_KEY="AIzaGood", PORT=4321, _env_file=None)
    sentinel = object()
    with patch("uvicorn.run") as mock_uvicorn, patch("citemap.main.create_app", return_value=sentinel) as mock_create:
        run(settings)

    mock_create.assert_called_once_with(settings)
    args, kwargs = mock_uvicorn.call_args
    assert args == (sentinel,)
    assert kwargs["port"] == 4321
    assert kwargs["host"] == settings.HOST
