"""
Tagged error type shared by the gateway.

Every domain failure is a CitemapError carrying a kind tag (config,
validation or upstream) and, optionally, the exception it wraps. Route
handlers raise these; the application's exception handlers turn them into
JSON bodies.
"""
from __future__ import annotations

from typing import Any, Optional


class CitemapError(Exception):
    kind = "internal"
    status_code = 500

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    @property
    def details(self) -> Optional[str]:
        if self.cause is None:
            return None
        return str(self.cause)

    @property
    def type_name(self) -> str:
        if self.cause is None:
            return type(self).__name__
        return type(self.cause).__name__

    @property
    def cause_message(self) -> Optional[str]:
        # The wrapped exception's own cause, when the SDK chained one.
        if self.cause is None:
            return None
        inner = self.cause.__cause__ or self.cause.__context__
        return str(inner) if inner is not None else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.message,
            "details": self.details,
            "type": self.type_name,
            "cause": self.cause_message,
        }


class ConfigError(CitemapError):
    kind = "config"


class ValidationError(CitemapError):
    kind = "validation"
    status_code = 400


class UpstreamError(CitemapError):
    kind = "upstream"

    def to_status_dict(self) -> dict[str, Any]:
        return {
            "status": "error",
            "message": self.details or self.message,
            "details": self.cause_message or "No additional details",
            "type": self.type_name,
        }
