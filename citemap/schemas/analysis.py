from pydantic import BaseModel
from typing import Literal, Optional


class AnalysisRequest(BaseModel):
    # Presence and emptiness are checked in the route
    text: Optional[str] = None


class AnalysisResponse(BaseModel):
    analysis: str


class AnalysisErrorBody(BaseModel):
    error: str
    details: Optional[str] = None
    type: Optional[str] = None
    cause: Optional[str] = None


class HealthStatus(BaseModel):
    status: Literal["ok"] = "ok"
    apiKey: Literal["missing", "invalid format", "valid format"]
    apiKeyPrefix: Optional[str] = None
    version: str


class ConnectivityResult(BaseModel):
    status: Literal["success"] = "success"
    message: str
    apiKeyPrefix: Optional[str] = None


class Endpoints(BaseModel):
    root: str = "/"
    health: str = "/health"
    analyze: str = "/analyze (POST)"
    test: str = "/test (GET)"


class ServiceInfo(BaseModel):
    message: str = "Citemap API is running"
    endpoints: Endpoints = Endpoints()
    status: Literal["ok"] = "ok"
