from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from citemap.core.deps import get_llm, get_settings
from citemap.core.settings import VERSION, Settings, api_key_prefix, api_key_status
from citemap.errors import UpstreamError
from citemap.schemas.analysis import ConnectivityResult, HealthStatus, ServiceInfo
from citemap.services.prompts import HELLO_PROMPT

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/", response_model=ServiceInfo)
async def root():
    return ServiceInfo()


@router.get("/health", response_model=HealthStatus)
async def health(settings: Settings = Depends(get_settings)):
    key = settings.GEMINI_API_KEY
    return HealthStatus(
        apiKey=api_key_status(key),
        apiKeyPrefix=api_key_prefix(key),
        version=VERSION,
    )


@router.get("/test", response_model=ConnectivityResult)
async def test_connection(settings: Settings = Depends(get_settings), llm=Depends(get_llm)):
    """Round-trip a fixed prompt through the model to confirm the key works."""
    prefix = api_key_prefix(settings.GEMINI_API_KEY)
    logger.info("Testing Gemini API connection...")
    logger.info("Using API key: %s", prefix)

    try:
        text = await llm.generate_text(HELLO_PROMPT)
    except Exception as e:
        err = UpstreamError("Gemini API connection test failed", cause=e)
        logger.error("Test failed: %s (%s)", e, type(e).__name__, exc_info=True)
        return JSONResponse(status_code=500, content=err.to_status_dict())

    logger.info("Test successful: %s", text)
    return ConnectivityResult(message=text, apiKeyPrefix=prefix)
