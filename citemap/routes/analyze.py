from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from citemap.core.deps import get_llm
from citemap.errors import UpstreamError, ValidationError
from citemap.schemas.analysis import AnalysisErrorBody, AnalysisRequest, AnalysisResponse
from citemap.services.prompts import build_analysis_prompt, preview

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analyze"])


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    responses={400: {"model": AnalysisErrorBody}, 500: {"model": AnalysisErrorBody}},
)
async def analyze_text(payload: AnalysisRequest, llm=Depends(get_llm)):
    text = payload.text
    if not text or not text.strip():
        raise ValidationError("No text provided")

    logger.info("Received text for analysis: %s", preview(text))

    prompt = build_analysis_prompt(text)
    logger.info("Sending request to Gemini API...")

    try:
        analysis = await llm.generate_text(prompt)
    except Exception as e:
        logger.error("Analysis error: %s (%s)", e, type(e).__name__, exc_info=True)
        raise UpstreamError("Failed to analyze text", cause=e) from e

    logger.info("Successfully received analysis from Gemini API")
    return AnalysisResponse(analysis=analysis)
