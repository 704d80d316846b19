from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from citemap.api_routes import router as api_router
from citemap.core.settings import Settings, api_key_prefix, api_key_status, validate_api_key
from citemap.errors import CitemapError, ConfigError
from citemap.services.llm_client import build_llm, llm_config_from_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _citemap_error_handler(request: Request, exc: CitemapError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Any body that fails schema validation is reported as missing text.
    logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"error": "No text provided", "details": str(exc.errors()), "type": "ValidationError", "cause": None},
    )


def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error: %s", exc, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": str(exc)},
    )


def create_app(settings: Settings, llm=None) -> FastAPI:
    app = FastAPI(title="Citemap API (Gemini)")

    app.state.settings = settings
    app.state.llm = llm if llm is not None else build_llm(llm_config_from_settings(settings))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(CitemapError, _citemap_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    static_dir = Path(__file__).resolve().parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    app.include_router(api_router)
    return app


def run(settings: Optional[Settings] = None) -> None:
    """Validate configuration, then serve the gateway with uvicorn."""
    import uvicorn

    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)

    try:
        validate_api_key(settings)
    except ConfigError as e:
        logger.error("Error: %s", e)
        sys.exit(1)

    app = create_app(settings)

    key = settings.GEMINI_API_KEY
    logger.info("API Key status: %s", api_key_status(key))
    logger.info("API Key prefix: %s", api_key_prefix(key))
    logger.info("Server running on port %d", settings.PORT)
    logger.info("Visit http://localhost:%d for API information", settings.PORT)

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.log_level.lower())
