from __future__ import annotations
from fastapi import APIRouter
from citemap.routes.analyze import router as analyze_router
from citemap.routes.health import router as health_router
from citemap.routes.ui import router as ui_router

router = APIRouter()
router.include_router(health_router)
router.include_router(analyze_router)
router.include_router(ui_router)
