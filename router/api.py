"""API router aggregator.

This module exists only to keep the public import stable:

    `from router.api import router`

All endpoint implementations live in dedicated `router/routes_*.py` modules.
"""

from __future__ import annotations

from fastapi import APIRouter

from router.routes_health import router as health_router
from router.routes_render import router as render_router


router = APIRouter()
router.include_router(health_router, tags=["Health"])
router.include_router(render_router, tags=["Render"])
