from __future__ import annotations

from fastapi import HTTPException, Request

from config import AppConfig
from core.doclink.static import StaticDocLinkResolver
from core.ports.doclink_port import DocLinkResolver


def get_config(request: Request) -> AppConfig:
    """Return the config loaded at startup (defaults if startup never ran)."""

    config = getattr(request.app.state, "config", None)
    return config if isinstance(config, AppConfig) else AppConfig()


def get_doc_links(request: Request) -> DocLinkResolver:
    """Return the documentation link resolver built at startup.

    Raises:
        HTTPException: 503 if startup failed.
    """

    if getattr(request.app.state, "startup_error", None):
        raise HTTPException(
            status_code=503, detail=f"Startup failed: {request.app.state.startup_error}"
        )

    resolver = getattr(request.app.state, "doc_links", None)
    if resolver is None:
        resolver = StaticDocLinkResolver()
        request.app.state.doc_links = resolver
    return resolver


def require_name(value: str, *, field: str) -> str:
    """Normalize and validate a non-empty name parameter.

    Raises:
        HTTPException: If the value is empty.
    """

    v = str(value or "").strip()
    if not v:
        raise HTTPException(status_code=400, detail=f"{field} is required")
    return v
