from __future__ import annotations

from fastapi import APIRouter, Request

from core.doclink.project_index import ProjectIndexDocLinkResolver
from router.common import get_config
from router.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(request: Request) -> HealthResponse:
    """Lightweight health/status endpoint."""

    config = get_config(request)
    resolver = getattr(request.app.state, "doc_links", None)

    projects = []
    ready = True
    if isinstance(resolver, ProjectIndexDocLinkResolver):
        projects = resolver.projects
        ready = resolver.is_ready()

    return HealthResponse(
        config_path=getattr(request.app.state, "config_path", "docwiki.yaml"),
        debug_level=config.debug_level,
        proxy_root=config.proxy_root,
        wrap_width=config.wrap_width,
        doc_project_index=config.doc_project_index,
        doc_projects=projects,
        doc_index_ready=ready,
        startup_error=getattr(request.app.state, "startup_error", None),
    )
