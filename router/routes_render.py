from __future__ import annotations

from fastapi import APIRouter, Request

from core.wikilang import wiki_to_html
from router.common import get_config, get_doc_links, require_name
from router.schemas import DocLinkResponse, RenderRequest, RenderResponse


router = APIRouter()


@router.post("/render", response_model=RenderResponse)
def render(request: Request, req: RenderRequest) -> RenderResponse:
    """Convert wiki markup to HTML."""

    config = get_config(request)
    html = wiki_to_html(
        req.markup,
        link_resolver=get_doc_links(request),
        url_prefix=config.proxy_root,
        wrap_width=config.wrap_width,
    )
    return RenderResponse(html=html)


@router.get("/doclink", response_model=DocLinkResponse)
def doclink(request: Request, project: str, entity: str = "") -> DocLinkResponse:
    """Resolve the documentation URL of an entity in a project."""

    project = require_name(project, field="project")
    url = get_doc_links(request).resolve(project, entity)
    return DocLinkResponse(project=project, entity=entity, url=url)
