from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class RenderRequest(BaseModel):
    """Wiki markup to convert to HTML."""

    markup: str = Field(..., description="Wiki text, as stored in a page.")


class RenderResponse(BaseModel):
    """Rendered HTML: one fragment per top-level paragraph, blank-line separated."""

    html: str


class DocLinkResponse(BaseModel):
    """Resolved documentation URL for a project entity."""

    project: str
    entity: str
    url: str


class HealthResponse(BaseModel):
    status: str = "ok"
    config_path: str
    debug_level: str
    proxy_root: str
    wrap_width: int
    doc_project_index: Optional[str] = None
    doc_projects: List[str] = Field(default_factory=list)
    doc_index_ready: bool = True
    startup_error: Optional[str] = None
