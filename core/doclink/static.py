from __future__ import annotations

from core.ports.doclink_port import DocLinkResolver, project_doc_url


class StaticDocLinkResolver(DocLinkResolver):
    """Resolver without an index: every link points at the project index page."""

    def resolve(self, project: str, entity: str) -> str:
        return project_doc_url(project)
