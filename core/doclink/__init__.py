from __future__ import annotations

import logging
import os
from typing import Optional

from core.doclink.project_index import ProjectIndexDocLinkResolver
from core.doclink.static import StaticDocLinkResolver
from core.ports.doclink_port import DocLinkResolver

logger = logging.getLogger(__name__)


def create_doc_link_resolver(index_path: Optional[str]) -> DocLinkResolver:
    """Return the resolver for a configured project index path.

    Without an index (unset or missing file) links go to project index pages.
    """

    if not index_path:
        return StaticDocLinkResolver()

    if not os.path.exists(index_path):
        logger.warning("Documentation project index does not exist: %s", index_path)
        return StaticDocLinkResolver()

    return ProjectIndexDocLinkResolver(index_path)
