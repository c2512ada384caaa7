from __future__ import annotations

import logging
import threading
import time
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from core.ports.doclink_port import DocLinkResolver, project_doc_url

logger = logging.getLogger(__name__)


@dataclass
class ProjectIndex:
    """Entity -> relative URL map of one documented project.

    `urls` is only read after `ready` has been set.
    """

    name: str
    search_data: Path
    urls: Dict[str, str] = field(default_factory=dict)
    ready: threading.Event = field(default_factory=threading.Event)
    error: Optional[str] = None


def read_project_list(index_path: Path) -> List[ProjectIndex]:
    """Read the project list from a project index XML file.

    Expected layout:

        <projects>
          <project name="core"><searchdata>core/searchdata.xml</searchdata></project>
        </projects>

    Relative search data paths are resolved against the index file's
    directory.
    """

    root = ET.parse(index_path).getroot()
    projects: List[ProjectIndex] = []
    for element in root.findall("project"):
        name = (element.get("name") or "").strip()
        search_data = (element.findtext("searchdata") or "").strip()
        if not name or not search_data:
            logger.warning("Skipping incomplete project entry in %s", index_path)
            continue

        path = Path(search_data)
        if not path.is_absolute():
            path = index_path.parent / path
        projects.append(ProjectIndex(name=name, search_data=path))
    return projects


def _inner_xml(element: ET.Element) -> str:
    """Text of an element including any markup nested inside it."""

    return (element.text or "") + "".join(
        ET.tostring(child, encoding="unicode") for child in element
    )


def read_search_data(path: Path) -> Dict[str, str]:
    """Parse search data XML (`<doc><field name="name">..</field>...`) into a URL map."""

    root = ET.parse(path).getroot()
    urls: Dict[str, str] = {}
    for doc in root.findall("doc"):
        name = ""
        url = ""
        for f in doc.findall("field"):
            if f.get("name") == "name":
                name = _inner_xml(f)
            elif f.get("name") == "url":
                url = _inner_xml(f)

        if name and url:
            urls[name] = url
    return urls


class ProjectIndexDocLinkResolver(DocLinkResolver):
    """Resolve documentation links from per-project search data.

    Every project is indexed once, in its own background thread. Lookups
    for a project block until that project's index is complete; they
    never see a partially built map.
    """

    def __init__(self, index_path: str | Path):
        self._index_path = Path(index_path).expanduser()
        self._projects: Dict[str, ProjectIndex] = {}

        for project in read_project_list(self._index_path):
            self._projects[project.name] = project

        for project in self._projects.values():
            thread = threading.Thread(
                target=self._index_project,
                name=f"doclink-index-{project.name}",
                args=(project,),
                daemon=True,
            )
            thread.start()

        logger.info(
            "Indexing documentation for %d project(s) from %s",
            len(self._projects),
            self._index_path,
        )

    @property
    def projects(self) -> List[str]:
        return sorted(self._projects)

    def is_ready(self) -> bool:
        return all(p.ready.is_set() for p in self._projects.values())

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        """Block until every project is indexed; False if `timeout` expired first."""

        deadline = None if timeout is None else time.monotonic() + timeout
        for project in self._projects.values():
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            if not project.ready.wait(remaining):
                return False
        return True

    def resolve(self, project: str, entity: str) -> str:
        index = self._projects.get(project)
        if index is None:
            return project_doc_url(project)

        index.ready.wait()
        return project_doc_url(project, index.urls.get(entity) or "index.html")

    def _index_project(self, project: ProjectIndex) -> None:
        try:
            project.urls = read_search_data(project.search_data)
            logger.info("Indexed %d entities for project %s", len(project.urls), project.name)
        except (OSError, ET.ParseError) as e:
            project.error = str(e)
            logger.exception("Failed to index documentation for project %s", project.name)
        finally:
            project.ready.set()
