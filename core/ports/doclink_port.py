from abc import ABC, abstractmethod


def project_doc_url(project: str, page: str = "index.html") -> str:
    """Return the URL of a page in a project's generated documentation."""
    return f"/doc/{project}/html/{page}"


class DocLinkResolver(ABC):
    """Abstract interface for cross-project documentation lookups."""

    @abstractmethod
    def resolve(self, project: str, entity: str) -> str:
        """
        Find the documentation URL of an entity (class, function, type...).

        Args:
            project: Name of the documented project.
            entity: Name of the entity inside that project.

        Returns:
            The entity URL, or the project's index URL when the project or
            entity is unknown.
        """
        pass
