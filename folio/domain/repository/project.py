"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from folio.domain.model.project import Project
from folio.domain.value import ProjectId, UserId


class ProjectRepository(ABC):
    """Repository for Project aggregate.

    Defines the contract for project persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID.

        Args:
            project_id: The project's unique identifier

        Returns:
            The project if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        owner_id: Optional[UserId] = None,
        include_private: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Project]:
        """Find projects, newest first.

        Args:
            owner_id: Only projects of this owner (None for all owners)
            include_private: Whether to include private projects
            limit: Maximum number of projects to return
            offset: Number of projects to skip

        Returns:
            List of projects matching the criteria
        """
        pass

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Insert a new project.

        Args:
            project: The project to insert (id is ignored)

        Returns:
            The stored project with its assigned id
        """
        pass

    @abstractmethod
    async def update(self, project: Project) -> Optional[Project]:
        """Write the editable fields of an existing project.

        Counters are not written; they only change through the atomic
        methods below.

        Args:
            project: Project carrying the new field values

        Returns:
            The stored project, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project.

        Args:
            project_id: The project ID to delete

        Returns:
            True if a project was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def increment_star_count(self, project_id: ProjectId) -> None:
        """Atomically increment star_count by 1.

        Uses a storage-level increment to avoid lost updates.

        Args:
            project_id: The project ID
        """
        pass

    @abstractmethod
    async def decrement_star_count(self, project_id: ProjectId) -> None:
        """Atomically decrement star_count by 1 (minimum 0).

        Args:
            project_id: The project ID
        """
        pass

    @abstractmethod
    async def increment_view_count(self, project_id: ProjectId) -> None:
        """Atomically increment view_count by 1.

        Args:
            project_id: The project ID
        """
        pass
