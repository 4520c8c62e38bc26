"""In-memory project repository for testing."""

import asyncio
from typing import Optional

from folio.domain.model.project import Project
from folio.domain.repository.project import ProjectRepository
from folio.domain.value import ProjectId, UserId, Visibility


class InMemoryProjectRepository(ProjectRepository):
    """In-memory implementation of ProjectRepository for testing."""

    def __init__(self) -> None:
        self._projects: dict[ProjectId, Project] = {}
        self._next_id = 1

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        await asyncio.sleep(0)
        return self._projects.get(project_id)

    async def find_all(
        self,
        owner_id: Optional[UserId] = None,
        include_private: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Project]:
        """Find projects, newest first."""
        await asyncio.sleep(0)
        projects = list(self._projects.values())

        if owner_id is not None:
            projects = [p for p in projects if p.owner_id == owner_id]
        if not include_private:
            projects = [p for p in projects if p.visibility == Visibility.PUBLIC]

        projects.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return projects[offset : offset + limit]

    async def create(self, project: Project) -> Project:
        """Store a project with the next id."""
        await asyncio.sleep(0)
        saved = project.model_copy(update={"id": ProjectId(self._next_id)})
        self._next_id += 1
        self._projects[saved.id] = saved  # type: ignore[index]
        return saved

    async def update(self, project: Project) -> Optional[Project]:
        """Write editable fields, keeping the stored counters."""
        await asyncio.sleep(0)
        existing = self._projects.get(project.id)  # type: ignore[arg-type]
        if existing is None:
            return None
        saved = project.model_copy(
            update={
                "owner_id": existing.owner_id,
                "star_count": existing.star_count,
                "view_count": existing.view_count,
                "created_at": existing.created_at,
            }
        )
        self._projects[saved.id] = saved  # type: ignore[index]
        return saved

    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project."""
        await asyncio.sleep(0)
        return self._projects.pop(project_id, None) is not None

    async def _adjust(self, project_id: ProjectId, counter: str, delta: int) -> None:
        await asyncio.sleep(0)
        project = self._projects.get(project_id)
        if project is None:
            return
        value = max(getattr(project, counter) + delta, 0)
        self._projects[project_id] = project.model_copy(update={counter: value})

    async def increment_star_count(self, project_id: ProjectId) -> None:
        await self._adjust(project_id, "star_count", 1)

    async def decrement_star_count(self, project_id: ProjectId) -> None:
        await self._adjust(project_id, "star_count", -1)

    async def increment_view_count(self, project_id: ProjectId) -> None:
        await self._adjust(project_id, "view_count", 1)
