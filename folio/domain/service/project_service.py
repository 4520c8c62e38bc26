"""Project domain service."""

from datetime import datetime
from typing import Any

import logfire

from folio.domain.error import AuthorizationError, NotFoundError, StoreUnavailableError
from folio.domain.model import Project
from folio.domain.repository import ProjectRepository, StarRepository
from folio.domain.value import ProjectId, StarTargetType, UserId

from .base import Service
from .validation import MAX_PAGE_SIZE, ensure_limit, ensure_offset

# Fields the owner may change after creation
EDITABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "readme_content",
        "repository_url",
        "live_url",
        "thumbnail_url",
        "tech_stack",
        "tags",
        "featured",
        "visibility",
    }
)


class ProjectService(Service):
    """Domain service for project operations."""

    def __init__(
        self, project_repository: ProjectRepository, star_repository: StarRepository
    ) -> None:
        """Initialize project service.

        Args:
            project_repository: Project repository
            star_repository: Star repository (stars are removed with their project)
        """
        self.project_repository = project_repository
        self.star_repository = star_repository

    async def get_by_id(self, project_id: ProjectId) -> Project | None:
        """Get a project by ID.

        Args:
            project_id: Project ID

        Returns:
            Project if found, None otherwise
        """
        with logfire.span("project_service.get_by_id", project_id=project_id):
            project = await self.project_repository.find_by_id(project_id)
            if not project:
                logfire.warn("Project not found", project_id=project_id)
            return project

    async def get_project(self, project_id: ProjectId) -> Project:
        """Get a project by ID.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.get_by_id(project_id)
        if not project:
            raise NotFoundError("Project", str(project_id))
        return project

    async def get_visible_project(
        self, project_id: ProjectId, viewer_id: UserId | None
    ) -> Project:
        """Get a project as seen by a viewer.

        Private projects of other users are reported as missing.

        Raises:
            NotFoundError: If the project does not exist or is hidden
        """
        project = await self.get_project(project_id)
        if not project.is_visible_to(viewer_id):
            logfire.info(
                "Private project hidden from viewer",
                project_id=project_id,
                viewer_id=viewer_id,
            )
            raise NotFoundError("Project", str(project_id))
        return project

    async def list_projects(
        self,
        owner_id: UserId | None,
        viewer_id: UserId | None,
        limit: int,
        offset: int,
    ) -> list[Project]:
        """List projects newest first.

        Owners see their own private projects; everyone else only public ones.
        Listing is a read path, so an unavailable store yields an empty list.

        Raises:
            ValidationError: If limit is outside 1..100 or offset is negative
        """
        ensure_limit(limit, MAX_PAGE_SIZE)
        ensure_offset(offset)
        include_private = owner_id is not None and owner_id == viewer_id
        with logfire.span(
            "project_service.list_projects",
            owner_id=owner_id,
            include_private=include_private,
            limit=limit,
            offset=offset,
        ):
            try:
                return await self.project_repository.find_all(
                    owner_id=owner_id,
                    include_private=include_private,
                    limit=limit,
                    offset=offset,
                )
            except StoreUnavailableError as e:
                logfire.warn("Project listing degraded to empty", error=str(e))
                return []

    async def create_project(self, project: Project) -> Project:
        """Store a new project.

        Args:
            project: Project to create (counters start at zero)

        Returns:
            Created project with its id
        """
        with logfire.span(
            "project_service.create_project",
            owner_id=project.owner_id,
            title=project.title,
        ):
            fresh = project.model_copy(update={"star_count": 0, "view_count": 0})
            saved = await self.project_repository.create(fresh)
            logfire.info("Project created", project_id=saved.id, owner_id=saved.owner_id)
            return saved

    async def update_project(
        self,
        project_id: ProjectId,
        acting_user_id: UserId,
        changes: dict[str, Any],
    ) -> Project:
        """Apply the owner's edits to a project.

        Args:
            project_id: Project to edit
            acting_user_id: User performing the edit (must be the owner)
            changes: Field name to new value; None values are ignored

        Returns:
            Updated project

        Raises:
            NotFoundError: If the project does not exist
            AuthorizationError: If the acting user is not the owner
        """
        changes = {
            k: v for k, v in changes.items() if k in EDITABLE_FIELDS and v is not None
        }
        with logfire.span(
            "project_service.update_project",
            project_id=project_id,
            user_id=acting_user_id,
            fields=sorted(changes),
        ):
            project = await self._get_owned(project_id, acting_user_id)

            updated = Project.model_validate(
                {**project.model_dump(), **changes, "updated_at": datetime.now()}
            )
            saved = await self.project_repository.update(updated)
            if saved is None:
                raise NotFoundError("Project", str(project_id))

            logfire.info("Project updated", project_id=project_id)
            return saved

    async def delete_project(self, project_id: ProjectId, acting_user_id: UserId) -> bool:
        """Delete a project and the stars recorded on it.

        Raises:
            NotFoundError: If the project does not exist
            AuthorizationError: If the acting user is not the owner
        """
        with logfire.span(
            "project_service.delete_project",
            project_id=project_id,
            user_id=acting_user_id,
        ):
            await self._get_owned(project_id, acting_user_id)

            removed_stars = await self.star_repository.delete_by_target(
                StarTargetType.PROJECT, project_id
            )
            deleted = await self.project_repository.delete(project_id)
            logfire.info(
                "Project deleted",
                project_id=project_id,
                removed_stars=removed_stars,
            )
            return deleted

    async def record_view(self, project_id: ProjectId) -> None:
        """Atomically increment a project's view count."""
        with logfire.span("project_service.record_view", project_id=project_id):
            await self.project_repository.increment_view_count(project_id)

    async def increment_star_count(self, project_id: ProjectId) -> None:
        """Atomically increment a project's star count.

        Uses a storage-level increment to avoid race conditions.
        """
        with logfire.span("project_service.increment_star_count", project_id=project_id):
            await self.project_repository.increment_star_count(project_id)
            logfire.info("Project stars incremented", project_id=project_id)

    async def decrement_star_count(self, project_id: ProjectId) -> None:
        """Atomically decrement a project's star count (minimum 0)."""
        with logfire.span("project_service.decrement_star_count", project_id=project_id):
            await self.project_repository.decrement_star_count(project_id)
            logfire.info("Project stars decremented", project_id=project_id)

    async def _get_owned(self, project_id: ProjectId, acting_user_id: UserId) -> Project:
        project = await self.get_project(project_id)
        if not project.is_owned_by(acting_user_id):
            logfire.warn(
                "Unauthorized project mutation",
                project_id=project_id,
                owner_id=project.owner_id,
                user_id=acting_user_id,
            )
            raise AuthorizationError("project", project_id, acting_user_id)
        return project
