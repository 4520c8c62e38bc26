"""List projects use case."""

import logfire
from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import ProjectService, StarService
from folio.domain.value import StarTargetType, UserId

from .get_project import ProjectResponse


class ListProjectsRequest(BaseModel):
    """List projects request."""

    owner_id: int | None = None  # Only this user's projects
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    viewer_id: int | None = None  # Current user ID (if authenticated)


class ListProjectsResponse(BaseModel):
    """List projects response."""

    projects: list[ProjectResponse]
    limit: int
    offset: int


class ListProjectsUseCase(BaseUseCase):
    """Use case for listing projects newest first."""

    def __init__(
        self, project_service: ProjectService, star_service: StarService
    ) -> None:
        self.project_service = project_service
        self.star_service = star_service

    async def execute(self, request: ListProjectsRequest) -> ListProjectsResponse:
        """Execute list projects flow."""
        owner_id = UserId(request.owner_id) if request.owner_id else None
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None

        projects = await self.project_service.list_projects(
            owner_id=owner_id,
            viewer_id=viewer_id,
            limit=request.limit,
            offset=request.offset,
        )

        # Batch query for the viewer's stars (avoid N+1)
        starred: set[int] = set()
        if viewer_id is not None and projects:
            starred = await self.star_service.get_starred_ids(
                viewer_id,
                StarTargetType.PROJECT,
                [p.id for p in projects],  # type: ignore[misc]
            )

        logfire.info(
            "Projects listed",
            count=len(projects),
            owner_id=owner_id,
            viewer_id=viewer_id,
        )
        return ListProjectsResponse(
            projects=[ProjectResponse.build(p, p.id in starred) for p in projects],
            limit=request.limit,
            offset=request.offset,
        )
