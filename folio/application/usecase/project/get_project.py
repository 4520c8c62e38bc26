"""Get project use case."""

from datetime import datetime

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.model import Project
from folio.domain.service import ProjectService, StarService
from folio.domain.value import ProjectId, StarTargetType, UserId, Visibility


class ProjectResponse(BaseModel):
    """Project as returned by the API."""

    project_id: int
    owner_id: int
    title: str
    description: str | None
    readme_content: str | None
    repository_url: str | None
    live_url: str | None
    thumbnail_url: str | None
    tech_stack: list[str]
    tags: list[str]
    star_count: int
    view_count: int
    featured: bool
    visibility: Visibility
    has_starred: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(cls, project: Project, has_starred: bool = False) -> "ProjectResponse":
        return cls(
            project_id=project.id,  # type: ignore[arg-type]
            owner_id=project.owner_id,
            title=project.title,
            description=project.description,
            readme_content=project.readme_content,
            repository_url=project.repository_url,
            live_url=project.live_url,
            thumbnail_url=project.thumbnail_url,
            tech_stack=[t.root for t in project.tech_stack],
            tags=[t.root for t in project.tags],
            star_count=project.star_count,
            view_count=project.view_count,
            featured=project.featured,
            visibility=project.visibility,
            has_starred=has_starred,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class GetProjectRequest(BaseModel):
    """Get project request."""

    project_id: int
    viewer_id: int | None = None  # Current user ID (if authenticated)


class GetProjectUseCase(BaseUseCase):
    """Use case for viewing a single project.

    Each successful view increments the project's view counter.
    """

    def __init__(
        self, project_service: ProjectService, star_service: StarService
    ) -> None:
        self.project_service = project_service
        self.star_service = star_service

    async def execute(self, request: GetProjectRequest) -> ProjectResponse:
        """Execute get project flow.

        Raises:
            NotFoundError: If the project does not exist or is private to
                someone else
        """
        project_id = ProjectId(request.project_id)
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None

        await self.project_service.get_visible_project(project_id, viewer_id)
        await self.project_service.record_view(project_id)
        project = await self.project_service.get_project(project_id)

        has_starred = False
        if viewer_id is not None:
            has_starred = await self.star_service.has_star(
                viewer_id, StarTargetType.PROJECT, project_id
            )

        return ProjectResponse.build(project, has_starred)
