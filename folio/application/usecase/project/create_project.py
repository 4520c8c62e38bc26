"""Create project use case."""

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.domain.model import Project
from folio.domain.service import ProjectService
from folio.domain.value import Tag, UserId, Visibility

from .get_project import ProjectResponse


class CreateProjectRequest(BaseModel):
    """Create project request."""

    owner_id: int  # From authenticated user
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    readme_content: str | None = None
    repository_url: str | None = Field(default=None, max_length=255)
    live_url: str | None = Field(default=None, max_length=255)
    thumbnail_url: str | None = None
    tech_stack: list[Tag] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    featured: bool = False
    visibility: Visibility = Visibility.PUBLIC


class CreateProjectUseCase(BaseUseCase):
    """Use case for publishing a new project."""

    def __init__(self, project_service: ProjectService) -> None:
        """Initialize create project use case.

        Args:
            project_service: Project domain service
        """
        self.project_service = project_service

    async def execute(self, request: CreateProjectRequest) -> ProjectResponse:
        """Create the project owned by the requesting user."""
        project = Project(
            owner_id=UserId(request.owner_id),
            title=request.title,
            description=request.description,
            readme_content=request.readme_content,
            repository_url=request.repository_url,
            live_url=request.live_url,
            thumbnail_url=request.thumbnail_url,
            tech_stack=request.tech_stack,
            tags=request.tags,
            featured=request.featured,
            visibility=request.visibility,
        )
        saved = await self.project_service.create_project(project)
        return ProjectResponse.build(saved)
