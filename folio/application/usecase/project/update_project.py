"""Update project use case."""

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import ProjectService
from folio.domain.value import ProjectId, Tag, UserId, Visibility

from .get_project import ProjectResponse


class UpdateProjectRequest(BaseModel):
    """Update project request.

    Omitted (None) fields keep their current value.
    """

    project_id: int
    user_id: int  # From authenticated user
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    readme_content: str | None = None
    repository_url: str | None = Field(default=None, max_length=255)
    live_url: str | None = Field(default=None, max_length=255)
    thumbnail_url: str | None = None
    tech_stack: list[Tag] | None = None
    tags: list[Tag] | None = None
    featured: bool | None = None
    visibility: Visibility | None = None


class UpdateProjectUseCase(BaseUseCase):
    """Use case for the owner editing a project."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: UpdateProjectRequest) -> ProjectResponse:
        """Execute update project flow.

        Raises:
            NotFoundError: If the project does not exist
            AuthorizationError: If the user is not the owner
        """
        changes = request.model_dump(
            exclude={"project_id", "user_id"}, exclude_none=True
        )
        project = await self.project_service.update_project(
            ProjectId(request.project_id), UserId(request.user_id), changes
        )
        return ProjectResponse.build(project)
