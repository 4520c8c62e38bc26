"""Delete project use case."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import ProjectService
from folio.domain.value import ProjectId, UserId


class DeleteProjectRequest(BaseModel):
    """Delete project request."""

    project_id: int
    user_id: int  # From authenticated user


class DeleteProjectResponse(BaseModel):
    """Delete project response."""

    success: bool


class DeleteProjectUseCase(BaseUseCase):
    """Use case for the owner deleting a project."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: DeleteProjectRequest) -> DeleteProjectResponse:
        """Execute delete project flow.

        Raises:
            NotFoundError: If the project does not exist
            AuthorizationError: If the user is not the owner
        """
        deleted = await self.project_service.delete_project(
            ProjectId(request.project_id), UserId(request.user_id)
        )
        return DeleteProjectResponse(success=deleted)
