"""Star status use case."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import SocialService
from folio.domain.value import ProjectId, SnippetId, StarTargetType, UserId


class GetStarStatusRequest(BaseModel):
    """Star status request."""

    target_type: StarTargetType
    target_id: int
    user_id: int


class GetStarStatusResponse(BaseModel):
    """Star status response."""

    starred: bool


class GetStarStatusUseCase(BaseUseCase):
    """Use case for checking whether the user starred a target."""

    def __init__(self, social_service: SocialService) -> None:
        self.social_service = social_service

    async def execute(self, request: GetStarStatusRequest) -> GetStarStatusResponse:
        user_id = UserId(request.user_id)
        if request.target_type == StarTargetType.PROJECT:
            starred = await self.social_service.is_project_starred(
                user_id, ProjectId(request.target_id)
            )
        else:
            starred = await self.social_service.is_snippet_starred(
                user_id, SnippetId(request.target_id)
            )
        return GetStarStatusResponse(starred=starred)
