"""Unstar use case."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import ProjectService, SnippetService, SocialService
from folio.domain.value import ProjectId, SnippetId, StarTargetType, UserId

from .star import StarResponse, current_star_count


class UnstarRequest(BaseModel):
    """Unstar request."""

    target_type: StarTargetType
    target_id: int
    user_id: int  # From authenticated user


class UnstarUseCase(BaseUseCase):
    """Use case for removing a star. Removing a missing star succeeds."""

    def __init__(
        self,
        social_service: SocialService,
        project_service: ProjectService,
        snippet_service: SnippetService,
    ) -> None:
        self.social_service = social_service
        self.project_service = project_service
        self.snippet_service = snippet_service

    async def execute(self, request: UnstarRequest) -> StarResponse:
        user_id = UserId(request.user_id)

        if request.target_type == StarTargetType.PROJECT:
            removed = await self.social_service.unstar_project(
                user_id, ProjectId(request.target_id)
            )
        else:  # StarTargetType.SNIPPET
            removed = await self.social_service.unstar_snippet(
                user_id, SnippetId(request.target_id)
            )

        return StarResponse(
            success=removed,
            starred=False,
            star_count=await current_star_count(
                self.project_service,
                self.snippet_service,
                request.target_type,
                request.target_id,
                user_id,
            ),
        )
