"""Star use case."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import ProjectService, SnippetService, SocialService
from folio.domain.value import ProjectId, SnippetId, StarTargetType, UserId


class StarRequest(BaseModel):
    """Star request."""

    target_type: StarTargetType
    target_id: int
    user_id: int  # From authenticated user


class StarResponse(BaseModel):
    """Star response.

    success is False when the star already existed; that is not an error.
    """

    success: bool
    starred: bool
    star_count: int


async def current_star_count(
    project_service: ProjectService,
    snippet_service: SnippetService,
    target_type: StarTargetType,
    target_id: int,
    viewer_id: UserId,
) -> int:
    """Read a target's star counter after a ledger change, as the viewer sees it."""
    if target_type == StarTargetType.PROJECT:
        project = await project_service.get_visible_project(ProjectId(target_id), viewer_id)
        return project.star_count
    snippet = await snippet_service.get_visible_snippet(SnippetId(target_id), viewer_id)
    return snippet.star_count


class StarUseCase(BaseUseCase):
    """Use case for starring a project or snippet."""

    def __init__(
        self,
        social_service: SocialService,
        project_service: ProjectService,
        snippet_service: SnippetService,
    ) -> None:
        """Initialize star use case.

        Args:
            social_service: Social orchestration service
            project_service: Project domain service (counter read-back)
            snippet_service: Snippet domain service (counter read-back)
        """
        self.social_service = social_service
        self.project_service = project_service
        self.snippet_service = snippet_service

    async def execute(self, request: StarRequest) -> StarResponse:
        """Execute star flow.

        Raises:
            ValidationError: If an id is malformed
            NotFoundError: If the target does not exist
        """
        user_id = UserId(request.user_id)

        if request.target_type == StarTargetType.PROJECT:
            added = await self.social_service.star_project(
                user_id, ProjectId(request.target_id)
            )
        else:  # StarTargetType.SNIPPET
            added = await self.social_service.star_snippet(
                user_id, SnippetId(request.target_id)
            )

        return StarResponse(
            success=added,
            starred=True,
            star_count=await current_star_count(
                self.project_service,
                self.snippet_service,
                request.target_type,
                request.target_id,
                user_id,
            ),
        )
