"""Update snippet use case."""

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import SnippetService
from folio.domain.value import Language, SnippetId, Tag, UserId, Visibility

from .get_snippet import SnippetResponse


class UpdateSnippetRequest(BaseModel):
    """Update snippet request; omitted fields keep their value."""

    snippet_id: int
    user_id: int  # From authenticated user
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    code: str | None = Field(default=None, min_length=1)
    language: Language | None = None
    tags: list[Tag] | None = None
    visibility: Visibility | None = None


class UpdateSnippetUseCase(BaseUseCase):
    """Use case for the owner editing a snippet."""

    def __init__(self, snippet_service: SnippetService) -> None:
        self.snippet_service = snippet_service

    async def execute(self, request: UpdateSnippetRequest) -> SnippetResponse:
        """Execute update snippet flow.

        Raises:
            NotFoundError: If the snippet does not exist
            AuthorizationError: If the user is not the owner
        """
        changes = request.model_dump(
            exclude={"snippet_id", "user_id"}, exclude_none=True
        )
        snippet = await self.snippet_service.update_snippet(
            SnippetId(request.snippet_id), UserId(request.user_id), changes
        )
        return SnippetResponse.build(snippet)
