"""Delete snippet use case."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import SnippetService
from folio.domain.value import SnippetId, UserId


class DeleteSnippetRequest(BaseModel):
    """Delete snippet request."""

    snippet_id: int
    user_id: int  # From authenticated user


class DeleteSnippetResponse(BaseModel):
    """Delete snippet response."""

    success: bool


class DeleteSnippetUseCase(BaseUseCase):
    """Use case for the owner deleting a snippet."""

    def __init__(self, snippet_service: SnippetService) -> None:
        self.snippet_service = snippet_service

    async def execute(self, request: DeleteSnippetRequest) -> DeleteSnippetResponse:
        deleted = await self.snippet_service.delete_snippet(
            SnippetId(request.snippet_id), UserId(request.user_id)
        )
        return DeleteSnippetResponse(success=deleted)
