"""Create snippet use case."""

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.domain.model import Snippet
from folio.domain.service import SnippetService
from folio.domain.value import Language, Tag, UserId, Visibility

from .get_snippet import SnippetResponse


class CreateSnippetRequest(BaseModel):
    """Create snippet request."""

    owner_id: int  # From authenticated user
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    code: str = Field(min_length=1)
    language: Language
    tags: list[Tag] = Field(default_factory=list)
    visibility: Visibility = Visibility.PUBLIC


class CreateSnippetUseCase(BaseUseCase):
    """Use case for sharing a new snippet."""

    def __init__(self, snippet_service: SnippetService) -> None:
        self.snippet_service = snippet_service

    async def execute(self, request: CreateSnippetRequest) -> SnippetResponse:
        snippet = Snippet(
            owner_id=UserId(request.owner_id),
            title=request.title,
            description=request.description,
            code=request.code,
            language=request.language,
            tags=request.tags,
            visibility=request.visibility,
        )
        saved = await self.snippet_service.create_snippet(snippet)
        return SnippetResponse.build(saved)
