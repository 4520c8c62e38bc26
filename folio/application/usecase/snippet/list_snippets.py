"""List snippets use case."""

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import SnippetService, StarService
from folio.domain.value import Language, StarTargetType, UserId

from .get_snippet import SnippetResponse


class ListSnippetsRequest(BaseModel):
    """List snippets request."""

    owner_id: int | None = None
    language: Language | None = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    viewer_id: int | None = None


class ListSnippetsResponse(BaseModel):
    """List snippets response."""

    snippets: list[SnippetResponse]
    limit: int
    offset: int


class ListSnippetsUseCase(BaseUseCase):
    """Use case for listing snippets newest first, optionally by language."""

    def __init__(
        self, snippet_service: SnippetService, star_service: StarService
    ) -> None:
        self.snippet_service = snippet_service
        self.star_service = star_service

    async def execute(self, request: ListSnippetsRequest) -> ListSnippetsResponse:
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None

        snippets = await self.snippet_service.list_snippets(
            owner_id=UserId(request.owner_id) if request.owner_id else None,
            viewer_id=viewer_id,
            language=request.language,
            limit=request.limit,
            offset=request.offset,
        )

        starred: set[int] = set()
        if viewer_id is not None and snippets:
            starred = await self.star_service.get_starred_ids(
                viewer_id,
                StarTargetType.SNIPPET,
                [s.id for s in snippets],  # type: ignore[misc]
            )

        return ListSnippetsResponse(
            snippets=[SnippetResponse.build(s, s.id in starred) for s in snippets],
            limit=request.limit,
            offset=request.offset,
        )
