"""Get snippet use case."""

from datetime import datetime

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.model import Snippet
from folio.domain.service import SnippetService, StarService
from folio.domain.value import SnippetId, StarTargetType, UserId, Visibility


class SnippetResponse(BaseModel):
    """Snippet as returned by the API."""

    snippet_id: int
    owner_id: int
    title: str
    description: str | None
    code: str
    language: str
    tags: list[str]
    star_count: int
    view_count: int
    visibility: Visibility
    has_starred: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(cls, snippet: Snippet, has_starred: bool = False) -> "SnippetResponse":
        return cls(
            snippet_id=snippet.id,  # type: ignore[arg-type]
            owner_id=snippet.owner_id,
            title=snippet.title,
            description=snippet.description,
            code=snippet.code,
            language=snippet.language.root,
            tags=[t.root for t in snippet.tags],
            star_count=snippet.star_count,
            view_count=snippet.view_count,
            visibility=snippet.visibility,
            has_starred=has_starred,
            created_at=snippet.created_at,
            updated_at=snippet.updated_at,
        )


class GetSnippetRequest(BaseModel):
    """Get snippet request."""

    snippet_id: int
    viewer_id: int | None = None


class GetSnippetUseCase(BaseUseCase):
    """Use case for viewing a single snippet (counts a view)."""

    def __init__(
        self, snippet_service: SnippetService, star_service: StarService
    ) -> None:
        self.snippet_service = snippet_service
        self.star_service = star_service

    async def execute(self, request: GetSnippetRequest) -> SnippetResponse:
        snippet_id = SnippetId(request.snippet_id)
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None

        await self.snippet_service.get_visible_snippet(snippet_id, viewer_id)
        await self.snippet_service.record_view(snippet_id)
        snippet = await self.snippet_service.get_snippet(snippet_id)

        has_starred = False
        if viewer_id is not None:
            has_starred = await self.star_service.has_star(
                viewer_id, StarTargetType.SNIPPET, snippet_id
            )

        return SnippetResponse.build(snippet, has_starred)
