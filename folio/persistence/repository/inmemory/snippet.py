"""In-memory snippet repository for testing."""

import asyncio
from typing import Optional

from folio.domain.model.snippet import Snippet
from folio.domain.repository.snippet import SnippetRepository
from folio.domain.value import Language, SnippetId, UserId, Visibility


class InMemorySnippetRepository(SnippetRepository):
    """In-memory implementation of SnippetRepository for testing."""

    def __init__(self) -> None:
        self._snippets: dict[SnippetId, Snippet] = {}
        self._next_id = 1

    async def find_by_id(self, snippet_id: SnippetId) -> Optional[Snippet]:
        await asyncio.sleep(0)
        return self._snippets.get(snippet_id)

    async def find_all(
        self,
        owner_id: Optional[UserId] = None,
        language: Optional[Language] = None,
        include_private: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Snippet]:
        """Find snippets, newest first."""
        await asyncio.sleep(0)
        snippets = list(self._snippets.values())

        if owner_id is not None:
            snippets = [s for s in snippets if s.owner_id == owner_id]
        if language is not None:
            snippets = [s for s in snippets if s.language == language]
        if not include_private:
            snippets = [s for s in snippets if s.visibility == Visibility.PUBLIC]

        snippets.sort(key=lambda s: (s.created_at, s.id), reverse=True)
        return snippets[offset : offset + limit]

    async def create(self, snippet: Snippet) -> Snippet:
        await asyncio.sleep(0)
        saved = snippet.model_copy(update={"id": SnippetId(self._next_id)})
        self._next_id += 1
        self._snippets[saved.id] = saved  # type: ignore[index]
        return saved

    async def update(self, snippet: Snippet) -> Optional[Snippet]:
        await asyncio.sleep(0)
        existing = self._snippets.get(snippet.id)  # type: ignore[arg-type]
        if existing is None:
            return None
        saved = snippet.model_copy(
            update={
                "owner_id": existing.owner_id,
                "star_count": existing.star_count,
                "view_count": existing.view_count,
                "created_at": existing.created_at,
            }
        )
        self._snippets[saved.id] = saved  # type: ignore[index]
        return saved

    async def delete(self, snippet_id: SnippetId) -> bool:
        await asyncio.sleep(0)
        return self._snippets.pop(snippet_id, None) is not None

    async def _adjust(self, snippet_id: SnippetId, counter: str, delta: int) -> None:
        await asyncio.sleep(0)
        snippet = self._snippets.get(snippet_id)
        if snippet is None:
            return
        value = max(getattr(snippet, counter) + delta, 0)
        self._snippets[snippet_id] = snippet.model_copy(update={counter: value})

    async def increment_star_count(self, snippet_id: SnippetId) -> None:
        await self._adjust(snippet_id, "star_count", 1)

    async def decrement_star_count(self, snippet_id: SnippetId) -> None:
        await self._adjust(snippet_id, "star_count", -1)

    async def increment_view_count(self, snippet_id: SnippetId) -> None:
        await self._adjust(snippet_id, "view_count", 1)
