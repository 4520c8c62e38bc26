"""Snippet domain service."""

from datetime import datetime
from typing import Any

import logfire

from folio.domain.error import AuthorizationError, NotFoundError, StoreUnavailableError
from folio.domain.model import Snippet
from folio.domain.repository import SnippetRepository, StarRepository
from folio.domain.value import Language, SnippetId, StarTargetType, UserId

from .base import Service
from .validation import MAX_PAGE_SIZE, ensure_limit, ensure_offset

EDITABLE_FIELDS = frozenset(
    {"title", "description", "code", "language", "tags", "visibility"}
)


class SnippetService(Service):
    """Domain service for snippet operations."""

    def __init__(
        self, snippet_repository: SnippetRepository, star_repository: StarRepository
    ) -> None:
        """Initialize snippet service.

        Args:
            snippet_repository: Snippet repository
            star_repository: Star repository (stars are removed with their snippet)
        """
        self.snippet_repository = snippet_repository
        self.star_repository = star_repository

    async def get_by_id(self, snippet_id: SnippetId) -> Snippet | None:
        """Get a snippet by ID, or None if it does not exist."""
        with logfire.span("snippet_service.get_by_id", snippet_id=snippet_id):
            snippet = await self.snippet_repository.find_by_id(snippet_id)
            if not snippet:
                logfire.warn("Snippet not found", snippet_id=snippet_id)
            return snippet

    async def get_snippet(self, snippet_id: SnippetId) -> Snippet:
        """Get a snippet by ID.

        Raises:
            NotFoundError: If the snippet does not exist
        """
        snippet = await self.get_by_id(snippet_id)
        if not snippet:
            raise NotFoundError("Snippet", str(snippet_id))
        return snippet

    async def get_visible_snippet(
        self, snippet_id: SnippetId, viewer_id: UserId | None
    ) -> Snippet:
        """Get a snippet as seen by a viewer; hidden private snippets are missing."""
        snippet = await self.get_snippet(snippet_id)
        if not snippet.is_visible_to(viewer_id):
            raise NotFoundError("Snippet", str(snippet_id))
        return snippet

    async def list_snippets(
        self,
        owner_id: UserId | None,
        viewer_id: UserId | None,
        language: Language | None,
        limit: int,
        offset: int,
    ) -> list[Snippet]:
        """List snippets newest first, optionally by owner and language.

        Degrades to an empty list when the store is unavailable.

        Raises:
            ValidationError: If limit is outside 1..100 or offset is negative
        """
        ensure_limit(limit, MAX_PAGE_SIZE)
        ensure_offset(offset)
        include_private = owner_id is not None and owner_id == viewer_id
        with logfire.span(
            "snippet_service.list_snippets",
            owner_id=owner_id,
            language=language.root if language else None,
            include_private=include_private,
            limit=limit,
            offset=offset,
        ):
            try:
                return await self.snippet_repository.find_all(
                    owner_id=owner_id,
                    language=language,
                    include_private=include_private,
                    limit=limit,
                    offset=offset,
                )
            except StoreUnavailableError as e:
                logfire.warn("Snippet listing degraded to empty", error=str(e))
                return []

    async def create_snippet(self, snippet: Snippet) -> Snippet:
        """Store a new snippet with zeroed counters."""
        with logfire.span(
            "snippet_service.create_snippet",
            owner_id=snippet.owner_id,
            language=snippet.language.root,
        ):
            fresh = snippet.model_copy(update={"star_count": 0, "view_count": 0})
            saved = await self.snippet_repository.create(fresh)
            logfire.info("Snippet created", snippet_id=saved.id, owner_id=saved.owner_id)
            return saved

    async def update_snippet(
        self,
        snippet_id: SnippetId,
        acting_user_id: UserId,
        changes: dict[str, Any],
    ) -> Snippet:
        """Apply the owner's edits to a snippet.

        Raises:
            NotFoundError: If the snippet does not exist
            AuthorizationError: If the acting user is not the owner
        """
        changes = {
            k: v for k, v in changes.items() if k in EDITABLE_FIELDS and v is not None
        }
        with logfire.span(
            "snippet_service.update_snippet",
            snippet_id=snippet_id,
            user_id=acting_user_id,
            fields=sorted(changes),
        ):
            snippet = await self._get_owned(snippet_id, acting_user_id)

            updated = Snippet.model_validate(
                {**snippet.model_dump(), **changes, "updated_at": datetime.now()}
            )
            saved = await self.snippet_repository.update(updated)
            if saved is None:
                raise NotFoundError("Snippet", str(snippet_id))
            return saved

    async def delete_snippet(self, snippet_id: SnippetId, acting_user_id: UserId) -> bool:
        """Delete a snippet and the stars recorded on it.

        Raises:
            NotFoundError: If the snippet does not exist
            AuthorizationError: If the acting user is not the owner
        """
        with logfire.span(
            "snippet_service.delete_snippet",
            snippet_id=snippet_id,
            user_id=acting_user_id,
        ):
            await self._get_owned(snippet_id, acting_user_id)

            removed_stars = await self.star_repository.delete_by_target(
                StarTargetType.SNIPPET, snippet_id
            )
            deleted = await self.snippet_repository.delete(snippet_id)
            logfire.info(
                "Snippet deleted", snippet_id=snippet_id, removed_stars=removed_stars
            )
            return deleted

    async def record_view(self, snippet_id: SnippetId) -> None:
        """Atomically increment a snippet's view count."""
        await self.snippet_repository.increment_view_count(snippet_id)

    async def increment_star_count(self, snippet_id: SnippetId) -> None:
        """Atomically increment a snippet's star count."""
        with logfire.span("snippet_service.increment_star_count", snippet_id=snippet_id):
            await self.snippet_repository.increment_star_count(snippet_id)

    async def decrement_star_count(self, snippet_id: SnippetId) -> None:
        """Atomically decrement a snippet's star count (minimum 0)."""
        with logfire.span("snippet_service.decrement_star_count", snippet_id=snippet_id):
            await self.snippet_repository.decrement_star_count(snippet_id)

    async def _get_owned(self, snippet_id: SnippetId, acting_user_id: UserId) -> Snippet:
        snippet = await self.get_snippet(snippet_id)
        if not snippet.is_owned_by(acting_user_id):
            logfire.warn(
                "Unauthorized snippet mutation",
                snippet_id=snippet_id,
                owner_id=snippet.owner_id,
                user_id=acting_user_id,
            )
            raise AuthorizationError("snippet", snippet_id, acting_user_id)
        return snippet
