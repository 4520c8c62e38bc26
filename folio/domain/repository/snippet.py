"""Snippet repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from folio.domain.model.snippet import Snippet
from folio.domain.value import Language, SnippetId, UserId


class SnippetRepository(ABC):
    """Repository for Snippet aggregate.

    Same contract as ProjectRepository, with a language filter on listings.
    """

    @abstractmethod
    async def find_by_id(self, snippet_id: SnippetId) -> Optional[Snippet]:
        """Find a snippet by ID."""
        pass

    @abstractmethod
    async def find_all(
        self,
        owner_id: Optional[UserId] = None,
        language: Optional[Language] = None,
        include_private: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Snippet]:
        """Find snippets, newest first.

        Args:
            owner_id: Only snippets of this owner (None for all owners)
            language: Only snippets in this language (None for all)
            include_private: Whether to include private snippets
            limit: Maximum number of snippets to return
            offset: Number of snippets to skip

        Returns:
            List of snippets matching the criteria
        """
        pass

    @abstractmethod
    async def create(self, snippet: Snippet) -> Snippet:
        """Insert a new snippet and return it with its assigned id."""
        pass

    @abstractmethod
    async def update(self, snippet: Snippet) -> Optional[Snippet]:
        """Write the editable fields of an existing snippet (not counters)."""
        pass

    @abstractmethod
    async def delete(self, snippet_id: SnippetId) -> bool:
        """Delete a snippet. Returns True if one was deleted."""
        pass

    @abstractmethod
    async def increment_star_count(self, snippet_id: SnippetId) -> None:
        """Atomically increment star_count by 1."""
        pass

    @abstractmethod
    async def decrement_star_count(self, snippet_id: SnippetId) -> None:
        """Atomically decrement star_count by 1 (minimum 0)."""
        pass

    @abstractmethod
    async def increment_view_count(self, snippet_id: SnippetId) -> None:
        """Atomically increment view_count by 1."""
        pass
