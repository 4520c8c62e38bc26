"""PostgreSQL implementation of Snippet repository."""

from typing import List, Optional

from sqlalchemy import case, delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Snippet
from folio.domain.repository import SnippetRepository
from folio.domain.value import Language, SnippetId, UserId, Visibility
from folio.persistence.error import translate_store_errors
from folio.persistence.mappers import row_to_snippet, snippet_to_dict
from folio.persistence.tables import snippets_table

READ_ONLY_COLUMNS = ("id", "owner_id", "star_count", "view_count", "created_at")


class PostgresSnippetRepository(SnippetRepository):
    """PostgreSQL implementation of SnippetRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @translate_store_errors
    async def find_by_id(self, snippet_id: SnippetId) -> Optional[Snippet]:
        """Find a snippet by ID."""
        stmt = select(snippets_table).where(snippets_table.c.id == snippet_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_snippet(dict(row)) if row else None

    @translate_store_errors
    async def find_all(
        self,
        owner_id: Optional[UserId] = None,
        language: Optional[Language] = None,
        include_private: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Snippet]:
        """Find snippets, newest first."""
        stmt = select(snippets_table)
        if owner_id is not None:
            stmt = stmt.where(snippets_table.c.owner_id == owner_id)
        if language is not None:
            stmt = stmt.where(snippets_table.c.language == language.root)
        if not include_private:
            stmt = stmt.where(snippets_table.c.visibility == Visibility.PUBLIC.value)

        stmt = (
            stmt.order_by(desc(snippets_table.c.created_at), desc(snippets_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_snippet(dict(row)) for row in result.mappings().all()]

    @translate_store_errors
    async def create(self, snippet: Snippet) -> Snippet:
        """Insert a snippet; the database assigns its id."""
        stmt = (
            insert(snippets_table)
            .values(**snippet_to_dict(snippet))
            .returning(snippets_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_snippet(dict(row))

    @translate_store_errors
    async def update(self, snippet: Snippet) -> Optional[Snippet]:
        """Write a snippet's editable fields, leaving counters untouched."""
        values = {
            k: v
            for k, v in snippet_to_dict(snippet).items()
            if k not in READ_ONLY_COLUMNS
        }
        stmt = (
            update(snippets_table)
            .where(snippets_table.c.id == snippet.id)
            .values(**values)
            .returning(snippets_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_snippet(dict(row)) if row else None

    @translate_store_errors
    async def delete(self, snippet_id: SnippetId) -> bool:
        """Delete a snippet."""
        stmt = delete(snippets_table).where(snippets_table.c.id == snippet_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    @translate_store_errors
    async def increment_star_count(self, snippet_id: SnippetId) -> None:
        """Atomically increment star_count by 1."""
        stmt = (
            snippets_table.update()
            .where(snippets_table.c.id == snippet_id)
            .values(star_count=snippets_table.c.star_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @translate_store_errors
    async def decrement_star_count(self, snippet_id: SnippetId) -> None:
        """Atomically decrement star_count by 1 (minimum 0)."""
        stmt = (
            snippets_table.update()
            .where(snippets_table.c.id == snippet_id)
            .values(
                star_count=case(
                    (snippets_table.c.star_count > 0, snippets_table.c.star_count - 1),
                    else_=0,
                )
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @translate_store_errors
    async def increment_view_count(self, snippet_id: SnippetId) -> None:
        """Atomically increment view_count by 1."""
        stmt = (
            snippets_table.update()
            .where(snippets_table.c.id == snippet_id)
            .values(view_count=snippets_table.c.view_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
