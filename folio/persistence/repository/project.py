"""PostgreSQL implementation of Project repository."""

from typing import List, Optional

import logfire
from sqlalchemy import case, delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Project
from folio.domain.repository import ProjectRepository
from folio.domain.value import ProjectId, UserId, Visibility
from folio.persistence.error import translate_store_errors
from folio.persistence.mappers import project_to_dict, row_to_project
from folio.persistence.tables import projects_table

# Columns never written by update(); counters only move atomically
READ_ONLY_COLUMNS = ("id", "owner_id", "star_count", "view_count", "created_at")


class PostgresProjectRepository(ProjectRepository):
    """PostgreSQL implementation of ProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        with logfire.span("project_repository.find_by_id", project_id=project_id):
            stmt = select(projects_table).where(projects_table.c.id == project_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_project(dict(row)) if row else None

    @translate_store_errors
    async def find_all(
        self,
        owner_id: Optional[UserId] = None,
        include_private: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Project]:
        """Find projects, newest first."""
        stmt = select(projects_table)
        if owner_id is not None:
            stmt = stmt.where(projects_table.c.owner_id == owner_id)
        if not include_private:
            stmt = stmt.where(projects_table.c.visibility == Visibility.PUBLIC.value)

        stmt = (
            stmt.order_by(desc(projects_table.c.created_at), desc(projects_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_project(dict(row)) for row in result.mappings().all()]

    @translate_store_errors
    async def create(self, project: Project) -> Project:
        """Insert a project; the database assigns its id."""
        stmt = (
            insert(projects_table)
            .values(**project_to_dict(project))
            .returning(projects_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_project(dict(row))

    @translate_store_errors
    async def update(self, project: Project) -> Optional[Project]:
        """Write a project's editable fields, leaving counters untouched."""
        values = {
            k: v
            for k, v in project_to_dict(project).items()
            if k not in READ_ONLY_COLUMNS
        }
        stmt = (
            update(projects_table)
            .where(projects_table.c.id == project.id)
            .values(**values)
            .returning(projects_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_project(dict(row)) if row else None

    @translate_store_errors
    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project."""
        stmt = delete(projects_table).where(projects_table.c.id == project_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    @translate_store_errors
    async def increment_star_count(self, project_id: ProjectId) -> None:
        """Atomically increment star_count by 1."""
        stmt = (
            projects_table.update()
            .where(projects_table.c.id == project_id)
            .values(star_count=projects_table.c.star_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @translate_store_errors
    async def decrement_star_count(self, project_id: ProjectId) -> None:
        """Atomically decrement star_count by 1 (minimum 0)."""
        stmt = (
            projects_table.update()
            .where(projects_table.c.id == project_id)
            .values(
                star_count=case(
                    (projects_table.c.star_count > 0, projects_table.c.star_count - 1),
                    else_=0,
                )
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @translate_store_errors
    async def increment_view_count(self, project_id: ProjectId) -> None:
        """Atomically increment view_count by 1."""
        stmt = (
            projects_table.update()
            .where(projects_table.c.id == project_id)
            .values(view_count=projects_table.c.view_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
