"""Star ledger domain service."""

from datetime import datetime
from typing import Awaitable, Sequence

import logfire

from folio.domain.model import Star
from folio.domain.repository import StarRepository
from folio.domain.value import ProjectId, SnippetId, StarTargetType, UserId

from .base import Service
from .project_service import ProjectService
from .snippet_service import SnippetService


class StarService(Service):
    """Domain service for the star ledger.

    Keeps each target's star_count equal to the number of star rows:
    a row is only counted when it was actually inserted or deleted, and
    the counter itself only moves through atomic storage updates.
    """

    def __init__(
        self,
        star_repository: StarRepository,
        project_service: ProjectService,
        snippet_service: SnippetService,
    ) -> None:
        """Initialize star service.

        Args:
            star_repository: Star repository
            project_service: Project domain service (project counters)
            snippet_service: Snippet domain service (snippet counters)
        """
        self.star_repository = star_repository
        self.project_service = project_service
        self.snippet_service = snippet_service

    async def add_star(
        self, user_id: UserId, target_type: StarTargetType, target_id: int
    ) -> bool:
        """Record a star and count it.

        A star that already exists is a no-op: nothing is inserted, the
        counter is untouched and False is returned.

        If the counter update fails, the inserted row is removed again
        before the error propagates.

        Args:
            user_id: User giving the star
            target_type: Type of the starred content
            target_id: ID of the starred content

        Returns:
            True if a new star was recorded, False if it already existed
        """
        with logfire.span(
            "star_service.add_star",
            user_id=user_id,
            target_type=target_type.value,
            target_id=target_id,
        ):
            star = Star(
                user_id=user_id,
                target_type=target_type,
                target_id=target_id,
                created_at=datetime.now(),
            )

            inserted = await self.star_repository.add(star)
            if not inserted:
                logfire.info(
                    "Duplicate star ignored",
                    user_id=user_id,
                    target_type=target_type.value,
                    target_id=target_id,
                )
                return False

            try:
                await self._increment(target_type, target_id)
            except Exception as e:
                logfire.error(
                    "Star counter increment failed, removing star",
                    user_id=user_id,
                    target_id=target_id,
                    error=str(e),
                )
                await self._compensate(
                    self.star_repository.remove(user_id, target_type, target_id)
                )
                raise

            logfire.info(
                "Star added",
                user_id=user_id,
                target_type=target_type.value,
                target_id=target_id,
            )
            return True

    async def remove_star(
        self, user_id: UserId, target_type: StarTargetType, target_id: int
    ) -> bool:
        """Remove a star and uncount it.

        Removing a star that does not exist succeeds without touching the
        counter. The counter never drops below zero.

        Returns:
            True once the pair is unstarred
        """
        with logfire.span(
            "star_service.remove_star",
            user_id=user_id,
            target_type=target_type.value,
            target_id=target_id,
        ):
            deleted = await self.star_repository.remove(user_id, target_type, target_id)
            if not deleted:
                logfire.info(
                    "No star to remove",
                    user_id=user_id,
                    target_type=target_type.value,
                    target_id=target_id,
                )
                return True

            try:
                await self._decrement(target_type, target_id)
            except Exception as e:
                logfire.error(
                    "Star counter decrement failed, restoring star",
                    user_id=user_id,
                    target_id=target_id,
                    error=str(e),
                )
                await self._compensate(
                    self.star_repository.add(
                        Star(user_id=user_id, target_type=target_type, target_id=target_id)
                    )
                )
                raise

            logfire.info(
                "Star removed",
                user_id=user_id,
                target_type=target_type.value,
                target_id=target_id,
            )
            return True

    async def has_star(
        self, user_id: UserId, target_type: StarTargetType, target_id: int
    ) -> bool:
        """Check whether a user has starred a target."""
        return await self.star_repository.exists(user_id, target_type, target_id)

    async def get_starred_ids(
        self, user_id: UserId, target_type: StarTargetType, target_ids: Sequence[int]
    ) -> set[int]:
        """Check which of several targets a user has starred.

        Args:
            user_id: User ID
            target_type: Type of the content
            target_ids: IDs to check

        Returns:
            The starred subset of target_ids
        """
        if not target_ids:
            return set()

        # Batch query to avoid N+1
        return await self.star_repository.find_starred_ids(
            user_id, target_type, target_ids
        )

    async def _increment(self, target_type: StarTargetType, target_id: int) -> None:
        if target_type == StarTargetType.PROJECT:
            await self.project_service.increment_star_count(ProjectId(target_id))
        else:
            await self.snippet_service.increment_star_count(SnippetId(target_id))

    async def _decrement(self, target_type: StarTargetType, target_id: int) -> None:
        if target_type == StarTargetType.PROJECT:
            await self.project_service.decrement_star_count(ProjectId(target_id))
        else:
            await self.snippet_service.decrement_star_count(SnippetId(target_id))

    @staticmethod
    async def _compensate(undo: Awaitable[bool]) -> None:
        """Run a ledger undo, logging rather than masking the original error."""
        try:
            await undo
        except Exception as e:
            logfire.error("Star ledger compensation failed", error=str(e))
