"""Follow ledger domain service."""

from datetime import datetime
from typing import Awaitable

import logfire

from folio.domain.error import SelfReferenceError
from folio.domain.model import Follow
from folio.domain.repository import FollowRepository
from folio.domain.value import UserId

from .base import Service
from .profile_service import ProfileService


class FollowService(Service):
    """Domain service for the follow ledger.

    Every recorded follow moves two counters: the followed user's
    follower_count and the follower's following_count.
    """

    def __init__(
        self, follow_repository: FollowRepository, profile_service: ProfileService
    ) -> None:
        """Initialize follow service.

        Args:
            follow_repository: Follow repository
            profile_service: Profile domain service (follow counters)
        """
        self.follow_repository = follow_repository
        self.profile_service = profile_service

    async def add_follow(self, follower_id: UserId, following_id: UserId) -> bool:
        """Record a follow and count it on both profiles.

        Args:
            follower_id: User who follows
            following_id: User being followed

        Returns:
            True if a new follow was recorded, False if it already existed

        Raises:
            SelfReferenceError: If both ids are the same user
        """
        if follower_id == following_id:
            raise SelfReferenceError(follower_id)

        with logfire.span(
            "follow_service.add_follow",
            follower_id=follower_id,
            following_id=following_id,
        ):
            follow = Follow(
                follower_id=follower_id,
                following_id=following_id,
                created_at=datetime.now(),
            )

            inserted = await self.follow_repository.add(follow)
            if not inserted:
                logfire.info(
                    "Duplicate follow ignored",
                    follower_id=follower_id,
                    following_id=following_id,
                )
                return False

            try:
                await self.profile_service.increment_follower_count(following_id)
            except Exception:
                await self._compensate(
                    self.follow_repository.remove(follower_id, following_id)
                )
                raise

            try:
                await self.profile_service.increment_following_count(follower_id)
            except Exception:
                await self._compensate(
                    self.profile_service.decrement_follower_count(following_id)
                )
                await self._compensate(
                    self.follow_repository.remove(follower_id, following_id)
                )
                raise

            logfire.info(
                "Follow added", follower_id=follower_id, following_id=following_id
            )
            return True

    async def remove_follow(self, follower_id: UserId, following_id: UserId) -> bool:
        """Remove a follow and uncount it on both profiles.

        Removing a follow that does not exist succeeds without touching
        either counter. Counters never drop below zero.

        Returns:
            True once follower_id no longer follows following_id
        """
        with logfire.span(
            "follow_service.remove_follow",
            follower_id=follower_id,
            following_id=following_id,
        ):
            deleted = await self.follow_repository.remove(follower_id, following_id)
            if not deleted:
                logfire.info(
                    "No follow to remove",
                    follower_id=follower_id,
                    following_id=following_id,
                )
                return True

            restore = Follow(follower_id=follower_id, following_id=following_id)
            try:
                await self.profile_service.decrement_follower_count(following_id)
            except Exception:
                await self._compensate(self.follow_repository.add(restore))
                raise

            try:
                await self.profile_service.decrement_following_count(follower_id)
            except Exception:
                await self._compensate(
                    self.profile_service.increment_follower_count(following_id)
                )
                await self._compensate(self.follow_repository.add(restore))
                raise

            logfire.info(
                "Follow removed", follower_id=follower_id, following_id=following_id
            )
            return True

    async def is_following(self, follower_id: UserId, following_id: UserId) -> bool:
        """Check whether follower_id follows following_id."""
        return await self.follow_repository.exists(follower_id, following_id)

    @staticmethod
    async def _compensate(undo: Awaitable[object]) -> None:
        """Run an undo step, logging rather than masking the original error."""
        try:
            await undo
        except Exception as e:
            logfire.error("Follow ledger compensation failed", error=str(e))
