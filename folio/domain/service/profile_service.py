"""Profile domain service."""

from datetime import datetime
from typing import Any

import logfire

from folio.domain.model import Profile
from folio.domain.repository import ProfileRepository
from folio.domain.value import UserId

from .base import Service

# Fields a user may change on their own profile
EDITABLE_FIELDS = frozenset(
    {"avatar_url", "bio", "location", "website", "github", "twitter", "linkedin", "skills"}
)


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_profile(self, user_id: UserId) -> Profile:
        """Get a user's profile.

        A user who never edited their profile and was never followed has no
        row yet; they read as an empty profile with zero counters.
        """
        with logfire.span("profile_service.get_profile", user_id=user_id):
            profile = await self.profile_repository.find_by_user_id(user_id)
            return profile if profile else Profile.empty(user_id)

    async def update_profile(self, user_id: UserId, changes: dict[str, Any]) -> Profile:
        """Apply edits to a profile, creating it on first edit.

        Args:
            user_id: Owner of the profile (the acting user)
            changes: Field name to new value; None values are ignored

        Returns:
            The stored profile
        """
        changes = {
            k: v for k, v in changes.items() if k in EDITABLE_FIELDS and v is not None
        }
        with logfire.span(
            "profile_service.update_profile",
            user_id=user_id,
            fields=sorted(changes),
        ):
            current = await self.get_profile(user_id)
            updated = Profile.model_validate(
                {
                    **current.model_dump(),
                    **changes,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.profile_repository.save(updated)
            logfire.info("Profile updated", user_id=user_id)
            return saved

    async def increment_follower_count(self, user_id: UserId) -> None:
        """Atomically increment a user's follower count."""
        with logfire.span("profile_service.increment_follower_count", user_id=user_id):
            await self.profile_repository.increment_follower_count(user_id)

    async def decrement_follower_count(self, user_id: UserId) -> None:
        """Atomically decrement a user's follower count (minimum 0)."""
        with logfire.span("profile_service.decrement_follower_count", user_id=user_id):
            await self.profile_repository.decrement_follower_count(user_id)

    async def increment_following_count(self, user_id: UserId) -> None:
        """Atomically increment a user's following count."""
        with logfire.span("profile_service.increment_following_count", user_id=user_id):
            await self.profile_repository.increment_following_count(user_id)

    async def decrement_following_count(self, user_id: UserId) -> None:
        """Atomically decrement a user's following count (minimum 0)."""
        with logfire.span("profile_service.decrement_following_count", user_id=user_id):
            await self.profile_repository.decrement_following_count(user_id)
