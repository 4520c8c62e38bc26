"""Social interaction orchestration."""

import logfire

from folio.domain.error import NotFoundError, SelfReferenceError
from folio.domain.value import (
    NotificationKind,
    NotificationTargetKind,
    ProjectId,
    SnippetId,
    StarTargetType,
    UserId,
)

from .base import Service
from .follow_service import FollowService
from .notification_service import NotificationService
from .project_service import ProjectService
from .snippet_service import SnippetService
from .star_service import StarService
from .user_service import UserService
from .validation import ensure_id


class SocialService(Service):
    """Composes the star and follow ledgers with notification fan-out.

    A notification is sent only when the ledger reports that a new
    relationship was actually recorded. Duplicates and removals never
    notify.
    """

    def __init__(
        self,
        star_service: StarService,
        follow_service: FollowService,
        notification_service: NotificationService,
        project_service: ProjectService,
        snippet_service: SnippetService,
        user_service: UserService,
    ) -> None:
        self.star_service = star_service
        self.follow_service = follow_service
        self.notification_service = notification_service
        self.project_service = project_service
        self.snippet_service = snippet_service
        self.user_service = user_service

    async def star_project(self, acting_user_id: UserId, project_id: ProjectId) -> bool:
        """Star a project and notify its owner.

        Args:
            acting_user_id: User giving the star
            project_id: Project to star

        Returns:
            True if a new star was recorded, False if it already existed

        Raises:
            ValidationError: If an id is malformed
            NotFoundError: If the project does not exist or is private to someone else
        """
        ensure_id("user_id", acting_user_id)
        ensure_id("project_id", project_id)

        with logfire.span(
            "social_service.star_project",
            user_id=acting_user_id,
            project_id=project_id,
        ):
            project = await self.project_service.get_visible_project(
                project_id, acting_user_id
            )

            starred = await self.star_service.add_star(
                acting_user_id, StarTargetType.PROJECT, project_id
            )
            if not starred:
                return False

            await self.notification_service.notify(
                recipient_id=project.owner_id,
                actor_id=acting_user_id,
                kind=NotificationKind.STAR,
                target_kind=NotificationTargetKind.PROJECT,
                target_id=project_id,
            )
            return True

    async def unstar_project(self, acting_user_id: UserId, project_id: ProjectId) -> bool:
        """Remove a star from a project. Never notifies.

        Raises:
            ValidationError: If an id is malformed
            NotFoundError: If the project does not exist or is private to someone else
        """
        ensure_id("user_id", acting_user_id)
        ensure_id("project_id", project_id)

        with logfire.span(
            "social_service.unstar_project",
            user_id=acting_user_id,
            project_id=project_id,
        ):
            await self.project_service.get_visible_project(project_id, acting_user_id)
            return await self.star_service.remove_star(
                acting_user_id, StarTargetType.PROJECT, project_id
            )

    async def is_project_starred(
        self, acting_user_id: UserId, project_id: ProjectId
    ) -> bool:
        """Check whether the user has starred a project.

        Raises:
            ValidationError: If an id is malformed
            NotFoundError: If the project does not exist or is private to someone else
        """
        ensure_id("user_id", acting_user_id)
        ensure_id("project_id", project_id)
        await self.project_service.get_visible_project(project_id, acting_user_id)
        return await self.star_service.has_star(
            acting_user_id, StarTargetType.PROJECT, project_id
        )

    async def star_snippet(self, acting_user_id: UserId, snippet_id: SnippetId) -> bool:
        """Star a snippet and notify its owner.

        Returns:
            True if a new star was recorded, False if it already existed

        Raises:
            ValidationError: If an id is malformed
            NotFoundError: If the snippet does not exist or is private to someone else
        """
        ensure_id("user_id", acting_user_id)
        ensure_id("snippet_id", snippet_id)

        with logfire.span(
            "social_service.star_snippet",
            user_id=acting_user_id,
            snippet_id=snippet_id,
        ):
            snippet = await self.snippet_service.get_visible_snippet(
                snippet_id, acting_user_id
            )

            starred = await self.star_service.add_star(
                acting_user_id, StarTargetType.SNIPPET, snippet_id
            )
            if not starred:
                return False

            await self.notification_service.notify(
                recipient_id=snippet.owner_id,
                actor_id=acting_user_id,
                kind=NotificationKind.STAR,
                target_kind=NotificationTargetKind.SNIPPET,
                target_id=snippet_id,
            )
            return True

    async def unstar_snippet(self, acting_user_id: UserId, snippet_id: SnippetId) -> bool:
        """Remove a star from a snippet. Never notifies."""
        ensure_id("user_id", acting_user_id)
        ensure_id("snippet_id", snippet_id)

        with logfire.span(
            "social_service.unstar_snippet",
            user_id=acting_user_id,
            snippet_id=snippet_id,
        ):
            await self.snippet_service.get_visible_snippet(snippet_id, acting_user_id)
            return await self.star_service.remove_star(
                acting_user_id, StarTargetType.SNIPPET, snippet_id
            )

    async def is_snippet_starred(
        self, acting_user_id: UserId, snippet_id: SnippetId
    ) -> bool:
        """Check whether the user has starred a snippet.

        Raises:
            ValidationError: If an id is malformed
            NotFoundError: If the snippet does not exist or is private to someone else
        """
        ensure_id("user_id", acting_user_id)
        ensure_id("snippet_id", snippet_id)
        await self.snippet_service.get_visible_snippet(snippet_id, acting_user_id)
        return await self.star_service.has_star(
            acting_user_id, StarTargetType.SNIPPET, snippet_id
        )

    async def follow_user(self, acting_user_id: UserId, target_user_id: UserId) -> bool:
        """Follow a user and notify them.

        Args:
            acting_user_id: User who follows
            target_user_id: User to follow

        Returns:
            True if a new follow was recorded, False if it already existed

        Raises:
            ValidationError: If an id is malformed
            SelfReferenceError: If the user tries to follow themselves
            NotFoundError: If the target user does not exist
        """
        ensure_id("user_id", acting_user_id)
        ensure_id("target_user_id", target_user_id)
        if acting_user_id == target_user_id:
            logfire.warn("Self-follow rejected", user_id=acting_user_id)
            raise SelfReferenceError(acting_user_id)

        with logfire.span(
            "social_service.follow_user",
            user_id=acting_user_id,
            target_user_id=target_user_id,
        ):
            await self._ensure_user_exists(target_user_id)

            followed = await self.follow_service.add_follow(acting_user_id, target_user_id)
            if not followed:
                return False

            await self.notification_service.notify(
                recipient_id=target_user_id,
                actor_id=acting_user_id,
                kind=NotificationKind.FOLLOW,
                target_kind=NotificationTargetKind.PROFILE,
            )
            return True

    async def unfollow_user(self, acting_user_id: UserId, target_user_id: UserId) -> bool:
        """Stop following a user. Never notifies.

        Raises:
            ValidationError: If an id is malformed
            NotFoundError: If the target user does not exist
        """
        ensure_id("user_id", acting_user_id)
        ensure_id("target_user_id", target_user_id)

        with logfire.span(
            "social_service.unfollow_user",
            user_id=acting_user_id,
            target_user_id=target_user_id,
        ):
            await self._ensure_user_exists(target_user_id)
            return await self.follow_service.remove_follow(acting_user_id, target_user_id)

    async def is_following(self, acting_user_id: UserId, target_user_id: UserId) -> bool:
        """Check whether one user follows another. Pure read.

        Raises:
            ValidationError: If an id is malformed
        """
        ensure_id("user_id", acting_user_id)
        ensure_id("target_user_id", target_user_id)
        return await self.follow_service.is_following(acting_user_id, target_user_id)

    async def _ensure_user_exists(self, user_id: UserId) -> None:
        if await self.user_service.find_by_id(user_id) is None:
            raise NotFoundError("User", str(user_id))
