"""Domain layer DI providers."""

from dishka import Scope, provide

from folio.config import AuthSettings, SocialSettings
from folio.domain.repository import (
    FollowRepository,
    NotificationRepository,
    ProfileRepository,
    ProjectRepository,
    SnippetRepository,
    StarRepository,
    UserRepository,
)
from folio.domain.service import (
    FollowService,
    JWTService,
    NotificationService,
    ProfileService,
    ProjectService,
    SnippetService,
    SocialService,
    StarService,
    UserService,
)
from folio.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_project_service(
        self, project_repository: ProjectRepository, star_repository: StarRepository
    ) -> ProjectService:
        """Provide project domain service."""
        return ProjectService(
            project_repository=project_repository, star_repository=star_repository
        )

    @provide
    def get_snippet_service(
        self, snippet_repository: SnippetRepository, star_repository: StarRepository
    ) -> SnippetService:
        """Provide snippet domain service."""
        return SnippetService(
            snippet_repository=snippet_repository, star_repository=star_repository
        )

    @provide
    def get_star_service(
        self,
        star_repository: StarRepository,
        project_service: ProjectService,
        snippet_service: SnippetService,
    ) -> StarService:
        """Provide star ledger service."""
        return StarService(
            star_repository=star_repository,
            project_service=project_service,
            snippet_service=snippet_service,
        )

    @provide
    def get_follow_service(
        self, follow_repository: FollowRepository, profile_service: ProfileService
    ) -> FollowService:
        """Provide follow ledger service."""
        return FollowService(
            follow_repository=follow_repository, profile_service=profile_service
        )

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        social_settings: SocialSettings,
    ) -> NotificationService:
        """Provide notification fan-out service."""
        return NotificationService(
            notification_repository=notification_repository,
            social_settings=social_settings,
        )

    @provide
    def get_social_service(
        self,
        star_service: StarService,
        follow_service: FollowService,
        notification_service: NotificationService,
        project_service: ProjectService,
        snippet_service: SnippetService,
        user_service: UserService,
    ) -> SocialService:
        """Provide social orchestration service."""
        return SocialService(
            star_service=star_service,
            follow_service=follow_service,
            notification_service=notification_service,
            project_service=project_service,
            snippet_service=snippet_service,
            user_service=user_service,
        )
