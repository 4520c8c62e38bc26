"""Application layer DI providers."""

from dishka import Scope, provide

from folio.application.usecase.auth import GetCurrentUserUseCase, SignInUseCase
from folio.application.usecase.follow import (
    FollowUserUseCase,
    GetFollowStatusUseCase,
    UnfollowUserUseCase,
)
from folio.application.usecase.notification import (
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllReadUseCase,
    MarkNotificationReadUseCase,
)
from folio.application.usecase.profile import (
    GetUserProfileUseCase,
    UpdateProfileUseCase,
)
from folio.application.usecase.project import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
)
from folio.application.usecase.snippet import (
    CreateSnippetUseCase,
    DeleteSnippetUseCase,
    GetSnippetUseCase,
    ListSnippetsUseCase,
    UpdateSnippetUseCase,
)
from folio.application.usecase.star import (
    GetStarStatusUseCase,
    StarUseCase,
    UnstarUseCase,
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_sign_in_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> SignInUseCase:
        """Provide sign-in use case."""
        return SignInUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        profile_service: ProfileService,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service,
            user_service=user_service,
            profile_service=profile_service,
        )

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self,
        user_service: UserService,
        profile_service: ProfileService,
        follow_service: FollowService,
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service,
            profile_service=profile_service,
            follow_service=follow_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, user_service: UserService, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(
            user_service=user_service, profile_service=profile_service
        )

    # Project use cases
    @provide(scope=Scope.REQUEST)
    def get_create_project_use_case(
        self, project_service: ProjectService
    ) -> CreateProjectUseCase:
        """Provide create project use case."""
        return CreateProjectUseCase(project_service=project_service)

    @provide(scope=Scope.REQUEST)
    def get_get_project_use_case(
        self, project_service: ProjectService, star_service: StarService
    ) -> GetProjectUseCase:
        """Provide get project use case."""
        return GetProjectUseCase(
            project_service=project_service, star_service=star_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_projects_use_case(
        self, project_service: ProjectService, star_service: StarService
    ) -> ListProjectsUseCase:
        """Provide list projects use case."""
        return ListProjectsUseCase(
            project_service=project_service, star_service=star_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_project_use_case(
        self, project_service: ProjectService
    ) -> UpdateProjectUseCase:
        """Provide update project use case."""
        return UpdateProjectUseCase(project_service=project_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_project_use_case(
        self, project_service: ProjectService
    ) -> DeleteProjectUseCase:
        """Provide delete project use case."""
        return DeleteProjectUseCase(project_service=project_service)

    # Snippet use cases
    @provide(scope=Scope.REQUEST)
    def get_create_snippet_use_case(
        self, snippet_service: SnippetService
    ) -> CreateSnippetUseCase:
        """Provide create snippet use case."""
        return CreateSnippetUseCase(snippet_service=snippet_service)

    @provide(scope=Scope.REQUEST)
    def get_get_snippet_use_case(
        self, snippet_service: SnippetService, star_service: StarService
    ) -> GetSnippetUseCase:
        """Provide get snippet use case."""
        return GetSnippetUseCase(
            snippet_service=snippet_service, star_service=star_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_snippets_use_case(
        self, snippet_service: SnippetService, star_service: StarService
    ) -> ListSnippetsUseCase:
        """Provide list snippets use case."""
        return ListSnippetsUseCase(
            snippet_service=snippet_service, star_service=star_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_snippet_use_case(
        self, snippet_service: SnippetService
    ) -> UpdateSnippetUseCase:
        """Provide update snippet use case."""
        return UpdateSnippetUseCase(snippet_service=snippet_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_snippet_use_case(
        self, snippet_service: SnippetService
    ) -> DeleteSnippetUseCase:
        """Provide delete snippet use case."""
        return DeleteSnippetUseCase(snippet_service=snippet_service)

    # Star use cases
    @provide(scope=Scope.REQUEST)
    def get_star_use_case(
        self,
        social_service: SocialService,
        project_service: ProjectService,
        snippet_service: SnippetService,
    ) -> StarUseCase:
        """Provide star use case."""
        return StarUseCase(
            social_service=social_service,
            project_service=project_service,
            snippet_service=snippet_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_unstar_use_case(
        self,
        social_service: SocialService,
        project_service: ProjectService,
        snippet_service: SnippetService,
    ) -> UnstarUseCase:
        """Provide unstar use case."""
        return UnstarUseCase(
            social_service=social_service,
            project_service=project_service,
            snippet_service=snippet_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_star_status_use_case(
        self, social_service: SocialService
    ) -> GetStarStatusUseCase:
        """Provide star status use case."""
        return GetStarStatusUseCase(social_service=social_service)

    # Follow use cases
    @provide(scope=Scope.REQUEST)
    def get_follow_user_use_case(
        self, social_service: SocialService, profile_service: ProfileService
    ) -> FollowUserUseCase:
        """Provide follow user use case."""
        return FollowUserUseCase(
            social_service=social_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_unfollow_user_use_case(
        self, social_service: SocialService, profile_service: ProfileService
    ) -> UnfollowUserUseCase:
        """Provide unfollow user use case."""
        return UnfollowUserUseCase(
            social_service=social_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_follow_status_use_case(
        self, social_service: SocialService
    ) -> GetFollowStatusUseCase:
        """Provide follow status use case."""
        return GetFollowStatusUseCase(social_service=social_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_all_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        """Provide unread count use case."""
        return GetUnreadCountUseCase(notification_service=notification_service)
