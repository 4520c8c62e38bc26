"""User domain service."""

from datetime import datetime

import logfire

from folio.config import AuthSettings
from folio.domain.error import NotFoundError
from folio.domain.model import User
from folio.domain.repository import UserRepository
from folio.domain.value import ExternalIdentity, UserId, UserRole

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (owner identity)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, or None if it does not exist."""
        return await self.user_repository.find_by_id(user_id)

    async def sign_in(self, identity: ExternalIdentity) -> User:
        """Create or refresh the user behind an external identity.

        Called from the authentication callback. The configured owner
        identity is always stored with the admin role; every other identity
        keeps the role it already has.

        Args:
            identity: Identity asserted by the identity provider

        Returns:
            The stored user
        """
        with logfire.span(
            "user_service.sign_in", external_id=identity.external_id
        ):
            existing = await self.user_repository.find_by_external_id(
                identity.external_id
            )

            if identity.external_id == self.auth_settings.owner_external_id:
                role = UserRole.ADMIN
            elif existing:
                role = existing.role
            else:
                role = UserRole.USER

            now = datetime.now()
            user = User(
                external_id=identity.external_id,
                name=identity.name if identity.name is not None else (
                    existing.name if existing else None
                ),
                email=identity.email if identity.email is not None else (
                    existing.email if existing else None
                ),
                login_method=identity.login_method,
                role=role,
                created_at=existing.created_at if existing else now,
                updated_at=now,
                last_signed_in=now,
            )

            saved = await self.user_repository.upsert(user)
            logfire.info(
                "User signed in",
                user_id=saved.id,
                new_user=existing is None,
                role=saved.role.value,
            )
            return saved
