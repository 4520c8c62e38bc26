"""JWT token domain service."""

import logfire

from folio.config import AuthSettings
from folio.domain.model import User
from folio.domain.value import UserId
from folio.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create a session token for a stored user."""
        if user.id is None:
            raise ValueError("Cannot issue a token for an unsaved user")

        with logfire.span("jwt_service.create_token", user_id=user.id):
            token = create_token(
                user.id, user.external_id, user.name, self.auth_settings
            )
            logfire.info("JWT token created", user_id=user.id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            return payload

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Extract the user ID from a token without raising.

        Used by routes where authentication is optional.

        Returns:
            User ID if the token is valid, None if it is missing or invalid
        """
        if not token:
            return None

        try:
            return UserId(self.verify_token(token).user_id)
        except JWTError as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
