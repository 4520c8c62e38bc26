"""Session cookie helpers shared by the routers."""

from fastapi import HTTPException, status

from folio.domain.service import JWTService
from folio.domain.value import UserId


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> UserId:
    """Resolve the authenticated user from the session cookie.

    Raises:
        HTTPException: 401 if the cookie is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id
