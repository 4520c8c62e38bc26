"""Sign-in use case."""

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import JWTService, UserService
from folio.domain.value import ExternalIdentity, UserRole


class SignInRequest(BaseModel):
    """Identity handed over by the external authentication callback."""

    external_id: str = Field(min_length=1, max_length=64)
    name: str | None = None
    email: str | None = None
    login_method: str | None = None


class SignInResponse(BaseModel):
    """Sign-in response."""

    user_id: int
    name: str | None
    role: UserRole
    token: str  # Session JWT, set as a cookie by the API layer


class SignInUseCase(BaseUseCase):
    """Use case for turning an external identity into a session."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Upsert the user and issue a session token."""
        identity = ExternalIdentity(
            external_id=request.external_id,
            name=request.name,
            email=request.email,
            login_method=request.login_method,
        )
        user = await self.user_service.sign_in(identity)
        token = self.jwt_service.create_token(user)

        return SignInResponse(
            user_id=user.id,  # type: ignore[arg-type]
            name=user.name,
            role=user.role,
            token=token,
        )
