"""Code snippet routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from folio.application.usecase.snippet import (
    CreateSnippetRequest,
    CreateSnippetUseCase,
    DeleteSnippetRequest,
    DeleteSnippetResponse,
    DeleteSnippetUseCase,
    GetSnippetRequest,
    GetSnippetUseCase,
    ListSnippetsRequest,
    ListSnippetsResponse,
    ListSnippetsUseCase,
    SnippetResponse,
    UpdateSnippetRequest,
    UpdateSnippetUseCase,
)
from folio.application.usecase.star import (
    GetStarStatusRequest,
    GetStarStatusResponse,
    GetStarStatusUseCase,
    StarRequest,
    StarResponse,
    StarUseCase,
    UnstarRequest,
    UnstarUseCase,
)
from folio.domain.service import JWTService
from folio.domain.value import Language, StarTargetType, Tag, Visibility
from folio.interface.api.session import require_user_id

router = APIRouter(prefix="/snippets", tags=["snippets"], route_class=DishkaRoute)


class CreateSnippetAPIRequest(BaseModel):
    """API request for creating a snippet."""

    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    code: str = Field(min_length=1)
    language: Language
    tags: list[Tag] = Field(default_factory=list)
    visibility: Visibility = Visibility.PUBLIC


class UpdateSnippetAPIRequest(BaseModel):
    """API request for editing a snippet. Omitted fields are unchanged."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    code: str | None = Field(None, min_length=1)
    language: Language | None = None
    tags: list[Tag] | None = None
    visibility: Visibility | None = None


@router.post("", response_model=SnippetResponse, status_code=status.HTTP_201_CREATED)
async def create_snippet(
    request: CreateSnippetAPIRequest,
    create_snippet_use_case: FromDishka[CreateSnippetUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SnippetResponse:
    """Create a snippet owned by the current user."""
    user_id = require_user_id(jwt_service, auth_token)

    return await create_snippet_use_case.execute(
        CreateSnippetRequest(owner_id=user_id, **request.model_dump())
    )


@router.get("", response_model=ListSnippetsResponse)
async def list_snippets(
    list_snippets_use_case: FromDishka[ListSnippetsUseCase],
    jwt_service: FromDishka[JWTService],
    owner_id: int | None = None,
    language: str | None = None,
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListSnippetsResponse:
    """List snippets, newest first, optionally filtered by owner and language.

    Example:
        GET /snippets?language=python&limit=10
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)

    return await list_snippets_use_case.execute(
        ListSnippetsRequest(
            owner_id=owner_id,
            language=language,
            limit=limit,
            offset=offset,
            viewer_id=viewer_id,
        )
    )


@router.get("/{snippet_id}", response_model=SnippetResponse)
async def get_snippet(
    snippet_id: int,
    get_snippet_use_case: FromDishka[GetSnippetUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SnippetResponse:
    """Get a snippet and record a view."""
    viewer_id = jwt_service.get_user_id_from_token(auth_token)

    return await get_snippet_use_case.execute(
        GetSnippetRequest(snippet_id=snippet_id, viewer_id=viewer_id)
    )


@router.patch("/{snippet_id}", response_model=SnippetResponse)
async def update_snippet(
    snippet_id: int,
    request: UpdateSnippetAPIRequest,
    update_snippet_use_case: FromDishka[UpdateSnippetUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SnippetResponse:
    """Edit a snippet. Only the owner may do this (403 otherwise)."""
    user_id = require_user_id(jwt_service, auth_token)

    return await update_snippet_use_case.execute(
        UpdateSnippetRequest(
            snippet_id=snippet_id,
            user_id=user_id,
            **request.model_dump(exclude_none=True),
        )
    )


@router.delete("/{snippet_id}", response_model=DeleteSnippetResponse)
async def delete_snippet(
    snippet_id: int,
    delete_snippet_use_case: FromDishka[DeleteSnippetUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteSnippetResponse:
    """Delete a snippet and its stars. Only the owner may do this."""
    user_id = require_user_id(jwt_service, auth_token)

    return await delete_snippet_use_case.execute(
        DeleteSnippetRequest(snippet_id=snippet_id, user_id=user_id)
    )


@router.post("/{snippet_id}/star", response_model=StarResponse)
async def star_snippet(
    snippet_id: int,
    star_use_case: FromDishka[StarUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> StarResponse:
    """Star a snippet. Repeating the call is a no-op."""
    user_id = require_user_id(jwt_service, auth_token)

    return await star_use_case.execute(
        StarRequest(
            target_type=StarTargetType.SNIPPET,
            target_id=snippet_id,
            user_id=user_id,
        )
    )


@router.delete("/{snippet_id}/star", response_model=StarResponse)
async def unstar_snippet(
    snippet_id: int,
    unstar_use_case: FromDishka[UnstarUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> StarResponse:
    user_id = require_user_id(jwt_service, auth_token)

    return await unstar_use_case.execute(
        UnstarRequest(
            target_type=StarTargetType.SNIPPET,
            target_id=snippet_id,
            user_id=user_id,
        )
    )


@router.get("/{snippet_id}/star", response_model=GetStarStatusResponse)
async def get_snippet_star_status(
    snippet_id: int,
    get_star_status_use_case: FromDishka[GetStarStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetStarStatusResponse:
    user_id = require_user_id(jwt_service, auth_token)

    return await get_star_status_use_case.execute(
        GetStarStatusRequest(
            target_type=StarTargetType.SNIPPET,
            target_id=snippet_id,
            user_id=user_id,
        )
    )
