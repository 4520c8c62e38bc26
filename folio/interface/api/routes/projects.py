"""Project routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from folio.application.usecase.project import (
    CreateProjectRequest,
    CreateProjectUseCase,
    DeleteProjectRequest,
    DeleteProjectResponse,
    DeleteProjectUseCase,
    GetProjectRequest,
    GetProjectUseCase,
    ListProjectsRequest,
    ListProjectsResponse,
    ListProjectsUseCase,
    ProjectResponse,
    UpdateProjectRequest,
    UpdateProjectUseCase,
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
from folio.domain.value import StarTargetType, Tag, Visibility
from folio.interface.api.session import require_user_id

router = APIRouter(prefix="/projects", tags=["projects"], route_class=DishkaRoute)


class CreateProjectAPIRequest(BaseModel):
    """API request for creating a project."""

    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    readme_content: str | None = None
    repository_url: str | None = Field(None, max_length=255)
    live_url: str | None = Field(None, max_length=255)
    thumbnail_url: str | None = None
    tech_stack: list[Tag] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    featured: bool = False
    visibility: Visibility = Visibility.PUBLIC


class UpdateProjectAPIRequest(BaseModel):
    """API request for editing a project. Omitted fields are unchanged."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    readme_content: str | None = None
    repository_url: str | None = Field(None, max_length=255)
    live_url: str | None = Field(None, max_length=255)
    thumbnail_url: str | None = None
    tech_stack: list[Tag] | None = None
    tags: list[Tag] | None = None
    featured: bool | None = None
    visibility: Visibility | None = None


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    request: CreateProjectAPIRequest,
    create_project_use_case: FromDishka[CreateProjectUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProjectResponse:
    """Create a project owned by the current user.

    Example:
        POST /projects
        {"title": "folio", "tech_stack": ["python"], "visibility": "public"}
    """
    user_id = require_user_id(jwt_service, auth_token)

    return await create_project_use_case.execute(
        CreateProjectRequest(owner_id=user_id, **request.model_dump())
    )


@router.get("", response_model=ListProjectsResponse)
async def list_projects(
    list_projects_use_case: FromDishka[ListProjectsUseCase],
    jwt_service: FromDishka[JWTService],
    owner_id: int | None = None,
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListProjectsResponse:
    """List projects, newest first.

    Private projects only appear when an owner lists their own.
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)

    return await list_projects_use_case.execute(
        ListProjectsRequest(
            owner_id=owner_id, limit=limit, offset=offset, viewer_id=viewer_id
        )
    )


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int,
    get_project_use_case: FromDishka[GetProjectUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProjectResponse:
    """Get a project and record a view."""
    viewer_id = jwt_service.get_user_id_from_token(auth_token)

    return await get_project_use_case.execute(
        GetProjectRequest(project_id=project_id, viewer_id=viewer_id)
    )


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    request: UpdateProjectAPIRequest,
    update_project_use_case: FromDishka[UpdateProjectUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProjectResponse:
    """Edit a project. Only the owner may do this (403 otherwise)."""
    user_id = require_user_id(jwt_service, auth_token)

    return await update_project_use_case.execute(
        UpdateProjectRequest(
            project_id=project_id,
            user_id=user_id,
            **request.model_dump(exclude_none=True),
        )
    )


@router.delete("/{project_id}", response_model=DeleteProjectResponse)
async def delete_project(
    project_id: int,
    delete_project_use_case: FromDishka[DeleteProjectUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteProjectResponse:
    """Delete a project and its stars. Only the owner may do this."""
    user_id = require_user_id(jwt_service, auth_token)

    return await delete_project_use_case.execute(
        DeleteProjectRequest(project_id=project_id, user_id=user_id)
    )


@router.post("/{project_id}/star", response_model=StarResponse)
async def star_project(
    project_id: int,
    star_use_case: FromDishka[StarUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> StarResponse:
    """Star a project.

    Starring twice is not an error: the second call returns success=false
    and leaves star_count unchanged.
    """
    user_id = require_user_id(jwt_service, auth_token)

    return await star_use_case.execute(
        StarRequest(
            target_type=StarTargetType.PROJECT,
            target_id=project_id,
            user_id=user_id,
        )
    )


@router.delete("/{project_id}/star", response_model=StarResponse)
async def unstar_project(
    project_id: int,
    unstar_use_case: FromDishka[UnstarUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> StarResponse:
    """Remove the current user's star from a project."""
    user_id = require_user_id(jwt_service, auth_token)

    return await unstar_use_case.execute(
        UnstarRequest(
            target_type=StarTargetType.PROJECT,
            target_id=project_id,
            user_id=user_id,
        )
    )


@router.get("/{project_id}/star", response_model=GetStarStatusResponse)
async def get_project_star_status(
    project_id: int,
    get_star_status_use_case: FromDishka[GetStarStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetStarStatusResponse:
    user_id = require_user_id(jwt_service, auth_token)

    return await get_star_status_use_case.execute(
        GetStarStatusRequest(
            target_type=StarTargetType.PROJECT,
            target_id=project_id,
            user_id=user_id,
        )
    )
