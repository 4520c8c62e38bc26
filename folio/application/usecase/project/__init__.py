"""Project use cases."""

from .create_project import CreateProjectRequest, CreateProjectUseCase
from .delete_project import (
    DeleteProjectRequest,
    DeleteProjectResponse,
    DeleteProjectUseCase,
)
from .get_project import GetProjectRequest, GetProjectUseCase, ProjectResponse
from .list_projects import ListProjectsRequest, ListProjectsResponse, ListProjectsUseCase
from .update_project import UpdateProjectRequest, UpdateProjectUseCase

__all__ = [
    "CreateProjectRequest",
    "CreateProjectUseCase",
    "DeleteProjectRequest",
    "DeleteProjectResponse",
    "DeleteProjectUseCase",
    "GetProjectRequest",
    "GetProjectUseCase",
    "ListProjectsRequest",
    "ListProjectsResponse",
    "ListProjectsUseCase",
    "ProjectResponse",
    "UpdateProjectRequest",
    "UpdateProjectUseCase",
]
