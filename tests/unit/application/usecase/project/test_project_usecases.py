"""Unit tests for the project use cases."""

import pytest

from folio.application.usecase.project import (
    CreateProjectRequest,
    CreateProjectUseCase,
    DeleteProjectRequest,
    DeleteProjectUseCase,
    GetProjectRequest,
    GetProjectUseCase,
    ListProjectsRequest,
    ListProjectsUseCase,
    UpdateProjectRequest,
    UpdateProjectUseCase,
)
from folio.domain.error import AuthorizationError, NotFoundError
from folio.domain.service import SocialService
from folio.domain.value import Visibility
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestProjectUseCases:
    """Tests for project CRUD through the use cases."""

    @pytest.mark.asyncio
    async def test_create_and_get_records_view(self, unit_env):
        # Arrange
        create_use_case = await unit_env.get(CreateProjectUseCase)
        get_use_case = await unit_env.get(GetProjectUseCase)

        created = await create_use_case.execute(
            CreateProjectRequest(owner_id=1, title="Folio", tech_stack=["Python", "htmx"])
        )

        # Act
        first = await get_use_case.execute(GetProjectRequest(project_id=created.project_id))
        second = await get_use_case.execute(GetProjectRequest(project_id=created.project_id))

        # Assert
        assert created.tech_stack == ["Python", "htmx"]
        assert created.star_count == 0
        assert first.view_count == 1
        assert second.view_count == 2
        assert second.has_starred is False

    @pytest.mark.asyncio
    async def test_get_reports_viewer_star(self, unit_env):
        create_use_case = await unit_env.get(CreateProjectUseCase)
        get_use_case = await unit_env.get(GetProjectUseCase)
        social_service = await unit_env.get(SocialService)

        created = await create_use_case.execute(
            CreateProjectRequest(owner_id=1, title="Folio")
        )
        await social_service.star_project(2, created.project_id)

        seen = await get_use_case.execute(
            GetProjectRequest(project_id=created.project_id, viewer_id=2)
        )

        assert seen.has_starred is True
        assert seen.star_count == 1

    @pytest.mark.asyncio
    async def test_private_project_hidden_and_not_counted(self, unit_env):
        create_use_case = await unit_env.get(CreateProjectUseCase)
        get_use_case = await unit_env.get(GetProjectUseCase)

        created = await create_use_case.execute(
            CreateProjectRequest(owner_id=1, title="Secret", visibility=Visibility.PRIVATE)
        )

        with pytest.raises(NotFoundError):
            await get_use_case.execute(
                GetProjectRequest(project_id=created.project_id, viewer_id=2)
            )

        own = await get_use_case.execute(
            GetProjectRequest(project_id=created.project_id, viewer_id=1)
        )
        assert own.view_count == 1

    @pytest.mark.asyncio
    async def test_list_marks_starred_projects(self, unit_env):
        create_use_case = await unit_env.get(CreateProjectUseCase)
        list_use_case = await unit_env.get(ListProjectsUseCase)
        social_service = await unit_env.get(SocialService)

        older = await create_use_case.execute(CreateProjectRequest(owner_id=1, title="Older"))
        newer = await create_use_case.execute(CreateProjectRequest(owner_id=1, title="Newer"))
        await social_service.star_project(2, older.project_id)

        listing = await list_use_case.execute(ListProjectsRequest(viewer_id=2))

        assert [p.title for p in listing.projects] == ["Newer", "Older"]
        assert {p.project_id: p.has_starred for p in listing.projects} == {
            newer.project_id: False,
            older.project_id: True,
        }

    @pytest.mark.asyncio
    async def test_update_and_delete_require_owner(self, unit_env):
        create_use_case = await unit_env.get(CreateProjectUseCase)
        update_use_case = await unit_env.get(UpdateProjectUseCase)
        delete_use_case = await unit_env.get(DeleteProjectUseCase)

        created = await create_use_case.execute(CreateProjectRequest(owner_id=1, title="Folio"))

        with pytest.raises(AuthorizationError):
            await update_use_case.execute(
                UpdateProjectRequest(project_id=created.project_id, user_id=2, title="Stolen")
            )
        with pytest.raises(AuthorizationError):
            await delete_use_case.execute(
                DeleteProjectRequest(project_id=created.project_id, user_id=2)
            )

        updated = await update_use_case.execute(
            UpdateProjectRequest(project_id=created.project_id, user_id=1, featured=True)
        )
        assert updated.featured is True
        assert updated.title == "Folio"

        deleted = await delete_use_case.execute(
            DeleteProjectRequest(project_id=created.project_id, user_id=1)
        )
        assert deleted.success is True
