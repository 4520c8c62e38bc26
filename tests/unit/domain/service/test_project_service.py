"""Unit tests for ProjectService and SnippetService."""

import pytest

from folio.domain.error import AuthorizationError, NotFoundError, ValidationError
from folio.domain.model import Project
from folio.domain.repository import ProjectRepository, SnippetRepository
from folio.domain.service import (
    ProjectService,
    SnippetService,
    SocialService,
    StarService,
)
from folio.domain.value import (
    Language,
    ProjectId,
    StarTargetType,
    Tag,
    UserId,
    Visibility,
)
from tests.conftest import make_project, make_snippet
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestProjectService:
    """Tests for project ownership, visibility and counters."""

    @pytest.mark.asyncio
    async def test_create_project_zeroes_counters(self, unit_env):
        project_service = await unit_env.get(ProjectService)

        project = await project_service.create_project(
            Project(
                owner_id=UserId(1),
                title="Folio",
                tech_stack=[Tag("python")],
                star_count=12,
                view_count=40,
            )
        )

        assert project.id is not None
        assert project.star_count == 0
        assert project.view_count == 0

    @pytest.mark.asyncio
    async def test_update_by_owner_keeps_counters(self, unit_env):
        # Arrange
        project_service = await unit_env.get(ProjectService)
        star_service = await unit_env.get(StarService)
        project_repo = await unit_env.get(ProjectRepository)
        project = await make_project(project_repo, owner_id=UserId(1))
        await star_service.add_star(UserId(2), StarTargetType.PROJECT, project.id)

        # Act
        updated = await project_service.update_project(
            project.id,
            UserId(1),
            {"title": "Renamed", "star_count": 99, "owner_id": 5},
        )

        # Assert
        assert updated.title == "Renamed"
        assert updated.star_count == 1
        assert updated.owner_id == UserId(1)

    @pytest.mark.asyncio
    async def test_update_by_other_user_forbidden(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        project_repo = await unit_env.get(ProjectRepository)
        project = await make_project(project_repo, owner_id=UserId(1))

        with pytest.raises(AuthorizationError):
            await project_service.update_project(project.id, UserId(2), {"title": "Mine"})

        assert (await project_repo.find_by_id(project.id)).title == project.title

    @pytest.mark.asyncio
    async def test_update_missing_project(self, unit_env):
        project_service = await unit_env.get(ProjectService)

        with pytest.raises(NotFoundError):
            await project_service.update_project(ProjectId(999), UserId(1), {"title": "x"})

    @pytest.mark.asyncio
    async def test_delete_removes_stars(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        social_service = await unit_env.get(SocialService)
        star_service = await unit_env.get(StarService)
        project_repo = await unit_env.get(ProjectRepository)
        project = await make_project(project_repo, owner_id=UserId(1))
        await social_service.star_project(UserId(2), project.id)

        deleted = await project_service.delete_project(project.id, UserId(1))

        assert deleted is True
        assert await project_repo.find_by_id(project.id) is None
        assert not await star_service.has_star(UserId(2), StarTargetType.PROJECT, project.id)

    @pytest.mark.asyncio
    async def test_delete_by_other_user_forbidden(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        project_repo = await unit_env.get(ProjectRepository)
        project = await make_project(project_repo, owner_id=UserId(1))

        with pytest.raises(AuthorizationError):
            await project_service.delete_project(project.id, UserId(2))

        assert await project_repo.find_by_id(project.id) is not None

    @pytest.mark.asyncio
    async def test_private_project_hidden_from_others(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        project_repo = await unit_env.get(ProjectRepository)
        project = await make_project(
            project_repo, owner_id=UserId(1), visibility=Visibility.PRIVATE
        )

        with pytest.raises(NotFoundError):
            await project_service.get_visible_project(project.id, UserId(2))
        with pytest.raises(NotFoundError):
            await project_service.get_visible_project(project.id, None)

        visible = await project_service.get_visible_project(project.id, UserId(1))
        assert visible.id == project.id

    @pytest.mark.asyncio
    async def test_list_includes_private_only_for_owner(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        project_repo = await unit_env.get(ProjectRepository)
        await make_project(project_repo, UserId(1), title="Public")
        await make_project(project_repo, UserId(1), title="Secret", visibility=Visibility.PRIVATE)

        as_owner = await project_service.list_projects(
            owner_id=UserId(1), viewer_id=UserId(1), limit=20, offset=0
        )
        as_stranger = await project_service.list_projects(
            owner_id=UserId(1), viewer_id=UserId(2), limit=20, offset=0
        )

        assert {p.title for p in as_owner} == {"Public", "Secret"}
        assert [p.title for p in as_stranger] == ["Public"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit, offset", [(20, -1), (0, 0), (101, 0)])
    async def test_list_rejects_bad_paging(self, unit_env, limit, offset):
        project_service = await unit_env.get(ProjectService)

        with pytest.raises(ValidationError):
            await project_service.list_projects(
                owner_id=None, viewer_id=None, limit=limit, offset=offset
            )

    @pytest.mark.asyncio
    async def test_record_view_increments(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        project_repo = await unit_env.get(ProjectRepository)
        project = await make_project(project_repo, owner_id=UserId(1))

        await project_service.record_view(project.id)
        await project_service.record_view(project.id)

        assert (await project_repo.find_by_id(project.id)).view_count == 2


class TestSnippetService:
    """Tests for snippets, which follow the same rules as projects."""

    @pytest.mark.asyncio
    async def test_list_filters_by_language(self, unit_env):
        snippet_service = await unit_env.get(SnippetService)
        snippet_repo = await unit_env.get(SnippetRepository)
        await make_snippet(snippet_repo, UserId(1), title="py", language="python")
        await make_snippet(snippet_repo, UserId(1), title="rs", language="rust")

        snippets = await snippet_service.list_snippets(
            owner_id=None,
            viewer_id=None,
            language=Language("Python"),
            limit=20,
            offset=0,
        )

        assert [s.title for s in snippets] == ["py"]

    @pytest.mark.asyncio
    async def test_list_rejects_negative_offset(self, unit_env):
        snippet_service = await unit_env.get(SnippetService)

        with pytest.raises(ValidationError):
            await snippet_service.list_snippets(
                owner_id=None, viewer_id=None, language=None, limit=20, offset=-5
            )

    @pytest.mark.asyncio
    async def test_update_by_other_user_forbidden(self, unit_env):
        snippet_service = await unit_env.get(SnippetService)
        snippet_repo = await unit_env.get(SnippetRepository)
        snippet = await make_snippet(snippet_repo, owner_id=UserId(1))

        with pytest.raises(AuthorizationError):
            await snippet_service.update_snippet(snippet.id, UserId(2), {"code": "rm -rf"})

    @pytest.mark.asyncio
    async def test_delete_by_owner_removes_stars(self, unit_env):
        snippet_service = await unit_env.get(SnippetService)
        star_service = await unit_env.get(StarService)
        snippet_repo = await unit_env.get(SnippetRepository)
        snippet = await make_snippet(snippet_repo, owner_id=UserId(1))
        await star_service.add_star(UserId(3), StarTargetType.SNIPPET, snippet.id)

        assert await snippet_service.delete_snippet(snippet.id, UserId(1)) is True
        assert not await star_service.has_star(UserId(3), StarTargetType.SNIPPET, snippet.id)
