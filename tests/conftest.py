"""Test configuration and shared helpers."""

from folio.domain.model import Project, Snippet, User
from folio.domain.repository import ProjectRepository, SnippetRepository, UserRepository
from folio.domain.value import Language, UserId, Visibility


async def make_user(
    user_repo: UserRepository, external_id: str, name: str | None = None
) -> User:
    """Store a user as the sign-in callback would."""
    return await user_repo.upsert(
        User(external_id=external_id, name=name or external_id, login_method="test")
    )


async def make_project(
    project_repo: ProjectRepository,
    owner_id: UserId,
    title: str = "Test Project",
    visibility: Visibility = Visibility.PUBLIC,
) -> Project:
    """Store a project with zero counters."""
    return await project_repo.create(
        Project(owner_id=owner_id, title=title, visibility=visibility)
    )


async def make_snippet(
    snippet_repo: SnippetRepository,
    owner_id: UserId,
    title: str = "Test Snippet",
    language: str = "python",
    visibility: Visibility = Visibility.PUBLIC,
) -> Snippet:
    """Store a snippet with zero counters."""
    return await snippet_repo.create(
        Snippet(
            owner_id=owner_id,
            title=title,
            code="print('hello')",
            language=Language(language),
            visibility=visibility,
        )
    )
