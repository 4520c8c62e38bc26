"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from folio.domain.model import Follow, Notification, Profile, Project, Snippet, Star, User
from folio.domain.value import (
    FollowId,
    Language,
    NotificationId,
    NotificationKind,
    NotificationTargetKind,
    ProjectId,
    SnippetId,
    StarId,
    StarTargetType,
    Tag,
    UserId,
    UserRole,
    Visibility,
)


def _tags(values: list[str] | None) -> list[Tag]:
    return [Tag(v) for v in values or []]


def _without_id(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop a not-yet-assigned id so the database sequence fills it in."""
    if data.get("id") is None:
        data.pop("id", None)
    return data


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        external_id=row["external_id"],
        name=row.get("name"),
        email=row.get("email"),
        login_method=row.get("login_method"),
        role=UserRole(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        last_signed_in=row["last_signed_in"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["role"] = user.role.value
    return _without_id(data)


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        user_id=UserId(row["user_id"]),
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio"),
        location=row.get("location"),
        website=row.get("website"),
        github=row.get("github"),
        twitter=row.get("twitter"),
        linkedin=row.get("linkedin"),
        skills=_tags(row.get("skills")),
        follower_count=row["follower_count"],
        following_count=row["following_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict.

    Tag lists dump to plain strings.
    """
    return profile.model_dump()


def row_to_project(row: Dict[str, Any]) -> Project:
    """Convert database row to Project domain model.

    Args:
        row: Database row as dict

    Returns:
        Project domain model
    """
    return Project(
        id=ProjectId(row["id"]),
        owner_id=UserId(row["owner_id"]),
        title=row["title"],
        description=row.get("description"),
        readme_content=row.get("readme_content"),
        repository_url=row.get("repository_url"),
        live_url=row.get("live_url"),
        thumbnail_url=row.get("thumbnail_url"),
        tech_stack=_tags(row.get("tech_stack")),
        tags=_tags(row.get("tags")),
        star_count=row["star_count"],
        view_count=row["view_count"],
        featured=row["featured"],
        visibility=Visibility(row["visibility"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def project_to_dict(project: Project) -> Dict[str, Any]:
    """Convert Project domain model to database dict."""
    data = project.model_dump()
    data["visibility"] = project.visibility.value
    return _without_id(data)


def row_to_snippet(row: Dict[str, Any]) -> Snippet:
    """Convert database row to Snippet domain model."""
    return Snippet(
        id=SnippetId(row["id"]),
        owner_id=UserId(row["owner_id"]),
        title=row["title"],
        description=row.get("description"),
        code=row["code"],
        language=Language(row["language"]),
        tags=_tags(row.get("tags")),
        star_count=row["star_count"],
        view_count=row["view_count"],
        visibility=Visibility(row["visibility"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def snippet_to_dict(snippet: Snippet) -> Dict[str, Any]:
    """Convert Snippet domain model to database dict."""
    data = snippet.model_dump()
    data["visibility"] = snippet.visibility.value
    return _without_id(data)


def row_to_star(row: Dict[str, Any]) -> Star:
    """Convert database row to Star domain model."""
    return Star(
        id=StarId(row["id"]),
        user_id=UserId(row["user_id"]),
        target_type=StarTargetType(row["target_type"]),
        target_id=row["target_id"],
        created_at=row["created_at"],
    )


def star_to_dict(star: Star) -> Dict[str, Any]:
    """Convert Star domain model to database dict."""
    data = star.model_dump()
    data["target_type"] = star.target_type.value
    return _without_id(data)


def row_to_follow(row: Dict[str, Any]) -> Follow:
    """Convert database row to Follow domain model."""
    return Follow(
        id=FollowId(row["id"]),
        follower_id=UserId(row["follower_id"]),
        following_id=UserId(row["following_id"]),
        created_at=row["created_at"],
    )


def follow_to_dict(follow: Follow) -> Dict[str, Any]:
    """Convert Follow domain model to database dict."""
    return _without_id(follow.model_dump())


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(row["id"]),
        recipient_id=UserId(row["recipient_id"]),
        actor_id=UserId(row["actor_id"]),
        kind=NotificationKind(row["kind"]),
        target_kind=NotificationTargetKind(row["target_kind"]),
        target_id=row.get("target_id"),
        message=row.get("message"),
        read=row["read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["kind"] = notification.kind.value
    data["target_kind"] = notification.target_kind.value
    return _without_id(data)
