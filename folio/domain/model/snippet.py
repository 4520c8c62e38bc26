"""Snippet aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import Language, SnippetId, Tag, UserId, Visibility


class Snippet(DomainModel):
    """A shared piece of code.

    Like Project, owned by one user and carrying denormalized star and view
    counters.
    """

    id: Optional[SnippetId] = None
    owner_id: UserId
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    code: str = Field(min_length=1)
    language: Language
    tags: list[Tag] = Field(default_factory=list)
    star_count: int = Field(default=0, ge=0)
    view_count: int = Field(default=0, ge=0)
    visibility: Visibility = Visibility.PUBLIC
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id == user_id

    def is_visible_to(self, user_id: UserId | None) -> bool:
        return self.visibility == Visibility.PUBLIC or self.owner_id == user_id
