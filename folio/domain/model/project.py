"""Project aggregate root.

Projects are the main portfolio items: a repository or product a user
built, with a README and the stack it uses.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import ProjectId, Tag, UserId, Visibility


class Project(DomainModel):
    """Project aggregate root.

    Owned by exactly one user. star_count and view_count are denormalized
    counters maintained by atomic storage updates, never by saving a copy
    of the entity.
    """

    id: Optional[ProjectId] = None
    owner_id: UserId
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    readme_content: Optional[str] = None
    repository_url: Optional[str] = Field(default=None, max_length=255)
    live_url: Optional[str] = Field(default=None, max_length=255)
    thumbnail_url: Optional[str] = None
    tech_stack: list[Tag] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    star_count: int = Field(default=0, ge=0)
    view_count: int = Field(default=0, ge=0)
    featured: bool = False
    visibility: Visibility = Visibility.PUBLIC
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id == user_id

    def is_visible_to(self, user_id: UserId | None) -> bool:
        """Private projects are only visible to their owner."""
        return self.visibility == Visibility.PUBLIC or self.owner_id == user_id
