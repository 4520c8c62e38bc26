"""Profile entity.

Extended, user-editable portfolio attributes. One-to-one with User and
created lazily, either on first edit or on the first follow that touches
one of its counters.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import Tag, UserId


class Profile(DomainModel):
    """Profile entity.

    follower_count and following_count are denormalized caches of the
    follow ledger and are only ever changed through atomic counter updates.
    """

    user_id: UserId
    avatar_url: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=2000)
    location: Optional[str] = Field(default=None, max_length=255)
    website: Optional[str] = Field(default=None, max_length=255)
    github: Optional[str] = Field(default=None, max_length=255)
    twitter: Optional[str] = Field(default=None, max_length=255)
    linkedin: Optional[str] = Field(default=None, max_length=255)
    skills: list[Tag] = Field(default_factory=list)
    follower_count: int = Field(default=0, ge=0)
    following_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def empty(cls, user_id: UserId) -> "Profile":
        """Profile as seen for a user who never edited theirs."""
        return cls(user_id=user_id)
