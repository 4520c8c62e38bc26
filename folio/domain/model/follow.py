"""Follow entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from folio.domain.model.common import DomainModel
from folio.domain.value import FollowId, UserId


class Follow(DomainModel):
    """Directed follow relationship between two users.

    Business rules:
    - A user cannot follow themselves
    - At most one follow per ordered (follower, following) pair
    """

    id: Optional[FollowId] = None
    follower_id: UserId
    following_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_not_self(self) -> "Follow":
        if self.follower_id == self.following_id:
            raise ValueError("A user cannot follow themselves")
        return self
