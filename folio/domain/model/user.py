"""User aggregate root.

Users sign in through an external identity provider. The identity is
immutable; everything a user edits about themselves lives on Profile.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import UserId, UserRole


class User(DomainModel):
    """User aggregate root.

    Created on the first external-authentication callback and refreshed on
    every later sign-in (name, email, last_signed_in).
    """

    id: Optional[UserId] = None
    external_id: str = Field(min_length=1, max_length=64)
    name: Optional[str] = None
    email: Optional[str] = Field(default=None, max_length=320)
    login_method: Optional[str] = Field(default=None, max_length=64)
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    last_signed_in: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
