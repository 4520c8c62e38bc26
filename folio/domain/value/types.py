"""Domain value objects for Folio.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import field_validator

from folio.domain.value.common import RootValueObject, ValueObject


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "user"
    ADMIN = "admin"


class Visibility(str, Enum):
    """Who can see a project or snippet."""

    PUBLIC = "public"
    PRIVATE = "private"


class StarTargetType(str, Enum):
    """Type of content that can be starred."""

    PROJECT = "project"
    SNIPPET = "snippet"


class NotificationKind(str, Enum):
    """What happened to produce a notification."""

    STAR = "star"
    FOLLOW = "follow"
    COMMENT = "comment"


class NotificationTargetKind(str, Enum):
    """What a notification points at."""

    PROJECT = "project"
    SNIPPET = "snippet"
    PROFILE = "profile"

    @classmethod
    def for_star_target(cls, target_type: StarTargetType) -> "NotificationTargetKind":
        """Map a starred content type to its notification target kind."""
        return cls(target_type.value)


class Tag(RootValueObject[str]):
    """Free-form label on a project or snippet (also used for tech stack).

    Surrounding whitespace is stripped; 1-50 characters.
    Examples: 'python', 'machine learning', 'FastAPI'
    """

    @field_validator("root")
    @classmethod
    def validate_tag(cls, v: str) -> str:
        """Strip and validate tag length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Tag must be 1-50 characters")
        return v


class Language(RootValueObject[str]):
    """Programming language of a snippet, normalized to lowercase.

    Examples: 'python', 'typescript', 'c++', 'objective-c'
    """

    @field_validator("root")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Normalize and validate language identifier."""
        v = v.strip().lower()
        if not re.match(r"^[a-z0-9+#.\- ]{1,50}$", v):
            raise ValueError(
                "Language must be 1-50 characters of letters, digits, '+', '#', '.', '-'"
            )
        return v


class ExternalIdentity(ValueObject):
    """Identity asserted by the external authentication provider.

    Generic structure handed over by the sign-in callback.
    """

    external_id: str  # Stable identifier at the provider
    name: str | None = None
    email: str | None = None
    login_method: str | None = None

    @field_validator("external_id")
    @classmethod
    def validate_external_id(cls, v: str) -> str:
        """Validate identifier is not empty and within length limits."""
        if len(v) < 1 or len(v) > 64:
            raise ValueError("External id must be 1-64 characters")
        return v
