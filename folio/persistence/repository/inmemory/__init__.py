"""In-memory repository implementations for testing."""

from .follow import InMemoryFollowRepository
from .notification import InMemoryNotificationRepository
from .profile import InMemoryProfileRepository
from .project import InMemoryProjectRepository
from .snippet import InMemorySnippetRepository
from .star import InMemoryStarRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryFollowRepository",
    "InMemoryNotificationRepository",
    "InMemoryProfileRepository",
    "InMemoryProjectRepository",
    "InMemorySnippetRepository",
    "InMemoryStarRepository",
    "InMemoryUserRepository",
]
