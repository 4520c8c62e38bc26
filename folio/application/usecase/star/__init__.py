"""Star use cases."""

from .get_star_status import (
    GetStarStatusRequest,
    GetStarStatusResponse,
    GetStarStatusUseCase,
)
from .star import StarRequest, StarResponse, StarUseCase
from .unstar import UnstarRequest, UnstarUseCase

__all__ = [
    "GetStarStatusRequest",
    "GetStarStatusResponse",
    "GetStarStatusUseCase",
    "StarRequest",
    "StarResponse",
    "StarUseCase",
    "UnstarRequest",
    "UnstarUseCase",
]
