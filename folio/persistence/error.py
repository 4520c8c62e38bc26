"""Translation of driver-level failures into domain errors."""

import functools
from typing import Awaitable, Callable, ParamSpec, TypeVar

import logfire
from sqlalchemy.exc import DBAPIError, DisconnectionError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from folio.domain.error import StoreUnavailableError

P = ParamSpec("P")
R = TypeVar("R")


def translate_store_errors(
    func: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    """Re-raise connection-level database failures as StoreUnavailableError.

    Constraint violations and programming errors pass through unchanged.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except (DisconnectionError, PoolTimeoutError, OSError) as e:
            logfire.error("Database unreachable", operation=func.__qualname__, error=str(e))
            raise StoreUnavailableError(str(e)) from e
        except DBAPIError as e:
            if not e.connection_invalidated:
                raise
            logfire.error("Database connection lost", operation=func.__qualname__, error=str(e))
            raise StoreUnavailableError(str(e)) from e

    return wrapper
