"""Logging configuration for the application."""

import logging
import sys

from folio.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for third-party libraries.

    Application events go through logfire; this only sets levels and the
    format for loggers of libraries such as uvicorn and SQLAlchemy.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Keep noisy libraries at WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger("folio").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
