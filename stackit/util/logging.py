"""Logging configuration for the server process."""

import logging
import sys

from stackit.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for uvicorn and third-party libraries.

    Application code logs through logfire; this only sets levels and the
    format for everything else.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Pool checkouts are noisy at DEBUG
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("stackit").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
