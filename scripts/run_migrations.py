#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from stackit.config import Settings
from stackit.util.observability import configure_logfire


def main() -> int:
    """Upgrade the database schema to head."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations")

        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, "head")

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so deployment stops before the app starts on a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
