#!/usr/bin/env python3
"""Apply StackIt database migrations, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from stackit.config import Settings
from stackit.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database to the given revision."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations", revision=revision)
        command.upgrade(Config("alembic.ini"), revision)
        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Never start the API on a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
