#!/usr/bin/env python3
"""Apply Alembic migrations for the Atrium schema."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from atrium.config import Settings
from atrium.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database to ``revision`` and report failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        with logfire.span("run_migrations", revision=revision):
            alembic_cfg = Config("alembic.ini")
            command.upgrade(alembic_cfg, revision)

        logfire.info("Database migrations completed", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
