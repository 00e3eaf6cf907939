#!/usr/bin/env python3
"""Apply the directory schema and seed taxonomy.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f0d9a7b42  # schema only, no seed data
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from resdir.config import Settings
from resdir.util.logging import setup_logging
from resdir.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade to the requested revision, reporting failures to Logfire."""
    settings = Settings()
    revision = argv[1] if len(argv) > 1 else "head"

    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start against a half-migrated schema
            raise

    logfire.info("Database migrated", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
