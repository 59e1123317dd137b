#!/usr/bin/env python3
"""Upgrade the database schema to the latest Alembic revision."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from blogger.config import Settings
from blogger.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(revision: str = "head") -> int:
    """Apply migrations up to ``revision``.

    Args:
        revision: Target revision, ``head`` by default

    Returns:
        Process exit code
    """
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The container must not start on a half-migrated schema
            raise

    logfire.info("Database migrations applied", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
