"""Logging setup shared by the API process and the command line scripts."""

from __future__ import annotations

import logging

from loyalize.core.config import Settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(format=settings.logging.format, level=settings.log_level)
    # SQL echo is controlled by the database settings, keep the engine logger quiet otherwise
    if not (settings.database.echo or settings.debug):
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


__all__ = ["configure_logging"]
