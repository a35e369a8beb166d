# src/civicos/scripts/migrate.py
from __future__ import annotations

import logging
import os

from alembic import command
from alembic.config import Config

from civicos.core.settings import settings

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "..", "..", "migrations")
)


def build_config(url: str | None = None) -> Config:
    """Return an Alembic config pointed at the bundled migrations."""
    cfg = Config(os.path.join(MIGRATIONS_DIR, "..", "alembic.ini"))
    cfg.set_main_option("script_location", MIGRATIONS_DIR)
    # Sync driver URL for Alembic
    cfg.set_main_option("sqlalchemy.url", url or settings.database_url_sync)
    return cfg


def run_upgrade_head() -> None:
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Upgrading database schema to head")
    command.upgrade(build_config(), "head")


if __name__ == "__main__":
    run_upgrade_head()
