from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

logger = logging.getLogger(__name__)

# backend/app/db/migrate.py -> repo root
ALEMBIC_INI = Path(__file__).resolve().parents[3] / "alembic.ini"


def run_migrations(database_url: str | None = None) -> None:
    """Monte le schéma à `head`. Par défaut sur settings.DATABASE_URL."""
    cfg = Config(str(ALEMBIC_INI))
    cfg.attributes["configure_logger"] = False
    if database_url:
        cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
        cfg.attributes["url_overridden"] = True

    logger.info("Running database migrations")
    command.upgrade(cfg, "head")
