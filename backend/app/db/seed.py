from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.app.core.config import settings
from backend.app.core.logging import configure_logging
from backend.app.core.security import hash_password
from backend.app.db.models.models_v1 import User
from backend.app.db.session import SessionLocal

logger = logging.getLogger(__name__)


def seed_admin(db: Session, username: str, password: str) -> User:
    """Crée le compte admin une seule fois ; un username existant n'est pas touché."""
    user = db.scalar(select(User).where(User.username == username))
    if user:
        return user

    user = User(username=username, password=hash_password(password), role="admin")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def run_seed():
    if not settings.ADMIN_PASSWORD:
        raise SystemExit("ADMIN_PASSWORD must be set to seed the admin user")

    db = SessionLocal()
    try:
        user = seed_admin(db, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
        logger.info("SEED OK: user=%s role=%s", user.username, user.role)
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging()
    run_seed()
