"""
Accounts service.

Inscription, login (émission du token) et profil. Les utilisateurs ne sont
jamais supprimés physiquement ; un compte soft-deleted ne peut ni se
connecter ni résoudre son profil.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.core.errors import BadRequest, Conflict, NotFound, Unauthorized
from backend.app.core.security import create_access_token, hash_password, verify_password
from backend.app.db.models.models_v1 import DEFAULT_ROLE, User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

# même message pour utilisateur inconnu et mauvais mot de passe
INVALID_CREDENTIALS = "Invalid username or password"


def find_user_by_username(db: Session, username: str) -> User | None:
    return db.execute(
        select(User).where(User.username == username).where(User.deleted_at.is_(None))
    ).scalar_one_or_none()


def find_user(db: Session, user_id: int) -> User | None:
    return db.execute(
        select(User).where(User.id == user_id).where(User.deleted_at.is_(None))
    ).scalar_one_or_none()


def username_taken(db: Session, username: str) -> bool:
    # l'index unique couvre aussi les comptes soft-deleted
    return db.execute(select(User.id).where(User.username == username)).first() is not None


def register(db: Session, username: str, password: str, role: str | None = None) -> User:
    if not username or not password:
        raise BadRequest("Username and password are required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise BadRequest(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    if username_taken(db, username):
        raise Conflict("Username already exists")

    user = User(
        username=username,
        password=hash_password(password),
        role=role or DEFAULT_ROLE,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # inscription concurrente : l'index unique a tranché
        db.rollback()
        raise Conflict("Username already exists")
    db.refresh(user)

    logger.info("Registered user id=%s username=%s role=%s", user.id, user.username, user.role)
    return user


def login(db: Session, username: str, password: str) -> tuple[str, User]:
    if not username or not password:
        raise BadRequest("Username and password are required")

    user = find_user_by_username(db, username)
    if not user or not verify_password(password, user.password):
        raise Unauthorized(INVALID_CREDENTIALS)

    return create_access_token(user), user


def get_profile(db: Session, user_id: int) -> User:
    user = find_user(db, user_id)
    if not user:
        raise NotFound("User not found")
    return user
