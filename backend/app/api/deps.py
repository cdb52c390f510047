from __future__ import annotations

from typing import Generator

from fastapi import Header

from backend.app.core.errors import Unauthorized
from backend.app.core.security import Identity, decode_access_token
from backend.app.db.session import SessionLocal


def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_identity(authorization: str | None = Header(default=None)) -> Identity:
    """
    Garde Bearer pour les routes protégées.

    L'identité décodée est passée à l'endpoint comme simple valeur.
    """
    if not authorization:
        raise Unauthorized("Authorization header is required")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise Unauthorized("Invalid authorization format. Use: Bearer <token>")

    return decode_access_token(parts[1])
