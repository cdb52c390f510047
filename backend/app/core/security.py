from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from backend.app.core.config import settings
from backend.app.core.errors import Unauthorized

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, decoded from a bearer token."""

    user_id: int
    username: str
    role: str


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)


def create_access_token(user: Any, now: datetime | None = None) -> str:
    """
    Signed HS256 token carrying user_id/username/role.

    `now` only shifts the issue time (tests use it to forge old tokens).
    """
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "user_id": int(user.id),
        "username": user.username,
        "role": user.role,
        "exp": issued_at + timedelta(hours=settings.TOKEN_TTL_HOURS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Identity:
    try:
        # seul l'algorithme HMAC configuré est accepté
        claims = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise Unauthorized("Invalid or expired token")

    user_id = claims.get("user_id")
    username = claims.get("username")
    role = claims.get("role")
    if (
        not isinstance(user_id, int)
        or isinstance(user_id, bool)
        or not isinstance(username, str)
        or not isinstance(role, str)
    ):
        raise Unauthorized("Invalid token claims")

    return Identity(user_id=user_id, username=username, role=role)
