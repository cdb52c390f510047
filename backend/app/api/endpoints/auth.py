from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from backend.app.api.deps import get_current_identity, get_db
from backend.app.api.responses import envelope
from backend.app.core.security import Identity
from backend.app.schemas.user import UserBrief
from backend.services import accounts

router = APIRouter()


# les règles de champs vivent dans le service accounts (messages uniformes)
class RegisterCreate(BaseModel):
    username: str = ""
    password: str = ""
    role: str | None = None


class LoginCreate(BaseModel):
    username: str = ""
    password: str = ""


@router.post("/auth/register", status_code=201)
def register(payload: RegisterCreate, db: Session = Depends(get_db)):
    user = accounts.register(db, payload.username, payload.password, payload.role)
    return envelope(UserBrief.model_validate(user), "User registered successfully")


@router.post("/auth/login")
def login(payload: LoginCreate, db: Session = Depends(get_db)):
    token, user = accounts.login(db, payload.username, payload.password)
    return envelope(
        {"token": token, "user": UserBrief.model_validate(user)},
        "Login successful",
    )


@router.get("/profile")
def profile(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    user = accounts.get_profile(db, identity.user_id)
    return envelope(UserBrief.model_validate(user))
