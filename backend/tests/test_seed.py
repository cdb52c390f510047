from sqlalchemy import func, select

from backend.app.core.security import verify_password
from backend.app.db.models.models_v1 import User
from backend.app.db.seed import seed_admin


def test_seed_admin_is_idempotent(db_session):
    first = seed_admin(db_session, "admin", "admin-pass")
    again = seed_admin(db_session, "admin", "different-pass")

    assert first.id == again.id
    assert first.role == "admin"
    assert verify_password("admin-pass", again.password)
    assert db_session.execute(select(func.count()).select_from(User)).scalar_one() == 1
