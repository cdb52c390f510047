import os

# doit être en place avant que backend.app.* ne lise ses settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["MIGRATE_ON_STARTUP"] = "false"
os.environ["WEBHOOK_URL"] = ""
os.environ["JWT_SECRET"] = "test-secret"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from backend.app.api.deps import get_db  # noqa: E402
from backend.app.db.base import Base  # noqa: E402
from backend.app.db.models.models_v1 import Item, Supplier, User  # noqa: E402
from backend.app.main import app  # noqa: E402


@pytest.fixture(scope="function")
def engine():
    """
    Base SQLite en mémoire, neuve pour chaque test.

    StaticPool garde une seule connexion : toutes les sessions voient les mêmes données.
    """
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(eng, "connect")
    def _enable_fks(dbapi_conn, _record):
        dbapi_conn.execute("PRAGMA foreign_keys=ON")

    Base.metadata.create_all(bind=eng)
    try:
        yield eng
    finally:
        Base.metadata.drop_all(bind=eng)
        eng.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> Session:
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(engine):
    """Client HTTP dont les requêtes tapent sur l'engine de test."""
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client) -> dict:
    client.post("/api/auth/register", json={"username": "buyer", "password": "secret123"})
    resp = client.post("/api/auth/login", json={"username": "buyer", "password": "secret123"})
    token = resp.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}


# ---------- helpers données de référence (tests service) ----------
@pytest.fixture
def buyer(db_session) -> User:
    u = User(username="buyer", password="not-a-real-hash", role="user")
    db_session.add(u)
    db_session.commit()
    return u


@pytest.fixture
def acme(db_session) -> Supplier:
    s = Supplier(name="Acme", email="orders@acme.test", address="1 Industrial Way")
    db_session.add(s)
    db_session.commit()
    return s


@pytest.fixture
def make_item(db_session):
    def _make(name: str = "Bolt", stock: int = 10, price: float = 2.5) -> Item:
        item = Item(name=name, stock=stock, price=price)
        db_session.add(item)
        db_session.commit()
        return item

    return _make
