import os
import sys
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker


# Ensure `import backend.app...` works regardless of where pytest is run from.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Must be set before anything imports backend.app.config.
os.environ["DISABLE_DOTENV"] = "1"
os.environ.setdefault("SECRET_KEY", "test-secret")


@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("db") / "test.sqlite3"


@pytest.fixture()
def app(test_db_path: Path) -> FastAPI:
    """
    Create a FastAPI app wired to a temporary SQLite DB.

    The routers and exception handlers are the production ones; only the
    engine/session factory are swapped and the schema recreated per test.
    """
    from backend.app import database as db

    engine = create_engine(
        f"sqlite+pysqlite:///{test_db_path}",
        connect_args={"check_same_thread": False},
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    # Patch the shared database module so router dependencies use the test DB.
    db.engine = engine
    db.SessionLocal = TestingSessionLocal

    # Import models so Base metadata is populated, then create tables.
    from backend.app import models  # noqa: F401

    db.Base.metadata.drop_all(bind=engine)
    db.Base.metadata.create_all(bind=engine)

    from backend.app.api import admin as admin_api
    from backend.app.api import application as application_api
    from backend.app.api import auth as auth_api
    from backend.app.api import employer as employer_api
    from backend.app.api import job as job_api
    from backend.app.api import profile as profile_api
    from backend.app.utils.error_handlers import register_exception_handlers

    fastapi_app = FastAPI()
    fastapi_app.include_router(auth_api.router)
    fastapi_app.include_router(job_api.router)
    fastapi_app.include_router(employer_api.router)
    fastapi_app.include_router(application_api.router)
    fastapi_app.include_router(profile_api.router)
    fastapi_app.include_router(admin_api.router)
    register_exception_handlers(fastapi_app)

    yield fastapi_app

    engine.dispose()


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def db_session(app: FastAPI):
    """
    Direct SQLAlchemy session bound to the same temporary SQLite DB used by the test app.
    """
    from backend.app import database

    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


# -------------------- helpers shared by the API tests --------------------

def signup(client, *, email: str, role: str, name: str = "Test User", password: str = "Testpass123!", **extra):
    return client.post(
        "/auth/signup",
        json={"email": email, "password": password, "role": role, "name": name, **extra},
    )


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def make_user(client, db_session):
    """Sign up (or, for ADMIN, insert) a user and return (user_json, auth_headers)."""
    from backend.app.models.user import User
    from backend.app.utils.jwt import create_access_token
    from backend.app.utils.security import hash_password

    def _make(email: str, role: str = "SEEKER", **extra):
        if role == "ADMIN":
            admin = User(name=extra.get("name", "Admin"), email=email, password=hash_password("Adminpass1!"), role="ADMIN")
            db_session.add(admin)
            db_session.commit()
            token = create_access_token({"sub": admin.id, "role": "ADMIN"})
            return {"id": admin.id, "email": email, "role": "ADMIN"}, auth_headers(token)

        r = signup(client, email=email, role=role, **extra)
        assert r.status_code == 200, r.text
        data = r.json()
        return data["user"], auth_headers(data["token"])

    return _make


@pytest.fixture()
def make_job(client):
    def _make(headers: dict, **fields):
        body = {
            "title": "Backend Engineer",
            "description": "Build and run our public APIs.",
            "location": "Remote",
            **fields,
        }
        r = client.post("/jobs", json=body, headers=headers)
        assert r.status_code == 201, r.text
        return r.json()

    return _make
