# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["INTRANET_DATABASE_URL"] = "sqlite:///./test.db"
os.environ["INTRANET_RUN_BOOTSTRAP_ON_STARTUP"] = "false"

from intranet.database import get_db
from intranet.main import app
from intranet.models import Base
from intranet.rbac.roles import DEFAULT_ADMIN_ID
from intranet.schemas.user import UserDocument
from intranet.security import get_password_hash
from intranet.services import auth_service, seed_service
from intranet.services.access_service import AccessContext, build_access_context
from intranet.store import ChangeFeed, SqlDocumentStore
from intranet.store.collections import USERS

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

OFFICER_PASSWORD = "dienst123"  # noqa: S105


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def feed() -> ChangeFeed:
    """A change feed private to the test."""
    return ChangeFeed()


@pytest.fixture
def store(db_session, feed) -> SqlDocumentStore:
    return SqlDocumentStore(db_session, feed)


@pytest.fixture
def seeded_store(store) -> SqlDocumentStore:
    """Store with default roles, the default administrator and laws."""
    seed_service.run_bootstrap(store)
    return store


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _create_user(
    store,
    user_id: str = "officer-1",
    badge_number: str = "Falke 12/07",
    role: str = "ED",
    password: str | None = OFFICER_PASSWORD,
    plain_password: str | None = None,
    **fields,
) -> UserDocument:
    """Helper to persist a user document."""
    data = {
        "firstName": "Anna",
        "lastName": "Schmidt",
        "rank": "Polizeimeisterin",
        "badgeNumber": badge_number,
        "role": role,
        "specialRoles": [],
        "isAdmin": False,
        "permissions": [],
        "isLocked": False,
        **fields,
    }
    if password:
        data["passwordHash"] = get_password_hash(password)
    if plain_password:
        data["password"] = plain_password
    store.create_or_replace(USERS, user_id, data)
    return UserDocument.model_validate({**data, "id": user_id})


@pytest.fixture
def officer(seeded_store) -> UserDocument:
    """A patrol officer (role ED) with a password."""
    return _create_user(seeded_store)


@pytest.fixture
def recruit(seeded_store) -> UserDocument:
    """A recruit (role AW) with a password."""
    return _create_user(
        seeded_store,
        user_id="recruit-1",
        badge_number="Falke 12/31",
        role="AW",
        firstName="Jonas",
        lastName="Becker",
        rank="Polizeimeister-Anwärter",
    )


def login(client, badge_number: str, password: str):
    return client.post(
        "/api/v1/auth/login",
        json={"badgeNumber": badge_number, "password": password},
    )


@pytest.fixture
def admin_client(client, seeded_store):
    """Client logged in as the default administrator (claims the account)."""
    response = login(client, "Adler 51/01", "adminpassword123")
    assert response.status_code == 200
    return client


@pytest.fixture
def officer_client(client, officer):
    """Client logged in as a patrol officer."""
    response = login(client, officer.badge_number, OFFICER_PASSWORD)
    assert response.status_code == 200
    return client


@pytest.fixture
def recruit_client(client, recruit):
    """Client logged in as a recruit."""
    response = login(client, recruit.badge_number, OFFICER_PASSWORD)
    assert response.status_code == 200
    return client


@pytest.fixture
def make_user(store):
    """Factory persisting user documents in the test store."""

    def factory(**kwargs) -> UserDocument:
        return _create_user(store, **kwargs)

    return factory


@pytest.fixture
def chief(seeded_store) -> UserDocument:
    """A shift supervisor (role DSL) who manages users but is no administrator."""
    return _create_user(
        seeded_store,
        user_id="dsl-1",
        badge_number="Adler 12/02",
        role="DSL",
        firstName="Petra",
        lastName="Krause",
        rank="Polizeihauptkommissarin",
    )


@pytest.fixture
def chief_client(client, chief):
    """Client logged in as a shift supervisor."""
    response = login(client, chief.badge_number, OFFICER_PASSWORD)
    assert response.status_code == 200
    return client


@pytest.fixture
def admin_actor(seeded_store) -> AccessContext:
    """Access context of the default administrator."""
    return build_access_context(
        seeded_store, auth_service.get_user_by_id(seeded_store, DEFAULT_ADMIN_ID)
    )


@pytest.fixture
def chief_actor(seeded_store, chief) -> AccessContext:
    """Access context of the shift supervisor."""
    return build_access_context(seeded_store, chief)
