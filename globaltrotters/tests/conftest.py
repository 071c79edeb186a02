"""
Shared fixtures: an in-memory SQLite database per test and a TestClient bound to it.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import globaltrotters.models  # noqa: F401
from globaltrotters.db.base import Base
from globaltrotters.db.session import get_db
from globaltrotters.main import app
from globaltrotters.models.city import Activity, City

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register a user and return the auth payload."""
    def _register(email="traveller@example.com", password="secret123", name="Traveller"):
        response = client.post("/api/auth/register", json={"email": email, "password": password, "name": name})
        assert response.status_code == 201
        return response.json()["data"]
    return _register


@pytest.fixture
def auth_headers(register):
    token = register()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_headers(register):
    token = register(email="other@example.com", name="Other")["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def paris(db_session):
    city = City(name="Paris", country="France", cost_index=1.4, popularity=98)
    db_session.add(city)
    db_session.flush()
    db_session.add_all([
        Activity(name="Louvre Museum", category="Culture", estimated_cost=22, duration=4, city_id=city.id),
        Activity(name="Seine River Cruise", category="Sightseeing", estimated_cost=18, duration=1, city_id=city.id),
    ])
    db_session.commit()
    db_session.refresh(city)
    return city


@pytest.fixture
def louvre(db_session, paris):
    return db_session.query(Activity).filter(Activity.name == "Louvre Museum").one()


@pytest.fixture
def cruise(db_session, paris):
    return db_session.query(Activity).filter(Activity.name == "Seine River Cruise").one()
