"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from spendwise.api.main import create_app
from spendwise.api.dependencies import get_today
from spendwise.infrastructure.database.models import Base
from spendwise.infrastructure.database.session import get_db


# Test database: one shared in-memory connection
TEST_DATABASE_URL = "sqlite://"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Friday; with Sunday-start weeks the current week is 2024-03-10 .. 2024-03-16
TODAY = date(2024, 3, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session, today: date) -> TestClient:
    """Create FastAPI test client with test database and a fixed today"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: today
    return TestClient(app)


@pytest.fixture
def user_headers() -> dict:
    return {"X-User-ID": "user_owner"}


@pytest.fixture
def workspace(client: TestClient, user_headers: dict) -> dict:
    """Workspace with a 1300 weekly and 3100 monthly budget"""
    response = client.post(
        "/v1/workspaces",
        json={"weekly_budget": 1300, "monthly_budget": 3100, "currency": "ils", "language": "en"},
        headers=user_headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def add_purchase(client: TestClient, user_headers: dict) -> Callable[..., dict]:
    """Log a purchase through the API and return its JSON"""

    def _add(amount: float, day: date, description: str = "") -> dict:
        response = client.post(
            "/v1/purchases",
            json={"amount": amount, "date": day.isoformat(), "description": description},
            headers=user_headers,
        )
        assert response.status_code == 201
        return response.json()

    return _add
