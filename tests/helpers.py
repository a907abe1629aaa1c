"""Shared fixtures: an in-memory SQLite catalog and a TestClient wired to it."""

import unittest
from collections.abc import Generator
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.main import app
from app.models import Base


def register_body(**overrides: Any) -> dict[str, Any]:
    """A registration body that passes every check."""
    body: dict[str, Any] = {
        "firstname": "A",
        "lastname": "B",
        "username": "ab1",
        "email": "a@b.com",
        "password": "Abcdefg1",
        "role": "3",
        "phone": "1234567890",
    }
    body.update(overrides)
    return body


def book_body(**overrides: Any) -> dict[str, Any]:
    """An add-book body that passes every check."""
    body: dict[str, Any] = {
        "ISBN": "9780439554930",
        "title": "Harry Potter and the Philosopher's Stone",
        "author": "J.K. Rowling",
        "publicationYear": 1997,
        "imageSmallURL": "https://images.example.com/small/hp1.jpg",
        "imageLargeURL": "https://images.example.com/large/hp1.jpg",
        "totalRatings": 10,
        "oneStar": 1,
        "twoStar": 1,
        "threeStar": 2,
        "fourStar": 2,
        "fiveStar": 4,
    }
    body.update(overrides)
    return body


class DatabaseTestCase(unittest.TestCase):
    """Fresh schema per test in a single shared in-memory SQLite connection."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.db: Session = self.SessionLocal()

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db yields test sessions."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        super().tearDown()

    def register(self, **overrides: Any) -> dict[str, Any]:
        response = self.client.post("/register", json=register_body(**overrides))
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def auth_headers(self) -> dict[str, str]:
        token = self.register()["accessToken"]
        return {"Authorization": f"Bearer {token}"}
