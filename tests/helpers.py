import unittest
from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient
from sqlmodel import SQLModel

from backend.app.core.database import engine
from backend.app.main import app


class FakeClock:
    """Settable UTC clock for token and registry tests."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class ApiTestCase(unittest.TestCase):
    """
    Starts the app (lifespan included) on a freshly emptied database, so every
    test gets the seeded admin, a new token service and an empty registry.
    """

    def setUp(self):
        SQLModel.metadata.drop_all(engine)
        self.client = TestClient(app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)
        self.addCleanup(app.dependency_overrides.clear)

    def register(self, username, password, role):
        return self.client.post(
            "/api/v1/auth/register",
            json={"username": username, "password": password, "role": role},
        )

    def login(self, username, password):
        return self.client.post(
            "/api/v1/auth/login",
            json={"username": username, "password": password},
        )

    def token_for(self, username, password, role=None):
        if role is not None:
            self.assertEqual(self.register(username, password, role).status_code, 201)
        response = self.login(username, password)
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()["token"]

    def admin_token(self):
        return self.token_for("admin", "Admin@123")

    @staticmethod
    def bearer(token):
        return {"Authorization": f"Bearer {token}"}
