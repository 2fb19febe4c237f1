import unittest
from types import SimpleNamespace as Obj
from unittest.mock import patch
from fastapi.testclient import TestClient

from main import app
from core.database import get_db
from core.exceptions import AuthException
from auth.services.auth_service import get_current_user


class AuthRouterTests(unittest.TestCase):
    def setUp(self):
        def _fake_db():
            yield object()
        app.dependency_overrides[get_db] = _fake_db
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        app.dependency_overrides.pop(get_current_user, None)

    def test_login_missing_fields_400(self):
        resp = self.client.post("/api/auth/login", json={"username": "admin"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Please provide username and password")

    @patch("auth.routes.auth_router.auth_service.login")
    def test_login_ok(self, mock_login):
        mock_login.return_value = (
            Obj(id=1, username="admin", name="Administrator", email="admin@flow3.com", role="admin"),
            "tok",
        )
        resp = self.client.post("/api/auth/login", json={"username": "admin", "password": "123456"})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["data"]["token"], "tok")
        self.assertEqual(resp.json()["data"]["role"], "admin")

    @patch("auth.routes.auth_router.auth_service.login")
    def test_login_bad_credentials_401(self, mock_login):
        mock_login.side_effect = AuthException("Invalid credentials")
        resp = self.client.post("/api/auth/login", json={"username": "admin", "password": "x"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"success": False, "error": "Invalid credentials"})

    def test_me(self):
        app.dependency_overrides[get_current_user] = lambda: Obj(
            id=4, username="sara", name="Sara", email=None, role="staff"
        )
        resp = self.client.get("/api/auth/me")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["data"], {"id": 4, "username": "sara", "name": "Sara",
                                               "email": None, "role": "staff"})

    def test_health(self):
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)

    def test_login_without_body_400(self):
        resp = self.client.post("/api/auth/login")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Please provide username and password")
