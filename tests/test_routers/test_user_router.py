import unittest
from types import SimpleNamespace as Obj
from unittest.mock import patch
from fastapi.testclient import TestClient

from main import app
from core.database import get_db
from core.exceptions import ConflictException
from auth.services.auth_service import get_current_user


def _user(user_id=2, username="sara", role="staff"):
    return Obj(id=user_id, username=username, email=None, name="Sara", role=role,
               created_at=None, updated_at=None, password_hash="secret-hash")


class UserRouterTests(unittest.TestCase):
    def setUp(self):
        def _fake_db():
            yield object()
        app.dependency_overrides[get_db] = _fake_db
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        app.dependency_overrides.pop(get_current_user, None)

    def _as(self, role):
        app.dependency_overrides[get_current_user] = lambda: Obj(id=1, role=role)

    @patch("user.router.service.get_users")
    def test_admin_lists_users_without_password(self, mock_list):
        self._as("admin")
        mock_list.return_value = [_user()]
        resp = self.client.get("/api/users")
        self.assertEqual(resp.status_code, 200, resp.text)
        row = resp.json()["data"][0]
        self.assertEqual(row["username"], "sara")
        self.assertNotIn("password", row)
        self.assertNotIn("password_hash", row)

    def test_management_forbidden(self):
        self._as("management")
        resp = self.client.get("/api/users")
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["error"], "Not authorized as admin")

    def test_bad_role_400(self):
        self._as("admin")
        resp = self.client.post("/api/users", json={"username": "x", "password": "y", "role": "owner"})
        self.assertEqual(resp.status_code, 400)

    @patch("user.router.service.create_user")
    def test_create_201(self, mock_create):
        self._as("admin")
        mock_create.return_value = _user(3, "new", "management")
        resp = self.client.post("/api/users", json={"username": "new", "password": "pw", "role": "management"})
        self.assertEqual(resp.status_code, 201, resp.text)
        self.assertEqual(resp.json()["data"]["role"], "management")

    @patch("user.router.service.delete_user")
    def test_delete_admin_400(self, mock_delete):
        self._as("admin")
        mock_delete.side_effect = ConflictException("Cannot delete default admin account")
        resp = self.client.delete("/api/users/1")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Cannot delete default admin account")

    @patch("user.router.service.create_user")
    def test_create_blank_credentials_400(self, mock_create):
        self._as("admin")
        resp = self.client.post("/api/users", json={"username": "", "password": "", "role": "staff"})
        self.assertEqual(resp.status_code, 400)
        self.assertFalse(resp.json()["success"])
        mock_create.assert_not_called()

    @patch("user.router.service.update_user")
    def test_update_blank_username_400(self, mock_update):
        self._as("admin")
        resp = self.client.put("/api/users/1", json={"username": ""})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("username", resp.json()["error"])
        mock_update.assert_not_called()
