import unittest
from unittest.mock import MagicMock

from bson import ObjectId
from fastapi.testclient import TestClient

from mtsblog.api.deps import get_auth_service
from mtsblog.core.exceptions import StorageError
from mtsblog.core.security import PasswordHasher
from mtsblog.main import app
from mtsblog.repositories import UserRepository
from mtsblog.services import AuthService
from tests.fakes import InMemoryUserRepository


class TestUsersApi(unittest.TestCase):
    def setUp(self):
        self.users = InMemoryUserRepository()
        self.service = AuthService(self.users, PasswordHasher(rounds=4))
        app.dependency_overrides[get_auth_service] = lambda: self.service
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def _register(self, **body):
        payload = {"name": "Ann", "email": "ann@x.com", "password": "secret"}
        payload.update(body)
        return self.client.post("/users", json=payload)

    def test_register_and_login_scenario(self):
        resp = self._register()
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["message"], "User registered successfully")
        self.assertTrue(ObjectId.is_valid(body["userId"]))

        resp = self.client.post("/login", json={"email": "ann@x.com", "password": "secret"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {
                "message": "Login successful",
                "user": {"name": "Ann", "email": "ann@x.com", "role": None},
            },
        )

        resp = self.client.post("/login", json={"email": "ann@x.com", "password": "wrong"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["error"], "IncorrectPassword")

        resp = self.client.post("/login", json={"email": "nobody@x.com", "password": "x"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["error"], "UserNotFound")

    def test_register_missing_fields(self):
        resp = self.client.post("/users", json={"name": "Ann", "email": "ann@x.com"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "MissingField")

        resp = self.client.post("/users")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "MissingField")

    def test_register_duplicate(self):
        self._register()
        resp = self._register(name="Annie")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "DuplicateUser")

    def test_register_invalid_role(self):
        resp = self._register(role="superuser")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "InvalidRole")

    def test_register_overlong_password(self):
        resp = self._register(password="p" * 80)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "BadRequest")
        self.assertFalse(self.users.exists("ann@x.com"))

    def test_malformed_bodies_are_bad_requests(self):
        resp = self.client.post(
            "/users",
            content="name=Ann",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "BadRequest")

        resp = self._register(name=42)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "BadRequest")

        resp = self._register(is_admin=True)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "BadRequest")

    def test_login_missing_fields(self):
        resp = self.client.post("/login", json={"email": "ann@x.com"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "MissingField")

    def test_list_users_hides_passwords(self):
        self._register()
        self._register(name="Bob", email="bob@x.com", role="admin")

        resp = self.client.get("/users")

        self.assertEqual(resp.status_code, 200)
        users = resp.json()
        self.assertEqual(len(users), 2)
        for user in users:
            self.assertNotIn("password", user)
            self.assertNotIn("password_hash", user)
            self.assertTrue(ObjectId.is_valid(user["_id"]))

    def test_list_users_with_unknown_stored_role(self):
        mock_db = MagicMock()
        mock_db["users"].find.return_value = [
            {"_id": ObjectId(), "name": "Ann", "email": "ann@x.com", "role": "admin"},
            {"_id": ObjectId(), "name": "Eve", "email": "eve@x.com", "role": "editor"},
        ]
        app.dependency_overrides[get_auth_service] = lambda: AuthService(
            UserRepository(mock_db), PasswordHasher(rounds=4)
        )

        resp = self.client.get("/users")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual([u["role"] for u in resp.json()], ["admin", None])

    def test_update_role(self):
        user_id = self._register().json()["userId"]

        resp = self.client.put(f"/users/{user_id}/role", json={"role": "admin"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "User role updated"})
        self.assertEqual(self.client.get("/users").json()[0]["role"], "admin")

    def test_update_role_failures(self):
        user_id = self._register().json()["userId"]

        resp = self.client.put(f"/users/{user_id}/role", json={"role": "superuser"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "InvalidRole")

        resp = self.client.put(f"/users/{ObjectId()}/role", json={"role": "admin"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["error"], "UserNotFound")

        resp = self.client.put("/users/not-an-id/role", json={"role": "admin"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "InvalidIdentifier")

    def test_storage_fault_is_generic_500(self):
        users = MagicMock()
        users.list_all.side_effect = StorageError("connection refused to 10.0.0.5")
        app.dependency_overrides[get_auth_service] = lambda: AuthService(
            users, PasswordHasher(rounds=4)
        )

        resp = self.client.get("/users")

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(
            resp.json(),
            {"error": "InternalServerError", "message": "Internal server error"},
        )

    def test_responses_carry_request_id(self):
        resp = self.client.get("/users", headers={"X-Request-ID": "abc123"})
        self.assertEqual(resp.headers["X-Request-ID"], "abc123")


if __name__ == "__main__":
    unittest.main()
