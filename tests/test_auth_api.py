"""API tests for /register, /login, /hash_demo and token-protected routes."""

import unittest

from app.core.security import decode_access_token, generate_hash
from tests.helpers import ApiTestCase, register_body


class TestRegisterEndpoint(ApiTestCase):
    def test_register_returns_token_and_id(self) -> None:
        response = self.client.post("/register", json=register_body())
        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(set(data), {"accessToken", "id"})
        payload = decode_access_token(data["accessToken"])
        self.assertEqual(payload["id"], data["id"])
        self.assertEqual(payload["role"], 3)

    def test_missing_password(self) -> None:
        body = register_body()
        del body["password"]
        response = self.client.post("/register", json=body)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json(),
            {"message": "Invalid or missing password - please refer to documentation"},
        )

    def test_field_messages(self) -> None:
        cases = [
            ({"email": "no-at-sign"}, "Invalid or missing email - please refer to documentation"),
            ({"firstname": ""}, "Missing required information"),
            ({"phone": "12345"}, "Invalid or missing phone number - please refer to documentation"),
            ({"password": "short1A"}, "Invalid or missing password - please refer to documentation"),
            ({"role": "0"}, "Invalid or missing role - please refer to documentation"),
        ]
        for overrides, message in cases:
            with self.subTest(overrides=overrides):
                response = self.client.post("/register", json=register_body(**overrides))
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()["message"], message)

    def test_duplicate_username_and_email(self) -> None:
        self.register()
        response = self.client.post("/register", json=register_body(email="c@d.com"))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "Username exists"})

        response = self.client.post("/register", json=register_body(username="cd2"))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "Email exists"})

    def test_non_object_body_is_malformed(self) -> None:
        response = self.client.post(
            "/register",
            content="not json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "malformed JSON in parameters"})


class TestLoginEndpoint(ApiTestCase):
    def test_register_then_login_round_trip(self) -> None:
        registered = self.register()
        response = self.client.post("/login", json={"email": "a@b.com", "password": "Abcdefg1"})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(
            data["user"],
            {"id": registered["id"], "email": "a@b.com", "name": "A B", "role": 3},
        )
        payload = decode_access_token(data["accessToken"])
        self.assertEqual(payload["id"], registered["id"])
        self.assertEqual(payload["role"], 3)
        self.assertEqual(payload["name"], "A")

    def test_missing_information(self) -> None:
        response = self.client.post("/login", json={"email": "a@b.com"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "Missing required information"})

    def test_wrong_password_matches_unknown_email(self) -> None:
        self.register()
        wrong_password = self.client.post("/login", json={"email": "a@b.com", "password": "Abcdefg9"})
        unknown_email = self.client.post("/login", json={"email": "z@b.com", "password": "Abcdefg1"})
        self.assertEqual(wrong_password.status_code, 400)
        self.assertEqual(wrong_password.status_code, unknown_email.status_code)
        self.assertEqual(wrong_password.json(), {"message": "Invalid Credentials"})
        self.assertEqual(wrong_password.json(), unknown_email.json())


class TestHashDemo(ApiTestCase):
    def test_hashes_fixed_password(self) -> None:
        response = self.client.get("/hash_demo")
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["salted_hash"], generate_hash("password12345", data["salt"]))
        self.assertEqual(data["unsalted_hash"], generate_hash("password12345", ""))


class TestTokenCheck(ApiTestCase):
    def test_missing_token(self) -> None:
        response = self.client.get("/jwt_test")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"message": "Auth token is not supplied"})

    def test_invalid_token(self) -> None:
        response = self.client.get("/jwt_test", headers={"Authorization": "Bearer not.a.jwt"})
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json(), {"message": "Token is not valid"})

    def test_valid_bearer_token(self) -> None:
        response = self.client.get("/jwt_test", headers=self.auth_headers())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Your token is valid and your role is: 3"})

    def test_legacy_access_token_header(self) -> None:
        token = self.register()["accessToken"]
        response = self.client.get("/jwt_test", headers={"x-access-token": token})
        self.assertEqual(response.status_code, 200)


class TestHealth(ApiTestCase):
    def test_reports_connected_database(self) -> None:
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["database"], "connected")


if __name__ == "__main__":
    unittest.main()
