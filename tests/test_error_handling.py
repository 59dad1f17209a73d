"""
Tests for the error envelope: status codes, messages and what is never leaked.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from core.security import INVALID_TOKEN_MESSAGE, MISSING_TOKEN_MESSAGE
from services.food_service import FoodService
from test_fixtures import auth_headers, expired_token, make_food, make_user


class TestUnauthorized:
    def test_missing_header(self, client):
        response = client.get("/api/user/profile")

        assert response.status_code == 401
        body = response.json()
        assert body["success"] is False
        assert body["error"] == MISSING_TOKEN_MESSAGE
        assert body["code"] == "UNAUTHORIZED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.parametrize("placeholder", ["null", "undefined"])
    def test_placeholder_tokens(self, client, placeholder):
        response = client.get(
            "/api/user/profile", headers={"Authorization": f"Bearer {placeholder}"}
        )
        assert response.status_code == 401
        assert response.json()["error"] == MISSING_TOKEN_MESSAGE

    def test_non_bearer_scheme(self, client):
        response = client.get("/api/user/profile", headers={"Authorization": "Token abc"})
        assert response.status_code == 401

    def test_expired_token(self, client, db_session):
        user = make_user(db_session)
        response = client.get(
            "/api/user/profile",
            headers={"Authorization": f"Bearer {expired_token(user)}"},
        )

        assert response.status_code == 401
        assert response.json()["error"] == INVALID_TOKEN_MESSAGE

    def test_tampered_token(self, client, db_session):
        user = make_user(db_session)
        token = auth_headers(user)["Authorization"][len("Bearer "):]
        tampered = token[:-1] + ("A" if token[-1] != "A" else "B")

        response = client.get(
            "/api/user/profile", headers={"Authorization": f"Bearer {tampered}"}
        )

        assert response.status_code == 401

    def test_public_routes_need_no_token(self, client, db_session):
        food = make_food(db_session)
        assert client.get(f"/api/foods/{food.food_id}").status_code == 200


class TestValidation:
    def test_malformed_json_is_400(self, client):
        response = client.post(
            "/api/register",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_non_integer_path_parameter_is_400(self, client):
        response = client.get("/api/foods/abc")
        assert response.status_code == 400
        assert "food_id" in response.json()["error"]

    def test_error_envelope_has_timestamp(self, client):
        body = client.post("/api/login", json={}).json()
        assert set(body) >= {"success", "error", "code", "timestamp"}
        assert isinstance(body["error"], str)


def test_unknown_route_is_404(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_unexpected_error_is_500_without_detail(engine, monkeypatch):
    from main import app

    def explode(db, food_id):
        raise RuntimeError("password=hunter2 host=db.internal")

    monkeypatch.setattr(FoodService, "get_food", staticmethod(explode))
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/api/foods/1")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "An unexpected error occurred"
    assert "hunter2" not in response.text


class TestSubmittedValuesStayPrivate:
    def test_registration_missing_field_does_not_echo_password(self, client, caplog):
        caplog.set_level(logging.INFO)
        body = {
            "email": "valentina@example.com",
            "password": "Sup3rSecret!",
            "first_name": "Valentina",
            "last_name": "Mora",
        }

        response = client.post("/api/register", json=body)

        assert response.status_code == 400
        assert "nickname" in response.json()["error"]
        assert "Sup3rSecret!" not in response.text
        assert "Sup3rSecret!" not in caplog.text

    def test_login_missing_identifier_does_not_echo_password(self, client, caplog):
        caplog.set_level(logging.INFO)

        response = client.post("/api/login", json={"password": "Sup3rSecret!"})

        assert response.status_code == 400
        assert "Sup3rSecret!" not in response.text
        assert "Sup3rSecret!" not in caplog.text
        assert all("input" not in err for err in response.json()["details"])
