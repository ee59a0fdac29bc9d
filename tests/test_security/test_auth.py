"""
Tests for authentication and the authorization chain.

Tests cover:
- Login (form and JSON token generation)
- Invalid credentials and disabled accounts
- Token validation and expiration
- Role checks on /api/pets
- Security switch in settings
"""

import pytest
from fastapi.testclient import TestClient
from datetime import timedelta
from types import SimpleNamespace

from database.models import UserORM
from auth import create_access_token, decode_token
from config import settings
from core.exceptions import ForbiddenException
from core.security import Role, has_role, check_predicate


class TestLogin:
    """Tests for login endpoints (POST /auth/token, POST /auth/login)."""

    def test_login_exitoso(
        self,
        client: TestClient,
        owner_admin_user: UserORM
    ):
        """Form login returns a bearer token for the user."""
        response = client.post(
            "/auth/token",
            data={"username": "owneradmin", "password": "password123"}  # form data
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"

        payload = decode_token(data["access_token"])
        assert payload["sub"] == str(owner_admin_user.id)
        assert payload["role"] == "owner_admin"

    def test_login_json(
        self,
        client: TestClient,
        owner_admin_user: UserORM
    ):
        response = client.post(
            "/auth/login",
            json={"username": "owneradmin", "password": "password123"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["user"] == {
            "id": owner_admin_user.id,
            "username": "owneradmin",
            "role": "owner_admin",
            "enabled": True,
        }

    def test_login_credenciales_invalidas(
        self,
        client: TestClient,
        owner_admin_user: UserORM
    ):
        response = client.post(
            "/auth/token",
            data={"username": "owneradmin", "password": "wrong_password"}
        )

        assert response.status_code == 400

    def test_login_usuario_inexistente(self, client: TestClient):
        response = client.post(
            "/auth/login",
            json={"username": "nobody", "password": "password123"}
        )

        assert response.status_code == 400

    def test_login_usuario_deshabilitado(
        self,
        client: TestClient,
        disabled_user: UserORM
    ):
        response = client.post(
            "/auth/token",
            data={"username": "disabled", "password": "password123"}
        )

        assert response.status_code == 403

    def test_login_json_sin_password(self, client: TestClient):
        """Body errors on any route go through the `errors` header handler."""
        response = client.post("/auth/login", json={"username": "owneradmin"})

        assert response.status_code == 400
        assert "password" in response.headers["errors"]


class TestTokenValidation:
    """Tests for bearer token handling on /api/pets."""

    def test_sin_token(self, client: TestClient, pet):
        response = client.get("/api/pets/1")

        assert response.status_code == 401

    def test_sin_token_antes_que_validacion(self, client: TestClient):
        """Authorization runs before the payload is validated."""
        response = client.post("/api/pets/", json={"name": ""})

        assert response.status_code == 401
        assert "errors" not in response.headers

    def test_token_invalido(self, client: TestClient):
        response = client.get(
            "/api/pets/pettypes",
            headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401

    def test_token_expirado(self, client: TestClient, owner_admin_user: UserORM):
        token = create_access_token(
            data={"sub": owner_admin_user.id},
            expires_delta=timedelta(minutes=-1)
        )

        response = client.get(
            "/api/pets/pettypes",
            headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Token expired"

    def test_usuario_inexistente(self, client: TestClient):
        token = create_access_token(data={"sub": 999})

        response = client.get(
            "/api/pets/pettypes",
            headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    def test_usuario_deshabilitado(self, client: TestClient, disabled_user: UserORM):
        token = create_access_token(data={"sub": disabled_user.id})

        response = client.get(
            "/api/pets/pettypes",
            headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401


class TestRoles:
    """Only owner_admin may use /api/pets."""

    def test_vet_admin_rechazado(self, client: TestClient, auth_headers_vet, pet):
        response = client.get("/api/pets/1", headers=auth_headers_vet)

        assert response.status_code == 403

    def test_vet_admin_no_puede_borrar(self, client: TestClient, auth_headers_vet, pet, db_session):
        response = client.delete("/api/pets/1", headers=auth_headers_vet)

        assert response.status_code == 403
        assert db_session.get(type(pet), 1) is not None

    def test_owner_admin_aceptado(self, client: TestClient, auth_headers, pet_types):
        response = client.get("/api/pets/pettypes", headers=auth_headers)

        assert response.status_code == 200

    def test_seguridad_deshabilitada(self, client: TestClient, pet, monkeypatch):
        monkeypatch.setattr(settings, "security_enabled", False)

        response = client.get("/api/pets/1")

        assert response.status_code == 200
        assert response.json()["name"] == "Leo"


class TestRolePredicates:

    def test_has_role(self):
        predicate = has_role(Role.owner_admin)

        assert predicate(SimpleNamespace(role="owner_admin"))
        assert not predicate(SimpleNamespace(role="vet_admin"))
        assert not predicate(object())

    def test_has_role_varios(self):
        predicate = has_role(Role.vet_admin, Role.admin)

        assert predicate(SimpleNamespace(role="admin"))
        assert predicate.__name__ == "has_role(admin, vet_admin)"

    def test_check_predicate_rechaza(self):
        with pytest.raises(ForbiddenException) as exc_info:
            check_predicate(SimpleNamespace(role="vet_admin"), has_role(Role.owner_admin))

        assert exc_info.value.status_code == 403
        assert exc_info.value.details["user_role"] == "vet_admin"

    def test_crear_token_sin_sub(self):
        with pytest.raises(ValueError):
            create_access_token(data={"username": "x"})
