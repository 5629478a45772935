"""Token extraction and role gating through a throwaway FastAPI app."""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from shared.api.errors import register_exception_handlers
from shared.auth.dependencies import authorize
from shared.auth.revocation import get_revocation_list
from shared.auth.roles import Role
from shared.auth.tokens import Principal


@pytest.fixture()
def client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/anyone")
    async def anyone(principal: Principal = Depends(authorize())):
        return {"id": principal.id, "role": principal.role}

    @app.get("/sellers")
    async def sellers(principal: Principal = Depends(authorize(Role.SELLER, Role.ADMIN))):
        return {"id": principal.id}

    return TestClient(app)


class TestTokenExtraction:
    def test_missing_token_is_unauthorized(self, client):
        response = client.get("/anyone")
        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized"}

    def test_bearer_header_is_accepted(self, client, auth_headers):
        response = client.get("/anyone", headers=auth_headers(user_id="u-1"))
        assert response.status_code == 200
        assert response.json() == {"id": "u-1", "role": "user"}

    def test_cookie_is_accepted(self, client, make_token):
        client.cookies.set("token", make_token(user_id="u-2").token)
        response = client.get("/anyone")
        assert response.status_code == 200
        assert response.json()["id"] == "u-2"

    def test_non_bearer_scheme_is_ignored(self, client, make_token):
        response = client.get("/anyone", headers={"Authorization": f"Basic {make_token().token}"})
        assert response.status_code == 401

    def test_invalid_token_is_unauthorized(self, client):
        response = client.get("/anyone", headers={"Authorization": "Bearer nonsense"})
        assert response.status_code == 401

    def test_revoked_token_is_unauthorized(self, client, make_token):
        issued = make_token(user_id="u-3")
        get_revocation_list().revoke(issued.token_id, issued.expires_at)

        response = client.get("/anyone", headers={"Authorization": f"Bearer {issued.token}"})
        assert response.status_code == 401


class TestRoleGate:
    def test_allowed_role_passes(self, client, auth_headers):
        assert client.get("/sellers", headers=auth_headers(role="seller")).status_code == 200
        assert client.get("/sellers", headers=auth_headers(role="admin")).status_code == 200

    def test_other_role_is_forbidden(self, client, auth_headers):
        response = client.get("/sellers", headers=auth_headers(role="user"))
        assert response.status_code == 403
        assert response.json() == {"message": "Forbidden: insufficient permissions"}
