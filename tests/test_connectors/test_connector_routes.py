"""
Tests for the connector HTTP routes and the app-level error mapping.
"""

import asyncio
import json
from unittest.mock import AsyncMock
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest
from fastapi.testclient import TestClient

from connectors.github import GithubConnector
from connectors.registry import ConnectorRegistry
from connectors.routes import get_registry
from main import create_app


# ── fake GitHub ────────────────────────────────────────────────────────────────


def _github_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/login/oauth/access_token":
        code = json.loads(request.content)["code"]
        if code == "good":
            return httpx.Response(200, json={"access_token": "tok"})
        if code == "expired-token":
            return httpx.Response(200, json={"access_token": "expired"})
        if code == "boom":
            return httpx.Response(500)
        if code == "slow":
            raise httpx.ReadTimeout("timed out", request=request)
        return httpx.Response(200, json={"error": "bad_verification_code"})

    if request.headers["Authorization"] == "token tok":
        return httpx.Response(200, json={"id": 583231, "name": "The Octocat"})
    return httpx.Response(401, json={"message": "Bad credentials"})


@pytest.fixture
def client():
    ConnectorRegistry.reset()
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(_github_handler))
    registry = ConnectorRegistry()
    registry.register(
        GithubConnector(
            AsyncMock(return_value={"clientId": "gh-id", "clientSecret": "gh-secret"}),
            AsyncMock(return_value=5.0),
            http_client=http_client,
        )
    )

    app = create_app()
    app.dependency_overrides[get_registry] = lambda: registry
    yield TestClient(app)
    asyncio.run(http_client.aclose())
    ConnectorRegistry.reset()


class TestMetadataRoutes:
    def test_list_providers(self, client):
        response = client.get("/api/v1/connectors/providers")
        assert response.status_code == 200
        [meta] = response.json()
        assert meta["id"] == "github"
        assert "readme" not in meta

    def test_metadata_includes_docs(self, client):
        response = client.get("/api/v1/connectors/github/metadata")
        assert response.status_code == 200
        assert "GitHub connector" in response.json()["readme"]

    def test_unknown_connector(self, client):
        response = client.get("/api/v1/connectors/gitlab/metadata")
        assert response.status_code == 404
        assert response.json()["code"] == "not_found"


class TestValidateConfigRoute:
    def test_valid(self, client):
        response = client.post(
            "/api/v1/connectors/github/validate-config",
            json={"clientId": "id", "clientSecret": "secret"},
        )
        assert response.status_code == 200
        assert response.json() == {"valid": True}

    def test_invalid(self, client):
        response = client.post(
            "/api/v1/connectors/github/validate-config",
            json={"clientId": 42},
        )
        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "invalid_config"
        assert body["detail"]


class TestAuthorizationUriRoute:
    def test_returns_uri(self, client):
        response = client.get(
            "/api/v1/connectors/github/authorization-uri",
            params={"redirect_uri": "https://host.example/cb", "state": "s t"},
        )
        assert response.status_code == 200
        uri = response.json()["authorization_uri"]
        params = parse_qs(urlsplit(uri).query)
        assert params["client_id"] == ["gh-id"]
        assert params["state"] == ["s t"]

    def test_requires_state(self, client):
        response = client.get(
            "/api/v1/connectors/github/authorization-uri",
            params={"redirect_uri": "https://host.example/cb"},
        )
        assert response.status_code == 422


class TestCallbackRoute:
    def test_success(self, client):
        response = client.get("/api/v1/connectors/github/callback", params={"code": "good"})
        assert response.status_code == 200
        assert response.json() == {"id": "583231", "name": "The Octocat"}

    def test_bad_code(self, client):
        response = client.get("/api/v1/connectors/github/callback", params={"code": "reused"})
        assert response.status_code == 401
        assert response.json()["code"] == "social_auth_code_invalid"

    def test_rejected_token(self, client):
        response = client.get(
            "/api/v1/connectors/github/callback", params={"code": "expired-token"}
        )
        assert response.status_code == 401
        assert response.json()["code"] == "social_access_token_invalid"

    def test_upstream_status_error(self, client):
        response = client.get("/api/v1/connectors/github/callback", params={"code": "boom"})
        assert response.status_code == 502
        assert response.json()["code"] == "upstream_error"

    def test_upstream_timeout(self, client):
        response = client.get("/api/v1/connectors/github/callback", params={"code": "slow"})
        assert response.status_code == 504
        assert response.json()["code"] == "upstream_unreachable"
