"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import app


@pytest.fixture
def schema() -> dict:
    """Fetch the generated OpenAPI schema."""
    response = TestClient(app).get("/openapi.json")
    assert response.status_code == 200
    return response.json()


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_title_and_version(self, schema: dict) -> None:
        """OpenAPI schema has correct title, description and version."""
        assert schema["info"]["title"] == "user-registration"
        assert "User Registration API" in schema["info"]["description"]
        assert schema["info"]["version"] == "0.1.0"

    def test_create_user_endpoint_in_schema(self, schema: dict) -> None:
        """POST /v1/users is documented."""
        assert "/v1/users" in schema["paths"]
        create = schema["paths"]["/v1/users"]["post"]
        assert create["summary"] == "Create a new user"
        assert {"201", "422", "503"} <= set(create["responses"])

    def test_create_user_request_schema(self, schema: dict) -> None:
        """CreateUserRequest lists all five registration fields as required."""
        request_schema = schema["components"]["schemas"]["CreateUserRequest"]
        assert set(request_schema["required"]) == {
            "first_name",
            "last_name",
            "email",
            "password",
            "repeat_password",
        }

    def test_user_response_schema_has_no_password(self, schema: dict) -> None:
        """UserResponse never exposes a password field."""
        properties = schema["components"]["schemas"]["UserResponse"]["properties"]
        assert set(properties) == {"id", "first_name", "last_name", "email"}

    def test_health_endpoint_in_schema(self, schema: dict) -> None:
        """GET /health is documented."""
        assert "get" in schema["paths"]["/health"]
