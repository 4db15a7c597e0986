"""Tests for health, banner and cross-cutting middleware behaviour."""

import pytest
from fastapi import status
from httpx import AsyncClient

from src.api.core.constants import API_VERSION_HEADER
from src.api.core.messages import MessageCode
from tests.utils.assertions import assert_error_response


@pytest.mark.asyncio
async def test_root_banner(public_client: AsyncClient):
    response = await public_client.get("/")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["service"] == "toolkitforseo-api"


@pytest.mark.asyncio
async def test_liveness(public_client: AsyncClient):
    response = await public_client.get("/health/liveness")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "alive", "service": "toolkitforseo-api"}


@pytest.mark.asyncio
async def test_health_check_reports_services(public_client: AsyncClient):
    response = await public_client.get("/health/")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["database"]["connected"] is True
    assert data["services"]["vendors"]["details"]["configured"] == [
        "gemini",
        "openai",
    ]


@pytest.mark.asyncio
async def test_responses_carry_security_and_request_id_headers(
    public_client: AsyncClient,
):
    response = await public_client.get(
        "/v1/tools/catalog", headers={"X-Request-ID": "req-123"}
    )

    assert response.headers["X-Request-ID"] == "req-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert API_VERSION_HEADER in response.headers


@pytest.mark.asyncio
async def test_unknown_route_is_not_found(authorized_client: AsyncClient):
    response = await authorized_client.get("/v1/tools/does-not-exist")

    assert_error_response(response, MessageCode.NOT_FOUND, status.HTTP_404_NOT_FOUND)
