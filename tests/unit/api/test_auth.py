"""Tests for bearer token authentication middleware."""

import pytest
from fastapi import FastAPI, status
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy import select

from src.api.core.messages import MessageCode
from src.database.models import User
from tests.utils.assertions import (
    assert_authentication_error,
    assert_error_response,
    assert_success_response,
)

BASE_URL = "http://test-toolkitforseo-api"


def client_with_header(app: FastAPI, authorization: str) -> AsyncClient:
    return AsyncClient(
        transport=ASGITransport(app=app),
        base_url=BASE_URL,
        headers={"Authorization": authorization},
    )


@pytest.mark.asyncio
async def test_missing_header_is_rejected(public_client: AsyncClient):
    response = await public_client.get("/v1/credits/usage")

    body = assert_authentication_error(response)
    assert "Bearer" in body["details"]["description"]


@pytest.mark.asyncio
@pytest.mark.parametrize("authorization", ["Token abc", "Bearer", "Bearer a b"])
async def test_malformed_header_is_rejected(app: FastAPI, authorization):
    async with client_with_header(app, authorization) as client:
        response = await client.get("/v1/credits/usage")

    assert_authentication_error(response, MessageCode.INVALID_TOKEN)


@pytest.mark.asyncio
async def test_token_signed_with_other_secret_is_rejected(app: FastAPI):
    token = jwt.encode({"sub": "idp|x"}, "wrong-secret", algorithm="HS256")

    async with client_with_header(app, f"Bearer {token}") as client:
        response = await client.get("/v1/credits/usage")

    assert_authentication_error(response, MessageCode.INVALID_TOKEN)


@pytest.mark.asyncio
async def test_first_request_provisions_subscriber_without_subscription(
    app: FastAPI, jwt_token_factory, db_session
):
    token = jwt_token_factory("idp|first-seen", "first@example.com", "First Seen")

    async with client_with_header(app, f"Bearer {token}") as client:
        usage = await client.get("/v1/credits/usage")
        tool = await client.post("/v1/tools/grammar-check", json={"text": "Hi."})

    assert_success_response(usage, data_assertions={"plan": None, "total_used": 0})
    assert_error_response(
        tool, MessageCode.NO_ACTIVE_SUBSCRIPTION, status.HTTP_402_PAYMENT_REQUIRED
    )
    stmt = select(User).where(User.external_id == "idp|first-seen")
    users = (await db_session.execute(stmt)).scalars().all()
    assert len(users) == 1
    assert users[0].email == "first@example.com"


@pytest.mark.asyncio
async def test_public_paths_skip_authentication(public_client: AsyncClient):
    for path in ("/", "/health/liveness", "/v1/tools/catalog"):
        response = await public_client.get(path)
        assert response.status_code == status.HTTP_200_OK, path
