"""Global test configuration and fixtures for ToolkitForSEO API."""

import os
from collections.abc import AsyncGenerator
from typing import Callable

# Settings are read at import time, so the environment goes first
TEST_JWT_SECRET = "test-jwt-secret-key-for-testing-only"

os.environ["ENVIRONMENT"] = "TEST"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["AUTH_JWT_SECRET"] = TEST_JWT_SECRET
os.environ["AUTH_JWT_ALGORITHM"] = "HS256"
os.environ["AUTH_JWT_AUDIENCE"] = ""
os.environ["GOOGLE_API_KEY"] = "test-google-key"
os.environ["OPENAI_API_KEY"] = "test-openai-key"
os.environ["CHARGE_FAILED_ATTEMPTS"] = "true"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from asgi_lifespan import LifespanManager  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from jose import jwt  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.api.core.dependencies import get_vendor_gateway  # noqa: E402
from src.database.models import Base, PlanTier, Subscription, User  # noqa: E402
from src.modules.credits.plans import plan_category_limits  # noqa: E402
from src.modules.user.auth_handlers import TOKEN_CLAIMS_CACHE  # noqa: E402
from tests.factories import (  # noqa: E402
    CreditHoldFactory,
    SubscriptionFactory,
    UsageRecordFactory,
    UserFactory,
)
from tests.utils.vendor_stubs import StubVendorGateway  # noqa: E402

BASE_URL = "http://test-toolkitforseo-api"


@pytest.fixture
def user_factory():
    return UserFactory


@pytest.fixture
def subscription_factory():
    return SubscriptionFactory


@pytest.fixture
def usage_record_factory():
    return UsageRecordFactory


@pytest.fixture
def credit_hold_factory():
    return CreditHoldFactory


@pytest.fixture(autouse=True)
def clear_token_cache():
    """Verified claims must not leak between tests."""
    TOKEN_CLAIMS_CACHE.clear()
    yield
    TOKEN_CLAIMS_CACHE.clear()


@pytest_asyncio.fixture
async def async_engine():
    """Fresh in-memory database per test, shared by every session."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=async_engine, class_=AsyncSession, expire_on_commit=False
    )


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def stub_gateway() -> StubVendorGateway:
    return StubVendorGateway()


@pytest_asyncio.fixture
async def app(session_factory, stub_gateway) -> AsyncGenerator[FastAPI, None]:
    """FastAPI application wired to the test database and a stub vendor."""
    from src.main import app

    async with LifespanManager(app):
        app.state.session_factory = session_factory
        app.dependency_overrides[get_vendor_gateway] = lambda: stub_gateway
        yield app
        app.dependency_overrides.clear()


# Test Data Fixtures
@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession, user_factory) -> User:
    return await user_factory.create_async(db_session)


@pytest_asyncio.fixture
async def test_subscription(
    db_session: AsyncSession, subscription_factory, test_user: User
) -> Subscription:
    """Active BASIC subscription for the test user."""
    return await subscription_factory.create_async(
        db_session,
        user_id=test_user.id,
        plan=PlanTier.BASIC.value,
        category_limits=plan_category_limits(PlanTier.BASIC),
    )


# JWT Token Fixtures
@pytest.fixture()
def jwt_token_factory() -> Callable[..., str]:
    """Factory for identity provider tokens signed with the test secret."""

    def create_token(subject: str, email: str, name: str = "Test User") -> str:
        payload = {
            "sub": subject,
            "email": email,
            "role": "authenticated",
            "aud": "authenticated",
            "user_metadata": {"full_name": name, "email_verified": True},
        }
        return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")

    return create_token


@pytest.fixture
def user_token(test_user: User, jwt_token_factory) -> str:
    return jwt_token_factory(test_user.external_id, test_user.email, test_user.name)


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client for testing public endpoints."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL) as ac:
        yield ac


@pytest_asyncio.fixture
async def authorized_client(
    app: FastAPI, user_token: str
) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client with JWT authorization headers."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=BASE_URL,
        headers={"Authorization": f"Bearer {user_token}"},
    ) as ac:
        yield ac
