"""Bearer token authentication against the identity provider's JWT secret."""

import time

from cachetools import TTLCache
from fastapi import status
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions.base import ToolkitException
from src.api.core.messages import MessageCode
from src.core.config import AuthConfig
from src.core.context import AuthenticatedUserContext
from src.modules.user.management import UserManagementService
from src.utils.logger import get_logger

logger = get_logger(__name__)

# Verified claims by raw token, so repeat requests skip signature checks
TOKEN_CLAIMS_CACHE: TTLCache[str, dict] = TTLCache(maxsize=1000, ttl=300)


def decode_token(token: str, config: AuthConfig) -> dict:
    cached = TOKEN_CLAIMS_CACHE.get(token)
    if cached is not None:
        exp = cached.get("exp")
        if exp is None or exp > time.time():
            return cached
        TOKEN_CLAIMS_CACHE.pop(token, None)

    if not config.jwt_secret:
        logger.error("AUTH_JWT_SECRET is not configured")
        raise ToolkitException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Token verification is not configured"},
        )

    options = {"verify_aud": bool(config.jwt_audience)}
    try:
        payload = jwt.decode(
            token,
            config.jwt_secret,
            algorithms=[config.jwt_algorithm],
            audience=config.jwt_audience or None,
            options=options,
        )
    except JWTError as e:
        logger.info(f"JWT decoding failed: {e}")
        raise ToolkitException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Invalid or expired authentication token"},
        )

    if not payload.get("sub"):
        raise ToolkitException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Token has no subject"},
        )

    TOKEN_CLAIMS_CACHE[token] = payload
    return payload


async def handle_jwt_auth(
    db: AsyncSession, token: str, config: AuthConfig
) -> AuthenticatedUserContext:
    payload = decode_token(token, config)
    user = await UserManagementService(db).handle_jwt_authentication(payload=payload)
    return AuthenticatedUserContext(user=user, claims=payload)
