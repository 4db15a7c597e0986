import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.api.core.constants import AUTH_HEADER, SKIP_AUTH_PATHS
from src.api.core.exceptions.base import ToolkitException
from src.api.core.messages import MessageCode
from src.database.connection import get_async_db
from src.modules.user.auth_handlers import handle_jwt_auth

logger = structlog.get_logger(__name__)


def _error_response(exc: ToolkitException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response_dict(),
        headers=exc.headers,
    )


async def auth_middleware(request: Request, call_next):
    """Resolve the bearer token into a subscriber on ``request.state.user``.

    Errors are rendered here because exception handlers do not see exceptions
    raised from HTTP middleware.
    """
    request.state.user = None
    request.state.claims = None

    if request.method == "OPTIONS" or request.url.path in SKIP_AUTH_PATHS:
        return await call_next(request)

    authorization = request.headers.get(AUTH_HEADER, "")
    if not authorization:
        logger.debug("No authentication provided - rejecting request")
        return _error_response(
            ToolkitException(
                MessageCode.AUTH_REQUIRED,
                status.HTTP_401_UNAUTHORIZED,
                {"description": "Provide an 'Authorization: Bearer <token>' header"},
            )
        )

    auth_parts = authorization.split(" ")
    if len(auth_parts) != 2 or auth_parts[0].lower() != "bearer":
        return _error_response(
            ToolkitException(
                MessageCode.INVALID_TOKEN,
                status.HTTP_401_UNAUTHORIZED,
                {"description": "Authorization header must be 'Bearer <token>'"},
            )
        )

    try:
        async with get_async_db(request.app.state.session_factory) as db:
            auth_data = await handle_jwt_auth(
                db, auth_parts[1], request.app.state.config.auth
            )
    except ToolkitException as e:
        logger.debug(
            "Authentication rejected",
            message_code=e.message_code,
            status_code=e.status_code,
        )
        return _error_response(e)
    except Exception as e:
        logger.error(
            "Unexpected authentication error",
            error=str(e),
            error_type=type(e).__name__,
        )
        return _error_response(
            ToolkitException(
                MessageCode.AUTH_REQUIRED,
                status.HTTP_401_UNAUTHORIZED,
                {"description": "Authentication failed"},
            )
        )

    request.state.user = auth_data.user
    request.state.claims = auth_data.claims
    structlog.contextvars.bind_contextvars(user_id=str(auth_data.user.id))

    return await call_next(request)
