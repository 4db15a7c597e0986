"""Global exception handlers for the FastAPI application."""

import traceback

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..messages import MessageCode, get_default_message
from src.core.exceptions import (
    ConfigurationError,
    InsufficientCreditsError,
    ParseError,
    VendorError,
)
from src.modules.credits.meter import NO_ACTIVE_SUBSCRIPTION
from src.utils.logger import get_logger

logger = get_logger(__name__)


class ToolkitException(Exception):
    """Base HTTP-facing exception with unified message codes."""

    def __init__(
        self,
        message_code: MessageCode,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict | None = None,
        headers: dict | None = None,
        message: str | None = None,
    ):
        self.message_code = message_code
        self.status_code = status_code
        self.message: str = message or get_default_message(message_code)
        self.details = details or {}
        self.headers = headers or {}
        super().__init__(self.message)

    def to_response_dict(self) -> dict:
        """Convert exception to API error format."""
        return error_body(self.message_code, self.message, self.details)


def error_body(
    message_code: MessageCode, error: str | None = None, details: dict | None = None
) -> dict:
    return {
        "error": error or get_default_message(message_code),
        "message_code": message_code,
        "details": details or {},
    }


def _serializable_errors(exc: RequestValidationError | ValidationError) -> list[dict]:
    serializable_errors = []
    for error in exc.errors():
        error_dict = {k: v for k, v in dict(error).items() if k != "ctx"}
        if "input" in error_dict and not isinstance(
            error_dict["input"], (str, int, float, bool, list, dict, type(None))
        ):
            error_dict["input"] = str(error_dict["input"])
        serializable_errors.append(error_dict)
    return serializable_errors


def _internal_error(message_code: MessageCode) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(message_code),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""

    @app.exception_handler(ToolkitException)
    async def toolkit_exception_handler(
        request: Request, exc: ToolkitException
    ) -> JSONResponse:
        logger.warning(
            "Toolkit exception",
            path=request.url.path,
            method=request.method,
            message_code=exc.message_code.value,
            details=exc.details,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response_dict(),
            headers=exc.headers,
        )

    @app.exception_handler(InsufficientCreditsError)
    async def insufficient_credits_handler(
        request: Request, exc: InsufficientCreditsError
    ) -> JSONResponse:
        result = exc.result
        if result.reason == NO_ACTIVE_SUBSCRIPTION:
            message_code = MessageCode.NO_ACTIVE_SUBSCRIPTION
            error = "No active subscription. Please subscribe to use this tool."
        else:
            message_code = MessageCode.INSUFFICIENT_CREDITS
            error = result.reason

        logger.info(
            "Tool call denied by credit meter",
            path=request.url.path,
            tool_name=result.tool_name,
            reason=result.reason,
            remaining=result.remaining,
        )

        return JSONResponse(
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
            content=error_body(
                message_code,
                error,
                {
                    "tool": result.tool_name,
                    "category": result.tool_category,
                    "credits_required": result.credits_required,
                    "remaining": result.remaining,
                },
            ),
        )

    @app.exception_handler(VendorError)
    async def vendor_error_handler(request: Request, exc: VendorError) -> JSONResponse:
        logger.error(
            "AI vendor call failed",
            path=request.url.path,
            vendor=exc.vendor,
            vendor_status=exc.status_code,
            error=str(exc),
        )
        return _internal_error(MessageCode.VENDOR_ERROR)

    @app.exception_handler(ParseError)
    async def parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
        logger.error(
            "Vendor reply could not be parsed", path=request.url.path, error=str(exc)
        )
        return _internal_error(MessageCode.PARSE_ERROR)

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(
        request: Request, exc: ConfigurationError
    ) -> JSONResponse:
        logger.error("Configuration error", path=request.url.path, error=str(exc))
        return _internal_error(MessageCode.CONFIGURATION_ERROR)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        """Handle FastAPI HTTP exceptions."""
        return await starlette_http_exception_handler(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def starlette_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle Starlette HTTP exceptions, including unknown routes."""
        logger.warning(
            f"HTTP exception {exc.status_code}: {exc.detail}",
            path=request.url.path,
            method=request.method,
        )

        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message_code = MessageCode.NOT_FOUND
        elif exc.status_code < 500:
            message_code = MessageCode.BAD_REQUEST
        else:
            message_code = MessageCode.INTERNAL_SERVER_ERROR

        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(message_code, str(exc.detail)),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors as bad input."""
        logger.warning(
            "Validation error occurred",
            path=request.url.path,
            method=request.method,
        )

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                MessageCode.INVALID_INPUT,
                details={"validation_errors": _serializable_errors(exc)},
            ),
        )

    @app.exception_handler(ValidationError)
    async def pydantic_validation_exception_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle Pydantic validation errors raised outside request parsing."""
        logger.error(
            "Pydantic validation error occurred",
            path=request.url.path,
            method=request.method,
            errors=exc.error_count(),
        )
        return _internal_error(MessageCode.INTERNAL_SERVER_ERROR)

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        """Handle SQLAlchemy database errors."""
        logger.error(
            f"Database error: {str(exc)}",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
        )
        return _internal_error(MessageCode.INTERNAL_SERVER_ERROR)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle all other unhandled exceptions."""
        logger.error(
            f"Unhandled exception: {str(exc)}",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
            traceback=traceback.format_exc(),
        )
        return _internal_error(MessageCode.INTERNAL_SERVER_ERROR)
