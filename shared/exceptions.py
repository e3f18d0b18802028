"""
Error taxonomy shared by every service.

Services raise these instead of building HTTP responses themselves; the
handlers registered by `register_exception_handlers` turn them into the
`{"error": {"status", "message"}}` envelope.
"""
import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

logger = structlog.get_logger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


class StorefrontError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StorefrontError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(StorefrontError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(StorefrontError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(StorefrontError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(StorefrontError):
    status_code = status.HTTP_409_CONFLICT


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"status": status_code, "message": message}},
        headers=headers,
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # loc looks like ("body", "quantity") or ("query", "page")
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


async def storefront_error_handler(request: Request, exc: StorefrontError):
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, error=exc.message)
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc))


async def http_exception_handler(request: Request, exc: HTTPException):
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return error_response(status.HTTP_429_TOO_MANY_REQUESTS, f"Rate limit exceeded: {exc.detail}")


async def unhandled_exception_handler(request: Request, exc: Exception):
    # Query text and driver messages stay in the logs only.
    logger.exception("unhandled_error", path=request.url.path, error_type=type(exc).__name__)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    app.add_exception_handler(SQLAlchemyError, unhandled_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
