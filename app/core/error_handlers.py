"""Translate application exceptions into JSON error responses.

Every failure, expected or not, is rendered in one envelope:
``{"success": false, "error": {"message": ..., "stack"?: ...}}``.

The stack trace is only included outside production.
"""

import traceback

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.models.response import ErrorDetail, ErrorResponse
from app.exceptions import (
    AppException,
    NotFoundError,
    AlreadyExistsError,
    ValidationError,
    AuthenticationError,
    InsufficientPermissionsError,
)


def error_response(
    status_code: int,
    message: str,
    exc: BaseException | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """
    Render the JSON error envelope.

    Parameters:
        status_code (int): HTTP status to send.
        message (str): Human-readable message placed in `error.message`.
        exc (BaseException | None): Source exception; its traceback becomes `error.stack` outside production.
        headers (dict[str, str] | None): Extra response headers.
    """
    stack = None
    if exc is not None and not get_settings().is_production:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    body = ErrorResponse(error=ErrorDetail(message=message, stack=stack))
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, str(exc), exc)


async def already_exists_handler(
    request: Request, exc: AlreadyExistsError
) -> JSONResponse:
    """
    Convert an AlreadyExistsError into an HTTP 409 Conflict response.

    Raised for duplicate usernames on registration.
    """
    return error_response(status.HTTP_409_CONFLICT, str(exc), exc)


async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """Convert a domain ValidationError (bad date filter, bad identifier) into HTTP 400."""
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc), exc)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Convert FastAPI's request validation failure into HTTP 400.

    The first reported error is turned into a readable message, e.g.
    "path.cat_id: Input should be a valid integer".
    """
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'Invalid request')}"
    else:
        message = "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message, exc)


async def insufficient_permissions_handler(
    request: Request, exc: InsufficientPermissionsError
) -> JSONResponse:
    return error_response(status.HTTP_403_FORBIDDEN, str(exc), exc)


async def authentication_error_handler(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    """
    Convert an AuthenticationError into a 401 response that includes a WWW-Authenticate header.
    """
    return error_response(
        status.HTTP_401_UNAUTHORIZED,
        str(exc),
        exc,
        headers={"WWW-Authenticate": "Bearer"},  # RFC 6750 challenge
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(
        exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Handle application-level failures with no more specific mapping (HTTP 500).

    The exception message is kept: service code raises AppException/InternalError
    with messages meant for the client (e.g. a partially applied donation).
    """
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc), exc)


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    logger.opt(exception=exc).error(
        f"Unhandled error on {request.method} {request.url.path}"
    )
    message = (
        "An internal error occurred" if get_settings().is_production else str(exc)
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message, exc)


def register_exception_handlers(app) -> None:
    """
    Attach every exception handler to `app`.

    Starlette resolves handlers along the exception MRO, so a subclass with its
    own entry (InsufficientPermissionsError) wins over its parent. Mappings:
    NotFoundError -> 404, AlreadyExistsError -> 409, ValidationError -> 400,
    RequestValidationError -> 400, InsufficientPermissionsError -> 403,
    AuthenticationError -> 401 (adds `WWW-Authenticate: Bearer`), HTTPException -> its
    own status, AppException -> 500 and any other Exception -> 500.
    """
    # Record errors
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(AlreadyExistsError, already_exists_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Credential and role errors
    app.add_exception_handler(
        InsufficientPermissionsError, insufficient_permissions_handler
    )
    app.add_exception_handler(AuthenticationError, authentication_error_handler)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Catch-all handlers
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
