"""Exception handlers for FastAPI application."""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from mockinterview.exceptions import (
    AuthenticationError,
    DomainValidationError,
    MockInterviewException,
    NotFoundError,
    PermissionDeniedError,
)

_STATUS_BY_EXCEPTION: tuple[tuple[type[MockInterviewException], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DomainValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
)


def get_request_id(request: Request) -> str | None:
    """Extract request_id from request state if available."""
    return getattr(request.state, "request_id", None)


async def mockinterview_exception_handler(
    request: Request,
    exc: MockInterviewException,
) -> JSONResponse:
    """Handle custom application exceptions."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for exc_type, mapped_status in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            status_code = mapped_status
            break

    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.message,
            "error_code": exc.error_code,
            "request_id": get_request_id(request),
            **exc.details,
        },
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle Pydantic validation errors as bad requests."""
    errors = exc.errors()
    detail = errors[0]["msg"] if errors else "Validation error"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": detail,
            "error_code": "VALIDATION_ERROR",
            "request_id": get_request_id(request),
            "errors": jsonable_encoder(errors),
        },
    )


async def generic_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.opt(exception=exc).error(
        "Unhandled exception",
        request_id=get_request_id(request),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error",
            "error_code": "INTERNAL_ERROR",
            "request_id": get_request_id(request),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the app."""
    app.add_exception_handler(MockInterviewException, mockinterview_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
