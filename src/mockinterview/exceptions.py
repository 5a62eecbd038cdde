"""Custom exceptions for the mock interview application."""

from typing import Any


class MockInterviewException(Exception):
    """Base exception for all mock interview errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(MockInterviewException):
    """Resource not found."""

    def __init__(
        self,
        resource: str,
        resource_id: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=f"{resource} with id '{resource_id}' not found",
            error_code="NOT_FOUND",
            details={
                "resource": resource,
                "resource_id": str(resource_id),
                **(details or {}),
            },
        )


class DomainValidationError(MockInterviewException):
    """Input validation failed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details={"field": field, **(details or {})} if field else details,
        )


class AuthenticationError(MockInterviewException):
    """Credentials missing or rejected."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message=message, error_code="AUTHENTICATION_REQUIRED")


class PermissionDeniedError(MockInterviewException):
    """Caller is authenticated but may not access the resource."""

    def __init__(
        self,
        message: str = "Not authorized",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="PERMISSION_DENIED",
            details=details,
        )
