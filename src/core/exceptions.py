"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    NOT_FOUND = "NOT_FOUND"

    # Validation errors (400/422)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (409)
    DUPLICATE = "DUPLICATE"

    # Server errors (500)
    UNEXPECTED = "UNEXPECTED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class NotFoundError(AppException):
    """Requested todo or label does not exist."""

    def __init__(self, id: int) -> None:
        self.id = id
        super().__init__(
            error_code=ErrorCode.NOT_FOUND,
            message=f"Not Found, id is {id}",
            status_code=404,
            details={"id": id},
        )


class DuplicateError(AppException):
    """A label with the same name already exists."""

    def __init__(self, id: int) -> None:
        self.id = id
        super().__init__(
            error_code=ErrorCode.DUPLICATE,
            message=f"Duplicate data, id is {id}",
            status_code=409,
            details={"id": id},
        )


class UnexpectedError(AppException):
    """Storage failure that is not otherwise classified."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(
            error_code=ErrorCode.UNEXPECTED,
            message=f"Unexpected Error: [{detail}]",
            status_code=500,
        )
