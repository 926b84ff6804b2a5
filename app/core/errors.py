"""Error hierarchy for the task-tracking core.

Every failure the core reports is one of these, raised synchronously to the
caller. The HTTP layer maps them to status codes in app/api/error_handlers.py.
"""

from typing import Optional


class AppError(Exception):
    """Base exception for all application errors."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_response(self) -> dict:
        return {"success": False, "message": self.message}


class ValidationFailure(AppError):
    """A write violates a field constraint."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def to_response(self) -> dict:
        body = super().to_response()
        if self.field:
            body["errors"] = [{"field": self.field, "message": self.message}]
        return body


class NotFound(AppError):
    status_code = 404


class Forbidden(AppError):
    status_code = 403


class StoreFailure(AppError):
    """The entity store is unreachable or returned an error."""

    status_code = 500

    def __init__(self, operation: str):
        super().__init__(f"Database {operation} failed")
        self.operation = operation
