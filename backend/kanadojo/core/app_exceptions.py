"""Application-specific exceptions for consistent error handling."""

from typing import Any


class AppError(Exception):
    """Application error with standardized error code."""

    code = "APP_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | list[Any] | None = None,
    ):
        """Initialize application error."""
        super().__init__(message)
        self.code = code or self.code
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Convert to the standard error envelope."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class EmptyPoolError(AppError):
    """Raised when a selection is requested from zero candidates."""

    code = "EMPTY_POOL"

    def __init__(self, message: str = "Cannot select from an empty candidate pool"):
        super().__init__(message)


class InvalidSelectionParamsError(AppError):
    """Raised when selection parameter overrides fail validation."""

    code = "INVALID_PARAMS"



def raise_app_error(
    code: str,
    message: str,
    details: dict[str, Any] | list[Any] | None = None,
) -> None:
    """Raise an application error with standardized format."""
    raise AppError(message, code=code, details=details)
