"""Custom exception classes for the combo service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_IMAGE_STORAGE,
    ERROR_CODE_SERVER_ERROR,
    ERROR_CODE_STORE,
    ERROR_CODE_VALIDATION_FAILED,
)


class ComboServiceError(Exception):
    """
    Base exception for all combo service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(ComboServiceError):
    """Raised when caller-supplied input violates a precondition."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class StoreError(ComboServiceError):
    """Raised when a combo store operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_STORE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ImageStorageError(ComboServiceError):
    """Raised when an image storage operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_IMAGE_STORAGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ServerError(ComboServiceError):
    """Raised by the service layer when a store or image storage call fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
