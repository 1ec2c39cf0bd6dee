"""Client-facing exceptions rendered as structured JSON errors."""

from typing import Any

from fastapi import status

from docshelf.core.constants import ErrorMessages


class ClientException(Exception):
    """An error caused by the request, returned to the caller as JSON.

    Rendered by the application's exception handler as
    ``{"type": ..., "message": ..., **extra}`` with ``status_code``.
    """

    def __init__(
        self,
        type: str,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.type = type
        self.message = message
        self.status_code = status_code
        self.extra = extra or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "message": self.message, **self.extra}


class ForbiddenClientException(ClientException):
    """Raised when the caller is not authenticated"""

    def __init__(self) -> None:
        super().__init__(
            type="ForbiddenError",
            message=ErrorMessages.FORBIDDEN,
            status_code=status.HTTP_403_FORBIDDEN,
        )


class ValidationException(ClientException):
    """Raised when a request field fails a length or format check"""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(type="ValidationError", message=message, extra={"field": field})
        self.field = field


class TagAlreadyExistsException(ClientException):
    def __init__(self, name: str) -> None:
        super().__init__(
            type="AlreadyExistingTag",
            message=ErrorMessages.TAG_ALREADY_EXISTS.format(name),
            extra={"name": name},
        )
        self.name = name


class TagNotFoundException(ClientException):
    def __init__(self, tag_id: str) -> None:
        super().__init__(
            type="TagNotFound",
            message=ErrorMessages.TAG_NOT_FOUND.format(tag_id),
            status_code=status.HTTP_404_NOT_FOUND,
            extra={"id": tag_id},
        )
        self.tag_id = tag_id


class InvalidCredentialsException(ClientException):
    """Raised when a login does not match any user's email and password"""

    def __init__(self) -> None:
        super().__init__(
            type="AuthenticationError",
            message=ErrorMessages.INVALID_CREDENTIALS,
            status_code=status.HTTP_401_UNAUTHORIZED,
        )


class SetupCompletedException(ClientException):
    def __init__(self) -> None:
        super().__init__(type="SetupCompleted", message=ErrorMessages.SETUP_COMPLETED)
