"""
Domain exceptions.

Raised by the kernel and orchestration layers; the application turns each
into an HTTP response with the matching status code.
"""

from typing import List, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from athlete_minds.kernel.validation import FieldError


class AppError(Exception):
    """Base class for errors that map onto a client-facing response."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(AppError):
    """Malformed request outside the payload, e.g. an unparseable path id."""

    status_code = 400


class ValidationFailed(AppError):
    """Payload failed the shape check; carries one entry per offending field."""

    status_code = 400

    def __init__(self, errors: Sequence["FieldError"], message: str = "Validation error"):
        super().__init__(message)
        self.errors: List["FieldError"] = list(errors)

    @property
    def fields(self) -> List[str]:
        return [e.field for e in self.errors]


class NotFoundError(AppError):
    """Referenced record does not exist."""

    status_code = 404


class DuplicateUsernameError(AppError):
    """Username already taken."""

    status_code = 409

    def __init__(self, username: str):
        super().__init__(f"Username '{username}' is already taken")
        self.username = username
