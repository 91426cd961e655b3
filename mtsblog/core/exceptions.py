"""Error types raised by services and repositories.

Each class carries the HTTP status it maps to and a stable ``code`` used in
error response bodies; the mapping itself lives in ``mtsblog.api.errors``.
"""

from typing import Iterable, Optional


class BlogServerError(Exception):
    status_code: int = 500
    code: str = "InternalServerError"
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class MissingFieldError(BlogServerError):
    status_code = 400
    code = "MissingField"
    default_message = "Required fields are missing"

    def __init__(self, message: Optional[str] = None, fields: Iterable[str] = ()):
        super().__init__(message)
        self.fields = list(fields)


class BadRequestError(BlogServerError):
    status_code = 400
    code = "BadRequest"
    default_message = "Malformed request body"


class DuplicateUserError(BlogServerError):
    status_code = 400
    code = "DuplicateUser"
    default_message = "User already exists"


class InvalidRoleError(BlogServerError):
    status_code = 400
    code = "InvalidRole"
    default_message = "Invalid role"


class InvalidIdentifierError(BlogServerError):
    status_code = 400
    code = "InvalidIdentifier"
    default_message = "Invalid identifier"

    def __init__(self, value: object = None, message: Optional[str] = None):
        super().__init__(message or f"Invalid identifier: {value!r}")
        self.value = value


class IncorrectPasswordError(BlogServerError):
    status_code = 401
    code = "IncorrectPassword"
    default_message = "Incorrect password"


class UserNotFoundError(BlogServerError):
    status_code = 404
    code = "UserNotFound"
    default_message = "User not found"


class BlogNotFoundError(BlogServerError):
    status_code = 404
    code = "BlogNotFound"
    default_message = "Blog not found"


class StorageError(BlogServerError):
    """The document store failed to execute an operation."""


class HashingError(BlogServerError):
    """The password hashing primitive could not run."""
