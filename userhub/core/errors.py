"""
Userhub - Error Hierarchy
Tagged error kinds for every failure the user endpoints report
"""

import enum
from typing import Any, List, Optional


class ErrorKind(str, enum.Enum):
    """Error kinds and the HTTP status each one maps to"""
    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNHANDLED = "unhandled"

    @property
    def http_status(self) -> int:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.AUTHORIZATION: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.UNHANDLED: 500,
}


class UserhubError(Exception):
    """Base exception for all Userhub errors"""

    kind: ErrorKind = ErrorKind.UNHANDLED

    def __init__(self, message: str, details: Optional[List[Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def http_status(self) -> int:
        return self.kind.http_status

    def to_response(self) -> dict:
        """Render the JSON body returned to the client"""
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(UserhubError):
    """Request parameters or body failed validation"""
    kind = ErrorKind.VALIDATION


class AuthorizationError(UserhubError):
    """Caller is not allowed to perform the action"""
    kind = ErrorKind.AUTHORIZATION


class NotFoundError(UserhubError):
    """Target user does not exist"""
    kind = ErrorKind.NOT_FOUND


class ConflictError(UserhubError):
    """Unique constraint (email) would be violated"""
    kind = ErrorKind.CONFLICT


def error_for_kind(kind: ErrorKind, message: str, details: Optional[List[Any]] = None) -> UserhubError:
    """Build the exception class matching an error kind"""
    cls = {
        ErrorKind.VALIDATION: ValidationError,
        ErrorKind.AUTHORIZATION: AuthorizationError,
        ErrorKind.NOT_FOUND: NotFoundError,
        ErrorKind.CONFLICT: ConflictError,
    }.get(kind, UserhubError)
    return cls(message, details)
