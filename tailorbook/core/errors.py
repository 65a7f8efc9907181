"""
Error kinds shared by the business layer, the API, and the CLI.

Business functions raise TailorBookError with one of a closed set of
kinds. The API maps each kind to an HTTP status and a user-facing message;
store internals are logged, never sent to clients.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_REQUEST = "invalid_request"
    DUPLICATE_NAME = "duplicate_name"
    UNKNOWN_ACTION = "unknown_action"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    STORE_FAILURE = "store_failure"

    @property
    def status(self) -> int:
        return _STATUS[self]

    @property
    def default_message(self) -> str:
        return _MESSAGES[self]


_STATUS = {
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.DUPLICATE_NAME: 400,
    ErrorKind.UNKNOWN_ACTION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.METHOD_NOT_ALLOWED: 405,
    ErrorKind.STORE_FAILURE: 500,
}

_MESSAGES = {
    ErrorKind.INVALID_REQUEST: "Invalid request",
    ErrorKind.DUPLICATE_NAME: "A customer with this name is already registered",
    ErrorKind.UNKNOWN_ACTION: "Invalid action",
    ErrorKind.NOT_FOUND: "Not found",
    ErrorKind.METHOD_NOT_ALLOWED: "Method not allowed",
    ErrorKind.STORE_FAILURE: "A database error occurred, please try again later",
}


class TailorBookError(Exception):
    """A failure the caller can act on, tagged with its ErrorKind."""

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or kind.default_message
        super().__init__(self.message)

    @property
    def status(self) -> int:
        return self.kind.status

    def to_dict(self) -> dict:
        return {"success": False, "message": self.message}
