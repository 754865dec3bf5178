"""
Unkey Client Exceptions

Error taxonomy shared by every operation. API-reported errors, transport
failures and decode failures all collapse into a single HttpError.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error categories reported by the Unkey API."""

    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    BAD_REQUEST = "BAD_REQUEST"
    RATELIMITED = "RATELIMITED"
    UNAUTHORIZED = "UNAUTHORIZED"
    USAGE_EXCEEDED = "USAGE_EXCEEDED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    CONFLICT = "CONFLICT"
    EXPIRED = "EXPIRED"
    DISABLED = "DISABLED"
    NOT_UNIQUE = "NOT_UNIQUE"
    DELETE_PROTECTED = "DELETE_PROTECTED"
    TOO_MANY_REQUESTS = "TOO_MANY_REQUESTS"
    INVALID_KEY_TYPE = "INVALID_KEY_TYPE"

    # Local failures and any code this client does not know about yet.
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value: Any) -> "ErrorCode":
        return cls.UNKNOWN


class HttpError(Exception):
    """
    An error returned by an operation.

    Operations hand this back inside a Result instead of raising it;
    Result.unwrap() raises it for callers who prefer exceptions.
    """

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = ErrorCode(code)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpError):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    def __repr__(self) -> str:
        return f"HttpError(code={self.code.value!r}, message={self.message!r})"

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UndefinedSerializationError(TypeError):
    """An UndefinedOr field in the Undefined state reached the serializer."""
    pass
