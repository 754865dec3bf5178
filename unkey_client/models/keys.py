"""
Key Models

Requests and responses for the /keys endpoints.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from ..undefined import NULL, UNDEFINED, UndefinedOr
from .base import RequestModel, ResponseModel
from .ratelimit import Ratelimit, RatelimitState
from .refill import Refill


def expires_in(delta: timedelta) -> int:
    """Unix timestamp in milliseconds `delta` from now."""
    return int((datetime.now(timezone.utc) + delta).timestamp() * 1000)


class UpdateOp(str, Enum):
    """How UpdateRemainingRequest.value is applied."""

    INCREMENT = "increment"
    DECREMENT = "decrement"
    SET = "set"


class Granularity(str, Enum):
    DAY = "day"


class CreateKeyRequest(RequestModel):
    """
    Request to create a new api key.

    Example:
        req = (
            CreateKeyRequest(api_id="api_123")
            .set_prefix("test")
            .set_remaining(100)
        )
    """

    api_id: str
    owner_id: Optional[str] = None
    byte_length: Optional[int] = Field(default=None, ge=16, le=255)
    prefix: Optional[str] = None
    name: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None
    # Unix timestamp in milliseconds
    expires: Optional[int] = None
    remaining: Optional[int] = Field(default=None, ge=0)
    ratelimit: Optional[Ratelimit] = None
    refill: Optional[Refill] = None
    environment: Optional[str] = None
    enabled: Optional[bool] = None

    def set_owner_id(self, owner_id: str) -> "CreateKeyRequest":
        return self._set(owner_id=owner_id)

    def set_byte_length(self, byte_length: int) -> "CreateKeyRequest":
        return self._set(byte_length=byte_length)

    def set_prefix(self, prefix: str) -> "CreateKeyRequest":
        return self._set(prefix=prefix)

    def set_name(self, name: str) -> "CreateKeyRequest":
        return self._set(name=name)

    def set_meta(self, meta: Dict[str, Any]) -> "CreateKeyRequest":
        return self._set(meta=meta)

    def set_expires(self, expires: int) -> "CreateKeyRequest":
        """Set the absolute expiry as a unix timestamp in milliseconds."""
        return self._set(expires=expires)

    def set_expires_in(self, delta: timedelta) -> "CreateKeyRequest":
        """Expire the key `delta` from now."""
        return self._set(expires=expires_in(delta))

    def set_remaining(self, remaining: int) -> "CreateKeyRequest":
        return self._set(remaining=remaining)

    def set_ratelimit(self, ratelimit: Ratelimit) -> "CreateKeyRequest":
        return self._set(ratelimit=ratelimit)

    def set_refill(self, refill: Refill) -> "CreateKeyRequest":
        return self._set(refill=refill)

    def set_environment(self, environment: str) -> "CreateKeyRequest":
        return self._set(environment=environment)

    def set_enabled(self, enabled: bool) -> "CreateKeyRequest":
        return self._set(enabled=enabled)


class CreateKeyResponse(ResponseModel):
    # The full key; Unkey only returns it once.
    key: str
    key_id: str


class VerifyKeyRequest(RequestModel):
    key: str
    api_id: str


class VerifyKeyResponse(ResponseModel):
    """Result of a key verification. `code` explains why a key is invalid."""

    valid: bool
    code: Optional[str] = None
    key_id: Optional[str] = None
    name: Optional[str] = None
    owner_id: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None
    remaining: Optional[int] = None
    ratelimit: Optional[RatelimitState] = None
    refill: Optional[Refill] = None
    expires: Optional[int] = None
    enabled: Optional[bool] = None
    environment: Optional[str] = None


class RevokeKeyRequest(RequestModel):
    key_id: str


class GetKeyRequest(RequestModel):
    key_id: str


class UpdateKeyRequest(RequestModel):
    """
    Partial update of an existing key.

    Fields left untouched are not sent and stay as they are on the server.
    Passing None to a setter sends null, which clears the field.

    Example:
        req = (
            UpdateKeyRequest(key_id="key_123")
            .set_name("renamed")
            .set_remaining(None)
        )
    """

    key_id: str
    owner_id: UndefinedOr[str] = UNDEFINED
    name: UndefinedOr[str] = UNDEFINED
    meta: UndefinedOr[Dict[str, Any]] = UNDEFINED
    expires: UndefinedOr[int] = UNDEFINED
    remaining: UndefinedOr[int] = UNDEFINED
    ratelimit: UndefinedOr[Ratelimit] = UNDEFINED
    refill: UndefinedOr[Refill] = UNDEFINED
    enabled: UndefinedOr[bool] = UNDEFINED

    def set_owner_id(self, owner_id: Optional[str]) -> "UpdateKeyRequest":
        return self._set(owner_id=UndefinedOr.from_optional(owner_id))

    def set_name(self, name: Optional[str]) -> "UpdateKeyRequest":
        return self._set(name=UndefinedOr.from_optional(name))

    def set_meta(self, meta: Optional[Dict[str, Any]]) -> "UpdateKeyRequest":
        return self._set(meta=UndefinedOr.from_optional(meta))

    def set_expires(self, expires: Optional[int]) -> "UpdateKeyRequest":
        return self._set(expires=UndefinedOr.from_optional(expires))

    def set_expires_in(self, delta: timedelta) -> "UpdateKeyRequest":
        return self._set(expires=UndefinedOr.value(expires_in(delta)))

    def set_remaining(self, remaining: Optional[int]) -> "UpdateKeyRequest":
        return self._set(remaining=UndefinedOr.from_optional(remaining))

    def set_ratelimit(self, ratelimit: Optional[Ratelimit]) -> "UpdateKeyRequest":
        return self._set(ratelimit=UndefinedOr.from_optional(ratelimit))

    def set_refill(self, refill: Optional[Refill]) -> "UpdateKeyRequest":
        return self._set(refill=UndefinedOr.from_optional(refill))

    def set_enabled(self, enabled: Optional[bool]) -> "UpdateKeyRequest":
        return self._set(enabled=UndefinedOr.from_optional(enabled))


class UpdateRemainingRequest(RequestModel):
    """
    Change the remaining verifications of a key.

    A value of None with UpdateOp.SET makes the key unlimited.
    """

    key_id: str
    value: UndefinedOr[int] = NULL
    op: UpdateOp

    @field_validator("value", mode="before")
    @classmethod
    def value_is_never_undefined(cls, v: Any) -> Any:
        if isinstance(v, UndefinedOr) and v.is_undefined():
            return NULL
        return v


class UpdateRemainingResponse(ResponseModel):
    remaining: Optional[int] = None


class GetVerificationsRequest(RequestModel):
    """Usage counters for a key, sent as query params."""

    key_id: str
    owner_id: Optional[str] = None
    # Unix timestamps in milliseconds
    start: Optional[int] = None
    end: Optional[int] = None
    granularity: Optional[Granularity] = None

    def set_owner_id(self, owner_id: str) -> "GetVerificationsRequest":
        return self._set(owner_id=owner_id)

    def set_start(self, start: int) -> "GetVerificationsRequest":
        return self._set(start=start)

    def set_end(self, end: int) -> "GetVerificationsRequest":
        return self._set(end=end)

    def set_granularity(self, granularity: Granularity) -> "GetVerificationsRequest":
        return self._set(granularity=granularity)


class VerificationCount(ResponseModel):
    time: int
    success: int
    rate_limited: int
    usage_exceeded: int


class GetVerificationsResponse(ResponseModel):
    verifications: List[VerificationCount] = Field(default_factory=list)


class ApiKey(ResponseModel):
    """An api key as returned by the get and list endpoints."""

    id: str
    api_id: Optional[str] = None
    workspace_id: str
    start: str
    name: Optional[str] = None
    owner_id: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None
    created_at: int
    expires: Optional[int] = None
    remaining: Optional[int] = None
    ratelimit: Optional[Ratelimit] = None
    refill: Optional[Refill] = None
    enabled: Optional[bool] = None
    environment: Optional[str] = None
