"""
Response Envelope

Every Unkey response is either an error object tagged with the "error" key
or an untagged success payload. These helpers decode a raw HttpResult into
a Result holding the typed payload or an HttpError. Nothing in here raises
for transport, read or decode failures; they all become ErrorCode.UNKNOWN.
"""

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from .exceptions import ErrorCode, HttpError
from .http import HttpResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

# The discriminator key of the error envelope.
ERROR_TAG = "error"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an operation: a value or an HttpError, never both.

    Example:
        result = await client.get_key(GetKeyRequest(key_id="key_123"))
        if result.is_ok:
            print(result.value.name)
        else:
            print(result.error.code)
    """
    value: Optional[T] = None
    error: Optional[HttpError] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def err(cls, error: HttpError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_err(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """
        Get the value.

        Raises:
            HttpError: If the operation failed
        """
        if self.error is not None:
            raise self.error
        return self.value


class ErrorPayload(BaseModel):
    """Body of the "error" variant."""

    model_config = ConfigDict(extra="ignore")

    code: str
    message: str

    def to_error(self) -> HttpError:
        return HttpError(ErrorCode(self.code), self.message)


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def _read_body(result: HttpResult) -> Tuple[Optional[str], Optional[HttpError]]:
    """Response text, or the HttpError for a failed transport call or body read."""
    if result.error is not None:
        return None, HttpError(ErrorCode.UNKNOWN, str(result.error))
    if result.response is None:
        return None, HttpError(ErrorCode.UNKNOWN, "No response received")

    try:
        text = result.response.text
    except (httpx.HTTPError, httpx.StreamError) as e:
        logger.error("Failed to read response body: %s", e)
        return None, HttpError(ErrorCode.UNKNOWN, str(e))

    logger.debug("INCOMING: %s", text)
    return text, None


def decode_envelope(text: str, model: Type[T]) -> Result[T]:
    """
    Decode response text as the envelope around `model`.

    The error shape wins whenever the "error" key is present; the success
    shape is only tried without it.

    Raises:
        ValueError: If the text is not valid JSON or matches neither shape
    """
    data = json.loads(text)

    if isinstance(data, dict) and ERROR_TAG in data:
        payload = ErrorPayload.model_validate(data[ERROR_TAG])
        return Result.err(payload.to_error())

    return Result.ok(_adapter(model).validate_python(data))


def parse_response(result: HttpResult, model: Type[T]) -> Result[T]:
    """
    Decode a response that carries a payload.

    Args:
        result: The raw result from HttpService.fetch
        model: The expected success type

    Returns:
        Result with the decoded payload or an HttpError
    """
    text, error = _read_body(result)
    if error is not None:
        return Result.err(error)

    try:
        return decode_envelope(text, model)
    except (ValueError, ValidationError) as e:
        logger.warning("Failed to decode response: %s", e)
        return Result.err(HttpError(ErrorCode.UNKNOWN, str(e)))


def parse_empty_response(result: HttpResult) -> Result[None]:
    """
    Decode a response that carries no payload.

    Some endpoints answer with an empty or trivial body that does not
    decode as the unit type. If decoding fails and the text has no
    "error" in it, the response is treated as success whatever its
    status. If the text mentions "error", the error shape is out of line
    with the API and the failure is returned as ErrorCode.UNKNOWN.

    Note the substring check also matches a success body that merely
    contains the word "error" somewhere.
    """
    text, error = _read_body(result)
    if error is not None:
        return Result.err(error)

    try:
        return decode_envelope(text, type(None))
    except (ValueError, ValidationError) as e:
        if ERROR_TAG in text:
            logger.warning("Failed to decode error response: %s", e)
            return Result.err(HttpError(ErrorCode.UNKNOWN, str(e)))

        return Result.ok(None)
