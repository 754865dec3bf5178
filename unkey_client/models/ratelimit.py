"""
Ratelimit Models
"""

from enum import Enum

from pydantic import Field

from .base import ResponseModel, WireModel


class RatelimitType(str, Enum):
    """How Unkey enforces a ratelimit."""

    # Each edge location keeps its own counter; bursts across locations
    # can exceed the limit.
    FAST = "fast"

    # Every check goes through one service.
    CONSISTENT = "consistent"


class Ratelimit(WireModel):
    """A ratelimit imposed on an api key."""

    ratelimit_type: RatelimitType = Field(alias="type")
    refill_rate: int = Field(ge=0)
    # Milliseconds
    refill_interval: int = Field(gt=0)
    limit: int = Field(ge=0)


class RatelimitState(ResponseModel):
    """A snapshot of the ratelimit status for a key."""

    limit: int
    remaining: int
    # Unix timestamp (ms) at which the next window starts
    reset: int
