"""
Refill Models
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from .base import WireModel


class RefillInterval(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"


class Refill(WireModel):
    """Automatic refill of a key's remaining verifications."""

    amount: int = Field(gt=0)
    interval: RefillInterval
    # Set by the server only; never sent.
    last_refilled_at: Optional[int] = Field(default=None, exclude=True)
