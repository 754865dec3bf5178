"""
Unkey Models

Mostly you will construct the *Request models and receive the *Response
models; UndefinedOr and Result wrap them where needed.
"""

from .apis import (
    DEFAULT_LIST_LIMIT,
    DeleteApiRequest,
    GetApiRequest,
    GetApiResponse,
    ListKeysRequest,
    ListKeysResponse,
)
from .base import RequestModel, ResponseModel
from .keys import (
    ApiKey,
    CreateKeyRequest,
    CreateKeyResponse,
    GetKeyRequest,
    GetVerificationsRequest,
    GetVerificationsResponse,
    Granularity,
    RevokeKeyRequest,
    UpdateKeyRequest,
    UpdateOp,
    UpdateRemainingRequest,
    UpdateRemainingResponse,
    VerificationCount,
    VerifyKeyRequest,
    VerifyKeyResponse,
)
from .ratelimit import Ratelimit, RatelimitState, RatelimitType
from .refill import Refill, RefillInterval

__all__ = [
    "ApiKey",
    "CreateKeyRequest",
    "CreateKeyResponse",
    "DEFAULT_LIST_LIMIT",
    "DeleteApiRequest",
    "GetApiRequest",
    "GetApiResponse",
    "GetKeyRequest",
    "GetVerificationsRequest",
    "GetVerificationsResponse",
    "Granularity",
    "ListKeysRequest",
    "ListKeysResponse",
    "Ratelimit",
    "RatelimitState",
    "RatelimitType",
    "Refill",
    "RefillInterval",
    "RequestModel",
    "ResponseModel",
    "RevokeKeyRequest",
    "UpdateKeyRequest",
    "UpdateOp",
    "UpdateRemainingRequest",
    "UpdateRemainingResponse",
    "VerificationCount",
    "VerifyKeyRequest",
    "VerifyKeyResponse",
]
