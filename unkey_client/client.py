"""
Unkey Client

Public entry point. Groups the key and api operations over one shared
HttpService and returns every outcome as a Result.
"""

import logging
from typing import Optional

import httpx

from .config import get_settings
from .http import HttpService
from .models import (
    ApiKey,
    CreateKeyRequest,
    CreateKeyResponse,
    DeleteApiRequest,
    GetApiRequest,
    GetApiResponse,
    GetKeyRequest,
    GetVerificationsRequest,
    GetVerificationsResponse,
    ListKeysRequest,
    ListKeysResponse,
    RevokeKeyRequest,
    UpdateKeyRequest,
    UpdateRemainingRequest,
    UpdateRemainingResponse,
    VerifyKeyRequest,
    VerifyKeyResponse,
)
from .response import Result
from .services import ApiService, KeyService

logger = logging.getLogger(__name__)


class Client:
    """
    Client for the Unkey API.

    Example:
        async with Client("unkey_abc") as client:
            result = await client.verify_key(
                VerifyKeyRequest(key="test_KEY", api_id="api_123")
            )
            if result.is_ok and result.value.valid:
                ...

    Args:
        key: Root key sent as the bearer token; defaults to UNKEY_ROOT_KEY
        url: Base url without trailing slash, i.e. `http://localhost:3000`;
            defaults to UNKEY_BASE_URL
        timeout: Request timeout in seconds
        transport: Optional httpx transport, mainly for tests
    """

    def __init__(
        self,
        key: Optional[str] = None,
        url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()

        key = key if key is not None else settings.root_key
        if not key:
            logger.warning("No root key configured; requests will be unauthorized")

        self._http = HttpService(
            key,
            url or settings.base_url,
            timeout=timeout or settings.timeout,
            transport=transport,
        )
        self._keys = KeyService()
        self._apis = ApiService()

    @property
    def url(self) -> str:
        return self._http.url

    def set_key(self, key: str) -> None:
        """Update the root key used for subsequent requests."""
        self._http.set_key(key)

    def set_url(self, url: str) -> None:
        """Update the base url used for subsequent requests."""
        self._http.set_url(url)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # Keys

    async def create_key(self, req: CreateKeyRequest) -> Result[CreateKeyResponse]:
        """Create a new api key."""
        return await self._keys.create_key(self._http, req)

    async def verify_key(self, req: VerifyKeyRequest) -> Result[VerifyKeyResponse]:
        """Verify an existing api key."""
        return await self._keys.verify_key(self._http, req)

    async def revoke_key(self, req: RevokeKeyRequest) -> Result[None]:
        """Revoke an existing api key. The value is None on success."""
        return await self._keys.revoke_key(self._http, req)

    async def update_key(self, req: UpdateKeyRequest) -> Result[None]:
        """Apply a partial update to an api key. The value is None on success."""
        return await self._keys.update_key(self._http, req)

    async def get_key(self, req: GetKeyRequest) -> Result[ApiKey]:
        return await self._keys.get_key(self._http, req)

    async def update_remaining(
        self, req: UpdateRemainingRequest
    ) -> Result[UpdateRemainingResponse]:
        """Increment, decrement or set the remaining verifications of a key."""
        return await self._keys.update_remaining(self._http, req)

    async def get_verifications(
        self, req: GetVerificationsRequest
    ) -> Result[GetVerificationsResponse]:
        """Usage counters for a key."""
        return await self._keys.get_verifications(self._http, req)

    # Apis

    async def get_api(self, req: GetApiRequest) -> Result[GetApiResponse]:
        return await self._apis.get_api(self._http, req)

    async def delete_api(self, req: DeleteApiRequest) -> Result[None]:
        """Permanently delete an api and revoke all of its keys."""
        return await self._apis.delete_api(self._http, req)

    async def list_keys(self, req: ListKeysRequest) -> Result[ListKeysResponse]:
        """A page of the keys belonging to an api."""
        return await self._apis.list_keys(self._http, req)
