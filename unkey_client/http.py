"""
Unkey HTTP Service

Thin wrapper over httpx that sends a CompiledRoute to the configured base
url with the root key attached. Transport failures are captured in the
returned HttpResult rather than raised, so decoding can turn them into an
HttpError.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from .config import DEFAULT_BASE_URL, SDK_VERSION
from .models.base import RequestModel
from .routes import CompiledRoute

logger = logging.getLogger(__name__)

USER_AGENT = f"Unkey Python SDK v{SDK_VERSION}"


@dataclass
class HttpResult:
    """The raw outcome of one request: a response or a transport error."""
    response: Optional[httpx.Response] = None
    error: Optional[Exception] = None


class HttpService:
    """
    Sends requests to the Unkey API.

    The key and url may be changed between calls with set_key/set_url.
    Nothing here synchronizes those updates with in-flight requests.
    """

    def __init__(
        self,
        key: str,
        url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._url = url.rstrip("/")
        self._headers = self._generate_headers(key)
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @staticmethod
    def _generate_headers(key: str) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "x-user-agent": USER_AGENT,
            "Authorization": f"Bearer {key}",
        }

    @property
    def url(self) -> str:
        return self._url

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    def set_key(self, key: str) -> None:
        """Replace the root key sent with every request."""
        self._headers["Authorization"] = f"Bearer {key}"

    def set_url(self, url: str) -> None:
        """Replace the base url, i.e. `http://localhost:3000`."""
        self._url = url.rstrip("/")

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def fetch(
        self,
        route: CompiledRoute,
        payload: Optional[RequestModel] = None,
    ) -> HttpResult:
        """
        Send the request for a compiled route.

        Args:
            route: The compiled route to fetch
            payload: Optional request model sent as the JSON body

        Returns:
            HttpResult with either the response or the transport error
        """
        endpoint = route.endpoint
        logger.info("OUTGOING: %s %s", route.method, endpoint)

        body = None
        if payload is not None:
            body = payload.to_wire()
            logger.debug("PAYLOAD : %s", body)

        client = self._get_client()

        try:
            response = await client.request(
                route.method,
                self._url + endpoint,
                headers=self._headers,
                json=body,
            )
        except httpx.HTTPError as e:
            logger.error("HTTP request failed: %s", e)
            return HttpResult(error=e)

        return HttpResult(response=response)

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
