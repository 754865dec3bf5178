"""
Key Service

Operations on /keys. Each call compiles its route, makes exactly one
request and decodes the result; nothing is retried or cached.
"""

from urllib.parse import quote

from .. import routes
from ..http import HttpService
from ..models import (
    ApiKey,
    CreateKeyRequest,
    CreateKeyResponse,
    GetKeyRequest,
    GetVerificationsRequest,
    GetVerificationsResponse,
    RevokeKeyRequest,
    UpdateKeyRequest,
    UpdateRemainingRequest,
    UpdateRemainingResponse,
    VerifyKeyRequest,
    VerifyKeyResponse,
)
from ..response import Result, parse_empty_response, parse_response


class KeyService:
    """Handles key related requests."""

    async def create_key(
        self, http: HttpService, req: CreateKeyRequest
    ) -> Result[CreateKeyResponse]:
        route = routes.CREATE_KEY.compile()

        return parse_response(await http.fetch(route, req), CreateKeyResponse)

    async def verify_key(
        self, http: HttpService, req: VerifyKeyRequest
    ) -> Result[VerifyKeyResponse]:
        route = routes.VERIFY_KEY.compile()

        return parse_response(await http.fetch(route, req), VerifyKeyResponse)

    async def revoke_key(self, http: HttpService, req: RevokeKeyRequest) -> Result[None]:
        route = routes.REVOKE_KEY.compile().insert_path_param(quote(req.key_id, safe=""))

        return parse_empty_response(await http.fetch(route))

    async def update_key(self, http: HttpService, req: UpdateKeyRequest) -> Result[None]:
        route = routes.UPDATE_KEY.compile().insert_path_param(quote(req.key_id, safe=""))

        return parse_empty_response(await http.fetch(route, req))

    async def get_key(self, http: HttpService, req: GetKeyRequest) -> Result[ApiKey]:
        route = routes.GET_KEY.compile().insert_path_param(quote(req.key_id, safe=""))

        return parse_response(await http.fetch(route), ApiKey)

    async def update_remaining(
        self, http: HttpService, req: UpdateRemainingRequest
    ) -> Result[UpdateRemainingResponse]:
        route = routes.UPDATE_REMAINING.compile().insert_path_param(quote(req.key_id, safe=""))

        return parse_response(await http.fetch(route, req), UpdateRemainingResponse)

    async def get_verifications(
        self, http: HttpService, req: GetVerificationsRequest
    ) -> Result[GetVerificationsResponse]:
        route = routes.GET_VERIFICATIONS.compile().insert_path_param(quote(req.key_id, safe=""))

        if req.owner_id is not None:
            route.insert_query_param("ownerId", quote(req.owner_id, safe=""))
        if req.start is not None:
            route.insert_query_param("start", req.start)
        if req.end is not None:
            route.insert_query_param("end", req.end)
        if req.granularity is not None:
            route.insert_query_param("granularity", req.granularity.value)

        return parse_response(await http.fetch(route), GetVerificationsResponse)
