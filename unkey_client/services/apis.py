"""
Api Service

Operations on /apis.
"""

from urllib.parse import quote

from .. import routes
from ..http import HttpService
from ..models import (
    DeleteApiRequest,
    GetApiRequest,
    GetApiResponse,
    ListKeysRequest,
    ListKeysResponse,
)
from ..response import Result, parse_empty_response, parse_response


class ApiService:
    """Handles api related requests."""

    async def get_api(self, http: HttpService, req: GetApiRequest) -> Result[GetApiResponse]:
        route = routes.GET_API.compile().insert_path_param(quote(req.api_id, safe=""))

        return parse_response(await http.fetch(route), GetApiResponse)

    async def delete_api(self, http: HttpService, req: DeleteApiRequest) -> Result[None]:
        """Permanently delete an api; its keys are revoked with it."""
        route = routes.DELETE_API.compile().insert_path_param(quote(req.api_id, safe=""))

        return parse_empty_response(await http.fetch(route))

    async def list_keys(
        self, http: HttpService, req: ListKeysRequest
    ) -> Result[ListKeysResponse]:
        route = routes.LIST_KEYS.compile().insert_path_param(quote(req.api_id, safe=""))
        route.insert_query_param("limit", req.limit)

        if req.offset is not None:
            route.insert_query_param("offset", req.offset)
        if req.cursor is not None:
            route.insert_query_param("cursor", quote(req.cursor, safe=""))
        if req.owner_id is not None:
            route.insert_query_param("ownerId", quote(req.owner_id, safe=""))

        return parse_response(await http.fetch(route), ListKeysResponse)
