"""
Api Models

Requests and responses for the /apis endpoints.
"""

from typing import List, Optional

from pydantic import Field

from .base import RequestModel, ResponseModel
from .keys import ApiKey

DEFAULT_LIST_LIMIT = 100


class GetApiRequest(RequestModel):
    api_id: str


class GetApiResponse(ResponseModel):
    id: str
    name: str
    workspace_id: str


class DeleteApiRequest(RequestModel):
    api_id: str


class ListKeysRequest(RequestModel):
    """
    Paginated listing of the keys belonging to an api.

    Pagination uses either `offset` or the `cursor` from a previous
    ListKeysResponse.
    """

    api_id: str
    limit: int = Field(default=DEFAULT_LIST_LIMIT, ge=1, le=100)
    offset: Optional[int] = Field(default=None, ge=0)
    cursor: Optional[str] = None
    owner_id: Optional[str] = None

    def set_limit(self, limit: int) -> "ListKeysRequest":
        return self._set(limit=limit)

    def set_offset(self, offset: int) -> "ListKeysRequest":
        return self._set(offset=offset)

    def set_cursor(self, cursor: str) -> "ListKeysRequest":
        return self._set(cursor=cursor)

    def set_owner_id(self, owner_id: str) -> "ListKeysRequest":
        return self._set(owner_id=owner_id)


class ListKeysResponse(ResponseModel):
    keys: List[ApiKey] = Field(default_factory=list)
    total: int
    cursor: Optional[str] = None
