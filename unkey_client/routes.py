"""
Route Table

Static (method, uri template) descriptors for every API operation, and the
per-call CompiledRoute that resolves path placeholders and query params.
"""

from dataclasses import dataclass, field
from typing import Any, List, Tuple

PLACEHOLDER = "{}"


@dataclass(frozen=True)
class Route:
    """An HTTP method paired with a uri template using `{}` placeholders."""
    method: str
    uri: str

    def compile(self) -> "CompiledRoute":
        """Create a fresh, independent CompiledRoute for a single call."""
        return CompiledRoute(method=self.method, uri=self.uri)


@dataclass
class CompiledRoute:
    """
    A mutable expansion of a Route for one request.

    Path params fill placeholders left to right, one per call. Query params
    keep insertion order and are never deduplicated.
    """
    method: str
    uri: str
    params: List[Tuple[str, str]] = field(default_factory=list)

    def insert_path_param(self, value: Any) -> "CompiledRoute":
        """
        Replace the first remaining placeholder with `value`.

        Once the template has no placeholders left this does nothing.
        """
        self.uri = self.uri.replace(PLACEHOLDER, str(value), 1)
        return self

    def insert_query_param(self, name: str, value: Any) -> "CompiledRoute":
        """Append a query param; repeated names are kept."""
        self.params.append((name, str(value)))
        return self

    def build_query_string(self) -> str:
        """Render the params as `?a=b&c=d`, or an empty string if there are none."""
        if not self.params:
            return ""
        return "?" + "&".join(f"{name}={value}" for name, value in self.params)

    @property
    def endpoint(self) -> str:
        """The resolved path plus query string."""
        return self.uri + self.build_query_string()


# Keys
CREATE_KEY = Route("POST", "/keys")
VERIFY_KEY = Route("POST", "/keys/verify")
REVOKE_KEY = Route("DELETE", "/keys/{}")
UPDATE_KEY = Route("PUT", "/keys/{}")
GET_KEY = Route("GET", "/keys/{}")
UPDATE_REMAINING = Route("POST", "/keys/{}/remaining")
GET_VERIFICATIONS = Route("GET", "/keys/{}/verifications")

# Apis
GET_API = Route("GET", "/apis/{}")
DELETE_API = Route("DELETE", "/apis/{}")
LIST_KEYS = Route("GET", "/apis/{}/keys")
