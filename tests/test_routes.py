from unkey_client import routes
from unkey_client.routes import CompiledRoute, Route


class TestRouteCompilation:

    def test_compile_copies_template(self):
        compiled = routes.GET_KEY.compile()
        assert compiled.method == "GET"
        assert compiled.uri == "/keys/{}"
        assert compiled.params == []

    def test_path_params_fill_left_to_right(self):
        route = Route("GET", "/apis/{}/keys/{}")
        compiled = route.compile().insert_path_param("5").insert_path_param("1")
        assert compiled.uri == "/apis/5/keys/1"

    def test_missing_path_params_stay_literal(self):
        route = Route("GET", "/apis/{}/keys/{}")
        compiled = route.compile().insert_path_param("5")
        assert compiled.uri == "/apis/5/keys/{}"

    def test_excess_path_params_are_ignored(self):
        compiled = routes.GET_API.compile()
        compiled.insert_path_param("api_1").insert_path_param("api_2")
        assert compiled.uri == "/apis/api_1"

    def test_path_param_uses_string_form(self):
        compiled = Route("GET", "/items/{}").compile().insert_path_param(42)
        assert compiled.uri == "/items/42"

    def test_insert_returns_same_instance(self):
        compiled = routes.CREATE_KEY.compile()
        assert compiled.insert_query_param("a", "b") is compiled
        assert compiled.insert_path_param("x") is compiled

    def test_compile_creates_independent_routes(self):
        first = routes.LIST_KEYS.compile()
        second = routes.LIST_KEYS.compile()

        first.insert_query_param("limit", 10)
        first.insert_path_param("api_1")

        assert first is not second
        assert second.params == []
        assert second.uri == "/apis/{}/keys"
        assert routes.LIST_KEYS.uri == "/apis/{}/keys"


class TestQueryString:

    def test_query_string_order(self):
        compiled = routes.GET_KEY.compile()
        compiled.insert_query_param("test", "value")
        compiled.insert_query_param("js", "bad")
        assert compiled.build_query_string() == "?test=value&js=bad"

    def test_empty_query_string(self):
        assert routes.GET_KEY.compile().build_query_string() == ""

    def test_repeated_keys_are_kept(self):
        compiled = routes.GET_KEY.compile()
        compiled.insert_query_param("tag", "a").insert_query_param("tag", "b")
        assert compiled.build_query_string() == "?tag=a&tag=b"

    def test_endpoint_combines_path_and_query(self):
        compiled = routes.LIST_KEYS.compile().insert_path_param("api_1")
        compiled.insert_query_param("limit", 100)
        assert compiled.endpoint == "/apis/api_1/keys?limit=100"

    def test_compiled_route_can_be_built_directly(self):
        compiled = CompiledRoute(method="POST", uri="/keys")
        assert compiled.endpoint == "/keys"


class TestRouteTable:

    def test_update_key_is_pinned_to_put(self):
        assert routes.UPDATE_KEY.method == "PUT"

    def test_route_table(self):
        table = {
            routes.CREATE_KEY: ("POST", "/keys"),
            routes.VERIFY_KEY: ("POST", "/keys/verify"),
            routes.REVOKE_KEY: ("DELETE", "/keys/{}"),
            routes.GET_KEY: ("GET", "/keys/{}"),
            routes.UPDATE_REMAINING: ("POST", "/keys/{}/remaining"),
            routes.GET_VERIFICATIONS: ("GET", "/keys/{}/verifications"),
            routes.GET_API: ("GET", "/apis/{}"),
            routes.DELETE_API: ("DELETE", "/apis/{}"),
            routes.LIST_KEYS: ("GET", "/apis/{}/keys"),
        }
        for route, (method, uri) in table.items():
            assert (route.method, route.uri) == (method, uri)
