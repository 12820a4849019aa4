import pytest

from routedoc.generator.analyzer import analyze_route, normalize_path
from routedoc.routing.tree import ConstantSegment, HttpMethodSelector, RouteNode, Routing
from routedoc.utils.errors import RouteAnalysisError


class TestNormalizePath:
    def test_trailing_slash_trimmed(self):
        assert normalize_path("/v1/") == "/v1"

    def test_root_kept(self):
        assert normalize_path("/") == "/"

    def test_only_one_slash_trimmed(self):
        assert normalize_path("/v1//") == "/v1/"

    def test_no_trailing_slash_unchanged(self):
        assert normalize_path("/v1") == "/v1"


class TestAnalyzeRoute:
    def test_root_get(self):
        info = analyze_route(Routing().get("/"))
        assert info.method == "GET"
        assert info.url == "/"

    def test_template_reads_root_to_leaf(self):
        info = analyze_route(Routing().get("/api/v1/users/{id}/posts"))
        assert info.template == "/api/v1/users/{id}/posts/"
        assert info.url == "/api/v1/users/{id}/posts"

    def test_nested_routes_join_in_order(self):
        routing = Routing()
        leaf = routing.route("/a").route("b/{x}").route("c").put()
        assert analyze_route(leaf).url == "/a/b/{x}/c"

    def test_path_parameters_required_flags(self):
        info = analyze_route(Routing().get("/files/{dir}/{name?}"))
        assert info.path_parameters == [("dir", True), ("name", False)]

    def test_prefix_and_suffix_kept_in_template(self):
        info = analyze_route(Routing().get("/files/x{id}y"))
        assert info.url == "/files/x{id}y"
        assert info.path_parameters == [("id", True)]

    def test_query_parameters_do_not_change_template(self):
        routing = Routing()
        leaf = routing.route("/search").param("q").optional_param("page").method("GET")
        info = analyze_route(leaf)
        assert info.url == "/search"
        assert info.query_parameters == [("q", True), ("page", False)]
        assert info.path_parameters == []

    def test_missing_method_is_rejected(self):
        node = Routing().route("/items")
        with pytest.raises(RouteAnalysisError) as exc_info:
            analyze_route(node)
        assert exc_info.value.methods == ()

    def test_two_methods_are_rejected(self):
        leaf = Routing().route("/items").method("GET").method("POST")
        with pytest.raises(RouteAnalysisError) as exc_info:
            analyze_route(leaf)
        assert exc_info.value.methods == ("POST", "GET")

    def test_unknown_selector_is_rejected(self):
        detached = RouteNode(HttpMethodSelector("GET"), parent=RouteNode(object()))
        with pytest.raises(RouteAnalysisError):
            analyze_route(detached)

    def test_detached_subtree_has_no_leading_slash(self):
        leaf = RouteNode(HttpMethodSelector("GET"), parent=RouteNode(ConstantSegment("items")))
        assert analyze_route(leaf).url == "items"
