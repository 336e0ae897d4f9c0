"""Tests for linkroute.routing.params: parameter merging."""

from linkroute.config import RouteConfig
from linkroute.routing.params import extract_parameters
from linkroute.routing.path import RoutePath, parse_url


class TestExtractParameters:
    def test_bindings_url_query_fragment(self) -> None:
        url = "/item/9?color=red#top"
        params = extract_parameters(parse_url(url), {"id": "9"})
        assert params == {
            "id": "9",
            "route_url": url,
            "color": "red",
            "fragment": "top",
        }

    def test_insertion_order(self) -> None:
        params = extract_parameters(parse_url("/x?b=2&a=1#f"), {"id": "9"})
        assert list(params) == ["id", "route_url", "b", "a", "fragment"]

    def test_later_query_duplicate_wins(self) -> None:
        params = extract_parameters(parse_url("/x?tag=a&tag=b"), {})
        assert params["tag"] == "b"

    def test_query_overrides_binding(self) -> None:
        params = extract_parameters(parse_url("/item/9?id=10"), {"id": "9"})
        assert params["id"] == "10"

    def test_query_overrides_url_key(self) -> None:
        params = extract_parameters(parse_url("/x?route_url=other"), {})
        assert params["route_url"] == "other"

    def test_fragment_overrides_query(self) -> None:
        params = extract_parameters(parse_url("/x?fragment=q#real"), {})
        assert params["fragment"] == "real"

    def test_valueless_query_item_skipped(self) -> None:
        params = extract_parameters(parse_url("/x?flag&y="), {})
        assert "flag" not in params
        assert params["y"] == ""

    def test_no_fragment_key_without_fragment(self) -> None:
        assert "fragment" not in extract_parameters(parse_url("/x"), {})

    def test_empty_fragment_included(self) -> None:
        assert extract_parameters(parse_url("/x#"), {})["fragment"] == ""

    def test_url_key_holds_route_path(self) -> None:
        path = RoutePath(segments=("x",), fragment="f")
        params = extract_parameters(path, {})
        assert params["route_url"] is path

    def test_custom_keys(self) -> None:
        config = RouteConfig(url_key="url", fragment_key="anchor")
        params = extract_parameters(parse_url("/x#top"), {}, config)
        assert params == {"url": "/x#top", "anchor": "top"}

    def test_bindings_not_mutated(self) -> None:
        bindings = {"id": "9"}
        extract_parameters(parse_url("/x?id=1"), bindings)
        assert bindings == {"id": "9"}
