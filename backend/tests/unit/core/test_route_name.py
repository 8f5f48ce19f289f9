"""Unit tests for route-name derivation and sanitation."""

import re
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from routestats.core.route_name import (
    UNKNOWN_ROUTE_NAME,
    RequestMetricsContext,
    derive_route_name,
    sanitize_route_name,
    set_url_key,
)


class TestSanitizeRouteName:
    """Tests for the colon / slash sanitation rule."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("GET_root", "GET_root"),
            ("GET_/api/:user/:thing", "GET_api_user_thing"),
            ("/a/b/c", "a_b_c"),
            ("a/b", "ab"),
            ("a:b:c", "abc"),
            ("", ""),
        ],
    )
    def test_sanitize(self, raw, expected):
        assert sanitize_route_name(raw) == expected

    def test_only_first_slash_is_dropped(self):
        """The first slash disappears; later ones become underscores."""
        assert sanitize_route_name("x/y/z") == "xy_z"


class TestDeriveRouteName:
    """Tests for derive_route_name resolution order."""

    def test_url_key_wins_over_route(self):
        ctx = RequestMetricsContext(method="GET", route_path="/users", url_key="custom_key")
        assert derive_route_name(ctx) == "custom_key"

    def test_url_key_is_sanitized_too(self):
        ctx = RequestMetricsContext(method="GET", url_key="/v1/:id/edit")
        assert derive_route_name(ctx) == "v1_id_edit"

    def test_empty_url_key_is_ignored(self):
        ctx = RequestMetricsContext(method="GET", route_path="/users", url_key="")
        assert derive_route_name(ctx) == "GET_users"

    def test_root_route(self):
        ctx = RequestMetricsContext(method="GET", route_path="/")
        assert derive_route_name(ctx) == "GET_root"

    def test_templated_route(self):
        ctx = RequestMetricsContext(method="GET", route_path="/api/:user/:thing")
        assert derive_route_name(ctx) == "GET_api_user_thing"

    def test_regex_route(self):
        ctx = RequestMetricsContext(method="DELETE", route_path=re.compile(r"/items/\d+"))
        assert derive_route_name(ctx) == r"DELETE_items_\d+"

    def test_missing_route(self):
        ctx = RequestMetricsContext(method="GET")
        assert derive_route_name(ctx) == UNKNOWN_ROUTE_NAME == "unknown_express_route"


class TestRequestMetricsContext:
    """Tests for building the context from a Starlette request."""

    @staticmethod
    def _request(**scope_extra) -> Request:
        scope = {"type": "http", "method": "PUT", "path": "/x", "headers": [], "state": {}}
        scope.update(scope_extra)
        return Request(scope)

    def test_from_request_reads_route_and_override(self):
        request = self._request(route=SimpleNamespace(path="/things/{id}"))
        set_url_key(request, "things_update")

        ctx = RequestMetricsContext.from_request(request)

        assert ctx == RequestMetricsContext(
            method="PUT", route_path="/things/{id}", url_key="things_update"
        )

    def test_from_request_without_route_or_override(self):
        ctx = RequestMetricsContext.from_request(self._request())

        assert ctx.route_path is None
        assert ctx.url_key is None

    def test_set_url_key_writes_request_state(self):
        request = self._request()
        set_url_key(request, "k")

        assert request.state.statsd_url_key == "k"
        assert request.scope["state"]["statsd_url_key"] == "k"
