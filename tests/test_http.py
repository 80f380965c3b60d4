"""Tests for the request/response models and URL joining."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from webwatcher.web.http import HttpMethod, HttpRequest, HttpResponse, full_url


# ── full_url ─────────────────────────────────────────────────────────────────


class TestFullUrl:
    @pytest.mark.parametrize(
        "base, endpoint",
        [
            ("http://website.com", "api/status"),
            ("http://website.com/", "api/status"),
            ("http://website.com", "/api/status"),
            ("http://website.com/", "/api/status"),
        ],
    )
    def test_single_separator(self, base: str, endpoint: str) -> None:
        assert full_url(base, endpoint) == "http://website.com/api/status"

    @pytest.mark.parametrize("endpoint", ["", "   ", None])
    def test_blank_endpoint_returns_base(self, endpoint: str | None) -> None:
        assert full_url("http://website.com/", endpoint) == "http://website.com/"

    def test_idempotent_on_joined_url(self) -> None:
        once = full_url("http://website.com/", "/health")
        assert full_url(once, "") == once
        assert full_url("http://website.com", "health") == once
        assert "//health" not in once

    def test_request_full_url(self) -> None:
        req = HttpRequest.get("ping")
        assert req.full_url("https://api.example.com/v1/") == "https://api.example.com/v1/ping"


# ── HttpRequest ──────────────────────────────────────────────────────────────


class TestHttpRequest:
    def test_get_defaults(self) -> None:
        req = HttpRequest.get()
        assert req.method == HttpMethod.GET
        assert req.endpoint == ""
        assert req.data is None
        assert req.headers == {}

    def test_post_carries_body(self) -> None:
        req = HttpRequest.post("items", {"name": "x"}, {"X-Trace": "1"})
        assert req.method == HttpMethod.POST
        assert req.data == {"name": "x"}
        assert req.headers == {"X-Trace": "1"}

    def test_put_carries_body(self) -> None:
        req = HttpRequest.put("items/1", data=[1, 2])
        assert req.method == HttpMethod.PUT
        assert req.data == [1, 2]

    def test_delete_has_no_body(self) -> None:
        req = HttpRequest.delete("items/1")
        assert req.method == HttpMethod.DELETE
        assert req.data is None

    def test_header_lookup_is_case_insensitive(self) -> None:
        req = HttpRequest.get(headers={"Authorization": "token"})
        assert req.header("authorization") == "token"
        assert req.header("AUTHORIZATION") == "token"
        assert req.header("missing") is None

    def test_duplicate_header_names_last_wins(self) -> None:
        req = HttpRequest.get(headers={"Accept": "text/html", "accept": "application/json"})
        assert len(req.headers) == 1
        assert req.header("Accept") == "application/json"

    def test_frozen(self) -> None:
        req = HttpRequest.get("a")
        with pytest.raises(ValidationError):
            req.endpoint = "b"  # type: ignore[misc]

    def test_headers_are_read_only(self) -> None:
        source = {"X-Trace": "1"}
        req = HttpRequest.get(headers=source)
        with pytest.raises(TypeError):
            req.headers["x"] = "y"  # type: ignore[index]
        source["Leak"] = "x"
        assert dict(req.headers) == {"X-Trace": "1"}

    def test_default_headers_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            HttpRequest.get().headers["x"] = "y"  # type: ignore[index]


# ── HttpResponse ─────────────────────────────────────────────────────────────


class TestHttpResponse:
    def test_valid_and_invalid_factories(self) -> None:
        ok = HttpResponse.valid(200, "OK")
        bad = HttpResponse.invalid(503, "Service Unavailable")
        assert ok.is_valid is True
        assert bad.is_valid is False
        assert bad.status_code == 503

    def test_empty_headers_and_body_are_data(self) -> None:
        resp = HttpResponse.valid(204, "No Content", None, None)  # type: ignore[arg-type]
        assert resp.headers == {}
        assert resp.data == ""

    def test_header_lookup(self) -> None:
        resp = HttpResponse.valid(200, "OK", {"content-type": "application/json"}, "{}")
        assert resp.header("Content-Type") == "application/json"

    def test_frozen(self) -> None:
        resp = HttpResponse.valid(200, "OK")
        with pytest.raises(ValidationError):
            resp.status_code = 500  # type: ignore[misc]

    def test_headers_are_read_only(self) -> None:
        resp = HttpResponse.valid(200, "OK", {"X-A": "1"})
        with pytest.raises(TypeError):
            resp.headers["X-A"] = "tampered"  # type: ignore[index]
        assert resp.model_dump()["headers"] == {"X-A": "1"}
