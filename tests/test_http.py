"""Tests for intlroute.http — headers, cookies, request, response."""

import pytest

from intlroute.http.cookies import SetCookie, parse_cookies
from intlroute.http.headers import Headers
from intlroute.http.request import Request
from intlroute.http.response import Redirect, Response


def _make_scope(**overrides: object) -> dict[str, object]:
    """Build a minimal valid ASGI HTTP scope."""
    base: dict[str, object] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": "/",
        "raw_path": b"/",
        "query_string": b"",
        "root_path": "",
        "headers": [],
        "server": ("localhost", 8000),
        "client": ("127.0.0.1", 54321),
    }
    base.update(overrides)
    return base


class TestHeaders:
    def test_case_insensitive(self) -> None:
        headers = Headers(((b"accept-language", b"de"),))
        assert headers["Accept-Language"] == "de"
        assert "ACCEPT-LANGUAGE" in headers
        assert headers.get("missing") is None

    def test_get_list(self) -> None:
        headers = Headers(((b"x-a", b"1"), (b"x-a", b"2")))
        assert headers.get_list("X-A") == ["1", "2"]
        assert len(headers) == 1

    def test_with_header_replaces(self) -> None:
        headers = Headers(((b"x-intl-locale", b"en"), (b"host", b"example.com")))
        updated = headers.with_header("X-Intl-Locale", "de")
        assert updated.get_list("x-intl-locale") == ["de"]
        assert updated["host"] == "example.com"
        assert headers["x-intl-locale"] == "en"

    def test_from_mapping(self) -> None:
        headers = Headers.from_mapping({"Host": "example.com"})
        assert headers.raw == ((b"host", b"example.com"),)


class TestCookies:
    def test_parse(self) -> None:
        assert parse_cookies("INTL_LOCALE=de; theme=dark") == {
            "INTL_LOCALE": "de",
            "theme": "dark",
        }

    def test_parse_empty(self) -> None:
        assert parse_cookies("") == {}

    def test_parse_quoted_value(self) -> None:
        assert parse_cookies('INTL_LOCALE="de"') == {"INTL_LOCALE": "de"}

    def test_no_equals_ignored(self) -> None:
        assert parse_cookies("broken; a=1") == {"a": "1"}

    def test_set_cookie_serialization(self) -> None:
        cookie = SetCookie(name="INTL_LOCALE", value="de", max_age=60, httponly=False)
        assert cookie.to_header_value() == "INTL_LOCALE=de; Max-Age=60; Path=/; SameSite=lax"

    def test_set_cookie_all_attributes(self) -> None:
        cookie = SetCookie(
            name="INTL_LOCALE",
            value="fr",
            domain=".example.com",
            secure=True,
            samesite="strict",
        )
        header = cookie.to_header_value()
        assert "Domain=.example.com" in header
        assert "Secure" in header
        assert "HttpOnly" in header
        assert "SameSite=strict" in header


class TestRequestFromASGI:
    def test_basic_fields(self) -> None:
        req = Request.from_asgi(_make_scope(path="/de/about", query_string=b"q=1"))
        assert req.method == "GET"
        assert req.path == "/de/about"
        assert req.query_string == "q=1"
        assert req.url == "/de/about?q=1"
        assert req.server == ("localhost", 8000)

    def test_cookies_parsed_once(self) -> None:
        req = Request.from_asgi(_make_scope(headers=[(b"cookie", b"INTL_LOCALE=de")]))
        assert req.cookies == {"INTL_LOCALE": "de"}

    def test_host_prefers_forwarded_host(self) -> None:
        req = Request.from_asgi(
            _make_scope(
                headers=[
                    (b"host", b"internal:8080"),
                    (b"x-forwarded-host", b"CA.example.com, proxy.local"),
                ]
            )
        )
        assert req.host == "ca.example.com"

    def test_host_header(self) -> None:
        req = Request.from_asgi(_make_scope(headers=[(b"host", b"us.example.com")]))
        assert req.host == "us.example.com"

    def test_host_falls_back_to_server(self) -> None:
        assert Request.from_asgi(_make_scope()).host == "localhost:8000"
        assert Request.from_asgi(_make_scope(server=("example.com", 80))).host == "example.com"

    def test_origin_scheme(self) -> None:
        req = Request.from_asgi(_make_scope(headers=[(b"x-forwarded-proto", b"https")]))
        assert req.scheme == "http"
        assert req.origin_scheme == "https"

    def test_accept_language(self) -> None:
        req = Request.from_asgi(_make_scope(headers=[(b"accept-language", b"de, en;q=0.5")]))
        assert req.accept_language == "de, en;q=0.5"


class TestRequestBuild:
    def test_build(self) -> None:
        req = Request.build(
            "/about?x=1",
            host="example.com",
            headers={"Accept-Language": "de"},
            cookies={"INTL_LOCALE": "fr"},
        )
        assert req.path == "/about"
        assert req.query_string == "x=1"
        assert req.host == "example.com"
        assert req.accept_language == "de"
        assert req.cookies == {"INTL_LOCALE": "fr"}

    def test_with_path_keeps_everything_else(self) -> None:
        req = Request.build("/about?x=1", host="example.com")
        rewritten = req.with_path("/en/about")
        assert rewritten.path == "/en/about"
        assert rewritten.query_string == "x=1"
        assert rewritten.host == "example.com"
        assert req.path == "/about"

    def test_with_header(self) -> None:
        req = Request.build("/").with_header("x-intl-locale", "de")
        assert req.headers["x-intl-locale"] == "de"


class TestResponse:
    def test_chainable(self) -> None:
        response = Response("hi", status=201).with_header("X-A", "1")
        assert response.status == 201
        assert response.header("x-a") == "1"
        assert response.header("x-b") is None
        assert response.text == "hi"

    def test_with_set_cookie(self) -> None:
        response = Response().with_set_cookie(SetCookie(name="INTL_LOCALE", value="de", max_age=10))
        cookie = response.cookie("INTL_LOCALE")
        assert cookie is not None
        assert cookie.value == "de"
        assert cookie.max_age == 10
        assert response.cookie("other") is None

    def test_redirect_to_response(self) -> None:
        response = Redirect("/de").to_response()
        assert response.status == 307
        assert response.header("Location") == "/de"
        assert response.body_bytes == b""

    @pytest.mark.parametrize("status", [301, 302, 308])
    def test_redirect_status(self, status: int) -> None:
        assert Redirect("/x", status=status).to_response().status == status
