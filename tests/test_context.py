"""Tests for intlroute.i18n.context — request-scoped locale access."""

import pytest

from intlroute.config import COOKIE_LOCALE_NAME, HEADER_LOCALE_NAME
from intlroute.http.request import Request
from intlroute.i18n.context import _locale_var, get_locale, locale_from_request


class TestGetLocale:
    def test_outside_request_raises(self) -> None:
        with pytest.raises(LookupError, match="No active locale"):
            get_locale()

    def test_inside_request(self) -> None:
        token = _locale_var.set("de")
        try:
            assert get_locale() == "de"
        finally:
            _locale_var.reset(token)


class TestLocaleFromRequest:
    def test_header_first(self) -> None:
        request = Request.build(
            "/fr/about",
            headers={HEADER_LOCALE_NAME: "de"},
            cookies={COOKIE_LOCALE_NAME: "en"},
        )
        assert locale_from_request(request) == "de"

    def test_cookie_second(self) -> None:
        request = Request.build("/fr/about", cookies={COOKIE_LOCALE_NAME: "en"})
        assert locale_from_request(request) == "en"

    def test_path_segment_last(self) -> None:
        assert locale_from_request(Request.build("/fr/about")) == "fr"

    def test_nothing_to_go_on(self) -> None:
        with pytest.raises(LookupError, match="Unable to find the request locale"):
            locale_from_request(Request.build("/"))
