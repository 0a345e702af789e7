"""Immutable HTTP request descriptor.

Frozen metadata, built once from the ASGI scope. The routing engine
only reads requests; a rewrite produces a new request via
``with_path()`` rather than changing the original.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from intlroute.http.cookies import parse_cookies
from intlroute.http.headers import Headers


def _first_value(value: str | None) -> str | None:
    """First entry of a comma-separated proxy header, stripped."""
    if not value:
        return None
    first = value.split(",", 1)[0].strip()
    return first or None


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Cookies are parsed once at creation time (in ``from_asgi``) and
    stored as a frozen field, not re-parsed on every access.
    """

    method: str
    path: str
    query_string: str
    headers: Headers
    cookies: Mapping[str, str]
    scheme: str = "http"
    server: tuple[str, int] | None = None
    client: tuple[str, int] | None = None

    # -- Computed properties --

    @property
    def host(self) -> str | None:
        """Host the client addressed, preferring ``X-Forwarded-Host``.

        Falls back to the ``Host`` header, then to the ASGI server
        address. Lower-cased; the port is kept.
        """
        host = _first_value(self.headers.get("x-forwarded-host")) or _first_value(
            self.headers.get("host")
        )
        if host is None and self.server is not None:
            name, port = self.server
            default_port = 443 if self.scheme == "https" else 80
            host = name if port in (None, default_port) else f"{name}:{port}"
        return host.lower() if host else None

    @property
    def origin_scheme(self) -> str:
        """Scheme the client used, preferring ``X-Forwarded-Proto``."""
        return (_first_value(self.headers.get("x-forwarded-proto")) or self.scheme).lower()

    @property
    def accept_language(self) -> str | None:
        """Raw ``Accept-Language`` header value."""
        return self.headers.get("accept-language")

    @property
    def url(self) -> str:
        """Path plus query string."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    # -- Derived requests --

    def with_path(self, path: str) -> Request:
        """Return a copy routed to *path*; query string and headers are kept."""
        return replace(self, path=path)

    def with_header(self, name: str, value: str) -> Request:
        """Return a copy with *name* set to *value*."""
        return replace(self, headers=self.headers.with_header(name, value))

    # -- Factories --

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        headers = Headers(tuple(scope.get("headers", ())))
        server = scope.get("server")
        client = scope.get("client")
        query = scope.get("query_string", b"")
        return cls(
            method=scope.get("method", "GET"),
            path=scope["path"],
            query_string=query.decode("latin-1") if isinstance(query, bytes) else query,
            headers=headers,
            cookies=parse_cookies(headers.get("cookie", "")),
            scheme=scope.get("scheme", "http"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
        )

    @classmethod
    def build(
        cls,
        url: str,
        *,
        method: str = "GET",
        host: str | None = None,
        headers: Mapping[str, str] | None = None,
        cookies: Mapping[str, str] | None = None,
        scheme: str = "http",
    ) -> Request:
        """Build a request without an ASGI server (CLI, tests, previews).

        *url* may carry a query string. *host* and *cookies* are
        shorthands for the ``Host`` and ``Cookie`` headers.
        """
        path, _, query = url.partition("?")
        merged: dict[str, str] = {}
        if host is not None:
            merged["host"] = host
        if cookies:
            merged["cookie"] = "; ".join(f"{k}={v}" for k, v in cookies.items())
        merged.update({k.lower(): v for k, v in (headers or {}).items()})
        built = Headers.from_mapping(merged)
        return cls(
            method=method.upper(),
            path=path or "/",
            query_string=query,
            headers=built,
            cookies=parse_cookies(built.get("cookie", "")),
            scheme=scheme,
        )
