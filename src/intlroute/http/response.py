"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Immutable by convention,
built incrementally by design.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from intlroute.http.cookies import SetCookie


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status, headers, and cookies. Each call returns a new ``Response``.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()
    cookies: tuple[SetCookie, ...] = ()

    # -- Chainable transformations --

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_set_cookie(self, cookie: SetCookie) -> Response:
        """Return a new Response carrying a prepared ``SetCookie``."""
        return replace(self, cookies=(*self.cookies, cookie))

    # -- Lookups --

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or None."""
        name = name.lower()
        for hname, hvalue in self.headers:
            if hname.lower() == name:
                return hvalue
        return None

    def cookie(self, name: str) -> SetCookie | None:
        """The last ``SetCookie`` for *name*, or None."""
        for cookie in reversed(self.cookies):
            if cookie.name == name:
                return cookie
        return None

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect to *url* (a path or an absolute URL).

    Defaults to 307 so the client repeats the original method.
    """

    url: str
    status: int = 307
    headers: tuple[tuple[str, str], ...] = ()

    def to_response(self) -> Response:
        """Convert to a bodyless ``Response`` with a ``Location`` header."""
        return Response(
            body="",
            status=self.status,
            headers=(("Location", self.url), *self.headers),
        )
