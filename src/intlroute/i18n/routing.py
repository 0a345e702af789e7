"""Locale routing engine — resolver, strategy, and response side effects.

``LocaleRouting`` is built once per process from a ``RoutingConfig``.
For each request, ``route()`` runs the pipeline

    LocaleResolver -> RoutingStrategy -> alternate links

and returns a ``RoutingOutcome`` that knows how to apply itself: as a
rewritten ``Request``, as a redirect ``Response``, or as extra headers
for a raw ASGI response. All per-request values travel in the outcome;
the engine holds no request state.
"""

import logging
from dataclasses import dataclass

from intlroute.config import COOKIE_LOCALE_NAME, HEADER_LOCALE_NAME, RoutingConfig
from intlroute.http.cookies import SetCookie
from intlroute.http.request import Request
from intlroute.http.response import Redirect, Response
from intlroute.i18n.alternates import alternate_links, format_link_header
from intlroute.i18n.pathnames import quote_path
from intlroute.i18n.resolver import LocaleResolver, Resolution
from intlroute.i18n.strategy import Decision, RoutingStrategy, select_strategy

logger = logging.getLogger("intlroute.routing")


@dataclass(frozen=True, slots=True)
class RoutingOutcome:
    """Everything decided for one request."""

    request: Request
    resolution: Resolution
    decision: Decision
    cookie: SetCookie
    link_header: str | None = None

    @property
    def locale(self) -> str:
        return self.resolution.locale

    @property
    def is_redirect(self) -> bool:
        return self.decision.is_redirect

    @property
    def location(self) -> str:
        """Redirect target: a path on this host, or an absolute URL on another.

        The path is percent-encoded; the query string of the original
        request is preserved.
        """
        target = quote_path(self.decision.target_path)
        if self.request.query_string:
            target = f"{target}?{self.request.query_string}"
        if self.decision.target_host is not None:
            return f"{self.request.origin_scheme}://{self.decision.target_host}{target}"
        return target

    def rewritten_request(self) -> Request:
        """The request as downstream handlers should see it."""
        return self.request.with_path(self.decision.target_path).with_header(
            HEADER_LOCALE_NAME, self.locale
        )

    def redirect_response(self) -> Response:
        return self.apply(Redirect(self.location).to_response())

    def apply(self, response: Response) -> Response:
        """Attach the locale cookie and, for servable responses, the Link header."""
        response = response.with_set_cookie(self.cookie)
        if self.link_header and not self.is_redirect:
            response = response.with_header("Link", self.link_header)
        return response

    def extra_headers(self) -> list[tuple[bytes, bytes]]:
        """The same side effects as raw ASGI header pairs."""
        headers = [(b"set-cookie", self.cookie.to_header_value().encode("latin-1"))]
        if self.link_header and not self.is_redirect:
            headers.append((b"link", self.link_header.encode("latin-1")))
        return headers


class LocaleRouting:
    """The engine: configuration plus the strategy selected for it.

    Usage::

        routing = LocaleRouting(RoutingConfig(locales=("en", "de"), default_locale="en"))
        outcome = routing.route(Request.build("/", headers={"accept-language": "de"}))
        outcome.decision  # Decision(kind=REDIRECT, target_path="/de")
    """

    __slots__ = ("config", "resolver", "strategy")

    def __init__(
        self,
        config: RoutingConfig,
        *,
        resolver: LocaleResolver | None = None,
        strategy: RoutingStrategy | None = None,
    ) -> None:
        self.config = config
        self.resolver = resolver or LocaleResolver(config)
        self.strategy = strategy or select_strategy(config)

    def route(self, request: Request) -> RoutingOutcome:
        resolution = self.resolver.resolve(request)
        decision = self.strategy.decide(resolution, request)
        link_header = None
        if self.config.alternate_links and not decision.is_redirect:
            link_header = format_link_header(alternate_links(request, self.config))
        logger.debug(
            "%s %s -> locale=%s source=%s %s %s%s",
            request.method,
            request.path,
            resolution.locale,
            resolution.source.value,
            decision.kind.value,
            decision.target_host or "",
            decision.target_path,
        )
        return RoutingOutcome(
            request=request,
            resolution=resolution,
            decision=decision,
            cookie=self.locale_cookie(resolution.locale),
            link_header=link_header,
        )

    def locale_cookie(self, locale: str) -> SetCookie:
        cfg = self.config.cookie
        return SetCookie(
            name=COOKIE_LOCALE_NAME,
            value=locale,
            max_age=cfg.max_age,
            path=cfg.path,
            domain=cfg.domain,
            secure=cfg.secure,
            httponly=cfg.httponly,
            samesite=cfg.samesite,
        )
