"""ASGI adapter — locale routing in front of any ASGI application.

Wraps an existing app (Starlette, FastAPI, a bare ASGI callable, ...)::

    from intlroute import LocaleRoutingApp, RoutingConfig

    app = LocaleRoutingApp(inner_app, RoutingConfig(
        locales=("en", "de"),
        default_locale="en",
    ))

Redirects are answered here without calling the inner app. Rewrites
forward a copy of the scope with the locale-prefixed ``path`` and the
``x-intl-locale`` header; the locale cookie and ``Link`` header are
added to the inner app's ``http.response.start`` message, so streaming
responses pass through untouched.
"""

import logging
from collections.abc import Callable
from urllib.parse import quote

from intlroute._internal.asgi import ASGIApp, Message, Receive, Scope, Send
from intlroute.config import RoutingConfig
from intlroute.http.request import Request
from intlroute.i18n.context import _locale_var
from intlroute.i18n.matcher import PathMatcher
from intlroute.i18n.routing import LocaleRouting, RoutingOutcome
from intlroute.server.sender import send_response

logger = logging.getLogger("intlroute.asgi")


class LocaleRoutingApp:
    """ASGI middleware applying ``LocaleRouting`` to HTTP requests.

    Non-HTTP scopes (lifespan, websocket) and paths rejected by
    *matcher* go to the inner app unchanged. The default matcher skips
    ``/api``, ``/_static`` and file-like paths; pass ``matcher=None`` to
    route everything.
    """

    __slots__ = ("app", "matcher", "routing")

    def __init__(
        self,
        app: ASGIApp,
        config: RoutingConfig | LocaleRouting,
        *,
        matcher: Callable[[str], bool] | None = PathMatcher(),
    ) -> None:
        self.app = app
        self.routing = config if isinstance(config, LocaleRouting) else LocaleRouting(config)
        self.matcher = matcher

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        if self.matcher is not None and not self.matcher(scope["path"]):
            logger.debug("Skipping locale routing for %s", scope["path"])
            await self.app(scope, receive, send)
            return

        outcome = self.routing.route(Request.from_asgi(scope))
        if outcome.is_redirect:
            await send_response(outcome.redirect_response(), send)
            return

        extra_headers = outcome.extra_headers()

        async def send_with_locale(message: Message) -> None:
            if message["type"] == "http.response.start":
                message = {
                    **message,
                    "headers": [*message.get("headers", ()), *extra_headers],
                }
            await send(message)

        token = _locale_var.set(outcome.locale)
        try:
            await self.app(_rewritten_scope(scope, outcome), receive, send_with_locale)
        finally:
            _locale_var.reset(token)


def _rewritten_scope(scope: Scope, outcome: RoutingOutcome) -> Scope:
    """Copy of *scope* routed to the outcome's internal target."""
    rewritten = outcome.rewritten_request()
    forwarded = dict(scope)
    forwarded["path"] = rewritten.path
    forwarded["raw_path"] = quote(rewritten.path).encode("ascii")
    forwarded["headers"] = list(rewritten.headers.raw)
    return forwarded
