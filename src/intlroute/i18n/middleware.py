"""Locale middleware — resolves the locale, then rewrites or redirects.

Follows the middleware protocol (``async def __call__(request, next)``),
so it composes with any other middleware written the same way.

Usage::

    from intlroute import LocaleMiddleware, RoutingConfig

    locale_mw = LocaleMiddleware(RoutingConfig(
        locales=("en", "de"),
        default_locale="en",
    ))

    response = await locale_mw(request, handler)

On a redirect the handler is not called. On a rewrite it receives the
request with the locale-prefixed path and the ``x-intl-locale`` header,
and ``get_locale()`` returns the resolved locale while it runs. Either
way the response carries the locale cookie.
"""

from collections.abc import Callable

from intlroute.config import RoutingConfig
from intlroute.http.request import Request
from intlroute.http.response import Response
from intlroute.i18n.context import _locale_var
from intlroute.i18n.routing import LocaleRouting
from intlroute.middleware.protocol import Next


class LocaleMiddleware:
    """i18n routing as protocol middleware.

    *matcher* (e.g. ``PathMatcher()``) decides which paths are routed at
    all; requests it rejects are passed to ``next`` unchanged. Without
    one, every request is routed.
    """

    __slots__ = ("matcher", "routing")

    def __init__(
        self,
        config: RoutingConfig | LocaleRouting,
        *,
        matcher: Callable[[str], bool] | None = None,
    ) -> None:
        self.routing = config if isinstance(config, LocaleRouting) else LocaleRouting(config)
        self.matcher = matcher

    async def __call__(self, request: Request, next: Next) -> Response:
        if self.matcher is not None and not self.matcher(request.path):
            return await next(request)

        outcome = self.routing.route(request)
        if outcome.is_redirect:
            return outcome.redirect_response()

        token = _locale_var.set(outcome.locale)
        try:
            response = await next(outcome.rewritten_request())
        finally:
            _locale_var.reset(token)
        return outcome.apply(response)
