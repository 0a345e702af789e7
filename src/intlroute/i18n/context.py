"""Request-scoped locale access for downstream handlers.

The middleware stores the resolved locale in a ContextVar for the
duration of the downstream call, and also forwards it as the
``x-intl-locale`` request header on rewrites.

``get_locale()`` reads the ContextVar; ``locale_from_request()`` works
from the request alone (e.g. in a separate process behind the
middleware).
"""

from contextvars import ContextVar

from intlroute.config import COOKIE_LOCALE_NAME, HEADER_LOCALE_NAME
from intlroute.http.request import Request

_locale_var: ContextVar[str | None] = ContextVar("intlroute_locale", default=None)


def get_locale() -> str:
    """Return the locale resolved for the current request.

    Raises ``LookupError`` if called outside a request routed by
    ``LocaleMiddleware`` or ``LocaleRoutingApp``.
    """
    locale = _locale_var.get()
    if locale is None:
        msg = (
            "No active locale. Ensure LocaleMiddleware (or LocaleRoutingApp) "
            "handles the request before reading the locale."
        )
        raise LookupError(msg)
    return locale


def locale_from_request(request: Request) -> str:
    """Recover the locale from a request that went through the middleware.

    Reads the locale header set on rewrite, then the locale cookie, then
    the first path segment.
    """
    locale = request.headers.get(HEADER_LOCALE_NAME) or request.cookies.get(COOKIE_LOCALE_NAME)
    if not locale:
        locale = request.path.lstrip("/").partition("/")[0]
    if not locale:
        msg = "Unable to find the request locale; is LocaleMiddleware configured?"
        raise LookupError(msg)
    return locale
