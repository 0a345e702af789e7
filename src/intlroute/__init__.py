"""intlroute — locale detection and i18n routing for ASGI applications.

Decides, per request, which locale to serve and whether to rewrite the
request internally or redirect the client, keeps the preferred locale
in a cookie, and advertises localized alternates in a ``Link`` header.

Basic usage::

    from intlroute import LocaleRoutingApp, RoutingConfig

    routing = RoutingConfig(locales=("en", "de"), default_locale="en")
    app = LocaleRoutingApp(inner_app, routing)

Domain-based routing::

    from intlroute import DomainConfig, RoutingConfig

    routing = RoutingConfig(
        locales=("en", "fr"),
        default_locale="en",
        domains=(
            DomainConfig("us.example.com", "en", locales=("en",)),
            DomainConfig("ca.example.com", "en", locales=("en", "fr")),
        ),
    )
"""

__version__ = "0.1.0"
__all__ = [
    "COOKIE_LOCALE_NAME",
    "HEADER_LOCALE_NAME",
    "ConfigurationError",
    "Decision",
    "DecisionKind",
    "DomainConfig",
    "IntlRouteError",
    "LocaleMiddleware",
    "LocalePrefix",
    "LocaleRouting",
    "LocaleRoutingApp",
    "LocaleSource",
    "PathMatcher",
    "Redirect",
    "Request",
    "Resolution",
    "Response",
    "RoutingConfig",
    "get_locale",
    "locale_from_request",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import intlroute`` fast while providing a clean top-level API.
    """
    if name in (
        "COOKIE_LOCALE_NAME",
        "HEADER_LOCALE_NAME",
        "DomainConfig",
        "LocalePrefix",
        "RoutingConfig",
    ):
        from intlroute import config as _config

        return getattr(_config, name)

    if name in ("ConfigurationError", "IntlRouteError"):
        from intlroute import errors as _errors

        return getattr(_errors, name)

    if name == "Request":
        from intlroute.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from intlroute.http import response as _resp

        return getattr(_resp, name)

    if name == "LocaleRoutingApp":
        from intlroute.asgi import LocaleRoutingApp

        return LocaleRoutingApp

    if name in (
        "Decision",
        "DecisionKind",
        "LocaleMiddleware",
        "LocaleRouting",
        "LocaleSource",
        "PathMatcher",
        "Resolution",
        "get_locale",
        "locale_from_request",
    ):
        from intlroute import i18n as _i18n

        return getattr(_i18n, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
