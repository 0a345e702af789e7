"""intlroute exception hierarchy.

Shared across the configuration layer, the routing engine, and the CLI
so every module raises and catches the same types.
"""


class IntlRouteError(Exception):
    """Base for all intlroute-specific errors."""


class ConfigurationError(IntlRouteError):
    """Raised when a routing configuration is invalid.

    Raised eagerly while ``RoutingConfig`` / ``DomainConfig`` are
    constructed, so a bad configuration fails at startup instead of
    on every request.
    """
