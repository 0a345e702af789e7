"""Locale resolution — an ordered chain of named rules.

Each rule is a pure function ``(request, config) -> Resolution | None``.
The resolver evaluates them top to bottom and the first non-None
result wins:

1. ``path_prefix``     leading path segment names a supported locale
2. ``domain_default``  the host maps to a configured domain
3. ``cookie``          the locale cookie holds a supported locale
4. ``header``          ``Accept-Language`` matches a supported locale
5. ``fallback``        the configured default locale

``cookie`` and ``header`` only run when ``locale_detection`` is on.
A path prefix wins even on a domain that does not serve that locale;
the routing strategy turns that case into a cross-domain redirect.
A prefix naming a locale that no configured domain serves is ignored
on mapped hosts, so the domain default is resolved instead.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from intlroute.config import COOKIE_LOCALE_NAME, DomainConfig, RoutingConfig
from intlroute.http.request import Request
from intlroute.i18n.accept_language import best_locale
from intlroute.i18n.pathnames import split_locale_prefix


class LocaleSource(Enum):
    """Why a locale was chosen."""

    PATH_PREFIX = "pathPrefix"
    DOMAIN_DEFAULT = "domainDefault"
    COOKIE = "cookie"
    HEADER = "header"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class Resolution:
    """The locale for one request and where it came from."""

    locale: str
    source: LocaleSource
    matched_domain: DomainConfig | None = None


@dataclass(frozen=True, slots=True)
class ResolutionRule:
    """A named step of the resolution chain."""

    name: str
    apply: Callable[[Request, RoutingConfig], Resolution | None]


# -- Rules --


def from_path_prefix(request: Request, config: RoutingConfig) -> Resolution | None:
    locale, _ = split_locale_prefix(request.path, config)
    if locale is None:
        return None
    domain = config.domain_for_host(request.host)
    if domain is not None and not config.domains_for_locale(locale):
        # No host serves it; the host's default applies instead
        return None
    return Resolution(locale, LocaleSource.PATH_PREFIX, domain)


def from_domain(request: Request, config: RoutingConfig) -> Resolution | None:
    domain = config.domain_for_host(request.host)
    if domain is None:
        return None
    return Resolution(domain.default_locale, LocaleSource.DOMAIN_DEFAULT, domain)


def from_cookie(request: Request, config: RoutingConfig) -> Resolution | None:
    if not config.locale_detection:
        return None
    locale = config.match_locale(request.cookies.get(COOKIE_LOCALE_NAME))
    if locale is None:
        return None
    return Resolution(locale, LocaleSource.COOKIE)


def from_accept_language(request: Request, config: RoutingConfig) -> Resolution | None:
    if not config.locale_detection:
        return None
    locale = best_locale(request.accept_language, config.locales)
    if locale is None:
        return None
    return Resolution(locale, LocaleSource.HEADER)


def fallback(request: Request, config: RoutingConfig) -> Resolution:  # noqa: ARG001
    return Resolution(config.default_locale, LocaleSource.FALLBACK)


DEFAULT_RULES: tuple[ResolutionRule, ...] = (
    ResolutionRule("path_prefix", from_path_prefix),
    ResolutionRule("domain_default", from_domain),
    ResolutionRule("cookie", from_cookie),
    ResolutionRule("header", from_accept_language),
    ResolutionRule("fallback", fallback),
)


# -- Resolver --


class LocaleResolver:
    """Runs the rule chain against a fixed configuration.

    Custom chains may be passed as *rules*; when none of them produces a
    result, the configured default locale is returned as ``FALLBACK``.
    """

    __slots__ = ("config", "rules")

    def __init__(
        self,
        config: RoutingConfig,
        rules: Sequence[ResolutionRule] = DEFAULT_RULES,
    ) -> None:
        self.config = config
        self.rules = tuple(rules)

    def resolve(self, request: Request) -> Resolution:
        for rule in self.rules:
            resolution = rule.apply(request, self.config)
            if resolution is not None:
                return resolution
        return fallback(request, self.config)


def resolve(request: Request, config: RoutingConfig) -> Resolution:
    """Resolve *request* with the default rule chain."""
    return LocaleResolver(config).resolve(request)
