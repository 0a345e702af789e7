"""Locale resolution and request transformation.

Pipeline, leaf-first:
    accept_language -- Accept-Language parsing and matching
    resolver        -- ordered rule chain producing a Resolution
    strategy        -- PrefixStrategy / DomainStrategy producing a Decision
    alternates      -- Link header with hreflang alternates
    routing         -- LocaleRouting engine and RoutingOutcome
    middleware      -- LocaleMiddleware (protocol middleware)
    context         -- get_locale() / locale_from_request()
    matcher         -- PathMatcher, which paths are routed
"""

from intlroute.i18n.accept_language import (
    LanguageRange,
    best_locale,
    match_accept_language,
    parse_accept_language,
)
from intlroute.i18n.alternates import AlternateLink, alternate_links, format_link_header
from intlroute.i18n.context import get_locale, locale_from_request
from intlroute.i18n.matcher import PathMatcher
from intlroute.i18n.middleware import LocaleMiddleware
from intlroute.i18n.resolver import (
    DEFAULT_RULES,
    LocaleResolver,
    LocaleSource,
    Resolution,
    ResolutionRule,
    resolve,
)
from intlroute.i18n.routing import LocaleRouting, RoutingOutcome
from intlroute.i18n.strategy import (
    Decision,
    DecisionKind,
    DomainStrategy,
    PrefixStrategy,
    RoutingStrategy,
    select_strategy,
)

__all__ = [
    "DEFAULT_RULES",
    "AlternateLink",
    "Decision",
    "DecisionKind",
    "DomainStrategy",
    "LanguageRange",
    "LocaleMiddleware",
    "LocaleResolver",
    "LocaleRouting",
    "LocaleSource",
    "PathMatcher",
    "PrefixStrategy",
    "Resolution",
    "ResolutionRule",
    "RoutingOutcome",
    "RoutingStrategy",
    "alternate_links",
    "best_locale",
    "format_link_header",
    "get_locale",
    "locale_from_request",
    "match_accept_language",
    "parse_accept_language",
    "resolve",
    "select_strategy",
]
