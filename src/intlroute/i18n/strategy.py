"""Routing strategies — rewrite or redirect for a resolved locale.

Two variants of one capability, chosen once per configuration by
``select_strategy()``:

- ``PrefixStrategy`` encodes the locale as the leading path segment.
- ``DomainStrategy`` additionally honours per-host locale subsets and
  redirects across hosts when the current one cannot serve the locale.

Both return a ``Decision``. A rewrite only changes the internal routing
target; a redirect changes the URL the client sees.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from intlroute.config import LocalePrefix, RoutingConfig
from intlroute.http.request import Request
from intlroute.i18n.pathnames import localize_path, split_locale_prefix
from intlroute.i18n.resolver import Resolution


class DecisionKind(Enum):
    REWRITE = "rewrite"
    REDIRECT = "redirect"


@dataclass(frozen=True, slots=True)
class Decision:
    """What to do with the request.

    ``target_host`` is only set for redirects that leave the current host.
    """

    kind: DecisionKind
    target_path: str
    target_host: str | None = None

    @property
    def is_redirect(self) -> bool:
        return self.kind is DecisionKind.REDIRECT


def rewrite(path: str) -> Decision:
    return Decision(DecisionKind.REWRITE, path)


def redirect(path: str, host: str | None = None) -> Decision:
    return Decision(DecisionKind.REDIRECT, path, host)


class RoutingStrategy(Protocol):
    """Decides how a request reaches the page for its resolved locale."""

    def decide(self, resolution: Resolution, request: Request) -> Decision: ...


class PrefixStrategy:
    """Locale lives in the first path segment.

    - A prefixed path is served as-is (rewritten to canonical casing),
      even for the default locale, so explicit URLs never loop.
    - An unprefixed path is redirected to gain the prefix, except for
      the default locale under ``as-needed``, which is rewritten.
    - A prefix that differs from the resolved locale is replaced by a
      redirect to the path the resolved locale is served under.
    """

    __slots__ = ("config",)

    def __init__(self, config: RoutingConfig) -> None:
        self.config = config

    def decide(self, resolution: Resolution, request: Request) -> Decision:
        return self._decide_for_default(resolution, request, self.config.default_locale)

    def _decide_for_default(
        self,
        resolution: Resolution,
        request: Request,
        default_locale: str,
    ) -> Decision:
        prefix, rest = split_locale_prefix(request.path, self.config)
        target = localize_path(rest, resolution.locale)
        if prefix is not None and prefix != resolution.locale:
            # Stray prefix the resolver did not honour
            if (
                self.config.locale_prefix is LocalePrefix.AS_NEEDED
                and resolution.locale == default_locale
            ):
                return redirect(rest)
            return redirect(target)
        if prefix is not None:
            return rewrite(target)
        if self.config.locale_prefix is LocalePrefix.ALWAYS:
            return redirect(target)
        if resolution.locale == default_locale:
            return rewrite(target)
        return redirect(target)


class DomainStrategy(PrefixStrategy):
    """Prefix routing scoped to the domain the request arrived on.

    Hosts without a mapping (e.g. ``localhost`` during development) get
    plain prefix behaviour against the global default locale.
    """

    __slots__ = ()

    def decide(self, resolution: Resolution, request: Request) -> Decision:
        domain = resolution.matched_domain or self.config.domain_for_host(request.host)
        if domain is None:
            return super().decide(resolution, request)
        if domain.serves(resolution.locale):
            return self._decide_for_default(resolution, request, domain.default_locale)
        return self._redirect_elsewhere(resolution, request)

    def _redirect_elsewhere(self, resolution: Resolution, request: Request) -> Decision:
        """The current host cannot serve the locale; rewrites cannot cross hosts."""
        _, rest = split_locale_prefix(request.path, self.config)
        candidates = self.config.domains_for_locale(resolution.locale)
        if not candidates:
            # Nobody serves it: drop the prefix and let this host's default apply
            return redirect(rest)
        return redirect(localize_path(rest, resolution.locale), candidates[0].domain)


def select_strategy(config: RoutingConfig) -> RoutingStrategy:
    """``DomainStrategy`` when domains are configured, else ``PrefixStrategy``."""
    if config.uses_domains:
        return DomainStrategy(config)
    return PrefixStrategy(config)
