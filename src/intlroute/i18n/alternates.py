"""Alternate links — ``Link`` header entries for localized equivalents.

Builds, for the page being served, the absolute URL of the same page in
every locale it is reachable in, using the prefix rules in reverse::

    <https://example.com/about>; rel="alternate"; hreflang="en",
    <https://example.com/de/about>; rel="alternate"; hreflang="de",
    <https://example.com/about>; rel="alternate"; hreflang="x-default"

Under domain routing every (domain, locale) pair a mapping serves gets
one entry, on that mapping's host.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from intlroute.config import LocalePrefix, RoutingConfig
from intlroute.http.request import Request
from intlroute.i18n.pathnames import localize_path, quote_path, unprefixed_path

X_DEFAULT = "x-default"


@dataclass(frozen=True, slots=True)
class AlternateLink:
    url: str
    hreflang: str

    def to_header_value(self) -> str:
        return f'<{self.url}>; rel="alternate"; hreflang="{self.hreflang}"'


def _public_path(path: str, locale: str, default_locale: str, config: RoutingConfig) -> str:
    """The path a visitor uses for *locale*, given the applicable default."""
    if config.locale_prefix is LocalePrefix.AS_NEEDED and locale == default_locale:
        return path
    return localize_path(path, locale)


def alternate_links(request: Request, config: RoutingConfig) -> list[AlternateLink]:
    """Alternate URLs of the current page, one per reachable locale.

    Paths are percent-encoded so the URLs are safe in a header value.
    """
    path = quote_path(unprefixed_path(request.path, config))
    scheme = request.origin_scheme

    if config.uses_domains:
        return [
            AlternateLink(
                url=f"{scheme}://{domain.domain}"
                f"{_public_path(path, locale, domain.default_locale, config)}",
                hreflang=locale,
            )
            for domain in config.domains
            for locale in domain.locales
        ]

    origin = f"{scheme}://{request.host}" if request.host else ""
    links = [
        AlternateLink(
            url=f"{origin}{_public_path(path, locale, config.default_locale, config)}",
            hreflang=locale,
        )
        for locale in config.locales
    ]
    # x-default points at the unprefixed URL, where the locale is detected
    links.append(AlternateLink(url=f"{origin}{path}", hreflang=X_DEFAULT))
    return links


def format_link_header(links: Iterable[AlternateLink]) -> str:
    """Join links into a single ``Link`` header value."""
    return ", ".join(link.to_header_value() for link in links)
