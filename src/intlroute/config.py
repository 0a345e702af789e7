"""Routing configuration.

``RoutingConfig`` is a frozen dataclass, validated once at construction
and read-only afterwards. Every engine component receives it as input
and none of them mutates it::

    config = RoutingConfig(
        locales=("en", "de"),
        default_locale="en",
    )

Misconfiguration raises ``ConfigurationError`` immediately, so a bad
setup fails at startup instead of degrading per request.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from intlroute.errors import ConfigurationError

# Name of the cookie that persists the preferred locale across visits
COOKIE_LOCALE_NAME = "INTL_LOCALE"

# Request header carrying the resolved locale to downstream handlers
HEADER_LOCALE_NAME = "x-intl-locale"

# One year; the preference should outlive any browser session
COOKIE_MAX_AGE = 60 * 60 * 24 * 365


class LocalePrefix(Enum):
    """When a locale segment must appear at the start of the path."""

    ALWAYS = "always"
    AS_NEEDED = "as-needed"


@dataclass(frozen=True, slots=True)
class LocaleCookieConfig:
    """Attributes of the locale cookie. The name is fixed (``COOKIE_LOCALE_NAME``).

    ``httponly`` defaults to False so client-side locale switchers can
    read the current preference.
    """

    max_age: int = COOKIE_MAX_AGE
    path: str = "/"
    domain: str | None = None
    secure: bool = False
    httponly: bool = False
    samesite: str = "lax"


@dataclass(frozen=True, slots=True)
class DomainConfig:
    """Maps a hostname to its default locale and the locales it serves.

    An empty ``locales`` tuple means "every globally supported locale";
    ``RoutingConfig`` fills it in.
    """

    domain: str
    default_locale: str
    locales: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.domain, str) or not self.domain.strip():
            msg = f"Domain must be a non-empty hostname, got {self.domain!r}."
            raise ConfigurationError(msg)
        object.__setattr__(self, "domain", self.domain.strip().lower())
        object.__setattr__(self, "locales", tuple(self.locales))
        if self.locales and self.default_locale.lower() not in {
            loc.lower() for loc in self.locales
        }:
            msg = (
                f"Domain {self.domain!r} has default locale {self.default_locale!r} "
                f"which is not one of its locales {list(self.locales)!r}."
            )
            raise ConfigurationError(msg)

    def serves(self, locale: str) -> bool:
        """True if *locale* (canonical casing) may be served on this domain."""
        return locale in self.locales


@dataclass(frozen=True, slots=True)
class RoutingConfig:
    """Immutable description of how locales map onto URLs.

    Locales are matched case-insensitively; the casing given here is
    the canonical form the engine emits in paths, cookies, and links.
    """

    locales: tuple[str, ...]
    default_locale: str
    locale_prefix: LocalePrefix = LocalePrefix.AS_NEEDED
    locale_detection: bool = True
    alternate_links: bool = True
    domains: tuple[DomainConfig, ...] = ()
    cookie: LocaleCookieConfig = LocaleCookieConfig()

    # Derived lookup tables (lower-case key -> canonical value)
    _locale_index: dict[str, str] = field(init=False, repr=False, compare=False)
    _domain_index: dict[str, DomainConfig] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        locales = tuple(self.locales)
        if not locales:
            msg = "RoutingConfig.locales must contain at least one locale."
            raise ConfigurationError(msg)

        index: dict[str, str] = {}
        for locale in locales:
            if not isinstance(locale, str) or not locale or "/" in locale:
                msg = f"Invalid locale {locale!r}: expected a non-empty tag without '/'."
                raise ConfigurationError(msg)
            key = locale.lower()
            if key in index:
                msg = f"Duplicate locale {locale!r} (already configured as {index[key]!r})."
                raise ConfigurationError(msg)
            index[key] = locale
        object.__setattr__(self, "locales", locales)
        object.__setattr__(self, "_locale_index", index)

        default = index.get(str(self.default_locale).lower())
        if default is None:
            msg = (
                f"Default locale {self.default_locale!r} is not one of the "
                f"supported locales {list(locales)!r}."
            )
            raise ConfigurationError(msg)
        object.__setattr__(self, "default_locale", default)

        try:
            prefix = LocalePrefix(self.locale_prefix)
        except ValueError:
            allowed = ", ".join(p.value for p in LocalePrefix)
            msg = f"Invalid locale_prefix {self.locale_prefix!r}; expected one of: {allowed}."
            raise ConfigurationError(msg) from None
        object.__setattr__(self, "locale_prefix", prefix)

        domains: list[DomainConfig] = []
        domain_index: dict[str, DomainConfig] = {}
        for mapping in self.domains:
            resolved = self._canonical_domain(mapping)
            if resolved.domain in domain_index:
                msg = f"Domain {resolved.domain!r} is configured more than once."
                raise ConfigurationError(msg)
            domain_index[resolved.domain] = resolved
            domains.append(resolved)
        object.__setattr__(self, "domains", tuple(domains))
        object.__setattr__(self, "_domain_index", domain_index)

    def _canonical_domain(self, mapping: DomainConfig) -> DomainConfig:
        """Check a domain against the global locales and fill in its defaults."""
        if not mapping.locales:
            locales = self.locales
        else:
            canonical: list[str] = []
            for locale in mapping.locales:
                match = self.match_locale(locale)
                if match is None:
                    msg = (
                        f"Domain {mapping.domain!r} lists locale {locale!r} which is "
                        f"not one of the supported locales {list(self.locales)!r}."
                    )
                    raise ConfigurationError(msg)
                if match not in canonical:
                    canonical.append(match)
            locales = tuple(canonical)

        default = self.match_locale(mapping.default_locale)
        if default is None or default not in locales:
            msg = (
                f"Domain {mapping.domain!r} has default locale "
                f"{mapping.default_locale!r} which it does not serve."
            )
            raise ConfigurationError(msg)
        return replace(mapping, default_locale=default, locales=locales)

    # -- Lookups --

    @property
    def uses_domains(self) -> bool:
        """True when domain-based routing is configured."""
        return bool(self.domains)

    def match_locale(self, candidate: str | None) -> str | None:
        """Return the canonical spelling of *candidate*, or None if unsupported."""
        if not candidate:
            return None
        return self._locale_index.get(candidate.lower())

    def domain_for_host(self, host: str | None) -> DomainConfig | None:
        """Find the mapping for *host*, trying the exact host then without port."""
        if not host or not self._domain_index:
            return None
        host = host.lower()
        mapping = self._domain_index.get(host)
        if mapping is None and ":" in host:
            mapping = self._domain_index.get(host.rsplit(":", 1)[0])
        return mapping

    def domains_for_locale(self, locale: str) -> tuple[DomainConfig, ...]:
        """All mappings that serve *locale*, in configured order."""
        return tuple(d for d in self.domains if d.serves(locale))

    # -- Factory --

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RoutingConfig:
        """Build a config from plain data, e.g. a parsed TOML table.

        Recognised keys mirror the constructor arguments; ``domains``
        is a list of tables and ``cookie`` a table of cookie attributes.
        """
        allowed = {
            "locales",
            "default_locale",
            "locale_prefix",
            "locale_detection",
            "alternate_links",
            "domains",
            "cookie",
        }
        unknown = sorted(set(data) - allowed)
        if unknown:
            msg = f"Unknown routing configuration keys: {', '.join(unknown)}."
            raise ConfigurationError(msg)
        if "locales" not in data or "default_locale" not in data:
            msg = "Routing configuration requires 'locales' and 'default_locale'."
            raise ConfigurationError(msg)

        kwargs: dict[str, Any] = {
            "locales": _as_tuple(data["locales"], "locales"),
            "default_locale": data["default_locale"],
        }
        if "locale_prefix" in data:
            kwargs["locale_prefix"] = data["locale_prefix"]
        for key in ("locale_detection", "alternate_links"):
            if key in data:
                if not isinstance(data[key], bool):
                    msg = (
                        f"Routing configuration key {key!r} must be true or false, "
                        f"got {data[key]!r}."
                    )
                    raise ConfigurationError(msg)
                kwargs[key] = data[key]

        domains = []
        for entry in data.get("domains", ()):
            try:
                domains.append(
                    DomainConfig(
                        domain=entry["domain"],
                        default_locale=entry["default_locale"],
                        locales=_as_tuple(entry.get("locales", ()), "domains.locales"),
                    )
                )
            except (AttributeError, KeyError, TypeError) as exc:
                msg = f"Invalid domain entry {entry!r}: {exc}"
                raise ConfigurationError(msg) from exc
        kwargs["domains"] = tuple(domains)

        if "cookie" in data:
            try:
                kwargs["cookie"] = LocaleCookieConfig(**data["cookie"])
            except TypeError as exc:
                msg = f"Invalid cookie configuration: {exc}"
                raise ConfigurationError(msg) from exc

        return cls(**kwargs)


def _as_tuple(value: Any, key: str) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        msg = f"Routing configuration key {key!r} must be a list of locales."
        raise ConfigurationError(msg)
    return tuple(value)
