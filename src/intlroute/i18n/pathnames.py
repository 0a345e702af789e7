"""Locale-prefix helpers for URL paths.

A locale prefix is the first path segment when it names a supported
locale (case-insensitive). Anything else counts as "no prefix".
"""

from urllib.parse import quote

from intlroute.config import RoutingConfig


def split_locale_prefix(path: str, config: RoutingConfig) -> tuple[str | None, str]:
    """Split *path* into ``(locale, rest)``.

    ``locale`` is the canonical spelling of the leading segment, or None
    when that segment is not a supported locale. ``rest`` always starts
    with ``/``::

        split_locale_prefix("/DE/about", config)  # ("de", "/about")
        split_locale_prefix("/de", config)        # ("de", "/")
        split_locale_prefix("/about", config)     # (None, "/about")
    """
    if not path.startswith("/"):
        path = f"/{path}"
    segment, sep, remainder = path[1:].partition("/")
    locale = config.match_locale(segment)
    if locale is None:
        return None, path
    return locale, f"/{remainder}" if sep else "/"


def localize_path(path: str, locale: str) -> str:
    """Prefix an unprefixed *path* with *locale*; ``/`` becomes ``/<locale>``."""
    if not path or path == "/":
        return f"/{locale}"
    if not path.startswith("/"):
        path = f"/{path}"
    return f"/{locale}{path}"


def unprefixed_path(path: str, config: RoutingConfig) -> str:
    """*path* with any supported locale prefix removed."""
    return split_locale_prefix(path, config)[1]


def quote_path(path: str) -> str:
    """Percent-encode a decoded *path* for ``Location`` and ``Link`` values.

    Header values are latin-1 on the wire, so ``/de/日本`` must go out
    as ``/de/%E6%97%A5%E6%9C%AC``.
    """
    return quote(path, safe="/%")
