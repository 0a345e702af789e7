"""Accept-Language parsing and matching.

Parses the header into language ranges ranked by quality weight, then
maps them onto the configured locales::

    >>> list(match_accept_language("de-AT,en;q=0.5", ("en", "de")))
    ['de', 'en']

Matching per range is exact first, then longest prefix (``en-GB`` ->
``en``), then any configured locale with the same primary language
(``en`` -> ``en-US``). A missing or malformed header yields nothing,
so resolution simply moves on to the next rule.
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# RFC 4647 basic language range, without the "*" wildcard
_TAG_RE = re.compile(r"^[A-Za-z]{1,8}(?:-[A-Za-z0-9]{1,8})*$")


@dataclass(frozen=True, slots=True)
class LanguageRange:
    """One entry of an ``Accept-Language`` header."""

    tag: str
    quality: float
    position: int


def _parse_quality(params: list[str]) -> float | None:
    """Extract ``q`` from the parameters of one entry; None if malformed."""
    for param in params:
        name, sep, value = param.partition("=")
        if name.strip().lower() != "q":
            continue
        if not sep:
            return None
        try:
            quality = float(value.strip())
        except ValueError:
            return None
        if not 0.0 <= quality <= 1.0:
            return None
        return quality
    return 1.0


def parse_accept_language(header: str | None) -> Iterator[LanguageRange]:
    """Yield language ranges by descending quality, header order breaking ties.

    Entries with ``q=0``, a malformed quality, a malformed tag, or the
    ``*`` wildcard are skipped.
    """
    if not header:
        return
    ranges: list[LanguageRange] = []
    for position, part in enumerate(header.split(",")):
        tag, *params = (piece.strip() for piece in part.split(";"))
        if not tag or not _TAG_RE.match(tag):
            continue
        quality = _parse_quality(params)
        if not quality:
            continue
        ranges.append(LanguageRange(tag=tag, quality=quality, position=position))
    ranges.sort(key=lambda r: (-r.quality, r.position))
    yield from ranges


def _match_range(tag: str, locales: tuple[str, ...]) -> str | None:
    """Best configured locale for a single language range."""
    index = {locale.lower(): locale for locale in locales}
    subtags = tag.lower().split("-")
    while subtags:
        found = index.get("-".join(subtags))
        if found is not None:
            return found
        subtags.pop()
    primary = tag.lower().split("-", 1)[0]
    for locale in locales:
        if locale.lower().split("-", 1)[0] == primary:
            return locale
    return None


def match_accept_language(header: str | None, locales: Iterable[str]) -> Iterator[str]:
    """Lazily yield supported locales in the client's order of preference.

    Each supported locale is yielded at most once, in its configured
    casing.
    """
    supported = tuple(locales)
    seen: set[str] = set()
    for language_range in parse_accept_language(header):
        match = _match_range(language_range.tag, supported)
        if match is not None and match not in seen:
            seen.add(match)
            yield match


def best_locale(header: str | None, locales: Iterable[str]) -> str | None:
    """The top supported candidate, or None."""
    return next(match_accept_language(header, locales), None)
