"""
Locale helpers

Pure functions for locale tags as hosts hand them to us:
- base language extraction ("fr_FR", "fr-CA" -> "fr")
- RTL (right-to-left) language detection
- Accept-Language header parsing with quality-value (q=) support
"""

from __future__ import annotations

import re

# ── Constants ─────────────────────────────────────────────────────────────────

# Base language codes whose scripts read right-to-left
RTL_LOCALES: frozenset[str] = frozenset({"ar", "he", "fa", "ur", "yi", "ku"})

_SEPARATORS = re.compile(r"[-_.@]")


# ── Public helpers ────────────────────────────────────────────────────────────


def base_language(locale: str) -> str:
    """Return the lower-cased base language of a locale tag.

    Accepts both BCP 47 ("fr-CA") and POSIX-style ("fr_FR", "de_DE.UTF-8")
    tags, so host locales can be matched against catalog codes.
    """
    return _SEPARATORS.split(locale.strip(), maxsplit=1)[0].lower()


def is_rtl_locale(locale: str) -> bool:
    """Return True when the given locale is right-to-left.

    Compares only the base language, so both "ar" and "ar_SA" are RTL.
    """
    return base_language(locale) in RTL_LOCALES


def text_direction(locale: str) -> str:
    """Return "rtl" or "ltr" for the given locale."""
    return "rtl" if is_rtl_locale(locale) else "ltr"


def parse_accept_language(header: str, supported: list[str]) -> str | None:
    """Parse an Accept-Language header and return the best matching code.

    Algorithm:
    1. Split header into tags with optional q-values (default q=1.0).
    2. Sort by q-value descending.
    3. For each tag, try exact match in `supported`, then base-language match.
    4. Return the first match or None if nothing matches.

    Args:
        header:    Value of the Accept-Language HTTP header, e.g.
                   "fr-CA,fr;q=0.9,en-US;q=0.8,en;q=0.7".
        supported: Ordered list of language codes to choose from.

    Returns:
        The best matching code from `supported`, or None.
    """
    if not header:
        return None

    weighted: list[tuple[float, str]] = []
    for part in header.split(","):
        part = part.strip()
        if not part:
            continue
        if ";q=" in part:
            tag, q_str = part.split(";q=", 1)
            try:
                q = float(q_str.strip())
            except ValueError:
                q = 1.0
        else:
            tag = part
            q = 1.0
        if q <= 0:
            continue
        weighted.append((q, tag.strip()))

    # Stable sort keeps header order among equal q-values
    weighted.sort(key=lambda x: x[0], reverse=True)

    supported_lower = [s.lower() for s in supported]

    for _, tag in weighted:
        tag_lower = tag.lower()
        if tag_lower in supported_lower:
            return supported[supported_lower.index(tag_lower)]
        base = base_language(tag_lower)
        if base in supported_lower:
            return supported[supported_lower.index(base)]

    return None
