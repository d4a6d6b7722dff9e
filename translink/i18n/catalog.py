"""
Language Catalog

Registry of the language codes the translation core accepts, with display
metadata for each. The built-in table is fixed; other components contribute
entries through the ``languages.supported`` filter hook, later entries
winning on key collision.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from translink.i18n.locale import base_language, parse_accept_language, text_direction
from translink.plugins.hooks import FILTER_SUPPORTED_LANGUAGES
from translink.plugins.registry import HookRegistry

logger = logging.getLogger(__name__)

UNKNOWN_SYMBOL = "🌍"


@dataclass(frozen=True)
class LanguageInfo:
    """Display metadata for one language code."""

    code: str
    name: str
    native_name: str
    symbol: str = UNKNOWN_SYMBOL
    direction: str = "ltr"

    @classmethod
    def from_mapping(cls, code: str, data: Mapping[str, Any]) -> LanguageInfo:
        """Build an entry from a loose mapping contributed by an extension.

        Only ``name`` is required; ``native_name`` defaults to it, the
        direction is derived from the code.
        """
        name = data.get("name")
        if not name:
            raise ValueError(f"Language entry '{code}' has no name")
        return cls(
            code=code,
            name=name,
            native_name=data.get("native_name") or name,
            symbol=data.get("symbol") or data.get("flag") or UNKNOWN_SYMBOL,
            direction=data.get("direction") or text_direction(code),
        )


# ── Built-in table ────────────────────────────────────────────────────────────

DEFAULT_LANGUAGES: tuple[LanguageInfo, ...] = (
    LanguageInfo("fr", "French", "Français", "🇫🇷"),
    LanguageInfo("en", "English", "English", "🇺🇸"),
    LanguageInfo("es", "Spanish", "Español", "🇪🇸"),
    LanguageInfo("de", "German", "Deutsch", "🇩🇪"),
    LanguageInfo("it", "Italian", "Italiano", "🇮🇹"),
    LanguageInfo("pt", "Portuguese", "Português", "🇵🇹"),
    LanguageInfo("nl", "Dutch", "Nederlands", "🇳🇱"),
    LanguageInfo("ru", "Russian", "Русский", "🇷🇺"),
    LanguageInfo("ja", "Japanese", "日本語", "🇯🇵"),
    LanguageInfo("zh", "Chinese", "中文", "🇨🇳"),
)


class LanguageCatalog:
    """Supported languages, built-ins merged with hook contributions."""

    def __init__(
        self,
        hooks: HookRegistry | None = None,
        languages: tuple[LanguageInfo, ...] = DEFAULT_LANGUAGES,
    ) -> None:
        self.hooks = hooks or HookRegistry()
        self._builtin = {info.code: info for info in languages}

    # ── Extension point ───────────────────────────────────────────────────────

    def register(self, entries: Mapping[str, LanguageInfo | Mapping[str, Any]], priority: int = 10) -> None:
        """Contribute additional languages through the filter hook.

        Entries are validated here so a bad contribution fails at startup,
        not on every lookup.
        """
        coerced = {
            code: entry if isinstance(entry, LanguageInfo) else LanguageInfo.from_mapping(code, entry)
            for code, entry in entries.items()
        }

        def _merge(languages: dict[str, LanguageInfo]) -> dict[str, LanguageInfo]:
            languages.update(coerced)
            return languages

        self.hooks.add_filter(FILTER_SUPPORTED_LANGUAGES, _merge, priority)
        logger.info("Registered %d language(s): %s", len(coerced), ", ".join(coerced))

    # ── Queries ───────────────────────────────────────────────────────────────

    def list(self) -> dict[str, LanguageInfo]:
        """Return every supported language, in catalog order."""
        languages = self.hooks.apply_filters(FILTER_SUPPORTED_LANGUAGES, dict(self._builtin))
        return dict(languages)

    def info(self, code: str) -> LanguageInfo | None:
        return self.list().get(code)

    def is_valid(self, code: str) -> bool:
        return isinstance(code, str) and code in self.list()

    def invalid_codes(self, codes) -> list[str]:
        """Return the codes from `codes` that are not in the catalog."""
        languages = self.list()
        return [code for code in codes if not isinstance(code, str) or code not in languages]

    def display_name(self, code: str, use_native: bool = False) -> str:
        """Return the language name, or the upper-cased code when unknown."""
        info = self.info(code)
        if info is None:
            return str(code).upper()
        return info.native_name if use_native else info.name

    def symbol(self, code: str) -> str:
        info = self.info(code)
        return info.symbol if info else UNKNOWN_SYMBOL

    def choices(self, include_symbols: bool = True) -> dict[str, str]:
        """Return code -> label pairs for a select input."""
        return {
            code: f"{info.symbol} {info.name}" if include_symbols else info.name
            for code, info in self.list().items()
        }

    # ── Locale resolution ─────────────────────────────────────────────────────

    def resolve_locale(self, locale: str | None, fallback: str = "en") -> str:
        """Map a host locale such as "fr_FR" to a catalog code.

        Returns `fallback` when the locale is empty or its base language is
        not supported.
        """
        if locale:
            code = base_language(locale)
            if self.is_valid(code):
                return code
        return fallback

    def best_match(self, accept_language: str) -> str | None:
        """Return the catalog code best matching an Accept-Language header."""
        return parse_accept_language(accept_language, list(self.list()))
