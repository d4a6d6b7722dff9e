"""
i18n (Internationalization) package

Language catalog, locale helpers and the source/target language
preferences used by the translation relationship graph.
"""

from .catalog import DEFAULT_LANGUAGES, LanguageCatalog, LanguageInfo
from .locale import (
    RTL_LOCALES,
    base_language,
    is_rtl_locale,
    parse_accept_language,
    text_direction,
)
from .preferences import LanguagePreferenceStore

__all__ = [
    "DEFAULT_LANGUAGES",
    "LanguageCatalog",
    "LanguageInfo",
    "LanguagePreferenceStore",
    "RTL_LOCALES",
    "base_language",
    "is_rtl_locale",
    "parse_accept_language",
    "text_direction",
]
