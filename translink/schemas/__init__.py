from .content import ContentSnapshot
from .language import LanguageBadge, LanguageSettings, LanguageStatistic, TranslationPair

__all__ = [
    "ContentSnapshot",
    "LanguageBadge",
    "LanguageSettings",
    "LanguageStatistic",
    "TranslationPair",
]
