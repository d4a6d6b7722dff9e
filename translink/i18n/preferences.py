"""
Language Preference Store

Reads and writes the configured source language and target languages. The
values live in one named option of the host (a dict with ``source_language``
and ``target_languages``); every code is validated against the catalog
before anything is written.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from translink.config import Settings
from translink.config import settings as default_settings
from translink.exceptions import LanguageValidationError
from translink.i18n.catalog import LanguageCatalog
from translink.schemas.language import LanguageSettings, TranslationPair
from translink.storage.interfaces import OptionStore

logger = logging.getLogger(__name__)


def _unique(codes: Iterable[str]) -> list[str]:
    seen: dict[str, None] = {}
    for code in codes:
        seen.setdefault(code, None)
    return list(seen)


class LanguagePreferenceStore:
    def __init__(
        self,
        options: OptionStore,
        catalog: LanguageCatalog,
        settings: Settings | None = None,
    ) -> None:
        self.options = options
        self.catalog = catalog
        self.settings = settings or default_settings

    @property
    def option_name(self) -> str:
        return self.settings.language_settings_option

    def _load(self) -> dict[str, Any]:
        stored = self.options.get(self.option_name)
        return dict(stored) if isinstance(stored, dict) else {}

    # ── Reads ─────────────────────────────────────────────────────────────────

    def get_source(self) -> str:
        """Return the configured source language (settings default when unset)."""
        return self._load().get("source_language") or self.settings.default_source_language

    def get_targets(self) -> list[str]:
        """Return the configured target languages, ordered and de-duplicated."""
        targets = self._load().get("target_languages")
        if targets is None:
            targets = self.settings.default_target_languages
        return _unique(targets)

    def snapshot(self) -> LanguageSettings:
        return LanguageSettings(source_language=self.get_source(), target_languages=self.get_targets())

    def translation_pairs(self) -> list[TranslationPair]:
        """One pair per target that differs from the source."""
        source = self.get_source()
        return [
            TranslationPair(
                source=source,
                target=target,
                source_name=self.catalog.display_name(source),
                target_name=self.catalog.display_name(target),
                source_symbol=self.catalog.symbol(source),
                target_symbol=self.catalog.symbol(target),
            )
            for target in self.get_targets()
            if target != source
        ]

    # ── Writes ────────────────────────────────────────────────────────────────

    def set_source(self, code: str) -> None:
        """Store a new source language.

        Raises:
            LanguageValidationError: if `code` is not in the catalog; nothing is written.
        """
        invalid = self.catalog.invalid_codes([code])
        if invalid:
            raise LanguageValidationError(invalid, field="source_language")

        data = self._load()
        data["source_language"] = code
        self.options.set(self.option_name, data)
        logger.info("Source language set to %s", code)
        if code in self.get_targets():
            logger.warning("Source language %s is also a target; no %s->%s pair is offered", code, code, code)

    def set_targets(self, codes: Iterable[str]) -> None:
        """Replace the target languages.

        Every code is checked before the write, so a single invalid code
        leaves the stored targets untouched. The source language is
        accepted as a target but never forms a pair; that is logged.

        Raises:
            LanguageValidationError: listing every invalid code.
        """
        codes = list(codes)
        invalid = self.catalog.invalid_codes(codes)
        if invalid:
            raise LanguageValidationError(invalid, field="target_languages")

        data = self._load()
        data["target_languages"] = _unique(codes)
        self.options.set(self.option_name, data)
        logger.info("Target languages set to %s", ", ".join(data["target_languages"]) or "(none)")
        source = self.get_source()
        if source in data["target_languages"]:
            logger.warning("Target %s is the source language; no %s->%s pair is offered", source, source, source)
