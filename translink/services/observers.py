"""
Relationship Observers

Read-only views over the link graph for list screens: the language badge
of a row, links to its siblings, the "Translate to ..." actions still
available, and per-language counts. Nothing here writes.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from translink.i18n.catalog import LanguageCatalog
from translink.i18n.preferences import LanguagePreferenceStore
from translink.models.translation import RecordId
from translink.schemas.language import LanguageBadge, LanguageStatistic
from translink.services.link_graph import TranslationLinkGraph

logger = logging.getLogger(__name__)


class TranslationOverview:
    def __init__(
        self,
        graph: TranslationLinkGraph,
        catalog: LanguageCatalog,
        preferences: LanguagePreferenceStore,
    ) -> None:
        self.graph = graph
        self.catalog = catalog
        self.preferences = preferences

    def _badge(self, record_id: RecordId, code: str) -> LanguageBadge:
        status = self.graph.status_of(record_id)
        return LanguageBadge(
            record_id=record_id,
            code=code,
            name=self.catalog.display_name(code),
            symbol=self.catalog.symbol(code),
            is_original=status is None,
            status=status.value if status else None,
        )

    def language_badge(self, record_id: RecordId) -> LanguageBadge | None:
        """Badge for the language column; None when the record has no language."""
        code = self.graph.language_of(record_id)
        if code is None:
            return None
        return self._badge(record_id, code)

    def sibling_links(self, record_id: RecordId) -> list[LanguageBadge]:
        """Badges for every other record in the same translation set."""
        return [
            self._badge(other_id, code)
            for code, other_id in self.graph.all_translations(record_id).items()
            if str(other_id) != str(record_id)
        ]

    def missing_targets(self, record_id: RecordId) -> list[str]:
        """Configured target languages this record has no translation for yet.

        Translations themselves offer no actions.
        """
        if self.graph.is_translation(record_id):
            return []
        source = self.graph.language_of(record_id) or self.preferences.get_source()
        return [
            target
            for target in self.preferences.get_targets()
            if target != source and not self.graph.has_translation(record_id, target)
        ]

    def language_statistics(self, record_ids: Iterable[RecordId]) -> list[LanguageStatistic]:
        """Count records per language, one entry for each catalog language."""
        counts = Counter(
            code for code in (self.graph.language_of(record_id) for record_id in record_ids) if code
        )
        stats = [
            LanguageStatistic(code=code, name=info.name, symbol=info.symbol, count=counts.pop(code, 0))
            for code, info in self.catalog.list().items()
        ]
        if counts:
            logger.debug("Records in languages outside the catalog: %s", dict(counts))
        return stats
