"""
Core wiring

Builds the translation core from the stores the host injects. Every
collaborator is constructed here and passed down explicitly; hook
subscriptions are made once, in `build_core`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from translink.config import Settings
from translink.config import settings as default_settings
from translink.i18n.catalog import DEFAULT_LANGUAGES, LanguageCatalog, LanguageInfo
from translink.i18n.preferences import LanguagePreferenceStore
from translink.models.translation import RecordId, TranslationEdge
from translink.plugins.hooks import HOOK_CONTENT_DELETED, HOOK_TRANSLATION_COMPLETED
from translink.plugins.registry import HookRegistry
from translink.services.link_graph import TranslationLinkGraph
from translink.services.observers import TranslationOverview
from translink.services.status_lifecycle import StatusLifecycle
from translink.storage.interfaces import AttributeStore, OptionStore, RecordLifecycle

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or default_settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@dataclass
class TranslationCore:
    """The wired components, as handed to host integration code."""

    hooks: HookRegistry
    catalog: LanguageCatalog
    preferences: LanguagePreferenceStore
    graph: TranslationLinkGraph
    lifecycle: StatusLifecycle
    overview: TranslationOverview

    def on_content_changed(self, record_id: RecordId, changed: bool) -> list[RecordId]:
        """Entry point for the host's edit notification."""
        return self.lifecycle.on_content_changed(record_id, changed)

    def handle_translation_completed(
        self, original_id: RecordId, translated_id: RecordId, language: str, **_: Any
    ) -> TranslationEdge:
        return self.graph.link(original_id, translated_id, language)

    def handle_content_deleted(self, record_id: RecordId, **_: Any) -> list[RecordId]:
        return self.graph.unlink(record_id)


def build_core(
    attributes: AttributeStore,
    options: OptionStore,
    records: RecordLifecycle,
    hooks: HookRegistry | None = None,
    settings: Settings | None = None,
    languages: tuple[LanguageInfo, ...] = DEFAULT_LANGUAGES,
) -> TranslationCore:
    settings = settings or default_settings
    hooks = hooks or HookRegistry()

    catalog = LanguageCatalog(hooks, languages)
    preferences = LanguagePreferenceStore(options, catalog, settings)
    graph = TranslationLinkGraph(attributes, records, preferences, settings)
    lifecycle = StatusLifecycle(graph)
    overview = TranslationOverview(graph, catalog, preferences)

    core = TranslationCore(hooks, catalog, preferences, graph, lifecycle, overview)
    lifecycle.register(hooks)
    hooks.add_action(HOOK_TRANSLATION_COMPLETED, core.handle_translation_completed)
    hooks.add_action(HOOK_CONTENT_DELETED, core.handle_content_deleted)
    logger.info("Translation core ready: %d catalog language(s)", len(languages))
    return core


def build_sql_core(session_factory=None, hooks: HookRegistry | None = None, settings: Settings | None = None):
    """Build the core on the SQLAlchemy backends.

    Defaults to ``translink.database.SessionLocal``.
    """
    from translink.storage.sql import SqlAttributeStore, SqlOptionStore, SqlRecordLifecycle

    if session_factory is None:
        from translink.database import SessionLocal

        session_factory = SessionLocal

    return build_core(
        SqlAttributeStore(session_factory),
        SqlOptionStore(session_factory),
        SqlRecordLifecycle(session_factory),
        hooks=hooks,
        settings=settings,
    )
