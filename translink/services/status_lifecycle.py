"""
Status Lifecycle: translation status transitions.

    pending   -> completed | error
    completed -> error | pending
    outdated  -> pending | error
    error     -> pending

``outdated`` is not in the table: only a real content change of the
original moves a ``completed`` translation there. Nothing moves a record
back to ``completed`` except a fresh ``TranslationLinkGraph.link`` call
after re-translation.
"""

from __future__ import annotations

import logging
from typing import Any

from translink.exceptions import InvalidOperationError, InvalidStatusTransitionError
from translink.models.translation import RecordId, TranslationStatus
from translink.plugins.hooks import HOOK_CONTENT_UPDATED, HOOK_TRANSLATION_FAILED
from translink.plugins.registry import HookRegistry
from translink.schemas.content import ContentSnapshot
from translink.services.link_graph import TranslationLinkGraph

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: dict[TranslationStatus, frozenset[TranslationStatus]] = {
    TranslationStatus.pending: frozenset({TranslationStatus.completed, TranslationStatus.error}),
    TranslationStatus.completed: frozenset({TranslationStatus.error, TranslationStatus.pending}),
    TranslationStatus.outdated: frozenset({TranslationStatus.pending, TranslationStatus.error}),
    TranslationStatus.error: frozenset({TranslationStatus.pending}),
}


def can_transition(current: TranslationStatus, target: TranslationStatus) -> bool:
    return TranslationStatus(target) in ALLOWED_TRANSITIONS[TranslationStatus(current)]


class StatusLifecycle:
    def __init__(self, graph: TranslationLinkGraph) -> None:
        self.graph = graph

    def status_of(self, record_id: RecordId) -> TranslationStatus | None:
        return self.graph.status_of(record_id)

    def transition(self, record_id: RecordId, target: TranslationStatus) -> TranslationStatus:
        """Move a translated record to `target`, enforcing the transition table.

        Setting the current status again is a no-op.

        Raises:
            InvalidOperationError: if the record is not a translation.
            InvalidStatusTransitionError: if the move is not allowed.
        """
        target = TranslationStatus(target)
        current = self.graph.status_of(record_id)
        if current is None:
            raise InvalidOperationError(
                f"Record {record_id} is not a translation",
                details={"record_id": record_id, "status": target.value},
            )
        if current == target:
            return current
        if not can_transition(current, target):
            raise InvalidStatusTransitionError(current.value, target.value)

        self.graph.set_status(record_id, target)
        logger.info("Translation %s status: %s -> %s", record_id, current.value, target.value)
        return target

    def mark_pending(self, record_id: RecordId) -> TranslationStatus:
        """A re-translation of this record was queued."""
        return self.transition(record_id, TranslationStatus.pending)

    def mark_failed(self, record_id: RecordId) -> TranslationStatus:
        """The translation run for this record failed."""
        return self.transition(record_id, TranslationStatus.error)

    # ── Content-edit trigger ──────────────────────────────────────────────────

    def on_content_changed(self, record_id: RecordId, changed: bool) -> list[RecordId]:
        """React to a save of `record_id`.

        When the title or body really changed (`changed` is True) and the
        record is an original, every ``completed`` translation of it becomes
        ``outdated``. Errors stay errors until re-translated; pending and
        already outdated translations are left alone.

        Returns:
            IDs of translations marked outdated.
        """
        if not changed:
            return []
        if self.graph.is_translation(record_id):
            logger.debug("Record %s is a translation; edits to it do not cascade", record_id)
            return []

        outdated: list[RecordId] = []
        for edge in self.graph.edges_of(record_id):
            if edge.status == TranslationStatus.completed:
                self.graph._write_status(edge.translated_id, TranslationStatus.outdated)
                outdated.append(edge.translated_id)
            elif edge.status == TranslationStatus.error:
                logger.debug("Translation %s stays in error after edit of %s", edge.translated_id, record_id)

        if outdated:
            logger.info("Marked %d translation(s) of %s outdated", len(outdated), record_id)
        return outdated

    def handle_content_update(
        self,
        before: ContentSnapshot,
        after: ContentSnapshot,
        is_autosave: bool = False,
        is_revision: bool = False,
    ) -> list[RecordId]:
        """Compare two snapshots of a saved record and cascade real changes.

        Autosaves and revision rows are ignored.
        """
        if is_autosave or is_revision:
            return []
        return self.on_content_changed(after.id, after.differs_from(before))

    # ── Hook wiring ───────────────────────────────────────────────────────────

    def handle_hook(self, before: Any, after: Any, is_autosave: bool = False, is_revision: bool = False, **_: Any):
        """`content.updated` subscriber; accepts snapshots or plain dicts."""
        return self.handle_content_update(
            ContentSnapshot.model_validate(before),
            ContentSnapshot.model_validate(after),
            is_autosave=is_autosave,
            is_revision=is_revision,
        )

    def handle_failure(self, translated_id: RecordId, **_: Any) -> TranslationStatus:
        """`translation.failed` subscriber."""
        return self.mark_failed(translated_id)

    def register(self, hooks: HookRegistry) -> None:
        hooks.add_action(HOOK_CONTENT_UPDATED, self.handle_hook)
        hooks.add_action(HOOK_TRANSLATION_FAILED, self.handle_failure)
