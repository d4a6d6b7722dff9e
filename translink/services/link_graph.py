"""
Translation Link Graph

Tracks which content record is a translation of which, in which language.

Edges form a star per original: the translated record carries a pointer to
its original plus its language and status, and the original carries one
``has_translation_<lang>`` pointer per language. Chains are never stored
(a translation's original is always a true original), so traversal needs no
cycle detection: normalise to the original, then enumerate its pointers.

The host store only offers per-key writes. Writes therefore follow a fixed
order (reverse pointer first, translated side second) and every read that
walks reverse pointers checks the back-reference, dropping stale entries.
"""

from __future__ import annotations

import logging
from typing import Any

from translink.config import Settings
from translink.config import settings as default_settings
from translink.exceptions import InvalidOperationError, InvalidStatusTransitionError
from translink.i18n.preferences import LanguagePreferenceStore
from translink.models.translation import RecordId, TranslationEdge, TranslationStatus
from translink.storage.interfaces import AttributeStore, RecordLifecycle

logger = logging.getLogger(__name__)


def _same(a: Any, b: Any) -> bool:
    """Compare record IDs that may have round-tripped through string storage."""
    if a is None or b is None:
        return False
    return a == b or str(a) == str(b)


class TranslationLinkGraph:
    """Star graph of originals and their per-language translations."""

    def __init__(
        self,
        attributes: AttributeStore,
        records: RecordLifecycle,
        preferences: LanguagePreferenceStore,
        settings: Settings | None = None,
    ) -> None:
        self.attributes = attributes
        self.records = records
        self.preferences = preferences
        prefix = (settings or default_settings).meta_prefix
        self.translation_of_key = f"{prefix}translation_of"
        self.language_key = f"{prefix}language"
        self.status_key = f"{prefix}translation_status"
        self.has_translation_prefix = f"{prefix}has_translation_"

    def _has_translation_key(self, language: str) -> str:
        return f"{self.has_translation_prefix}{language}"

    # ── Raw reads ─────────────────────────────────────────────────────────────

    def _outbound(self, original_id: RecordId) -> dict[str, RecordId]:
        """Reverse pointers stored on `original_id`, unverified."""
        pointers = self.attributes.list_keys_with_prefix(original_id, self.has_translation_prefix)
        return {
            key[len(self.has_translation_prefix):]: value
            for key, value in pointers.items()
            if value is not None and key != self.has_translation_prefix
        }

    def _points_back(self, translated_id: RecordId, original_id: RecordId, language: str) -> bool:
        return _same(self.original_of(translated_id), original_id) and self.language_of(translated_id) == language

    def _root(self, record_id: RecordId) -> RecordId:
        original_id = self.original_of(record_id)
        return record_id if original_id is None else original_id

    def _clear_translation_attributes(self, record_id: RecordId) -> None:
        self.attributes.delete(record_id, self.translation_of_key)
        self.attributes.delete(record_id, self.language_key)
        self.attributes.delete(record_id, self.status_key)

    # ── Queries ───────────────────────────────────────────────────────────────

    def language_of(self, record_id: RecordId) -> str | None:
        return self.attributes.get(record_id, self.language_key) or None

    def original_of(self, record_id: RecordId) -> RecordId | None:
        """Return the original this record translates, or None for originals."""
        value = self.attributes.get(record_id, self.translation_of_key)
        return None if value in (None, "") else value

    def translation_of(self, record_id: RecordId, language: str) -> RecordId | None:
        """Return the ID of `record_id`'s translation into `language`, if any."""
        value = self.attributes.get(record_id, self._has_translation_key(language))
        return None if value in (None, "") else value

    def has_translation(self, record_id: RecordId, language: str) -> bool:
        return self.translation_of(record_id, language) is not None

    def is_translation(self, record_id: RecordId) -> bool:
        return self.original_of(record_id) is not None

    def all_translations(self, record_id: RecordId) -> dict[str, RecordId]:
        """Return language -> record ID for the whole translation set of a record.

        Starts from the original (even when given a translation), lists it
        under its own language, then adds every live translation whose
        back-reference matches. Stale pointers are logged and skipped.
        """
        original_id = self._root(record_id)
        translations: dict[str, RecordId] = {}

        original_language = self.language_of(original_id)
        if original_language:
            translations[original_language] = original_id

        for language, translated_id in self._outbound(original_id).items():
            if not self._points_back(translated_id, original_id, language):
                logger.warning(
                    "Stale translation pointer on %s: %s -> %s has no matching back-reference; ignoring",
                    original_id,
                    language,
                    translated_id,
                )
                continue
            if not self.records.exists_and_live(translated_id):
                logger.debug("Skipping translation %s of %s: record is not live", translated_id, original_id)
                continue
            if language == original_language:
                logger.warning(
                    "Translation %s of %s shares the original's language %s; keeping the original",
                    translated_id,
                    original_id,
                    language,
                )
                continue
            translations[language] = translated_id

        return translations

    def status_of(self, record_id: RecordId) -> TranslationStatus | None:
        """Return the status of a translated record; None for originals.

        A translation without a stored status reads as ``pending``.
        """
        if not self.is_translation(record_id):
            return None
        raw = self.attributes.get(record_id, self.status_key)
        if not raw:
            return TranslationStatus.pending
        try:
            return TranslationStatus(raw)
        except ValueError:
            logger.warning("Record %s has unknown translation status %r; treating as pending", record_id, raw)
            return TranslationStatus.pending

    def edge(self, record_id: RecordId) -> TranslationEdge | None:
        """Return the edge ending at translated record `record_id`."""
        original_id = self.original_of(record_id)
        if original_id is None:
            return None
        return TranslationEdge(
            original_id=original_id,
            translated_id=record_id,
            language=self.language_of(record_id),
            status=self.status_of(record_id),
        )

    def edges_of(self, record_id: RecordId) -> list[TranslationEdge]:
        """Consistent edges of the original of `record_id`, live or not."""
        original_id = self._root(record_id)
        edges = []
        for language, translated_id in self._outbound(original_id).items():
            if self._points_back(translated_id, original_id, language):
                edges.append(
                    TranslationEdge(
                        original_id=original_id,
                        translated_id=translated_id,
                        language=language,
                        status=self.status_of(translated_id),
                    )
                )
        return edges

    # ── Mutations ─────────────────────────────────────────────────────────────

    def link(self, original_id: RecordId, translated_id: RecordId, language: str) -> TranslationEdge:
        """Record `translated_id` as the `language` translation of `original_id`.

        Status is reset to ``completed``; calling again with the same
        arguments leaves the same state. `language` is not checked against
        the catalog, callers validate it.

        Raises:
            InvalidOperationError: if the link would make a record its own
                translation, would nest a record that owns translations
                under another original, or `language` is the original's own
                language.
        """
        root = self.original_of(original_id)
        if root is not None:
            logger.info("Record %s is a translation of %s; linking against the original", original_id, root)
            original_id = root

        if _same(original_id, translated_id):
            raise InvalidOperationError(
                f"Record {translated_id} cannot be a translation of itself",
                details={"original_id": original_id, "translated_id": translated_id, "language": language},
            )
        if self._outbound(translated_id):
            raise InvalidOperationError(
                f"Record {translated_id} has translations of its own and cannot become a translation",
                details={"original_id": original_id, "translated_id": translated_id, "language": language},
            )

        original_language = self.language_of(original_id) or self.preferences.get_source()
        if language == original_language:
            raise InvalidOperationError(
                f"Record {original_id} is already in {language} and cannot have a {language} translation",
                details={"original_id": original_id, "translated_id": translated_id, "language": language},
            )

        # Detach the record from wherever it was linked before; own side first
        previous_original = self.original_of(translated_id)
        previous_language = self.language_of(translated_id)
        if previous_original is not None and not (
            _same(previous_original, original_id) and previous_language == language
        ):
            self._clear_translation_attributes(translated_id)
            if previous_language and _same(
                self.translation_of(previous_original, previous_language), translated_id
            ):
                self.attributes.delete(previous_original, self._has_translation_key(previous_language))
            logger.info(
                "Moved record %s from %s (%s) to %s (%s)",
                translated_id,
                previous_original,
                previous_language,
                original_id,
                language,
            )

        # One translation per (original, language): orphan the previous occupant
        occupant = self.translation_of(original_id, language)
        if occupant is not None and not _same(occupant, translated_id):
            if _same(self.original_of(occupant), original_id):
                self._clear_translation_attributes(occupant)
            logger.info("Replaced %s translation of %s: %s -> %s", language, original_id, occupant, translated_id)

        if self.language_of(original_id) is None:
            self.attributes.set(original_id, self.language_key, original_language)

        # Reverse pointer first and the back-reference last: an interrupted
        # link leaves at most a pointer without a back-reference
        self.attributes.set(original_id, self._has_translation_key(language), translated_id)
        self.attributes.set(translated_id, self.language_key, language)
        self.attributes.set(translated_id, self.status_key, TranslationStatus.completed.value)
        self.attributes.set(translated_id, self.translation_of_key, original_id)

        logger.info("Translation linked: %s -> %s (%s)", original_id, translated_id, language)
        return TranslationEdge(original_id, translated_id, language, TranslationStatus.completed)

    def set_status(self, record_id: RecordId, status: TranslationStatus) -> None:
        """Write a status without transition checks (see StatusLifecycle).

        ``outdated`` cannot be set here; only a content change of the
        original produces it.

        Raises:
            InvalidOperationError: if the record is not a translation.
            InvalidStatusTransitionError: if `status` is ``outdated``.
        """
        status = TranslationStatus(status)
        current = self.status_of(record_id)
        if current is None:
            raise InvalidOperationError(
                f"Record {record_id} is not a translation",
                details={"record_id": record_id, "status": status.value},
            )
        if status == TranslationStatus.outdated and current != status:
            raise InvalidStatusTransitionError(current.value, status.value)
        self._write_status(record_id, status)

    def _write_status(self, record_id: RecordId, status: TranslationStatus) -> None:
        self.attributes.set(record_id, self.status_key, TranslationStatus(status).value)

    def unlink(self, record_id: RecordId) -> list[RecordId]:
        """Remove the translation relationships of a record.

        A translation is detached from its original. An original loses all
        of its translations, each of which becomes a standalone record.

        Returns:
            IDs of the records that stopped being translations.
        """
        original_id = self.original_of(record_id)
        if original_id is not None:
            language = self.language_of(record_id)
            if language and _same(self.translation_of(original_id, language), record_id):
                self.attributes.delete(original_id, self._has_translation_key(language))
            self._clear_translation_attributes(record_id)
            logger.info("Translation unlinked: %s -> %s (%s)", original_id, record_id, language)
            return [record_id]

        detached: list[RecordId] = []
        for language, translated_id in self._outbound(record_id).items():
            # Trashed translations included, a pointer must not outlive its edge
            if _same(self.original_of(translated_id), record_id):
                self._clear_translation_attributes(translated_id)
                detached.append(translated_id)
            self.attributes.delete(record_id, self._has_translation_key(language))
        if detached:
            logger.info("Unlinked %d translation(s) from original %s", len(detached), record_id)
        return detached

    def repair(self, record_id: RecordId) -> list[str]:
        """Delete reverse pointers of an original that no longer point back.

        Returns:
            Languages whose pointer was removed.
        """
        original_id = self._root(record_id)
        removed = []
        for language, translated_id in self._outbound(original_id).items():
            if not self._points_back(translated_id, original_id, language):
                self.attributes.delete(original_id, self._has_translation_key(language))
                removed.append(language)
        if removed:
            logger.warning("Repaired %s: dropped stale pointer(s) for %s", original_id, ", ".join(removed))
        return removed
