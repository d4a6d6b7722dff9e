"""
Status Lifecycle Tests

Test classes:
    TestTransitionTable   — ALLOWED_TRANSITIONS / can_transition
    TestTransition        — validated status writes
    TestContentChanged    — outdated propagation on real edits
    TestContentUpdate     — snapshot comparison, autosave/revision skipping
"""

from __future__ import annotations

import pytest

from translink.exceptions import InvalidOperationError, InvalidStatusTransitionError
from translink.models.translation import TranslationStatus
from translink.schemas.content import ContentSnapshot

S = TranslationStatus

# ══════════════════════════════════════════════════════════════════════════════
# 1. TestTransitionTable
# ══════════════════════════════════════════════════════════════════════════════


class TestTransitionTable:
    def test_every_status_has_an_entry(self):
        from translink.services.status_lifecycle import ALLOWED_TRANSITIONS

        assert set(ALLOWED_TRANSITIONS) == set(TranslationStatus)

    @pytest.mark.parametrize(
        "current,target",
        [
            (S.pending, S.completed),
            (S.pending, S.error),
            (S.completed, S.error),
            (S.completed, S.pending),
            (S.outdated, S.pending),
            (S.error, S.pending),
        ],
    )
    def test_allowed(self, current, target):
        from translink.services.status_lifecycle import can_transition

        assert can_transition(current, target) is True

    @pytest.mark.parametrize(
        "current,target",
        [
            (S.pending, S.outdated),
            (S.completed, S.outdated),
            (S.outdated, S.completed),
            (S.error, S.outdated),
            (S.error, S.completed),
        ],
    )
    def test_forbidden(self, current, target):
        from translink.services.status_lifecycle import can_transition

        assert can_transition(current, target) is False

    def test_accepts_plain_strings(self):
        from translink.services.status_lifecycle import can_transition

        assert can_transition("completed", "pending") is True
        assert can_transition("completed", "outdated") is False


# ══════════════════════════════════════════════════════════════════════════════
# 2. TestTransition
# ══════════════════════════════════════════════════════════════════════════════


class TestTransition:
    def test_mark_failed_from_completed(self, graph, lifecycle):
        graph.link(1, 2, "en")
        assert lifecycle.mark_failed(2) == S.error
        assert graph.status_of(2) == S.error

    def test_mark_pending_then_failed(self, graph, lifecycle):
        graph.link(1, 2, "en")
        lifecycle.mark_pending(2)
        lifecycle.mark_failed(2)
        assert lifecycle.status_of(2) == S.error

    def test_outdated_cannot_return_to_completed(self, graph, lifecycle):
        graph.link(1, 2, "en")
        lifecycle.on_content_changed(1, True)

        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            lifecycle.transition(2, S.completed)
        assert exc_info.value.details["current_status"] == "outdated"
        assert graph.status_of(2) == S.outdated

    def test_outdated_only_through_content_change(self, graph, lifecycle):
        graph.link(1, 2, "en")

        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            lifecycle.transition(2, S.outdated)
        assert exc_info.value.details["current_status"] == "completed"
        assert graph.status_of(2) == S.completed

    def test_outdated_is_noop_when_already_outdated(self, graph, lifecycle):
        graph.link(1, 2, "en")
        lifecycle.on_content_changed(1, True)
        assert lifecycle.transition(2, S.outdated) == S.outdated

    def test_same_status_is_noop(self, graph, lifecycle):
        graph.link(1, 2, "en")
        assert lifecycle.transition(2, S.completed) == S.completed

    def test_transition_on_original_rejected(self, graph, lifecycle):
        graph.link(1, 2, "en")
        with pytest.raises(InvalidOperationError):
            lifecycle.mark_failed(1)

    def test_transition_on_unknown_record_rejected(self, lifecycle):
        with pytest.raises(InvalidOperationError):
            lifecycle.mark_pending(404)

    def test_error_recovers_only_through_pending_or_link(self, graph, lifecycle):
        graph.link(1, 2, "en")
        lifecycle.mark_failed(2)
        with pytest.raises(InvalidStatusTransitionError):
            lifecycle.transition(2, S.completed)

        graph.link(1, 2, "en")
        assert graph.status_of(2) == S.completed


# ══════════════════════════════════════════════════════════════════════════════
# 3. TestContentChanged
# ══════════════════════════════════════════════════════════════════════════════


class TestContentChanged:
    def test_edit_marks_all_translations_outdated(self, graph, lifecycle):
        graph.link(1, 2, "en")
        graph.link(1, 3, "de")

        assert sorted(lifecycle.on_content_changed(1, True)) == [2, 3]
        assert graph.status_of(2) == S.outdated
        assert graph.status_of(3) == S.outdated

    def test_unchanged_save_is_noop(self, graph, lifecycle):
        graph.link(1, 2, "en")
        assert lifecycle.on_content_changed(1, False) == []
        assert graph.status_of(2) == S.completed

    def test_error_is_sticky(self, graph, lifecycle):
        graph.link(1, 2, "en")
        graph.link(1, 3, "de")
        lifecycle.mark_failed(2)

        assert lifecycle.on_content_changed(1, True) == [3]
        assert graph.status_of(2) == S.error

    def test_pending_is_left_alone(self, graph, lifecycle):
        graph.link(1, 2, "en")
        lifecycle.mark_pending(2)

        assert lifecycle.on_content_changed(1, True) == []
        assert graph.status_of(2) == S.pending

    def test_repeated_edits_are_stable(self, graph, lifecycle):
        graph.link(1, 2, "en")
        lifecycle.on_content_changed(1, True)
        assert lifecycle.on_content_changed(1, True) == []
        assert graph.status_of(2) == S.outdated

    def test_edit_of_translation_does_not_cascade(self, graph, lifecycle):
        graph.link(1, 2, "en")
        graph.link(1, 3, "de")

        assert lifecycle.on_content_changed(2, True) == []
        assert graph.status_of(2) == S.completed
        assert graph.status_of(3) == S.completed

    def test_edit_of_unlinked_record(self, lifecycle):
        assert lifecycle.on_content_changed(99, True) == []

    def test_core_entry_point(self, core):
        core.graph.link(1, 2, "en")
        assert core.on_content_changed(1, True) == [2]


# ══════════════════════════════════════════════════════════════════════════════
# 4. TestContentUpdate
# ══════════════════════════════════════════════════════════════════════════════


class TestContentUpdate:
    def _snapshots(self, **changes):
        before = ContentSnapshot(id=1, title="Bonjour", body="Le texte")
        after = before.model_copy(update=changes)
        return before, after

    def test_title_change(self, graph, lifecycle):
        graph.link(1, 2, "en")
        before, after = self._snapshots(title="Salut")
        assert lifecycle.handle_content_update(before, after) == [2]

    def test_body_change(self, graph, lifecycle):
        graph.link(1, 2, "en")
        before, after = self._snapshots(body="Un autre texte")
        assert lifecycle.handle_content_update(before, after) == [2]

    def test_metadata_only_change(self, graph, lifecycle):
        graph.link(1, 2, "en")
        before = ContentSnapshot.model_validate({"id": 1, "title": "T", "body": "B", "excerpt": "old"})
        after = ContentSnapshot.model_validate({"id": 1, "title": "T", "body": "B", "excerpt": "new"})

        assert lifecycle.handle_content_update(before, after) == []
        assert graph.status_of(2) == S.completed

    def test_autosave_ignored(self, graph, lifecycle):
        graph.link(1, 2, "en")
        before, after = self._snapshots(body="draft")
        assert lifecycle.handle_content_update(before, after, is_autosave=True) == []
        assert graph.status_of(2) == S.completed

    def test_revision_ignored(self, graph, lifecycle):
        graph.link(1, 2, "en")
        before, after = self._snapshots(title="rev")
        assert lifecycle.handle_content_update(before, after, is_revision=True) == []
        assert graph.status_of(2) == S.completed
