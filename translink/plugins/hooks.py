"""
Hook Name Constants

Centralised list of hook names the translation core fires or listens to.
Hook names follow the `category.action` convention.
"""

from __future__ import annotations

# ── Content lifecycle (fired by the host CMS) ─────────────────────────────────
HOOK_CONTENT_UPDATED = "content.updated"
HOOK_CONTENT_DELETED = "content.deleted"

# ── Translation jobs (fired by the translation runner) ────────────────────────
HOOK_TRANSLATION_COMPLETED = "translation.completed"
HOOK_TRANSLATION_FAILED = "translation.failed"

# ── Filters ───────────────────────────────────────────────────────────────────
# Receives the code -> LanguageInfo mapping; returns it extended
FILTER_SUPPORTED_LANGUAGES = "languages.supported"

# ── Master lists ──────────────────────────────────────────────────────────────
ALL_ACTIONS: list[str] = [
    HOOK_CONTENT_UPDATED,
    HOOK_CONTENT_DELETED,
    HOOK_TRANSLATION_COMPLETED,
    HOOK_TRANSLATION_FAILED,
]

ALL_FILTERS: list[str] = [
    FILTER_SUPPORTED_LANGUAGES,
]
