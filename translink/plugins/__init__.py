"""
Hook system. Action and filter hooks shared between the host CMS and the
translation core.
"""

from .hooks import (
    ALL_ACTIONS,
    ALL_FILTERS,
    FILTER_SUPPORTED_LANGUAGES,
    HOOK_CONTENT_DELETED,
    HOOK_CONTENT_UPDATED,
    HOOK_TRANSLATION_COMPLETED,
    HOOK_TRANSLATION_FAILED,
)
from .registry import HookRegistry

__all__ = [
    "ALL_ACTIONS",
    "ALL_FILTERS",
    "FILTER_SUPPORTED_LANGUAGES",
    "HOOK_CONTENT_DELETED",
    "HOOK_CONTENT_UPDATED",
    "HOOK_TRANSLATION_COMPLETED",
    "HOOK_TRANSLATION_FAILED",
    "HookRegistry",
]
