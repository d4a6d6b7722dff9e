from .link_graph import TranslationLinkGraph
from .observers import TranslationOverview
from .status_lifecycle import ALLOWED_TRANSITIONS, StatusLifecycle, can_transition

__all__ = [
    "ALLOWED_TRANSITIONS",
    "StatusLifecycle",
    "TranslationLinkGraph",
    "TranslationOverview",
    "can_transition",
]
