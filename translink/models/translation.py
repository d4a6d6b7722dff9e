"""
Translation edge value types.

An edge links one translated record to its original under one language.
Edges are not stored as rows of their own: the link graph reads them back
from the attribute store and hands out these immutable values.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

RecordId = Union[int, str]


class TranslationStatus(str, enum.Enum):
    """Lifecycle status for a translated record."""

    pending = "pending"
    completed = "completed"
    error = "error"
    outdated = "outdated"


@dataclass(frozen=True)
class TranslationEdge:
    """Relationship between an original record and one of its translations."""

    original_id: RecordId
    translated_id: RecordId
    language: str
    status: TranslationStatus = TranslationStatus.completed
