"""
ContentMeta model

Key-value attributes attached to host content records. Translation edges
and language assignments are persisted here, one row per (record, key).
Values are stored as JSON text so integer record IDs survive a round trip.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, Integer, String, Text, UniqueConstraint

from translink.database import Base


class ContentMeta(Base):
    """One attribute of one content record."""

    __tablename__ = "content_meta"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Record IDs are opaque to the core; stored as strings
    record_id = Column(String(64), nullable=False, index=True)
    meta_key = Column(String(191), nullable=False)
    meta_value = Column(Text, nullable=True)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        UniqueConstraint("record_id", "meta_key", name="uq_content_meta_record_key"),
        Index("idx_cm_key", "meta_key"),
    )

    def __repr__(self) -> str:
        return f"<ContentMeta(record_id={self.record_id}, key={self.meta_key})>"
