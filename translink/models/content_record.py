"""
ContentRecord model

Minimal read-side view of the host's content table. The translation core
never creates or deletes these rows; it only checks whether a record still
exists and is not in the trash.
"""

from sqlalchemy import Column, String

from translink.database import Base

TRASH_STATUS = "trash"


class ContentRecord(Base):
    """A host content record (post, page, document)."""

    __tablename__ = "content_records"

    # Same string form as content_meta.record_id, so int and slug IDs both work
    id = Column(String(64), primary_key=True, index=True)
    title = Column(String, nullable=True)
    status = Column(String(20), nullable=False, default="draft")

    def __repr__(self) -> str:
        return f"<ContentRecord(id={self.id}, status={self.status})>"
