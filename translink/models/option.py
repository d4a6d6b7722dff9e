"""
Option model

Process-wide named options (site settings). The language preference store
keeps its source/target configuration under a single option name.
"""

from sqlalchemy import Column, Integer, String, Text

from translink.database import Base


class Option(Base):
    """A named option holding a JSON-encoded value."""

    __tablename__ = "options"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(191), nullable=False, unique=True)
    value = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Option(name={self.name})>"
