"""
Storage package. Protocols for the host-owned stores and the backends that
implement them.
"""

from .interfaces import AttributeStore, OptionStore, RecordLifecycle
from .memory import InMemoryAttributeStore, InMemoryOptionStore, InMemoryRecordLifecycle
from .sql import SqlAttributeStore, SqlOptionStore, SqlRecordLifecycle

__all__ = [
    "AttributeStore",
    "OptionStore",
    "RecordLifecycle",
    "InMemoryAttributeStore",
    "InMemoryOptionStore",
    "InMemoryRecordLifecycle",
    "SqlAttributeStore",
    "SqlOptionStore",
    "SqlRecordLifecycle",
]
