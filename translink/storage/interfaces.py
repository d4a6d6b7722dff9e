"""
Storage interfaces

Capabilities the host CMS injects into the translation core. The core owns
none of this state; it annotates host records through these protocols.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from translink.models.translation import RecordId


@runtime_checkable
class AttributeStore(Protocol):
    """Per-record key-value attributes ("post meta")."""

    def get(self, record_id: RecordId, key: str) -> Any | None: ...

    def set(self, record_id: RecordId, key: str, value: Any) -> None: ...

    def delete(self, record_id: RecordId, key: str) -> None: ...

    def list_keys_with_prefix(self, record_id: RecordId, prefix: str) -> dict[str, Any]: ...


@runtime_checkable
class OptionStore(Protocol):
    """Process-wide named options."""

    def get(self, name: str) -> Any | None: ...

    def set(self, name: str, value: Any) -> None: ...


@runtime_checkable
class RecordLifecycle(Protocol):
    """Existence check for host records."""

    def exists_and_live(self, record_id: RecordId) -> bool: ...
