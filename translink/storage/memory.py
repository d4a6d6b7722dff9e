"""
In-memory storage backends.

Dict-backed implementations of the storage protocols, used for tests and
for hosts that keep attributes in process.
"""

from __future__ import annotations

import copy
from collections import defaultdict
from typing import Any

from translink.models.translation import RecordId


class InMemoryAttributeStore:
    def __init__(self) -> None:
        self._data: dict[RecordId, dict[str, Any]] = defaultdict(dict)

    def get(self, record_id: RecordId, key: str) -> Any | None:
        return self._data.get(record_id, {}).get(key)

    def set(self, record_id: RecordId, key: str, value: Any) -> None:
        self._data[record_id][key] = value

    def delete(self, record_id: RecordId, key: str) -> None:
        self._data.get(record_id, {}).pop(key, None)

    def list_keys_with_prefix(self, record_id: RecordId, prefix: str) -> dict[str, Any]:
        return {k: v for k, v in self._data.get(record_id, {}).items() if k.startswith(prefix)}

    def all_for(self, record_id: RecordId) -> dict[str, Any]:
        """Every attribute of a record (test/debug helper)."""
        return dict(self._data.get(record_id, {}))


class InMemoryOptionStore:
    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._options: dict[str, Any] = dict(initial or {})

    def get(self, name: str) -> Any | None:
        # Copies so callers can't mutate stored state in place
        return copy.deepcopy(self._options.get(name))

    def set(self, name: str, value: Any) -> None:
        self._options[name] = copy.deepcopy(value)


class InMemoryRecordLifecycle:
    """Tracks which records exist and which are trashed.

    With ``assume_live=True`` unknown records count as live, which suits hosts
    that never report creations.
    """

    def __init__(self, assume_live: bool = True) -> None:
        self.assume_live = assume_live
        self._live: set[RecordId] = set()
        self._gone: set[RecordId] = set()

    def add(self, *record_ids: RecordId) -> None:
        for record_id in record_ids:
            self._live.add(record_id)
            self._gone.discard(record_id)

    def trash(self, record_id: RecordId) -> None:
        self._live.discard(record_id)
        self._gone.add(record_id)

    def remove(self, record_id: RecordId) -> None:
        self._live.discard(record_id)
        self._gone.add(record_id)

    def exists_and_live(self, record_id: RecordId) -> bool:
        if record_id in self._gone:
            return False
        return record_id in self._live or self.assume_live
