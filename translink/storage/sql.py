"""
SQLAlchemy storage backends.

Each call opens its own session from the injected factory and commits
before returning: writes are atomic per key, never across keys.
SQLAlchemy failures are re-raised as StorageError; nothing is retried here.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from contextlib import contextmanager
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from translink.exceptions import StorageError
from translink.models.content_meta import ContentMeta
from translink.models.content_record import TRASH_STATUS, ContentRecord
from translink.models.option import Option
from translink.models.translation import RecordId

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]


def _encode(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def _decode(raw: str | None) -> Any | None:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        # Rows written by the host itself may hold plain strings
        return raw


@contextmanager
def _session_scope(factory: SessionFactory, operation: str):
    session = factory()
    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Storage operation %s failed: %s", operation, exc)
        raise StorageError(f"Storage operation '{operation}' failed", operation=operation) from exc
    finally:
        session.close()


class SqlAttributeStore:
    """AttributeStore backed by the ``content_meta`` table."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self.session_factory = session_factory

    def get(self, record_id: RecordId, key: str) -> Any | None:
        with _session_scope(self.session_factory, "meta.get") as session:
            raw = session.execute(
                select(ContentMeta.meta_value).where(
                    ContentMeta.record_id == str(record_id),
                    ContentMeta.meta_key == key,
                )
            ).scalar_one_or_none()
        return _decode(raw)

    def set(self, record_id: RecordId, key: str, value: Any) -> None:
        with _session_scope(self.session_factory, "meta.set") as session:
            row = session.execute(
                select(ContentMeta).where(
                    ContentMeta.record_id == str(record_id),
                    ContentMeta.meta_key == key,
                )
            ).scalar_one_or_none()
            if row is None:
                session.add(ContentMeta(record_id=str(record_id), meta_key=key, meta_value=_encode(value)))
            else:
                row.meta_value = _encode(value)

    def delete(self, record_id: RecordId, key: str) -> None:
        with _session_scope(self.session_factory, "meta.delete") as session:
            session.execute(
                delete(ContentMeta).where(
                    ContentMeta.record_id == str(record_id),
                    ContentMeta.meta_key == key,
                )
            )

    def list_keys_with_prefix(self, record_id: RecordId, prefix: str) -> dict[str, Any]:
        with _session_scope(self.session_factory, "meta.list") as session:
            rows = session.execute(
                select(ContentMeta.meta_key, ContentMeta.meta_value)
                .where(
                    ContentMeta.record_id == str(record_id),
                    ContentMeta.meta_key.startswith(prefix, autoescape=True),
                )
                .order_by(ContentMeta.id)
            ).all()
        return {key: _decode(raw) for key, raw in rows}


class SqlOptionStore:
    """OptionStore backed by the ``options`` table."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self.session_factory = session_factory

    def get(self, name: str) -> Any | None:
        with _session_scope(self.session_factory, "option.get") as session:
            raw = session.execute(select(Option.value).where(Option.name == name)).scalar_one_or_none()
        return _decode(raw)

    def set(self, name: str, value: Any) -> None:
        with _session_scope(self.session_factory, "option.set") as session:
            row = session.execute(select(Option).where(Option.name == name)).scalar_one_or_none()
            if row is None:
                session.add(Option(name=name, value=_encode(value)))
            else:
                row.value = _encode(value)


class SqlRecordLifecycle:
    """RecordLifecycle reading the host's ``content_records`` table."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self.session_factory = session_factory

    def exists_and_live(self, record_id: RecordId) -> bool:
        if record_id is None:
            return False
        with _session_scope(self.session_factory, "record.status") as session:
            record = session.get(ContentRecord, str(record_id))
            return record is not None and record.status != TRASH_STATUS
