"""
Key/value media backing the persistent store.

Supports:
- Memory (process local, used by tests and previews)
- SQL (SQLAlchemy table, SQLite by default)

Media only move opaque strings. Parsing, defaulting and merging are the
job of PersistentStore.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from stridefit.models.storage import KeyValueEntry

logger = logging.getLogger(__name__)


class StorageUnavailableError(Exception):
    """The backing medium could not be read or written."""


class StorageMedium(ABC):
    """Abstract base class for key/value storage media."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete a key. Removing a missing key is not an error."""
        pass


class MemoryStorageMedium(StorageMedium):
    """Dictionary backed medium."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class SqlStorageMedium(StorageMedium):
    """Medium backed by the kv_store table."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        try:
            with self.session_factory() as session:
                entry = session.get(KeyValueEntry, key)
                return entry.value if entry else None
        except SQLAlchemyError as e:
            raise StorageUnavailableError(f"Failed to read '{key}': {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            with self.session_factory() as session:
                self._upsert(session, key, value)
                session.commit()
        except SQLAlchemyError as e:
            raise StorageUnavailableError(f"Failed to write '{key}': {e}") from e

    def remove(self, key: str) -> None:
        try:
            with self.session_factory() as session:
                session.execute(delete(KeyValueEntry).where(KeyValueEntry.key == key))
                session.commit()
        except SQLAlchemyError as e:
            raise StorageUnavailableError(f"Failed to remove '{key}': {e}") from e

    @staticmethod
    def _upsert(session: Session, key: str, value: str) -> None:
        entry = session.get(KeyValueEntry, key)
        if entry:
            entry.value = value
            entry.updated_at = datetime.utcnow()
        else:
            session.add(KeyValueEntry(key=key, value=value))


def get_storage_medium(kind: str = "sql", session_factory: Optional[sessionmaker] = None) -> StorageMedium:
    """Factory function to get a storage medium by name."""
    kind = kind.lower()

    if kind == "memory":
        return MemoryStorageMedium()

    if kind == "sql":
        if session_factory is None:
            from stridefit.core.database import session_maker, init_db

            try:
                init_db()
            except SQLAlchemyError as e:
                logger.error(f"Local database unavailable: {e}, falling back to memory")
                return MemoryStorageMedium()
            session_factory = session_maker
        return SqlStorageMedium(session_factory)

    logger.warning(f"Unknown storage medium '{kind}', falling back to memory")
    return MemoryStorageMedium()
