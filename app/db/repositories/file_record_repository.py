from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, TYPE_CHECKING
import threading
import uuid

if TYPE_CHECKING:
    from app.domains.records.entities import FileRecord


class FileRecordRepository(ABC):
    """Contract for file record storage"""

    @abstractmethod
    def save(self, record: "FileRecord") -> "FileRecord":
        """Store the record under its id, replacing any previous one"""

    @abstractmethod
    def find_by_id(self, record_id: uuid.UUID) -> Optional["FileRecord"]:
        """Get a record by id, or None"""

    @abstractmethod
    def find_all(self) -> List["FileRecord"]:
        """All records, newest first"""

    @abstractmethod
    def delete_by_id(self, record_id: uuid.UUID) -> None:
        """Remove a record if present"""

    @abstractmethod
    def delete_all(self, record_ids: Iterable[uuid.UUID]) -> None:
        """Remove every listed record that is present"""

    @abstractmethod
    def count(self) -> int:
        """Number of live records"""


class InMemoryFileRecordRepository(FileRecordRepository):
    """Process-local repository backed by a dict guarded by a lock.

    Listings sort a copy of the stored values on every call rather than
    keeping a secondary index ordered by creation time.
    """

    def __init__(self):
        self._storage: Dict[uuid.UUID, "FileRecord"] = {}
        self._lock = threading.Lock()

    def save(self, record: "FileRecord") -> "FileRecord":
        with self._lock:
            self._storage[record.id] = record
        return record

    def find_by_id(self, record_id: uuid.UUID) -> Optional["FileRecord"]:
        with self._lock:
            return self._storage.get(record_id)

    def find_all(self) -> List["FileRecord"]:
        with self._lock:
            snapshot = list(self._storage.values())
        # sorted outside the lock so writers are not held up
        snapshot.sort(key=lambda record: record.created_at, reverse=True)
        return snapshot

    def delete_by_id(self, record_id: uuid.UUID) -> None:
        with self._lock:
            self._storage.pop(record_id, None)

    def delete_all(self, record_ids: Iterable[uuid.UUID]) -> None:
        for record_id in record_ids:
            self.delete_by_id(record_id)

    def count(self) -> int:
        with self._lock:
            return len(self._storage)
