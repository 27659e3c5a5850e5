"""
In-Memory Storage Implementation

Keeps the serialized file contents in a string instead of on disk, so the
command flow can be exercised without touching the file system. Loads and
saves go through the same codec as the CSV file storage.
"""

from typing import Optional

from contact_manager.records.store import RecordStore
from contact_manager.services.storage.csv_codec import parse_records, serialize_records
from contact_manager.services.storage.interface import (
    LoadResult,
    RecordStorageInterface,
    StorageError,
)


class InMemoryRecordStorage(RecordStorageInterface):
    """
    Record storage held in memory.

    Args:
        content: Initial file contents. None behaves like a missing file.
    """

    def __init__(self, content: Optional[str] = None):
        self.content = content
        self.save_count = 0

    @property
    def location(self) -> str:
        return "<memory>"

    def load(self) -> LoadResult:
        if self.content is None:
            raise StorageError("no data file")
        return parse_records(self.content)

    def save(self, store: RecordStore) -> None:
        self.content = serialize_records(store)
        self.save_count += 1
