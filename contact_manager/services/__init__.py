"""Services package."""

from contact_manager.services.storage import (
    CsvRecordStorage,
    InMemoryRecordStorage,
    LoadResult,
    ParseDiagnostic,
    ParseError,
    RecordStorageInterface,
    StorageError,
)

__all__ = [
    "CsvRecordStorage",
    "InMemoryRecordStorage",
    "LoadResult",
    "ParseDiagnostic",
    "ParseError",
    "RecordStorageInterface",
    "StorageError",
]
