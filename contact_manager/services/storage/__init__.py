"""
Storage Services Package

Provides the abstract storage interface, the CSV codec and the concrete
implementations: a CSV file and an in-memory stand-in for tests.
"""

from contact_manager.services.storage.interface import (
    EmptyRecordError,
    InvalidIdError,
    LoadResult,
    MissingFieldError,
    ParseDiagnostic,
    ParseError,
    RecordStorageInterface,
    StorageError,
)
from contact_manager.services.storage.csv_codec import (
    CSV_HEADER,
    parse_record,
    parse_records,
    serialize_record,
    serialize_records,
)
from contact_manager.services.storage.csv_file import CsvRecordStorage
from contact_manager.services.storage.memory import InMemoryRecordStorage

__all__ = [
    # Interface
    "LoadResult",
    "ParseDiagnostic",
    "RecordStorageInterface",
    # Exceptions
    "EmptyRecordError",
    "InvalidIdError",
    "MissingFieldError",
    "ParseError",
    "StorageError",
    # CSV codec
    "CSV_HEADER",
    "parse_record",
    "parse_records",
    "serialize_record",
    "serialize_records",
    # Implementations
    "CsvRecordStorage",
    "InMemoryRecordStorage",
]
