"""
CSV File Storage Implementation

Records are kept in a plain comma-separated file (see csv_codec for the format).

TRADEOFFS:
- Saving truncates the file and writes it in place. A crash mid-write can
  leave a truncated file; there is no temp-file swap or backup.
- No locking. Two invocations on the same file race and the last writer wins.
- A missing file is an error on load; it is never created implicitly.
- A file that is not valid UTF-8 is a read error, like a missing one.
"""

from pathlib import Path
from typing import Union

import structlog

from contact_manager.records.store import RecordStore
from contact_manager.services.storage.csv_codec import parse_records, serialize_records
from contact_manager.services.storage.interface import (
    LoadResult,
    RecordStorageInterface,
    StorageError,
)


logger = structlog.get_logger(__name__)


class CsvRecordStorage(RecordStorageInterface):
    """Record storage backed by one CSV file."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def load(self) -> LoadResult:
        try:
            # newline="" keeps line endings exactly as stored
            with open(self._path, "r", encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("csv_load_failed", path=self.location, error=str(e))
            raise StorageError(str(e)) from e

        result = parse_records(text)
        logger.debug(
            "csv_loaded",
            path=self.location,
            record_count=len(result.store),
            skipped_count=result.skipped_count,
        )
        return result

    def save(self, store: RecordStore) -> None:
        content = serialize_records(store)
        try:
            with open(self._path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except (OSError, UnicodeEncodeError) as e:
            logger.error("csv_save_failed", path=self.location, error=str(e))
            raise StorageError(str(e)) from e

        logger.debug("csv_saved", path=self.location, record_count=len(store))
