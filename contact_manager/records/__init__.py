"""Record store package."""

from contact_manager.records.store import RecordStore

__all__ = ["RecordStore"]
