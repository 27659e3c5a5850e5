"""
In-Memory Record Store

The store holds the contacts of one command invocation, keyed by id.
It is created empty or from a loaded file, mutated by add/remove/edit,
and discarded when the process ends.

DESIGN DECISION: The store is an explicit object handed from storage to the
flow and back. There is no module-level state.

Not safe for concurrent use: next_id() and add() are two separate steps.
"""

from typing import Iterator, Optional

from contact_manager.models.record import Record


class RecordStore:
    """Mapping from record id to Record, at most one record per id."""

    def __init__(self, records: Optional[list[Record]] = None):
        self._records: dict[int, Record] = {}
        for record in records or []:
            self.add(record)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __iter__(self) -> Iterator[Record]:
        return iter(self.to_sorted_list())

    def __repr__(self) -> str:
        return f"RecordStore({self.to_sorted_list()!r})"

    def add(self, record: Record) -> None:
        """Insert a record, replacing any record with the same id."""
        self._records[record.id] = record

    def get(self, record_id: int) -> Optional[Record]:
        return self._records.get(record_id)

    def next_id(self) -> int:
        """Return the highest id plus one, or 1 for an empty store."""
        if not self._records:
            return 1
        return max(self._records) + 1

    def search(self, query: str) -> list[Record]:
        """
        Find records whose name contains the query, ignoring case.

        Results are ordered by id.
        """
        needle = query.lower()
        return [
            record for record in self.to_sorted_list()
            if needle in record.name.lower()
        ]

    def remove(self, record_id: int) -> Optional[Record]:
        """Remove a record. Returns the removed record, or None if absent."""
        return self._records.pop(record_id, None)

    def edit(self, record_id: int, name: str, email: Optional[str] = None) -> Record:
        """
        Replace the record at record_id with new field values.

        Acts as an upsert: the record is written whether or not it existed,
        and an omitted email clears any previous one.
        """
        record = Record(id=record_id, name=name, email=email)
        self._records[record_id] = record
        return record

    def to_sorted_list(self) -> list[Record]:
        """All records ascending by id."""
        return [self._records[record_id] for record_id in sorted(self._records)]
