"""
Main Orchestrator for the Contact Manager

This module defines the end-to-end flow behind every CLI subcommand:
load the data file → change the store → save the data file.

DESIGN DECISION: The orchestrator enforces the boundaries:
- The file is saved only when the store actually changed
- Bad lines never abort a command; they are reported as diagnostics
- Every change is audited

Printing is left to the CLI. The flow returns what happened.
"""

from typing import Callable, Optional

from pydantic import BaseModel, Field

from contact_manager.audit import AuditLogger
from contact_manager.models.audit import AuditEventBuilder
from contact_manager.models.record import Record
from contact_manager.services.storage import (
    LoadResult,
    ParseDiagnostic,
    RecordStorageInterface,
    StorageError,
)


class FlowResult(BaseModel):
    """Outcome of one contact command."""

    records: list[Record] = Field(
        default_factory=list,
        description="Records the command produced or matched"
    )
    diagnostics: list[ParseDiagnostic] = Field(
        default_factory=list,
        description="Lines skipped while loading the data file"
    )
    changed: bool = Field(
        default=False,
        description="Whether the data file was rewritten"
    )


class ContactFlow:
    """
    Orchestrates the contact commands.

    Flow:
    1. Load → parse the data file into a RecordStore
    2. Change → apply one operation to the store
    3. Save → write the store back (only if it changed)

    Storage errors propagate to the caller after being audited.

    Args:
        storage: Where the records live
        audit_logger: Where changes are audited
        diagnostics_handler: Called with the skipped lines as soon as a load
                             finishes, before any save can fail
    """

    def __init__(
        self,
        storage: RecordStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
        diagnostics_handler: Optional[Callable[[list[ParseDiagnostic]], None]] = None,
    ):
        self._storage = storage
        self._audit = audit_logger or AuditLogger()
        self._diagnostics_handler = diagnostics_handler

    @property
    def storage(self) -> RecordStorageInterface:
        return self._storage

    def _correlation(self):
        return self._audit.correlation_id

    def _load(self) -> LoadResult:
        try:
            result = self._storage.load()
        except StorageError as e:
            self._audit.log(AuditEventBuilder.storage_error(
                source=self._storage.location,
                error_message=str(e),
                correlation_id=self._correlation(),
            ))
            raise

        for diagnostic in result.diagnostics:
            self._audit.log(AuditEventBuilder.line_skipped(
                line_number=diagnostic.line_number,
                error=str(diagnostic.error),
                line=diagnostic.line,
                source=self._storage.location,
                correlation_id=self._correlation(),
            ))
        self._audit.log(AuditEventBuilder.records_loaded(
            source=self._storage.location,
            record_count=len(result.store),
            skipped_count=result.skipped_count,
            correlation_id=self._correlation(),
        ))
        if self._diagnostics_handler is not None:
            self._diagnostics_handler(result.diagnostics)
        return result

    def _save(self, loaded: LoadResult) -> None:
        try:
            self._storage.save(loaded.store)
        except StorageError as e:
            self._audit.log(AuditEventBuilder.storage_error(
                source=self._storage.location,
                error_message=str(e),
                correlation_id=self._correlation(),
            ))
            raise

        self._audit.log(AuditEventBuilder.records_saved(
            source=self._storage.location,
            record_count=len(loaded.store),
            correlation_id=self._correlation(),
        ))

    def list_records(self) -> FlowResult:
        """All records, ascending by id."""
        loaded = self._load()
        return FlowResult(
            records=loaded.store.to_sorted_list(),
            diagnostics=loaded.diagnostics,
        )

    def add_record(self, name: str, email: Optional[str] = None) -> FlowResult:
        """Add a record under the next free id."""
        loaded = self._load()
        record = Record(id=loaded.store.next_id(), name=name, email=email)
        loaded.store.add(record)
        self._save(loaded)

        self._audit.log(AuditEventBuilder.record_added(
            record_id=record.id,
            name=record.name,
            correlation_id=self._correlation(),
        ))
        return FlowResult(records=[record], diagnostics=loaded.diagnostics, changed=True)

    def search(self, query: str) -> FlowResult:
        """Records whose name contains query, ignoring case."""
        loaded = self._load()
        return FlowResult(
            records=loaded.store.search(query),
            diagnostics=loaded.diagnostics,
        )

    def remove_record(self, record_id: int) -> FlowResult:
        """
        Remove a record by id.

        The data file is left untouched when the id is not present;
        `changed` tells the caller which case happened.
        """
        loaded = self._load()
        removed = loaded.store.remove(record_id)
        if removed is None:
            return FlowResult(diagnostics=loaded.diagnostics)

        self._save(loaded)
        self._audit.log(AuditEventBuilder.record_removed(
            record_id=record_id,
            correlation_id=self._correlation(),
        ))
        return FlowResult(records=[removed], diagnostics=loaded.diagnostics, changed=True)

    def update_record(
        self,
        record_id: int,
        name: str,
        email: Optional[str] = None,
    ) -> FlowResult:
        """Write the record at record_id, creating it if needed."""
        loaded = self._load()
        existed = record_id in loaded.store
        record = loaded.store.edit(record_id, name, email)
        self._save(loaded)

        self._audit.log(AuditEventBuilder.record_updated(
            record_id=record_id,
            name=name,
            replaced_existing=existed,
            correlation_id=self._correlation(),
        ))
        return FlowResult(records=[record], diagnostics=loaded.diagnostics, changed=True)
