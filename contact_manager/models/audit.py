"""
Audit Models for the Contact Manager

Every change to the data file is logged for audit purposes.
This provides:
1. Traceability of who changed what in the contact list
2. Debugging information when a data file loads partially

DESIGN DECISION: Audit events are emitted, never edited. They go to the
structured log, which is append-only by nature.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Persistence
    RECORDS_LOADED = "records_loaded"
    RECORDS_SAVED = "records_saved"
    LINE_SKIPPED = "line_skipped"
    STORAGE_ERROR = "storage_error"

    # Contact changes
    RECORD_ADDED = "record_added"
    RECORD_UPDATED = "record_updated"
    RECORD_REMOVED = "record_removed"

    # Bill changes
    BILL_ADDED = "bill_added"
    BILL_UPDATED = "bill_updated"
    BILL_REMOVED = "bill_removed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every change and every load/save creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'record', 'bill', 'file')"
    )
    entity_id: Optional[str] = Field(
        default=None,
        description="Record id, bill name or file path the event relates to"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID shared by all events of one command invocation"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.record_added(record_id, name, correlation_id)
        event = AuditEventBuilder.line_skipped(3, "invalid id", "x,Bob,", path)
    """

    @staticmethod
    def records_loaded(
        source: str,
        record_count: int,
        skipped_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORDS_LOADED,
            entity_type="file",
            entity_id=source,
            correlation_id=correlation_id,
            description=f"Loaded {record_count} records from {source}",
            details={
                "record_count": record_count,
                "skipped_count": skipped_count,
            },
        )

    @staticmethod
    def records_saved(
        source: str,
        record_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORDS_SAVED,
            entity_type="file",
            entity_id=source,
            correlation_id=correlation_id,
            description=f"Saved {record_count} records to {source}",
            details={"record_count": record_count},
        )

    @staticmethod
    def line_skipped(
        line_number: int,
        error: str,
        line: str,
        source: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LINE_SKIPPED,
            severity=AuditSeverity.WARNING,
            entity_type="file",
            entity_id=source,
            correlation_id=correlation_id,
            description=f"Skipped line {line_number}: {error}",
            details={
                "line_number": line_number,
                "line": line,
            },
            error_message=error,
        )

    @staticmethod
    def storage_error(
        source: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORAGE_ERROR,
            severity=AuditSeverity.ERROR,
            entity_type="file",
            entity_id=source,
            correlation_id=correlation_id,
            description=f"Storage error on {source}",
            error_message=error_message,
        )

    @staticmethod
    def record_added(
        record_id: int,
        name: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_ADDED,
            entity_type="record",
            entity_id=str(record_id),
            correlation_id=correlation_id,
            description=f"Record {record_id} added: {name}",
            details={"name": name},
            is_user_action=True,
        )

    @staticmethod
    def record_updated(
        record_id: int,
        name: str,
        replaced_existing: bool,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_UPDATED,
            entity_type="record",
            entity_id=str(record_id),
            correlation_id=correlation_id,
            description=f"Record {record_id} set to: {name}",
            details={
                "name": name,
                "replaced_existing": replaced_existing,
            },
            is_user_action=True,
        )

    @staticmethod
    def record_removed(
        record_id: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_REMOVED,
            entity_type="record",
            entity_id=str(record_id),
            correlation_id=correlation_id,
            description=f"Record {record_id} removed",
            is_user_action=True,
        )

    @staticmethod
    def bill_added(name: str, amount: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BILL_ADDED,
            entity_type="bill",
            entity_id=name,
            description=f"Bill added: {name}",
            details={"amount": amount},
            is_user_action=True,
        )

    @staticmethod
    def bill_updated(name: str, amount: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BILL_UPDATED,
            entity_type="bill",
            entity_id=name,
            description=f"Bill updated: {name}",
            details={"amount": amount},
            is_user_action=True,
        )

    @staticmethod
    def bill_removed(name: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BILL_REMOVED,
            entity_type="bill",
            entity_id=name,
            description=f"Bill removed: {name}",
            is_user_action=True,
        )
