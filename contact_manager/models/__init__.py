"""
Data Models Package

This package contains the Pydantic models used by the contact and bill managers.
"""

from contact_manager.models.record import Bill, Record
from contact_manager.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Record models
    "Bill",
    "Record",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
