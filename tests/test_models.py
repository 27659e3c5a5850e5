"""
Tests for the Pydantic models.

Test strategy:
1. Field requirements and defaults
2. Console representation (the CLI prints records with repr)
3. Audit event construction and log serialization
"""

import pytest
from decimal import Decimal
from uuid import uuid4

from contact_manager.models.record import Bill, Record
from contact_manager.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)


class TestRecordModel:
    """Tests for the contact Record model."""

    def test_record_creation(self):
        """Test Record creation with all fields."""
        record = Record(id=3, name="Alice", email="alice@x.com")
        assert record.id == 3
        assert record.name == "Alice"
        assert record.email == "alice@x.com"

    def test_record_email_defaults_to_none(self):
        record = Record(id=1, name="Bob")
        assert record.email is None

    def test_record_rejects_empty_name(self):
        """Test that an empty name is rejected."""
        with pytest.raises(ValueError):
            Record(id=1, name="")

    def test_record_keeps_name_whitespace(self):
        """Names are stored exactly as given."""
        record = Record(id=1, name=" Alice ")
        assert record.name == " Alice "

    def test_record_repr(self):
        """Test the representation printed by the CLI."""
        record = Record(id=1, name="Alice", email=None)
        assert repr(record) == "Record(id=1, name='Alice', email=None)"


class TestBillModel:
    """Tests for the Bill model."""

    def test_bill_amount_is_decimal(self):
        bill = Bill(name="Rent", amount="1200.50")
        assert bill.amount == Decimal("1200.50")

    def test_bill_rejects_empty_name(self):
        with pytest.raises(ValueError):
            Bill(name="", amount=Decimal("1"))


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.RECORD_ADDED,
            description="Record added",
        )
        assert event.event_type == AuditEventType.RECORD_ADDED
        assert event.severity == AuditSeverity.INFO
        assert event.timestamp.tzinfo is not None

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        correlation_id = uuid4()
        event = AuditEventBuilder.records_saved(
            source="contacts.csv",
            record_count=2,
            correlation_id=correlation_id,
        )
        log_dict = event.to_log_dict()
        assert log_dict["event_type"] == "records_saved"
        assert log_dict["entity_id"] == "contacts.csv"
        assert log_dict["correlation_id"] == str(correlation_id)
        assert log_dict["details"]["record_count"] == 2

    def test_line_skipped_is_a_warning(self):
        event = AuditEventBuilder.line_skipped(
            line_number=3,
            error="invalid id",
            line="x,Bob,",
            source="contacts.csv",
        )
        assert event.severity == AuditSeverity.WARNING
        assert event.error_message == "invalid id"
        assert event.details == {"line_number": 3, "line": "x,Bob,"}

    def test_record_events_are_user_actions(self):
        assert AuditEventBuilder.record_added(1, "Alice").is_user_action is True
        assert AuditEventBuilder.record_removed(1).is_user_action is True

        updated = AuditEventBuilder.record_updated(7, "Zoe", replaced_existing=False)
        assert updated.entity_id == "7"
        assert updated.details["replaced_existing"] is False

    def test_storage_error_event(self):
        event = AuditEventBuilder.storage_error("contacts.csv", "No such file")
        assert event.severity == AuditSeverity.ERROR
        assert event.event_type == AuditEventType.STORAGE_ERROR

    def test_bill_events(self):
        event = AuditEventBuilder.bill_updated("Rent", "1300")
        assert event.entity_type == "bill"
        assert event.entity_id == "Rent"
        assert event.details["amount"] == "1300"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
