"""
Shared pytest fixtures.

Every test starts with a fresh settings cache and no CONTACTS_* variables,
and leaves the root logger the way it found it.
"""

import logging

import pytest

from contact_manager.audit import AuditLogger
from contact_manager.config import get_settings
from contact_manager.services.storage import CSV_HEADER


SETTINGS_ENV_VARS = ("CONTACTS_DATA_FILE", "CONTACTS_VERBOSE", "CONTACTS_LOG_LEVEL")


class RecordingAuditLogger(AuditLogger):
    """AuditLogger that keeps events in memory instead of logging them."""

    def __init__(self):
        super().__init__()
        self.events = []

    def log(self, event):
        self.events.append(event)

    @property
    def event_types(self):
        return [event.event_type.value for event in self.events]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    get_settings.cache_clear()
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def audit_logger():
    return RecordingAuditLogger()


@pytest.fixture
def data_file(tmp_path):
    """A data file with a header and three contacts."""
    path = tmp_path / "contacts.csv"
    path.write_text(
        f"{CSV_HEADER}\n"
        "1,Alice,alice@example.com\n"
        "2,Bob,\n"
        "5,alicia,alicia@example.com\n",
        encoding="utf-8",
    )
    return path
