"""
CSV Codec for Contact Records

File format: a header line `id,name,email`, then one `id,name,email` line
per record. An absent email is written as an empty field.

KNOWN ISSUE: fields are joined with plain commas and never quoted or escaped.
A name or email containing a comma (or a newline) does not survive a
save/load round trip. The format is kept as is so existing data files stay
readable; fixing it means changing the file format.

The parser is pure: it returns diagnostics and never prints.
"""

import re

from contact_manager.models.record import Record
from contact_manager.records.store import RecordStore
from contact_manager.services.storage.interface import (
    EmptyRecordError,
    InvalidIdError,
    LoadResult,
    MissingFieldError,
    ParseDiagnostic,
    ParseError,
)


CSV_HEADER = "id,name,email"
FIELD_SEPARATOR = ","

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_record(line: str) -> Record:
    """
    Parse one data line into a Record.

    Fields past the third are ignored.

    Raises:
        EmptyRecordError: If the id field is blank
        InvalidIdError: If the id field is not an integer
        MissingFieldError: If the name field is absent or empty
    """
    fields = line.split(FIELD_SEPARATOR)

    raw_id = fields[0]
    if raw_id.strip() == "":
        raise EmptyRecordError()
    if not _INTEGER.fullmatch(raw_id):
        raise InvalidIdError(raw_id)
    record_id = int(raw_id)

    name = fields[1] if len(fields) > 1 else ""
    if name == "":
        raise MissingFieldError("name")

    email = fields[2] if len(fields) > 2 else ""

    return Record(id=record_id, name=name, email=email or None)


def parse_records(text: str) -> LoadResult:
    """
    Parse a whole data file.

    Empty lines are ignored. Every other line either becomes a record or a
    diagnostic; the header line is not special and shows up as an invalid id.
    """
    store = RecordStore()
    diagnostics = []

    for number, line in enumerate(text.split("\n"), start=1):
        if line == "":
            continue
        try:
            store.add(parse_record(line))
        except ParseError as e:
            diagnostics.append(ParseDiagnostic(line_number=number, error=e, line=line))

    return LoadResult(store=store, diagnostics=diagnostics)


def serialize_record(record: Record) -> str:
    """One data line, without the trailing newline."""
    return FIELD_SEPARATOR.join([str(record.id), record.name, record.email or ""])


def serialize_records(store: RecordStore) -> str:
    """The full file contents: header, then records ascending by id."""
    lines = [CSV_HEADER]
    lines.extend(serialize_record(record) for record in store.to_sorted_list())
    return "\n".join(lines) + "\n"
