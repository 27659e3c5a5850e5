"""
Contact Manager command line.

Usage:
    contact-manager [-d DATA_FILE] [-v] list
    contact-manager [-d DATA_FILE] [-v] add NAME [-e EMAIL]
    contact-manager [-d DATA_FILE] [-v] search QUERY
    contact-manager [-d DATA_FILE] [-v] remove ID
    contact-manager [-d DATA_FILE] [-v] update ID NAME [EMAIL]

Storage errors are printed and the process still exits 0.
An invalid configuration is reported on stderr with exit code 2.
"""

import argparse
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from contact_manager.audit import AuditLogger, configure_logging, create_correlation_id
from contact_manager.config import get_settings
from contact_manager.orchestrator import ContactFlow
from contact_manager.services.storage import (
    CsvRecordStorage,
    ParseDiagnostic,
    RecordStorageInterface,
    StorageError,
)


def _text(value: str) -> str:
    # undecodable argv bytes arrive as lone surrogates
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise argparse.ArgumentTypeError("must be valid UTF-8 text")
    return value


def _non_empty(value: str) -> str:
    if value == "":
        raise argparse.ArgumentTypeError("must not be empty")
    return _text(value)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(prog="contact-manager", description="Contact Manager")
    parser.add_argument(
        "-d",
        dest="data_file",
        default=settings.data_file,
        help=f"CSV data file (default: {settings.data_file})",
    )
    parser.add_argument(
        "-v",
        dest="verbose",
        action="store_true",
        default=settings.verbose,
        help="verbose",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Print all records sorted by id")

    add = subparsers.add_parser("add", help="Add a record with the next free id")
    add.add_argument("name", type=_non_empty)
    add.add_argument("-e", dest="email", type=_text, default=None)

    search = subparsers.add_parser("search", help="Find records by name, ignoring case")
    search.add_argument("query")

    remove = subparsers.add_parser("remove", help="Delete a record by id")
    remove.add_argument("id", type=int)

    update = subparsers.add_parser("update", help="Write the record at id")
    update.add_argument("id", type=int)
    update.add_argument("name", type=_non_empty)
    update.add_argument("email", nargs="?", type=_text, default=None)

    return parser


def print_diagnostics(diagnostics: list[ParseDiagnostic]) -> None:
    for diagnostic in diagnostics:
        print(diagnostic.render())


def build_flow(
    args: argparse.Namespace,
    storage: Optional[RecordStorageInterface] = None,
) -> ContactFlow:
    """Wire storage, audit logger and verbose reporting for one invocation."""
    return ContactFlow(
        storage if storage is not None else CsvRecordStorage(args.data_file),
        AuditLogger(correlation_id=create_correlation_id()),
        diagnostics_handler=print_diagnostics if args.verbose else None,
    )


def run(args: argparse.Namespace, flow: ContactFlow) -> None:
    """Execute one parsed command against the flow and print its output."""
    if args.command == "list":
        for record in flow.list_records().records:
            print(repr(record))
    elif args.command == "add":
        flow.add_record(args.name, args.email or None)
    elif args.command == "search":
        result = flow.search(args.query)
        if not result.records:
            print("no records found!")
        for record in result.records:
            print(repr(record))
    elif args.command == "remove":
        result = flow.remove_record(args.id)
        print("record deleted" if result.changed else "record not found")
    elif args.command == "update":
        flow.update_record(args.id, args.name, args.email or None)
    else:
        raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"invalid configuration: {e}", file=sys.stderr)
        return 2
    configure_logging(settings.log_level)

    args = build_parser().parse_args(argv)

    try:
        run(args, build_flow(args))
    except StorageError as e:
        print(f"an error occurred: {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
