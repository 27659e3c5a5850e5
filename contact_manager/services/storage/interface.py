"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for record storage.
This allows us to:
1. Keep the CSV file format in one place
2. Use in-memory storage for testing
3. Keep the command flow decoupled from the file system

The interface is intentionally simple: load the whole store, save the whole store.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from contact_manager.records.store import RecordStore


# =============================================================================
# ERRORS
# =============================================================================

class StorageError(Exception):
    """The data file could not be opened, read or written."""
    pass


class ParseError(Exception):
    """Base exception for a data file line that is not a valid record."""
    pass


class InvalidIdError(ParseError):
    """The id field is not an integer."""

    def __init__(self, value: str = ""):
        self.value = value
        super().__init__("invalid id")


class EmptyRecordError(ParseError):
    """The id field is blank."""

    def __init__(self):
        super().__init__("empty record")


class MissingFieldError(ParseError):
    """A required field is absent or blank."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"missing fields {field}")


# =============================================================================
# LOAD RESULTS
# =============================================================================

class ParseDiagnostic(BaseModel):
    """A line that was skipped while loading, and why."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    line_number: int = Field(
        ...,
        ge=1,
        description="1-based line number in the data file"
    )
    error: ParseError = Field(
        ...,
        description="Why the line was rejected"
    )
    line: str = Field(
        ...,
        description="Raw line text"
    )

    def render(self) -> str:
        """Human-readable report, as printed in verbose mode."""
        return f'error occurred in line {self.line_number}: {self.error}\n > "{self.line}"\n'


class LoadResult(BaseModel):
    """
    Outcome of a load.

    Loading never fails on a bad line; bad lines end up in diagnostics
    and the store holds whatever parsed.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    store: RecordStore
    diagnostics: list[ParseDiagnostic] = Field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.diagnostics)


# =============================================================================
# INTERFACE
# =============================================================================

class RecordStorageInterface(ABC):
    """
    Abstract interface for record storage.

    Any storage implementation (CSV file, in-memory) must implement these methods.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Where the records live, for log and error messages."""
        pass

    @abstractmethod
    def load(self) -> LoadResult:
        """
        Load every record.

        Returns:
            The store and the diagnostics for skipped lines

        Raises:
            StorageError: If the records cannot be read
        """
        pass

    @abstractmethod
    def save(self, store: RecordStore) -> None:
        """
        Replace the stored records with the contents of store.

        Raises:
            StorageError: If the records cannot be written
        """
        pass
