"""
Core Data Models for the Contact Manager

These models define the schemas for everything the tools keep in memory.
They are designed to:
1. Enforce type safety at runtime
2. Provide clear validation error messages
3. Print readably on the console

DESIGN DECISION: A record is checked only for a non-empty name.
Emails are stored exactly as given; the data file is the user's, not ours.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# CONTACTS
# =============================================================================

class Record(BaseModel):
    """
    One contact entry.

    The id is the store key. It is assigned by the store on add,
    or taken from the data file on load.
    """

    id: int = Field(
        ...,
        description="Unique record identifier"
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Contact name (required)"
    )
    email: Optional[str] = Field(
        default=None,
        description="Email address, None when absent"
    )


# =============================================================================
# BILLS
# =============================================================================

class Bill(BaseModel):
    """
    A bill tracked by the interactive bill manager.

    Bills are keyed by name, so adding a bill with an existing
    name replaces the old amount.
    """

    name: str = Field(
        ...,
        min_length=1,
        description="Bill name (unique key)"
    )
    amount: Decimal = Field(
        ...,
        description="Amount owed"
    )
