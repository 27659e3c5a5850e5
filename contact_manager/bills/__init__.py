"""Bill manager package."""

from contact_manager.bills.ledger import BillLedger
from contact_manager.bills.menu import BillMenu

__all__ = ["BillLedger", "BillMenu"]
