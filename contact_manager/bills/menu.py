"""
Interactive Bill Manager

A console menu over a BillLedger:

    1. add bill     2. view bills     3. remove bill     4. update bill

Any other selection, an empty line or end of input leaves the menu.
Inside a sub-menu an empty line goes back to the main menu.

Input and output are injected (defaulting to input/print) so the whole
session can be driven from tests.
"""

import sys
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from pydantic import ValidationError

from contact_manager.audit import AuditLogger, configure_logging
from contact_manager.bills.ledger import BillLedger
from contact_manager.config import get_settings
from contact_manager.models.audit import AuditEventBuilder
from contact_manager.models.record import Bill


MENU_TEXT = """
-- Manage Bills --
1. add bill...
2. view bill...
3. remove bill...
4. update bill...

Enter selection"""


class BillMenu:
    """
    Runs the bill manager loop.

    Args:
        ledger: Ledger to work on (a fresh one if omitted)
        input_fn: Reads one line; may raise EOFError
        output_fn: Writes one line
        audit_logger: Where bill changes are logged
    """

    def __init__(
        self,
        ledger: Optional[BillLedger] = None,
        input_fn: Callable[[], str] = input,
        output_fn: Callable[[str], None] = print,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self.ledger = ledger if ledger is not None else BillLedger()
        self._input = input_fn
        self._output = output_fn
        self._audit = audit_logger or AuditLogger()

    def get_input(self) -> Optional[str]:
        """One trimmed line, or None for an empty line or end of input."""
        try:
            line = self._input()
        except EOFError:
            return None
        line = line.strip()
        return line or None

    def get_bill_amount(self) -> Optional[Decimal]:
        """Prompt until a number is entered. None means go back."""
        self._output("Amount:")
        while True:
            text = self.get_input()
            if text is None:
                return None
            amount = None
            # Decimal also takes "1_000"; plain numbers only
            if "_" not in text:
                try:
                    amount = Decimal(text)
                except InvalidOperation:
                    pass
            if amount is not None and amount.is_finite():
                return amount
            self._output("Please enter a number")

    def _show_bills(self) -> None:
        for bill in self.ledger.get_all():
            self._output(repr(bill))

    def add_bill(self) -> None:
        self._output("Bill name:")
        name = self.get_input()
        if name is None:
            return
        amount = self.get_bill_amount()
        if amount is None:
            return

        self.ledger.add(Bill(name=name, amount=amount))
        self._audit.log(AuditEventBuilder.bill_added(name, str(amount)))

    def view_bills(self) -> None:
        self._show_bills()

    def remove_bill(self) -> None:
        self._show_bills()
        self._output("Remove Bill by name:")
        name = self.get_input()
        if name is None:
            return

        if self.ledger.remove(name):
            self._audit.log(AuditEventBuilder.bill_removed(name))
            self._output("removed bill")
        else:
            self._output("bill not found")

    def update_bill(self) -> None:
        self._show_bills()
        self._output("Enter bill name to update:")
        name = self.get_input()
        if name is None:
            return
        amount = self.get_bill_amount()
        if amount is None:
            return

        if self.ledger.update(name, amount):
            self._audit.log(AuditEventBuilder.bill_updated(name, str(amount)))
            self._output("updated")
        else:
            self._output("bill not found")

    def run(self) -> None:
        actions = {
            "1": self.add_bill,
            "2": self.view_bills,
            "3": self.remove_bill,
            "4": self.update_bill,
        }
        while True:
            self._output(MENU_TEXT)
            selection = self.get_input()
            action = actions.get(selection) if selection is not None else None
            if action is None:
                return
            action()


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"invalid configuration: {e}", file=sys.stderr)
        return 2
    configure_logging(settings.log_level)
    BillMenu().run()
    return 0
