"""In-memory bill ledger, keyed by bill name."""

from decimal import Decimal
from typing import Optional

from contact_manager.models.record import Bill


class BillLedger:
    """Bills for one console session. Nothing is persisted."""

    def __init__(self):
        self._bills: dict[str, Bill] = {}

    def __len__(self) -> int:
        return len(self._bills)

    def add(self, bill: Bill) -> None:
        """Insert a bill, replacing any bill with the same name."""
        self._bills[bill.name] = bill

    def get(self, name: str) -> Optional[Bill]:
        return self._bills.get(name)

    def get_all(self) -> list[Bill]:
        """All bills ordered by name."""
        return [self._bills[name] for name in sorted(self._bills)]

    def remove(self, name: str) -> bool:
        return self._bills.pop(name, None) is not None

    def update(self, name: str, amount: Decimal) -> bool:
        """Change the amount of an existing bill. Never inserts."""
        bill = self._bills.get(name)
        if bill is None:
            return False
        self._bills[name] = bill.model_copy(update={"amount": amount})
        return True
