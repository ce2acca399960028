"""Bank accounts that log every operation, with shared ledger totals."""

from __future__ import annotations

import sys
from collections.abc import Callable
from datetime import datetime
from typing import TextIO

_TIMESTAMP_FORMAT = "[%Y%m%d_%H%M%S] "


class Ledger:
    """Tracks all accounts and their totals, and writes the activity log."""

    def __init__(
        self,
        out: TextIO | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._out = out
        self._clock = clock or datetime.now
        self.accounts: list[Account] = []
        self.total_amount = 0
        self.total_deposits = 0
        self.total_withdrawals = 0

    @property
    def nb_accounts(self) -> int:
        return len(self.accounts)

    def log(self, body: str) -> str:
        """Write one timestamped line and return it without the newline."""
        line = self._clock().strftime(_TIMESTAMP_FORMAT) + body
        out = self._out if self._out is not None else sys.stdout
        out.write(line + "\n")
        return line

    def accounts_info(self) -> str:
        """Log and return the summary of all accounts."""
        return self.log(
            f"index:{self.nb_accounts};"
            f"total:{self.total_amount};"
            f"deposits:{self.total_deposits};"
            f"withdrawals:{self.total_withdrawals}"
        )

    def open(self, initial_deposit: int) -> Account:
        """Create a new account holding ``initial_deposit``."""
        account = Account(self, len(self.accounts), initial_deposit)
        self.accounts.append(account)
        self.total_amount += initial_deposit
        self.log(f"index:{account.index};amount:{account.amount};created")
        return account


class Account:
    """A single account belonging to a ledger."""

    def __init__(self, ledger: Ledger, index: int, amount: int) -> None:
        self.ledger = ledger
        self.index = index
        self.amount = amount
        self.nb_deposits = 0
        self.nb_withdrawals = 0
        self.closed = False

    def deposit(self, amount: int) -> str:
        """Add ``amount`` to the account and log the operation."""
        before = f"index{self.index};p_amount:{self.amount};nb_deposits:{self.nb_deposits};"
        self.amount += amount
        self.ledger.total_amount += amount
        self.nb_deposits += 1
        self.ledger.total_deposits += 1
        return self.ledger.log(
            before
            + f"deposit:{amount};amount:{self.amount};nb_deposits:{self.nb_deposits}"
        )

    def withdraw(self, amount: int) -> bool:
        """Take ``amount`` out if the balance covers it; return whether it did."""
        before = f" index:{self.index};amount:{self.amount};"
        if self.amount < amount:
            self.ledger.log(before + "withdrawal:refused")
            return False
        self.amount -= amount
        self.ledger.total_amount -= amount
        self.nb_withdrawals += 1
        self.ledger.total_withdrawals += 1
        self.ledger.log(
            before
            + f"withdrawal:{amount};amount:{self.amount};"
            + f"nb_witdrawals:{self.nb_withdrawals}"
        )
        return True

    def status(self) -> str:
        """Log and return this account's state."""
        return self.ledger.log(
            f"index:{self.index};amount:{self.amount};"
            f"deposits:{self.nb_deposits};withdrawals:{self.nb_withdrawals};"
        )

    def close(self) -> None:
        """Log the closing of the account; later calls do nothing."""
        if self.closed:
            return
        self.closed = True
        self.ledger.log(f"index:{self.index};amount:{self.amount};closed")

    def __enter__(self) -> Account:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()