"""Scripted run of the account ledger with fixed deposits and withdrawals."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TextIO

from moduleone.account import Ledger

AMOUNTS = (42, 54, 957, 432, 1234, 0, 754, 16576)
DEPOSITS = (5, 765, 564, 2, 87, 23, 9, 20)
WITHDRAWALS = (321, 34, 657, 4, 76, 275, 657, 7654)


def run_demo(
    out: TextIO | None = None,
    clock: Callable[[], datetime] | None = None,
) -> Ledger:
    """Open the accounts, deposit, withdraw, report, then close them all."""
    ledger = Ledger(out=out, clock=clock)
    accounts = [ledger.open(amount) for amount in AMOUNTS]

    def report() -> None:
        ledger.accounts_info()
        for account in accounts:
            account.status()

    report()
    for account, amount in zip(accounts, DEPOSITS):
        account.deposit(amount)
    report()
    for account, amount in zip(accounts, WITHDRAWALS):
        account.withdraw(amount)
    report()
    for account in accounts:
        account.close()
    return ledger


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo on standard output."""
    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())