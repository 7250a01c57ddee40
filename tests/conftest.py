from decimal import Decimal

import pytest

from payments import Account, Deposit, Dispute, Ledger, Withdrawal


@pytest.fixture
def account() -> Account:
    return Account(1, available=Decimal("10"), history={1: Decimal("10")})


@pytest.fixture
def toy_ledger():
    return Ledger.from_list(
        [
            Deposit(1, 1, Decimal("10")),
            Deposit(2, 2, Decimal("3")),
            Withdrawal(3, 1, Decimal("4")),
        ]
    )


@pytest.fixture
def disputed_ledger():
    return Ledger.from_list(
        [
            Deposit(1, 1, Decimal("10")),
            Deposit(2, 1, Decimal("5")),
            Deposit(3, 1, Decimal("2")),
            Dispute(2, 1),
        ]
    )

