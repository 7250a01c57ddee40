"""Client account with balances and dispute lifecycle.

Amounts in `history` are signed: a deposit is recorded as a positive amount
and a withdrawal as a negative one. The sign decides how a dispute moves funds:

- disputing a deposit moves its amount from `available` to `held`,
  resolving moves it back, charging back removes it from `held`;
- disputing a withdrawal leaves `available` as is and moves `held` below zero,
  resolving returns `held` to zero, charging back returns the withdrawn
  funds to `available`.

A chargeback locks the account. A locked account rejects deposits and
withdrawals but still processes disputes, resolves and chargebacks.

Each handler checks all its preconditions before touching any field and
raises `PolicyViolation` if one fails, so a rejected event leaves the
account unchanged.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from .base import Amount, ClientId, PolicyViolation, TransactionId


@dataclass
class Account:
    client: ClientId
    available: Amount = Decimal(0)
    held: Amount = Decimal(0)
    locked: bool = False
    history: dict[TransactionId, Amount] = field(default_factory=dict)
    open_disputes: dict[TransactionId, Amount] = field(default_factory=dict)

    @property
    def total(self) -> Amount:
        return self.available + self.held

    def is_active(self) -> bool:
        """Return True if at least one deposit or withdrawal was applied."""
        return bool(self.history)

    def is_disputed(self, tx: TransactionId) -> bool:
        return tx in self.open_disputes

    def _guard_movement(self, tx: TransactionId, amount: Amount, new_available: Amount):
        PolicyViolation.must_not_be_negative(amount)
        PolicyViolation.must_be_unlocked(self.locked)
        PolicyViolation.must_be_new(self.history, tx)
        PolicyViolation.must_cover(new_available)

    def deposit(self, tx: TransactionId, amount: Amount):
        self._guard_movement(tx, amount, self.available + amount)
        self.available += amount
        self.history[tx] = amount

    def withdraw(self, tx: TransactionId, amount: Amount):
        self._guard_movement(tx, amount, self.available - amount)
        self.available -= amount
        self.history[tx] = -amount

    def dispute(self, tx: TransactionId):
        PolicyViolation.must_be_known(self.history, tx)
        PolicyViolation.must_not_be_disputed(self.open_disputes, tx)
        amount = self.history[tx]
        if amount >= 0:
            self.available -= amount
        self.held += amount
        self.open_disputes[tx] = amount

    def resolve(self, tx: TransactionId):
        PolicyViolation.must_be_disputed(self.open_disputes, tx)
        amount = self.open_disputes.pop(tx)
        if amount >= 0:
            self.available += amount
        self.held -= amount

    def chargeback(self, tx: TransactionId):
        PolicyViolation.must_be_disputed(self.open_disputes, tx)
        amount = self.open_disputes.pop(tx)
        self.held -= amount
        if amount < 0:
            self.available -= amount
        self.locked = True
