from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Container

Amount = Decimal
ClientId = int
TransactionId = int

PLACES = Decimal("0.0001")
MAX_CLIENT_ID = 2**16 - 1
MAX_TRANSACTION_ID = 2**32 - 1


def to_amount(value: int | str | Decimal) -> Amount:
    """Convert *value* to a fixed-point amount with four decimal places."""
    return Decimal(value).quantize(PLACES, rounding=ROUND_HALF_UP)


class Operation(object):
    """A unit of change of the ledger state.

    Types of operations:
    - Movement: deposit or withdrawal, changes account balances,
    - Claim: dispute lifecycle step that refers to an earlier movement.
    """


class Movement(Operation):
    """Move funds in or out of an account."""


class Claim(Operation):
    """Refer to an earlier movement by its transaction id."""


class PaymentsError(Exception):
    pass


class ParseError(PaymentsError):
    """Input record cannot be turned into an event."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class Reason(Enum):
    NegativeAmount = "negative_amount"
    AccountLocked = "account_locked"
    DuplicateTransaction = "duplicate_transaction"
    InsufficientFunds = "insufficient_funds"
    UnknownTransaction = "unknown_transaction"
    AlreadyDisputed = "already_disputed"
    NotDisputed = "not_disputed"

    def __repr__(self):
        return self.value


class PolicyViolation(PaymentsError):
    """Event is well-formed but cannot be applied to the account."""

    def __init__(self, reason: Reason):
        self.reason = reason
        super().__init__(reason.value)

    @staticmethod
    def must_not_be_negative(amount: Amount):
        if amount < 0:
            raise PolicyViolation(Reason.NegativeAmount)

    @staticmethod
    def must_be_unlocked(locked: bool):
        if locked:
            raise PolicyViolation(Reason.AccountLocked)

    @staticmethod
    def must_be_new(collection: Container[int], tx: TransactionId):
        if tx in collection:
            raise PolicyViolation(Reason.DuplicateTransaction)

    @staticmethod
    def must_cover(balance: Amount):
        if balance < 0:
            raise PolicyViolation(Reason.InsufficientFunds)

    @staticmethod
    def must_be_known(collection: Container[int], tx: TransactionId):
        if tx not in collection:
            raise PolicyViolation(Reason.UnknownTransaction)

    @staticmethod
    def must_not_be_disputed(collection: Container[int], tx: TransactionId):
        if tx in collection:
            raise PolicyViolation(Reason.AlreadyDisputed)

    @staticmethod
    def must_be_disputed(collection: Container[int], tx: TransactionId):
        if tx not in collection:
            raise PolicyViolation(Reason.NotDisputed)
