"""Ledger events. Movements carry an amount, claims refer to an earlier movement."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from .base import Amount, Claim, ClientId, Movement, TransactionId


class Kind(Enum):
    Deposit = "deposit"
    Withdrawal = "withdrawal"
    Dispute = "dispute"
    Resolve = "resolve"
    Chargeback = "chargeback"

    def __repr__(self):
        return self.value.capitalize()

    @property
    def needs_amount(self) -> bool:
        return self in {Kind.Deposit, Kind.Withdrawal}


@dataclass
class Deposit(Movement):
    """Credit funds to the client account."""

    tx: TransactionId
    client: ClientId
    amount: Amount
    tag: Literal["deposit"] = "deposit"


@dataclass
class Withdrawal(Movement):
    """Debit funds from the client account if enough funds are available."""

    tx: TransactionId
    client: ClientId
    amount: Amount
    tag: Literal["withdrawal"] = "withdrawal"


@dataclass
class Dispute(Claim):
    """Claim that transaction *tx* was erroneous and freeze its funds."""

    tx: TransactionId
    client: ClientId
    tag: Literal["dispute"] = "dispute"


@dataclass
class Resolve(Claim):
    """Close a dispute in favour of the client."""

    tx: TransactionId
    client: ClientId
    tag: Literal["resolve"] = "resolve"


@dataclass
class Chargeback(Claim):
    """Close a dispute against the client and lock the account."""

    tx: TransactionId
    client: ClientId
    tag: Literal["chargeback"] = "chargeback"


Event = Deposit | Withdrawal | Dispute | Resolve | Chargeback


def make_event(
    kind: Kind, client: ClientId, tx: TransactionId, amount: Amount | None = None
) -> Event:
    """Create event of a given *kind*. Amount is ignored for claims."""
    match kind:
        case Kind.Deposit | Kind.Withdrawal if amount is None:
            raise ValueError(f"{kind.value} requires an amount")
        case Kind.Deposit:
            return Deposit(tx, client, amount)  # type: ignore
        case Kind.Withdrawal:
            return Withdrawal(tx, client, amount)  # type: ignore
        case Kind.Dispute:
            return Dispute(tx, client)
        case Kind.Resolve:
            return Resolve(tx, client)
        case Kind.Chargeback:
            return Chargeback(tx, client)
    raise ValueError(f"Unknown event kind: {kind}")
