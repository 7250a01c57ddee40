"""A payments ledger that equates to a sequence of events.

The main class is `Ledger`. You change the state of ledger by applying events to it:
- `Deposit` and `Withdrawal` move funds in and out of a client account,
- `Dispute`, `Resolve` and `Chargeback` run the dispute lifecycle of
  an earlier deposit or withdrawal.

Accounts are created on first reference to a client id. An event that breaks
account rules is not applied: it is counted, kept in `Ledger.rejections`
and logged, and processing continues. With `keep_history=False` the ledger
only counts received and rejected events and holds no event objects.

`Ledger.history` holds a sequence of events that were received by the ledger,
including the rejected ones. You can re-run the events on empty ledger and
will arrive to the same state of ledger.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .account import Account
from .base import ClientId, PaymentsError, PolicyViolation, Reason
from .event import Chargeback, Deposit, Dispute, Event, Resolve, Withdrawal
from .logs import get_logger
from .report import AccountState, Snapshot

logger = get_logger(__name__)


@dataclass
class Rejection:
    event: Event
    reason: Reason


@dataclass
class History:
    events: list[Event] = field(default_factory=list)

    def append(self, event: Event):
        self.events.append(event)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self.events)

    def to_ledger(self) -> "Ledger":
        """Re-create ledger from history of events."""
        return Ledger.from_list(self.events)


@dataclass
class Ledger:
    accounts: dict[ClientId, Account] = field(default_factory=dict)
    history: History = field(default_factory=History)
    rejections: list[Rejection] = field(default_factory=list)
    keep_history: bool = True
    received: int = 0
    rejected: Counter[Reason] = field(default_factory=Counter)

    @classmethod
    def from_list(cls, events: Iterable[Event]):
        return cls().apply_many(events)

    def account(self, client: ClientId) -> Account:
        """Return account for *client*, create empty account if not found."""
        if client not in self.accounts:
            self.accounts[client] = Account(client)
        return self.accounts[client]

    def run(self, event: Event):
        """Apply event to its account. Raise PolicyViolation if account rules forbid it."""
        match event:
            case Deposit(tx, client, amount):
                self.account(client).deposit(tx, amount)
            case Withdrawal(tx, client, amount):
                self.account(client).withdraw(tx, amount)
            case Dispute(tx, client):
                self.account(client).dispute(tx)
            case Resolve(tx, client):
                self.account(client).resolve(tx)
            case Chargeback(tx, client):
                self.account(client).chargeback(tx)
            case _:
                raise PaymentsError(f"Unknown {event}")

    def apply(self, event: Event):
        try:
            self.run(event)
        except PolicyViolation as e:
            self.rejected[e.reason] += 1
            if self.keep_history:
                self.rejections.append(Rejection(event, e.reason))
            logger.info(
                "event_rejected",
                client=event.client,
                tx=event.tx,
                kind=event.tag,
                reason=e.reason.value,
            )
        self.received += 1
        if self.keep_history:
            self.history.append(event)
        return self

    def apply_many(self, events: Iterable[Event]):
        for event in events:
            self.apply(event)
        return self

    def tally(self) -> Counter[Reason]:
        """Count rejected events by reason."""
        return Counter(self.rejected)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            {
                client: AccountState.from_account(account)
                for client, account in self.accounts.items()
            }
        )
