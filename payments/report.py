"""Account balances snapshot and its CSV and JSON renderings."""

import csv
from collections import UserDict
from decimal import Decimal
from typing import TYPE_CHECKING, TextIO

import simplejson as json  # type: ignore
from pydantic import BaseModel, ConfigDict

from .base import Amount, ClientId

if TYPE_CHECKING:
    from .account import Account

FIELDNAMES = ["client", "available", "held", "total", "locked"]


def format_amount(amount: Amount) -> str:
    """Render amount without trailing zeros and exponent, zero as '0'."""
    normalized = amount.normalize()
    if normalized == 0:
        return "0"
    return f"{normalized:f}"


class AccountState(BaseModel):
    """Frozen copy of account balances."""

    model_config = ConfigDict(frozen=True)

    client: ClientId
    available: Amount
    held: Amount
    total: Amount
    locked: bool
    active: bool = True

    @classmethod
    def from_account(cls, account: "Account"):
        return cls(
            client=account.client,
            available=account.available,
            held=account.held,
            total=account.total,
            locked=account.locked,
            active=account.is_active(),
        )

    def to_row(self) -> list[str]:
        return [
            str(self.client),
            format_amount(self.available),
            format_amount(self.held),
            format_amount(self.total),
            str(self.locked).lower(),
        ]

    def to_dict(self) -> dict:
        return dict(
            client=self.client,
            available=Decimal(format_amount(self.available)),
            held=Decimal(format_amount(self.held)),
            total=Decimal(format_amount(self.total)),
            locked=self.locked,
        )


class Snapshot(UserDict[ClientId, AccountState]):
    def states(self, include_inactive: bool = False) -> list[AccountState]:
        """Account states sorted by client id.

        Accounts without any applied deposit or withdrawal are skipped
        unless *include_inactive* is set.
        """
        return [
            self.data[client]
            for client in sorted(self.data)
            if include_inactive or self.data[client].active
        ]

    def write_csv(self, stream: TextIO, include_inactive: bool = False):
        """Write header and one row per account. Write nothing if there are no rows."""
        states = self.states(include_inactive)
        if not states:
            return
        writer = csv.writer(stream, lineterminator="\n")
        writer.writerow(FIELDNAMES)
        for state in states:
            writer.writerow(state.to_row())

    def model_dump_json(self, indent: int = 2, include_inactive: bool = False) -> str:
        return json.dumps(
            [state.to_dict() for state in self.states(include_inactive)],
            indent=indent,
            use_decimal=True,
        )

    def write_json(self, stream: TextIO, include_inactive: bool = False):
        stream.write(self.model_dump_json(include_inactive=include_inactive))
        stream.write("\n")
