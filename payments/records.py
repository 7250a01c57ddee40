"""Read ledger events from CSV records.

The input must start with a header row naming the `type`, `client`, `tx`
and `amount` columns. Whitespace around names and values is ignored,
rows may omit trailing fields or carry extra ones. Any row that cannot
be turned into an event raises `ParseError`.
"""

import csv
from decimal import Decimal, InvalidOperation
from typing import Iterator, TextIO

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .base import MAX_CLIENT_ID, MAX_TRANSACTION_ID, ParseError, to_amount
from .event import Event, Kind, make_event

REQUIRED_COLUMNS = ("type", "client", "tx")


class TransactionRow(BaseModel):
    """One validated input record."""

    model_config = ConfigDict(extra="ignore")

    type: Kind
    client: int = Field(ge=0, le=MAX_CLIENT_ID)
    tx: int = Field(ge=0, le=MAX_TRANSACTION_ID)
    amount: Decimal | None = None

    @model_validator(mode="after")
    def amount_is_present_for_movements(self):
        if self.type.needs_amount and self.amount is None:
            raise ValueError(f"amount is required for {self.type.value}")
        return self

    def to_event(self) -> Event:
        amount = None if self.amount is None else to_amount(self.amount)
        return make_event(self.type, self.client, self.tx, amount)


def describe(error: ValidationError) -> str:
    """Summarise pydantic validation errors in one line."""
    parts = []
    for err in error.errors():
        location = ".".join(str(x) for x in err["loc"])
        parts.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "; ".join(parts)


def parse_header(header: list[str] | None) -> list[str]:
    if header is None:
        raise ParseError("missing header row", line=1)
    names = [name.lstrip("\ufeff").strip().lower() for name in header]
    missing = [name for name in REQUIRED_COLUMNS if name not in names]
    if missing:
        raise ParseError(f"header has no columns: {', '.join(missing)}", line=1)
    return names


def parse_row(names: list[str], values: list[str], line: int | None = None) -> Event:
    record = {
        name: value.strip()
        for name, value in zip(names, values)
        if name and value.strip()
    }
    try:
        return TransactionRow.model_validate(record).to_event()
    except ValidationError as e:
        raise ParseError(describe(e), line=line) from e
    except InvalidOperation as e:
        raise ParseError(f"amount out of range: {record.get('amount')}", line=line) from e


def read_events(stream: TextIO) -> Iterator[Event]:
    """Yield events from a CSV text stream one by one."""
    reader = csv.reader(stream)
    try:
        names = parse_header(next(reader, None))
        for values in reader:
            if not any(value.strip() for value in values):
                continue
            yield parse_row(names, values, line=reader.line_num)
    except csv.Error as e:
        raise ParseError(str(e), line=reader.line_num) from e
