"""User-facing Engine class that runs CSV transactions through a ledger."""

from dataclasses import dataclass, field
from typing import Iterable, TextIO

from .config import Settings, get_settings
from .event import Event
from .ledger import Ledger
from .logs import get_logger
from .records import read_events
from .report import Snapshot

logger = get_logger(__name__)


@dataclass
class Engine:
    ledger: Ledger = field(default_factory=lambda: Ledger(keep_history=False))
    settings: Settings = field(default_factory=get_settings)

    def process(self, events: Iterable[Event]):
        self.ledger.apply_many(events)
        return self

    def process_csv(self, stream: TextIO):
        """Apply events from CSV stream. ParseError stops processing."""
        return self.process(read_events(stream))

    @property
    def snapshot(self) -> Snapshot:
        return self.ledger.snapshot()

    def summary(self) -> dict:
        return dict(
            events=self.ledger.received,
            accounts=len(self.ledger.accounts),
            rejected=sum(self.ledger.rejected.values()),
            reasons={r.value: n for r, n in self.ledger.tally().items()},
        )

    def write(self, output: TextIO, fmt: str | None = None):
        fmt = fmt or self.settings.output_format
        include_inactive = self.settings.include_inactive
        logger.info("ledger_processed", **self.summary())
        match fmt:
            case "csv":
                self.snapshot.write_csv(output, include_inactive)
            case "json":
                self.snapshot.write_json(output, include_inactive)
            case _:
                raise ValueError(f"Unknown output format: {fmt}")


def process_transactions_csv(
    transactions: TextIO, output: TextIO, settings: Settings | None = None
) -> Engine:
    """Read transactions CSV, write account balances to *output*."""
    engine = Engine(settings=settings or get_settings())
    engine.process_csv(transactions).write(output)
    return engine
