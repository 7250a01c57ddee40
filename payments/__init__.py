from .account import Account
from .base import ParseError, PaymentsError, PolicyViolation, Reason
from .engine import Engine, process_transactions_csv
from .event import Chargeback, Deposit, Dispute, Event, Kind, Resolve, Withdrawal
from .ledger import History, Ledger, Rejection
from .records import read_events
from .report import AccountState, Snapshot, format_amount
