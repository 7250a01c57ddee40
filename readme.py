from decimal import Decimal

from payments import Chargeback, Deposit, Dispute, Ledger, Reason, Resolve, Withdrawal

# Apply events
ledger = Ledger()
# fmt: off
events = [
    Deposit(tx=1, client=1, amount=Decimal("10.0")),
    Deposit(tx=2, client=2, amount=Decimal("2.0")),
    Withdrawal(tx=3, client=1, amount=Decimal("4.5")),
    Withdrawal(tx=4, client=2, amount=Decimal("3.0")),  # not enough funds
    Dispute(tx=1, client=1),
    Resolve(tx=1, client=1),
    Dispute(tx=3, client=1),
    Chargeback(tx=3, client=1),  # withdrawal undone, account locked
    Deposit(tx=5, client=1, amount=Decimal("1.0")),  # locked account
]
# fmt: on
ledger.apply_many(events)

# Show balances
snapshot = ledger.snapshot()
print(snapshot.model_dump_json())
assert snapshot[1].available == 10
assert snapshot[1].locked is True
assert snapshot[2].total == 2
assert ledger.tally() == {Reason.InsufficientFunds: 1, Reason.AccountLocked: 1}

# Same events give same balances
assert ledger.history.to_ledger().snapshot() == snapshot
