from decimal import Decimal

import pytest

from payments import (
    AccountState,
    Chargeback,
    Deposit,
    Dispute,
    Ledger,
    PaymentsError,
    Reason,
    Rejection,
    Resolve,
    Withdrawal,
)


def state(ledger: Ledger, client: int):
    s = ledger.snapshot()[client]
    return s.available, s.held, s.total, s.locked


def test_ledger_keys(toy_ledger):
    assert list(toy_ledger.accounts) == [1, 2]


@pytest.mark.ledger
def test_account_created_on_first_reference():
    ledger = Ledger().apply(Dispute(1, 5))
    assert state(ledger, 5) == (0, 0, 0, False)
    assert ledger.snapshot()[5].active is False


@pytest.mark.ledger
def test_deposits_and_withdrawal():
    ledger = Ledger.from_list(
        [
            Deposit(1, 1, Decimal("1.0")),
            Deposit(2, 1, Decimal("1.0")),
            Withdrawal(3, 1, Decimal("1.5")),
        ]
    )
    assert state(ledger, 1) == (Decimal("0.5"), 0, Decimal("0.5"), False)


@pytest.mark.ledger
def test_dispute_deposit():
    ledger = Ledger.from_list([Deposit(1, 1, Decimal("10.0")), Dispute(1, 1)])
    assert state(ledger, 1) == (0, 10, 10, False)


@pytest.mark.ledger
def test_chargeback_withdrawal_locks_account():
    ledger = Ledger.from_list(
        [
            Deposit(1, 1, Decimal("10.0")),
            Withdrawal(2, 1, Decimal("5.0")),
            Dispute(2, 1),
            Chargeback(2, 1),
        ]
    )
    assert state(ledger, 1) == (10, 0, 10, True)


@pytest.mark.ledger
def test_dispute_of_unknown_transaction_is_rejected():
    ledger = Ledger.from_list([Deposit(1, 1, Decimal("10.0")), Dispute(2, 1)])
    assert state(ledger, 1) == (10, 0, 10, False)
    assert ledger.rejections == [Rejection(Dispute(2, 1), Reason.UnknownTransaction)]


@pytest.mark.ledger
def test_dispute_of_other_client_transaction_is_rejected():
    ledger = Ledger.from_list([Deposit(1, 1, Decimal("10.0")), Dispute(1, 2)])
    assert state(ledger, 1) == (10, 0, 10, False)
    assert ledger.tally() == {Reason.UnknownTransaction: 1}


@pytest.mark.ledger
def test_clients_do_not_affect_each_other():
    events_a = [Deposit(1, 1, Decimal("10")), Dispute(1, 1), Chargeback(1, 1)]
    events_b = [Deposit(2, 2, Decimal("3")), Withdrawal(4, 2, Decimal("1"))]
    interleaved = [events_a[0], events_b[0], events_a[1], events_b[1], events_a[2]]
    ledger = Ledger.from_list(interleaved)
    assert state(ledger, 1) == (0, 0, 0, True)
    assert state(ledger, 2) == (2, 0, 2, False)
    assert ledger.snapshot()[2] == Ledger.from_list(events_b).snapshot()[2]


@pytest.mark.ledger
def test_resolve_and_chargeback_of_other_transaction_are_rejected(disputed_ledger):
    disputed_ledger.apply_many([Resolve(3, 1), Chargeback(3, 1)])
    assert state(disputed_ledger, 1) == (12, 5, 17, False)
    assert disputed_ledger.tally() == {Reason.NotDisputed: 2}


@pytest.mark.ledger
def test_locked_account_ignores_deposits_and_withdrawals(disputed_ledger):
    disputed_ledger.apply(Chargeback(2, 1))
    before = disputed_ledger.snapshot()[1]
    disputed_ledger.apply_many(
        [Deposit(10, 1, Decimal("1")), Withdrawal(11, 1, Decimal("1"))]
    )
    after = disputed_ledger.snapshot()[1]
    assert after == before
    assert after.locked is True
    assert disputed_ledger.tally() == {Reason.AccountLocked: 2}


@pytest.mark.ledger
def test_history_keeps_rejected_events(toy_ledger):
    toy_ledger.apply(Withdrawal(4, 2, Decimal("100")))
    assert len(toy_ledger.history) == 4
    assert len(toy_ledger.rejections) == 1


@pytest.mark.ledger
def test_replay_history_gives_same_snapshot(disputed_ledger):
    disputed_ledger.apply_many(
        [Withdrawal(4, 1, Decimal("50")), Chargeback(2, 1), Deposit(5, 3, Decimal("1"))]
    )
    replayed = disputed_ledger.history.to_ledger()
    assert replayed.snapshot() == disputed_ledger.snapshot()
    assert replayed.tally() == disputed_ledger.tally()


@pytest.mark.ledger
def test_snapshot_is_a_copy(toy_ledger):
    snapshot = toy_ledger.snapshot()
    toy_ledger.apply(Deposit(9, 1, Decimal("1")))
    assert snapshot[1] == AccountState(
        client=1, available=6, held=0, total=6, locked=False
    )


def test_unknown_event_raises_error():
    with pytest.raises(PaymentsError):
        Ledger().apply("deposit")  # type: ignore


@pytest.mark.ledger
def test_ledger_without_history_keeps_only_counts():
    ledger = Ledger(keep_history=False).apply_many(
        Deposit(i, 1, Decimal(1)) for i in range(1000)
    )
    ledger.apply(Withdrawal(1000, 1, Decimal(5000)))
    assert ledger.history.events == []
    assert ledger.rejections == []
    assert ledger.received == 1001
    assert ledger.tally() == {Reason.InsufficientFunds: 1}
    assert state(ledger, 1) == (1000, 0, 1000, False)
