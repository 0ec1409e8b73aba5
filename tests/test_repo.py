import logging

import pytest

from ledger.errors import NotFoundError, StorageError
from ledger.models import Transaction
from ledger.repo import (
    count_txns,
    create_txn,
    delete_txn,
    get_txn,
    list_txns,
    update_txn,
)


def test_create_then_get(settings):
    tid = create_txn(
        settings.db_path,
        txn_type="expense",
        category="food",
        amount=12.34,
        date_str="2026-02-25",
        description="lunch",
    )
    assert get_txn(settings.db_path, tid) == Transaction(
        id=tid,
        type="expense",
        category="food",
        amount=12.34,
        date="2026-02-25",
        description="lunch",
    )


def test_description_is_optional(settings):
    tid = create_txn(
        settings.db_path,
        txn_type="income",
        category="salary",
        amount=1000,
        date_str="2026-02-01",
    )
    txn = get_txn(settings.db_path, tid)
    assert txn.description is None
    assert txn.amount == 1000.0


def test_list_txns(settings):
    assert list_txns(settings.db_path) == []

    ids = {
        create_txn(
            settings.db_path,
            txn_type="expense",
            category=f"cat-{n}",
            amount=n,
            date_str="2026-02-0%d" % n,
        )
        for n in range(1, 4)
    }
    rows = list_txns(settings.db_path)
    assert len(rows) == 3
    assert {row.id for row in rows} == ids


def test_type_is_not_enforced(settings):
    tid = create_txn(
        settings.db_path,
        txn_type="transfer",
        category="misc",
        amount=-5,
        date_str="not a date",
    )
    txn = get_txn(settings.db_path, tid)
    assert txn.type == "transfer"
    assert txn.amount == -5.0


def test_get_missing(settings):
    with pytest.raises(NotFoundError):
        get_txn(settings.db_path, 42)


def test_update_overwrites_all_fields(settings):
    tid = create_txn(
        settings.db_path,
        txn_type="expense",
        category="food",
        amount=10,
        date_str="2026-02-25",
        description="lunch",
    )
    update_txn(
        settings.db_path,
        tid,
        txn_type="income",
        category="refund",
        amount=7.5,
        date_str="2026-02-26",
    )
    assert get_txn(settings.db_path, tid) == Transaction(
        id=tid,
        type="income",
        category="refund",
        amount=7.5,
        date="2026-02-26",
        description=None,
    )


def test_update_missing_does_not_create(settings):
    with pytest.raises(NotFoundError):
        update_txn(
            settings.db_path,
            99,
            txn_type="income",
            category="salary",
            amount=1,
            date_str="2026-02-01",
        )
    assert count_txns(settings.db_path) == 0


def test_delete(settings):
    tid = create_txn(
        settings.db_path,
        txn_type="expense",
        category="rent",
        amount=300,
        date_str="2026-02-01",
    )
    delete_txn(settings.db_path, tid)
    with pytest.raises(NotFoundError):
        get_txn(settings.db_path, tid)
    with pytest.raises(NotFoundError):
        delete_txn(settings.db_path, tid)


def test_ids_are_not_reused(settings):
    first = create_txn(
        settings.db_path,
        txn_type="expense",
        category="a",
        amount=1,
        date_str="2026-02-01",
    )
    delete_txn(settings.db_path, first)
    second = create_txn(
        settings.db_path,
        txn_type="expense",
        category="b",
        amount=1,
        date_str="2026-02-01",
    )
    assert second > first


def test_not_null_violation_is_storage_error(settings):
    with pytest.raises(StorageError):
        create_txn(
            settings.db_path,
            txn_type="expense",
            category=None,
            amount=1,
            date_str="2026-02-01",
        )
    assert count_txns(settings.db_path) == 0


@pytest.mark.parametrize("txn_id", [2**63, 2**70, -(2**63) - 1])
def test_ids_outside_sqlite_range_are_not_found(settings, txn_id):
    with pytest.raises(NotFoundError):
        get_txn(settings.db_path, txn_id)
    with pytest.raises(NotFoundError):
        update_txn(
            settings.db_path,
            txn_id,
            txn_type="income",
            category="salary",
            amount=1,
            date_str="2026-02-01",
        )
    with pytest.raises(NotFoundError):
        delete_txn(settings.db_path, txn_id)


def test_delete_logs_remaining_count(settings, caplog):
    keep = create_txn(
        settings.db_path,
        txn_type="income",
        category="salary",
        amount=5,
        date_str="2026-02-01",
    )
    gone = create_txn(
        settings.db_path,
        txn_type="expense",
        category="food",
        amount=2,
        date_str="2026-02-02",
    )

    with caplog.at_level(logging.INFO, logger="ledger.repo"):
        delete_txn(settings.db_path, gone)

    assert f"deleted transaction {gone}, 1 remaining" in caplog.text
    assert [txn.id for txn in list_txns(settings.db_path)] == [keep]
