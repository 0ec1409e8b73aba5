from .db import transaction
from .errors import NotFoundError
from .logging_utils import get_logger
from .models import Transaction

LOGGER = get_logger(__name__)

# SQLite integers are signed 64-bit; no row can carry an id outside this.
MIN_ROWID = -(2**63)
MAX_ROWID = 2**63 - 1


def _require_storable_id(txn_id: int) -> None:
    if not MIN_ROWID <= txn_id <= MAX_ROWID:
        raise NotFoundError("Transaction not found")


def create_txn(
    db_path,
    *,
    txn_type: str,
    category: str,
    amount: float,
    date_str: str,
    description: str | None = None,
) -> int:
    with transaction(db_path) as conn:
        cur = conn.execute(
            """
            INSERT INTO transactions(type, category, amount, date, description)
            VALUES (?, ?, ?, ?, ?)
            """,
            (txn_type, category, amount, date_str, description),
        )
        txn_id = int(cur.lastrowid)
    LOGGER.info("created transaction %s (%s %s)", txn_id, txn_type, amount)
    return txn_id


def list_txns(db_path) -> list[Transaction]:
    with transaction(db_path) as conn:
        rows = conn.execute(
            """
            SELECT id, type, category, amount, date, description
            FROM transactions
            ORDER BY id ASC
            """
        ).fetchall()
    LOGGER.debug("listed %s transactions", len(rows))
    return [Transaction.from_row(row) for row in rows]


def get_txn(db_path, txn_id: int) -> Transaction:
    _require_storable_id(txn_id)
    with transaction(db_path) as conn:
        row = conn.execute(
            """
            SELECT id, type, category, amount, date, description
            FROM transactions
            WHERE id = ?
            """,
            (txn_id,),
        ).fetchone()
    if row is None:
        raise NotFoundError("Transaction not found")
    return Transaction.from_row(row)


def count_txns(db_path) -> int:
    with transaction(db_path) as conn:
        row = conn.execute("SELECT COUNT(*) AS c FROM transactions").fetchone()
    return int(row["c"])


def update_txn(
    db_path,
    txn_id: int,
    *,
    txn_type: str,
    category: str,
    amount: float,
    date_str: str,
    description: str | None = None,
) -> None:
    _require_storable_id(txn_id)
    with transaction(db_path) as conn:
        cur = conn.execute(
            """
            UPDATE transactions
            SET type = ?, category = ?, amount = ?, date = ?, description = ?
            WHERE id = ?
            """,
            (txn_type, category, amount, date_str, description, txn_id),
        )
        if cur.rowcount == 0:
            raise NotFoundError("Transaction not found")
    LOGGER.info("updated transaction %s", txn_id)


def delete_txn(db_path, txn_id: int) -> None:
    _require_storable_id(txn_id)
    with transaction(db_path) as conn:
        cur = conn.execute("DELETE FROM transactions WHERE id = ?", (txn_id,))
        if cur.rowcount == 0:
            raise NotFoundError("Transaction not found")
    LOGGER.info(
        "deleted transaction %s, %s remaining", txn_id, count_txns(db_path)
    )


def get_summary(db_path) -> dict:
    # One statement, so both totals see the same snapshot.
    with transaction(db_path) as conn:
        totals = conn.execute(
            """
            SELECT
              COALESCE(SUM(CASE WHEN type = 'income' THEN amount END), 0) AS total_income,
              COALESCE(SUM(CASE WHEN type = 'expense' THEN amount END), 0) AS total_expenses
            FROM transactions
            """
        ).fetchone()

    total_income = float(totals["total_income"])
    total_expenses = float(totals["total_expenses"])
    return {
        "totalIncome": total_income,
        "totalExpenses": total_expenses,
        "balance": total_income - total_expenses,
    }
