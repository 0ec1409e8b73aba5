import sqlite3
from dataclasses import asdict, dataclass
from typing import Optional

from pydantic import BaseModel


@dataclass(frozen=True)
class Transaction:
    id: int
    type: str
    category: str
    amount: float
    date: str
    description: Optional[str]

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Transaction":
        return cls(
            id=int(row["id"]),
            type=row["type"],
            category=row["category"],
            amount=float(row["amount"]),
            date=row["date"],
            description=row["description"],
        )

    def as_dict(self) -> dict:
        return asdict(self)


class TransactionPayload(BaseModel):
    """Request body for create and update.

    Every field is optional here so that missing input is reported by
    ``require_fields`` as a 400 instead of a schema error.
    """

    type: Optional[str] = None
    category: Optional[str] = None
    amount: Optional[float] = None
    date: Optional[str] = None
    description: Optional[str] = None
