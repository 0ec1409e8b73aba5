import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .errors import StorageError
from .logging_utils import get_logger
from .settings import Settings

LOGGER = get_logger(__name__)


def connect(db_path: str | Path) -> sqlite3.Connection:
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def transaction(db_path: str | Path) -> Iterator[sqlite3.Connection]:
    """Yield a connection whose work is committed on success.

    Any sqlite3 failure, including failing to open the file, surfaces as
    StorageError. Other exceptions roll the transaction back and propagate.
    """
    try:
        conn = connect(db_path)
    except sqlite3.Error as exc:
        LOGGER.exception("cannot open database %s", db_path)
        raise StorageError(f"cannot open database: {exc}") from exc
    try:
        with conn:
            yield conn
    except sqlite3.Error as exc:
        LOGGER.exception("database error on %s", db_path)
        raise StorageError(str(exc)) from exc
    finally:
        conn.close()


def init_db(settings: Settings) -> None:
    try:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        settings.db_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageError(f"cannot create data directory: {exc}") from exc
    with transaction(settings.db_path) as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS transactions (
              id INTEGER PRIMARY KEY AUTOINCREMENT,
              type TEXT NOT NULL,
              category TEXT NOT NULL,
              amount REAL NOT NULL,
              date TEXT NOT NULL,
              description TEXT
            );
            """
        )
    LOGGER.info("database ready at %s", settings.db_path)
