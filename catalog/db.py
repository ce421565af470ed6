from __future__ import annotations

# catalog/db.py
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator, Sequence


def ensure_db_dir(path: str) -> str:
    # make sure the parent directory exists
    if path == ":memory:":
        return path
    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


@contextmanager
def get_conn(db_path: str) -> Iterator[sqlite3.Connection]:
    """
    Open a SQLite connection for one unit of work.
    row_factory is Row; the connection is usable from any thread.
    """
    conn = sqlite3.connect(
        ensure_db_dir(db_path),
        check_same_thread=False,
        isolation_level=None,
    )
    try:
        conn.row_factory = sqlite3.Row
        yield conn
    finally:
        conn.close()


class Store:
    """
    Query-execution handle over a SQLite file.

    Every call opens its own connection, so one Store can be shared by
    concurrent request threads.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        with get_conn(self.db_path) as conn:
            yield conn

    def query(self, sql: str, args: Sequence = ()) -> list[sqlite3.Row]:
        with get_conn(self.db_path) as conn:
            return conn.execute(sql, tuple(args)).fetchall()
