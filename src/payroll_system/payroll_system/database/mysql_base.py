from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import mysql.connector

from ..core.exceptions import PersistenceError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor) inside one transaction.

    Commits when the block exits cleanly, rolls back otherwise. Driver errors
    surface as PersistenceError.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise PersistenceError(f"Database connection failed: {e}") from e
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise PersistenceError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def in_clause(column: str, values: Sequence[Any]) -> Tuple[str, Tuple[Any, ...]]:
    """Build "column IN (%s, ...)" with its parameters.

    An empty sequence yields a clause that matches nothing.
    """
    if not values:
        return "1=0", ()
    placeholders = ", ".join(["%s"] * len(values))
    return f"{column} IN ({placeholders})", tuple(values)


def lower_eq(column: str) -> str:
    """Case-insensitive, trimmed equality on a text column."""
    return f"LOWER(TRIM({column}))=LOWER(TRIM(%s))"


def executemany(cur, sql: str, rows: Iterable[Sequence[Any]]) -> int:
    params = [tuple(r) for r in rows]
    if not params:
        return 0
    cur.executemany(sql, params)
    return len(params)
