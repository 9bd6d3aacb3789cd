from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..core.exceptions import ConstraintViolation, StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection) -> Iterator[Tuple[sqlite3.Connection, sqlite3.Cursor]]:
    """One unit of work: BEGIN ... COMMIT, or ROLLBACK and re-raise as a domain error."""
    with conn_factory.lock:
        try:
            conn = conn_factory.connect()
        except (sqlite3.Error, OSError) as e:
            # OSError: the database folder could not be created or opened.
            raise StorageError(str(e)) from e

        cur = conn.cursor()
        try:
            cur.execute("BEGIN")
            yield conn, cur
            cur.execute("COMMIT")
        except sqlite3.IntegrityError as e:
            _rollback(conn)
            raise ConstraintViolation(str(e)) from e
        except sqlite3.Error as e:
            _rollback(conn)
            logger.error("Query failed: %s", e)
            raise StorageError(str(e)) from e
        except Exception:
            _rollback(conn)
            raise
        finally:
            cur.close()


def _rollback(conn: sqlite3.Connection) -> None:
    if conn.in_transaction:
        conn.rollback()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return dict(row) if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return [dict(r) for r in rows or []]
