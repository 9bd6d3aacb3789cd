from __future__ import annotations

import logging
import sqlite3
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"


@dataclass
class DBConfig:
    path: str


class DatabaseConnection:
    """Owner of the single SQLite connection used by every repository.

    Built once at startup and injected, so tests can pass ``:memory:``.
    Access is serialized with a re-entrant lock; one writer at a time.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._conn: Optional[sqlite3.Connection] = None
        self.lock = threading.RLock()

    @property
    def path(self) -> str:
        return self._config.path

    @property
    def is_memory(self) -> bool:
        return self._config.path == MEMORY_PATH

    def connect(self) -> sqlite3.Connection:
        with self.lock:
            if self._conn is None:
                if not self.is_memory:
                    Path(self._config.path).expanduser().parent.mkdir(parents=True, exist_ok=True)
                # Autocommit mode: units of work issue their own BEGIN/COMMIT.
                self._conn = sqlite3.connect(
                    str(Path(self._config.path).expanduser()) if not self.is_memory else MEMORY_PATH,
                    isolation_level=None,
                    check_same_thread=False,
                )
                self._conn.row_factory = sqlite3.Row
                logger.info("Database connected: %s", self._config.path)
            return self._conn

    def close(self) -> None:
        with self.lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.info("Database closed: %s", self._config.path)
