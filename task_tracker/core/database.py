"""
SQLite connection manager.
Owns the database file, schema initialization and per-operation connections.
"""

import contextlib
import sqlite3
from pathlib import Path
from typing import Iterator, Union

from task_tracker.core.errors import SchemaError, StoreError
from task_tracker.core.logger import logger

TASKS_TABLE = "tasks"

SCHEMA_STATEMENTS = (
    f"""
    CREATE TABLE IF NOT EXISTS {TASKS_TABLE} (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        description TEXT,
        status TEXT DEFAULT 'pending',
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    f"CREATE INDEX IF NOT EXISTS idx_{TASKS_TABLE}_created_at ON {TASKS_TABLE}(created_at)",
)


class SQLiteDatabase:
    """
    SQLite database manager.

    Every operation gets its own short-lived connection, so concurrent
    requests are serialized by SQLite's file locking rather than by this
    process.
    """

    def __init__(self, db_path: Union[str, Path], timeout: float = 30.0):
        """
        Initialize database manager.

        Args:
            db_path: Path of the SQLite database file
            timeout: Seconds to wait on a locked database before failing
        """
        self.db_path = Path(db_path)
        self.timeout = timeout
        self._connected = False
        logger.debug(f"SQLite database manager initialized: path={self.db_path}")

    @property
    def is_connected(self) -> bool:
        return self._connected

    def connect(self) -> None:
        """
        Open the database file and make sure the schema exists.

        Safe to call on every process start.

        Raises:
            SchemaError: If the file cannot be opened or the schema is rejected
        """
        logger.info(f"Connecting to SQLite database at: {self.db_path}")
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create database directory {self.db_path.parent}: {e}")
            raise SchemaError(str(e)) from e

        try:
            conn = self._open()
            try:
                for statement in SCHEMA_STATEMENTS:
                    conn.execute(statement)
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error(f"Error creating table: {e}")
            raise SchemaError(str(e)) from e

        self._connected = True
        logger.info(f"{TASKS_TABLE.capitalize()} table ready")

    def disconnect(self) -> None:
        """Mark the database closed. Later operations raise StoreError."""
        if not self._connected:
            logger.debug("SQLite database not connected, nothing to disconnect")
            return
        self._connected = False
        logger.info(f"Disconnected from SQLite database: {self.db_path}")

    def health_check(self) -> bool:
        """
        Check that the database file answers a trivial query.

        Returns:
            True if healthy, False otherwise
        """
        if not self._connected:
            logger.warning("SQLite database not connected")
            return False
        try:
            with self.connection() as conn:
                conn.execute("SELECT 1").fetchone()
            return True
        except (sqlite3.Error, StoreError) as e:
            logger.error(f"SQLite health check failed: {e}")
            return False

    @contextlib.contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """
        Yield a fresh connection, committing on success and closing afterwards.

        Raises:
            StoreError: If the database is not connected or the engine fails
        """
        if not self._connected:
            raise StoreError("Database not connected. Call connect() first.")

        try:
            conn = self._open()
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(str(e)) from e
        finally:
            conn.close()

    def _open(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path), timeout=self.timeout)
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

