"""
Task repository for SQLite operations.
Includes logging and error handling for all CRUD operations.
"""

import sqlite3
from typing import List, Optional

from task_tracker.core.database import TASKS_TABLE, SQLiteDatabase
from task_tracker.core.logger import logger
from task_tracker.domain.entities import (
    DEFAULT_TASK_STATUS,
    MutationOutcome,
    Task,
    utc_now_iso,
)
from task_tracker.ports.repository import TaskRepositoryPort

# SQLite INTEGER is a signed 64-bit value; larger ids cannot be bound.
SQLITE_MAX_INTEGER = 2**63 - 1


def _storable_id(task_id: int) -> bool:
    return -SQLITE_MAX_INTEGER - 1 <= int(task_id) <= SQLITE_MAX_INTEGER


class SQLiteTaskRepository(TaskRepositoryPort):
    """SQLite implementation of TaskRepositoryPort."""

    def __init__(self, database: SQLiteDatabase):
        self.database = database
        logger.debug(f"SQLiteTaskRepository initialized for table: {TASKS_TABLE}")

    @staticmethod
    def _to_entity(row: sqlite3.Row) -> Task:
        """Convert a result row to a domain entity."""
        return Task(
            id=int(row["id"]),
            title=row["title"],
            description=row["description"],
            status=row["status"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    def initialize(self) -> None:
        self.database.connect()
        logger.info(f"Task store ready: db={self.database.db_path}, total={self.count_tasks()}")

    def list_tasks(self) -> List[Task]:
        with self.database.connection() as conn:
            rows = conn.execute(
                f"SELECT * FROM {TASKS_TABLE} ORDER BY created_at DESC, id DESC"
            ).fetchall()
        logger.debug(f"Listed {len(rows)} tasks")
        return [self._to_entity(row) for row in rows]

    def get_task(self, task_id: int) -> Optional[Task]:
        if not _storable_id(task_id):
            logger.debug(f"Task not found: id={task_id} is outside the SQLite integer range")
            return None

        with self.database.connection() as conn:
            row = conn.execute(
                f"SELECT * FROM {TASKS_TABLE} WHERE id = ?", (int(task_id),)
            ).fetchone()

        if row is None:
            logger.debug(f"Task not found: id={task_id}")
            return None
        return self._to_entity(row)

    def create_task(self, title: str, description: Optional[str] = None) -> int:
        """
        Insert a new task.

        Args:
            title: Non-empty title (validated by the caller)
            description: Optional description, stored as NULL when absent

        Returns:
            int: id assigned by SQLite

        Raises:
            StoreError: If the insert fails
        """
        now = utc_now_iso()
        with self.database.connection() as conn:
            cur = conn.execute(
                f"""
                INSERT INTO {TASKS_TABLE} (title, description, status, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (title, description, DEFAULT_TASK_STATUS, now, now),
            )
            task_id = int(cur.lastrowid)

        logger.info(f"Task created: id={task_id}")
        return task_id

    def update_task(
        self,
        task_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[str] = None,
    ) -> MutationOutcome:
        """
        Coalesce-update a task.

        updated_at is always refreshed and never moves below created_at.
        Zero affected rows is reported as NOT_FOUND; no existence pre-check.

        Raises:
            StoreError: If the update fails
        """
        if not _storable_id(task_id):
            return MutationOutcome.NOT_FOUND

        with self.database.connection() as conn:
            cur = conn.execute(
                f"""
                UPDATE {TASKS_TABLE}
                SET title = COALESCE(?, title),
                    description = COALESCE(?, description),
                    status = COALESCE(?, status),
                    updated_at = MAX(created_at, ?)
                WHERE id = ?
                """,
                (title, description, status, utc_now_iso(), int(task_id)),
            )
            changes = cur.rowcount

        if changes == 0:
            logger.debug(f"Update matched no rows: id={task_id}")
            return MutationOutcome.NOT_FOUND

        logger.info(f"Task updated: id={task_id}")
        return MutationOutcome.UPDATED

    def delete_task(self, task_id: int) -> MutationOutcome:
        if not _storable_id(task_id):
            return MutationOutcome.NOT_FOUND

        with self.database.connection() as conn:
            cur = conn.execute(f"DELETE FROM {TASKS_TABLE} WHERE id = ?", (int(task_id),))
            changes = cur.rowcount

        if changes == 0:
            logger.debug(f"Delete matched no rows: id={task_id}")
            return MutationOutcome.NOT_FOUND

        logger.info(f"Task deleted: id={task_id}")
        return MutationOutcome.DELETED

    def count_tasks(self) -> int:
        with self.database.connection() as conn:
            (total,) = conn.execute(f"SELECT COUNT(*) FROM {TASKS_TABLE}").fetchone()
        return int(total)
