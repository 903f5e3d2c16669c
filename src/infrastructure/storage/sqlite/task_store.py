"""SQLite implementation of team task storage."""

import aiosqlite

from src.config import get_logger
from src.core.entities.task import AssignTarget, Task
from src.core.interfaces.storage import ITaskStore
from src.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
    parse_timestamp,
)

logger = get_logger(__name__)


class SQLiteTaskStore(ITaskStore):
    """SQLite implementation of task storage."""

    async def create_task(self, task: Task) -> Task:
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO tasks (
                    id, title, completed, completion_comment,
                    assigned_to, assigned_to_id, created_by, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    task.id,
                    task.title,
                    int(task.completed),
                    task.completion_comment,
                    task.assigned_to.value,
                    task.assigned_to_id,
                    task.created_by,
                    task.created_at.isoformat(),
                ),
            )
        logger.info("task_created", task_id=task.id, assigned_to=task.assigned_to.value)
        return task

    async def get_task(self, task_id: str) -> Task | None:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,))
            row = await cursor.fetchone()
            return self._row_to_task(row) if row else None

    async def list_tasks(self) -> list[Task]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM tasks ORDER BY created_at DESC, rowid DESC"
            )
            rows = await cursor.fetchall()
            return [self._row_to_task(r) for r in rows]

    async def update_task(
        self,
        task_id: str,
        completed: bool | None = None,
        completion_comment: str | None = None,
    ) -> Task | None:
        updates = []
        params: list = []
        if completed is not None:
            updates.append("completed = ?")
            params.append(int(completed))
        if completion_comment is not None:
            updates.append("completion_comment = ?")
            params.append(completion_comment)

        if updates:
            params.append(task_id)
            async with get_transaction() as conn:
                await conn.execute(
                    f"UPDATE tasks SET {', '.join(updates)} WHERE id = ?",
                    params,
                )

        task = await self.get_task(task_id)
        if task is not None:
            logger.info("task_updated", task_id=task_id, completed=task.completed)
        return task

    async def delete_task(self, task_id: str) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("task_deleted", task_id=task_id)
        return deleted

    @staticmethod
    def _row_to_task(row: aiosqlite.Row) -> Task:
        return Task(
            id=row["id"],
            title=row["title"],
            completed=bool(row["completed"]),
            completion_comment=row["completion_comment"],
            assigned_to=AssignTarget.parse(row["assigned_to"]),
            assigned_to_id=row["assigned_to_id"],
            created_by=row["created_by"],
            created_at=parse_timestamp(row["created_at"]),
        )
