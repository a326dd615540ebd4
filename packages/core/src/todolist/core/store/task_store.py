"""TaskStore SQLite 实现

仅提供数据库操作，不负责提交事务；调用方在一次业务操作结束后 commit。
日期以 ISO 文本（YYYY-MM-DD）存储。
"""

from datetime import date

import aiosqlite

from ..models.task import Task

_COLUMNS = (
    "task_id, name, description, is_done, priority, created_at, updated_at, deadline"
)


def _date_or_none(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


class SqliteTaskStore:
    """TaskStore 的 SQLite 实现"""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    async def create_task(self, task: Task) -> None:
        """创建任务记录"""
        await self._conn.execute(
            f"INSERT INTO tasks ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            self._task_to_params(task),
        )

    async def get_task(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务"""
        cursor = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM tasks WHERE task_id = ?",
            (task_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_task(row)

    async def list_tasks(self) -> list[Task]:
        """查询全部任务，按 created_at 倒序（同日按 task_id 倒序）"""
        cursor = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM tasks ORDER BY created_at DESC, task_id DESC"
        )
        rows = await cursor.fetchall()
        return [self._row_to_task(row) for row in rows]

    async def update_task(self, task: Task) -> bool:
        """整行覆盖更新，返回是否命中记录"""
        cursor = await self._conn.execute(
            """
            UPDATE tasks
            SET name = ?, description = ?, is_done = ?, priority = ?,
                created_at = ?, updated_at = ?, deadline = ?
            WHERE task_id = ?
            """,
            (*self._task_to_params(task)[1:], task.task_id),
        )
        return cursor.rowcount > 0

    async def delete_task(self, task_id: str) -> bool:
        """删除任务，返回是否命中记录"""
        cursor = await self._conn.execute(
            "DELETE FROM tasks WHERE task_id = ?",
            (task_id,),
        )
        return cursor.rowcount > 0

    @staticmethod
    def _task_to_params(task: Task) -> tuple:
        """将 Task 转换为与 _COLUMNS 顺序一致的参数元组"""
        return (
            task.task_id,
            task.name,
            task.description,
            int(task.is_done),
            task.priority.value,
            task.created_at.isoformat(),
            task.updated_at.isoformat() if task.updated_at else None,
            task.deadline.isoformat() if task.deadline else None,
        )

    @staticmethod
    def _row_to_task(row: aiosqlite.Row) -> Task:
        """将数据库行转换为 Task 模型"""
        return Task(
            task_id=row[0],
            name=row[1],
            description=row[2],
            is_done=bool(row[3]),
            priority=row[4],
            created_at=date.fromisoformat(row[5]),
            updated_at=_date_or_none(row[6]),
            deadline=_date_or_none(row[7]),
        )
