"""TaskService -- 任务创建/修改/删除/查询业务逻辑

创建流程：
1. 解析名称中的 !before / !N 宏
2. 与请求中的显式字段合并（显式字段优先，优先级默认 Medium）
3. 写入 tasks 表（不含 status）
4. 按“今天”投影出 status 返回

所有返回值都是 TaskView，status 在每次返回前重新派生。
"""

import asyncio
from collections.abc import Callable
from datetime import date

import structlog
from todolist.core.config import MacroConfig, load_macro_config
from todolist.core.exceptions import TaskNotFoundError
from todolist.core.macros import extract_directives
from todolist.core.models import (
    Priority,
    Task,
    TaskCreateRequest,
    TaskFilter,
    TaskView,
)
from todolist.core.projection import filter_views, project_task, project_tasks
from todolist.core.resolution import resolve_fields
from todolist.core.store import StoreGroup
from ulid import ULID

log = structlog.get_logger()


class TaskService:
    """任务业务服务"""

    _task_locks: dict[str, asyncio.Lock] = {}
    _task_locks_guard = asyncio.Lock()

    def __init__(
        self,
        store_group: StoreGroup,
        config: MacroConfig | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        """
        Args:
            store_group: Store 实例组
            config: 宏解析配置，None 时从环境变量加载
            today: 返回“今天”的可调用对象，None 时使用 date.today
        """
        self._stores = store_group
        self._config = config if config is not None else load_macro_config()
        self._today = today or date.today

    async def create_task(self, request: TaskCreateRequest) -> TaskView:
        """创建任务

        Raises:
            MacroError: 名称中的宏不合法，或移除宏后名称过短
        """
        clean_name, directives = extract_directives(
            request.name,
            strict_priority=self._config.strict_priority,
        )
        resolved = resolve_fields(
            directives,
            priority=request.priority,
            deadline=request.deadline,
        )

        today = self._today()
        task = Task(
            task_id=str(ULID()),
            name=clean_name,
            description=request.description,
            is_done=False,
            priority=resolved.priority,
            created_at=today,
            deadline=resolved.deadline,
        )
        await self._stores.task_store.create_task(task)
        await self._stores.conn.commit()

        log.info(
            "task_created",
            task_id=task.task_id,
            priority=task.priority,
            deadline=task.deadline.isoformat() if task.deadline else None,
            macro_priority=directives.priority is not None,
            macro_deadline=directives.deadline is not None,
        )
        return project_task(task, today)

    async def get_task(self, task_id: str) -> TaskView | None:
        """查询任务详情，不存在返回 None"""
        task = await self._stores.task_store.get_task(task_id)
        if task is None:
            return None
        return project_task(task, self._today())

    async def list_tasks(self, task_filter: TaskFilter | None = None) -> list[TaskView]:
        """查询任务列表（created_at 倒序），status 筛选作用于当天派生的状态"""
        tasks = await self._stores.task_store.list_tasks()
        views = project_tasks(tasks, self._today())
        if task_filter is None:
            return views
        return filter_views(views, task_filter)

    async def delete_task(self, task_id: str) -> bool:
        """删除任务，返回是否存在并已删除"""
        lock = await self._get_task_lock(task_id)
        async with lock:
            deleted = await self._stores.task_store.delete_task(task_id)
            await self._stores.conn.commit()
        await self._cleanup_task_lock(task_id)

        if deleted:
            log.info("task_deleted", task_id=task_id)
        return deleted

    async def update_name(self, task_id: str, new_name: str) -> TaskView:
        """更新名称；新名称中的宏同样生效，覆盖已存储的优先级/截止日期

        Raises:
            MacroError: 宏不合法或移除宏后名称过短
            TaskNotFoundError: 任务不存在
        """
        clean_name, directives = extract_directives(
            new_name,
            strict_priority=self._config.strict_priority,
        )
        changes: dict = {"name": clean_name}
        if directives.priority is not None:
            changes["priority"] = directives.priority
        if directives.deadline is not None:
            changes["deadline"] = directives.deadline
        return await self._update(task_id, **changes)

    async def update_description(self, task_id: str, new_description: str) -> TaskView:
        """更新描述"""
        return await self._update(task_id, description=new_description)

    async def update_priority(self, task_id: str, new_priority: Priority) -> TaskView:
        """更新优先级"""
        return await self._update(task_id, priority=new_priority)

    async def update_is_done(self, task_id: str, is_done: bool) -> TaskView:
        """更新完成标记"""
        return await self._update(task_id, is_done=is_done)

    async def update_deadline(self, task_id: str, new_deadline: date | None) -> TaskView:
        """更新截止日期，None 表示清除"""
        return await self._update(task_id, deadline=new_deadline)

    async def _update(self, task_id: str, **changes) -> TaskView:
        """读-改-写单个任务，同一任务的并发修改按 task 级锁串行化"""
        lock = await self._get_task_lock(task_id)
        missing = False
        try:
            async with lock:
                task = await self._stores.task_store.get_task(task_id)
                if task is None:
                    missing = True
                    raise TaskNotFoundError(task_id)

                today = self._today()
                updated = task.model_copy(update={**changes, "updated_at": today})
                await self._stores.task_store.update_task(updated)
                await self._stores.conn.commit()
        finally:
            # 不存在的任务不保留锁
            if missing:
                await self._cleanup_task_lock(task_id)

        log.info(
            "task_updated",
            task_id=task_id,
            fields=sorted(changes),
        )
        return project_task(updated, today)

    @classmethod
    async def _get_task_lock(cls, task_id: str) -> asyncio.Lock:
        """获取 task 级别锁，序列化同一任务的读-改-写"""
        async with cls._task_locks_guard:
            lock = cls._task_locks.get(task_id)
            if lock is None:
                lock = asyncio.Lock()
                cls._task_locks[task_id] = lock
            return lock

    @classmethod
    async def _cleanup_task_lock(cls, task_id: str) -> None:
        """任务删除或不存在时释放对应锁"""
        async with cls._task_locks_guard:
            lock = cls._task_locks.get(task_id)
            if lock is not None and not lock.locked():
                cls._task_locks.pop(task_id, None)
