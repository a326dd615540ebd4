"""TaskService 单元测试

测试内容：
1. 状态随“今天”推移变化，无需任何写入
2. 名称更新时宏覆盖已存储字段
3. 严格模式配置透传到宏解析
4. 任务不存在时的行为
"""

import pytest
from todolist.core.config import MacroConfig
from todolist.core.exceptions import (
    NameTooShortAfterMacrosError,
    TaskNotFoundError,
    UnrecognizedPriorityDigitError,
)
from todolist.core.models import Priority, TaskCreateRequest, TaskFilter, TaskStatus
from todolist.gateway.services.task_service import TaskService


@pytest.fixture
def service(store_group, clock) -> TaskService:
    return TaskService(store_group, config=MacroConfig(), today=clock)


class TestClock:
    """状态由读取时的日期决定"""

    async def test_active_becomes_overdue_without_writes(self, service, clock):
        created = await service.create_task(
            TaskCreateRequest(name="Submit form !before 2025-03-16")
        )
        assert created.status == TaskStatus.ACTIVE

        clock.advance()
        assert (await service.get_task(created.task_id)).status == TaskStatus.ACTIVE

        clock.advance()
        view = await service.get_task(created.task_id)
        assert view.status == TaskStatus.OVERDUE
        assert view.updated_at is None

    async def test_status_filter_uses_current_day(self, service, clock):
        await service.create_task(TaskCreateRequest(name="Submit form !before 2025-03-15"))
        overdue = TaskFilter(statuses=[TaskStatus.OVERDUE])
        assert await service.list_tasks(overdue) == []

        clock.advance()
        assert [v.name for v in await service.list_tasks(overdue)] == ["Submit form"]


class TestUpdateName:
    """update_name"""

    async def test_macros_override_stored_fields(self, service):
        created = await service.create_task(
            TaskCreateRequest(name="Draft memo", priority=Priority.LOW)
        )
        view = await service.update_name(created.task_id, "Final memo !2 !before 20.03.2025")
        assert view.name == "Final memo"
        assert view.priority == Priority.HIGH
        assert view.deadline.isoformat() == "2025-03-20"

    async def test_plain_name_keeps_fields(self, service):
        created = await service.create_task(TaskCreateRequest(name="Draft memo !1"))
        view = await service.update_name(created.task_id, "Final memo")
        assert view.priority == Priority.CRITICAL

    async def test_macro_error_leaves_task_unchanged(self, service):
        created = await service.create_task(TaskCreateRequest(name="Draft memo"))
        with pytest.raises(NameTooShortAfterMacrosError):
            await service.update_name(created.task_id, "Ab !3")
        assert (await service.get_task(created.task_id)).name == "Draft memo"


class TestStrictPriority:
    """严格模式"""

    async def test_strict_rejects_unknown_digit(self, store_group, clock):
        service = TaskService(
            store_group, config=MacroConfig(strict_priority=True), today=clock
        )
        with pytest.raises(UnrecognizedPriorityDigitError):
            await service.create_task(TaskCreateRequest(name="Task !0"))
        assert await service.list_tasks() == []

    async def test_lenient_keeps_unknown_digit(self, service):
        view = await service.create_task(TaskCreateRequest(name="Task !0"))
        assert view.name == "Task !0"
        assert view.priority == Priority.MEDIUM


class TestMissingTask:
    """任务不存在"""

    async def test_get_returns_none(self, service):
        assert await service.get_task("01NOTEXIST0000000000000000") is None

    async def test_delete_returns_false(self, service):
        assert await service.delete_task("01NOTEXIST0000000000000000") is False

    async def test_updates_raise(self, service):
        with pytest.raises(TaskNotFoundError) as exc_info:
            await service.update_is_done("01NOTEXIST0000000000000000", True)
        assert exc_info.value.code == "TASK_NOT_FOUND"
        assert "01NOTEXIST0000000000000000" in exc_info.value.message

    async def test_delete_then_update_raises(self, service):
        created = await service.create_task(TaskCreateRequest(name="Short lived"))
        assert await service.delete_task(created.task_id) is True
        with pytest.raises(TaskNotFoundError):
            await service.update_description(created.task_id, "too late")
        assert created.task_id not in TaskService._task_locks

    async def test_missing_task_updates_do_not_keep_locks(self, service):
        """对不存在任务的更新不会累积 task 锁"""
        before = len(TaskService._task_locks)
        for i in range(20):
            with pytest.raises(TaskNotFoundError):
                await service.update_is_done(f"01MISSING{i:017d}", True)
        assert len(TaskService._task_locks) == before


class TestPersistence:
    """写入后重新读取"""

    async def test_update_sets_updated_at(self, service, clock, today):
        created = await service.create_task(TaskCreateRequest(name="Water plants"))
        clock.advance(3)
        view = await service.update_priority(created.task_id, Priority.HIGH)
        assert view.created_at == today
        assert view.updated_at == clock()

        stored = await service.get_task(created.task_id)
        assert stored == view
