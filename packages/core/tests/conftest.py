"""packages/core 测试配置 -- 核心层 fixture"""

from collections.abc import AsyncGenerator, Callable
from datetime import date
from pathlib import Path

import aiosqlite
import pytest
import pytest_asyncio
from todolist.core.models import Priority, Task


@pytest_asyncio.fixture
async def core_db(tmp_path: Path) -> AsyncGenerator[aiosqlite.Connection, None]:
    """核心层已初始化数据库连接"""
    from todolist.core.store.sqlite_init import init_db

    conn = await aiosqlite.connect(str(tmp_path / "core_test.db"))
    await init_db(conn)
    yield conn
    await conn.close()


@pytest.fixture
def make_task(today: date) -> Callable[..., Task]:
    """构造 Task 的工厂，未指定字段取默认值"""
    counter = iter(range(1, 10_000))

    def _make(**overrides) -> Task:
        fields = {
            "task_id": f"01TESTTASK{next(counter):016d}",
            "name": "Write report",
            "description": "",
            "is_done": False,
            "priority": Priority.MEDIUM,
            "created_at": today,
            "updated_at": None,
            "deadline": None,
        }
        fields.update(overrides)
        return Task(**fields)

    return _make
