"""全局 pytest 配置 -- 临时 SQLite 数据库 fixture + 固定日期"""

from collections.abc import AsyncGenerator
from datetime import date
from pathlib import Path

import aiosqlite
import pytest
import pytest_asyncio

# 测试统一使用的“今天”
FIXED_TODAY = date(2025, 3, 15)


@pytest.fixture
def today() -> date:
    """固定的参考日期，避免测试依赖真实时钟"""
    return FIXED_TODAY


@pytest_asyncio.fixture
async def tmp_db_path(tmp_path: Path) -> Path:
    """提供临时 SQLite 数据库路径"""
    return tmp_path / "sqlite" / "test.db"


@pytest_asyncio.fixture
async def db_conn(tmp_path: Path) -> AsyncGenerator[aiosqlite.Connection, None]:
    """提供已初始化的临时 SQLite 数据库连接"""
    from todolist.core.store.sqlite_init import init_db

    conn = await aiosqlite.connect(str(tmp_path / "test.db"))
    await init_db(conn)
    yield conn
    await conn.close()
