"""apps/gateway 测试配置 -- httpx AsyncClient + 手动初始化的 app.state"""

import os
from collections.abc import AsyncGenerator
from datetime import date, timedelta
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from todolist.core.config import MacroConfig
from todolist.core.store import StoreGroup, create_store_group


class FakeClock:
    """可推进的“今天”，替换 date.today"""

    def __init__(self, today: date) -> None:
        self.current = today

    def __call__(self) -> date:
        return self.current

    def advance(self, days: int = 1) -> None:
        self.current += timedelta(days=days)


@pytest.fixture
def clock(today: date) -> FakeClock:
    return FakeClock(today)


@pytest_asyncio.fixture
async def store_group(tmp_path: Path) -> AsyncGenerator[StoreGroup, None]:
    """临时数据库上的 StoreGroup"""
    group = await create_store_group(str(tmp_path / "sqlite" / "test.db"))
    yield group
    await group.conn.close()


@pytest_asyncio.fixture
async def test_app(tmp_path: Path, store_group: StoreGroup, clock: FakeClock):
    """创建测试用 FastAPI app，手动初始化 lifespan 状态"""
    os.environ["TODOLIST_DB_PATH"] = str(tmp_path / "sqlite" / "test.db")

    from todolist.gateway.main import create_app

    app = create_app()

    # 手动初始化（绕过 lifespan）
    app.state.store_group = store_group
    app.state.macro_config = MacroConfig()
    app.state.today = clock

    yield app

    os.environ.pop("TODOLIST_DB_PATH", None)


@pytest_asyncio.fixture
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """提供 httpx AsyncClient 用于测试"""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as ac:
        yield ac
