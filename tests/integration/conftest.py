"""集成测试共享 fixture"""

import os
from collections.abc import AsyncGenerator
from datetime import date
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from todolist.core.config import MacroConfig
from todolist.core.store import create_store_group


@pytest_asyncio.fixture
async def integration_app(tmp_path: Path, today: date):
    """集成测试用 FastAPI app"""
    os.environ["TODOLIST_DB_PATH"] = str(tmp_path / "test.db")

    from todolist.gateway.main import create_app

    app = create_app()

    store_group = await create_store_group(str(tmp_path / "test.db"))
    app.state.store_group = store_group
    app.state.macro_config = MacroConfig()
    app.state.today = lambda: today

    yield app

    await store_group.conn.close()
    os.environ.pop("TODOLIST_DB_PATH", None)


@pytest_asyncio.fixture
async def client(integration_app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=integration_app),
        base_url="http://test",
    ) as ac:
        yield ac
