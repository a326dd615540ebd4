"""FastAPI 应用主文件

app 创建 + lifespan 管理：DB 初始化/关闭 + 宏解析配置加载 + 路由注册。
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import date

import structlog
from fastapi import FastAPI
from todolist.core.config import get_db_path, load_macro_config
from todolist.core.store import create_store_group

from .middleware.logging_config import setup_logging
from .middleware.logging_mw import LoggingMiddleware
from .middleware.trace_mw import TraceMiddleware
from .routes import health, tasks

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """应用生命周期管理：启动时初始化 DB 与配置，关闭时清理连接"""
    db_path = get_db_path()
    app.state.store_group = await create_store_group(db_path)
    app.state.macro_config = load_macro_config()
    app.state.today = date.today

    log.info(
        "gateway_started",
        db_path=db_path,
        strict_priority=app.state.macro_config.strict_priority,
    )

    yield

    # 关闭：清理数据库连接
    if getattr(app.state, "store_group", None):
        await app.state.store_group.conn.close()


def create_app() -> FastAPI:
    """创建 FastAPI 应用实例"""
    app = FastAPI(
        title="todolist Gateway",
        version="0.1.0",
        description="任务名称宏解析与状态派生 API",
        lifespan=lifespan,
    )

    # 注册中间件（顺序：先 Trace 后 Logging，Logging 在最外层）
    app.add_middleware(TraceMiddleware)
    app.add_middleware(LoggingMiddleware)

    setup_logging()

    app.include_router(tasks.router, tags=["tasks"])
    app.include_router(health.router, tags=["health"])

    return app


# 默认 app 实例（uvicorn 入口）
app = create_app()
