"""依赖注入模块 -- 通过 FastAPI Depends 注入 TaskService

StoreGroup、MacroConfig 与日期来源都挂在 app.state 上，在 lifespan 中初始化；
测试可直接替换 app.state.today 固定“今天”。
"""

from fastapi import Request
from todolist.core.store import StoreGroup

from .services.task_service import TaskService


def get_store_group(request: Request) -> StoreGroup:
    """从 app.state 获取 StoreGroup 实例"""
    return request.app.state.store_group


def get_task_service(request: Request) -> TaskService:
    """按请求构造 TaskService"""
    state = request.app.state
    return TaskService(
        state.store_group,
        config=getattr(state, "macro_config", None),
        today=getattr(state, "today", None),
    )
