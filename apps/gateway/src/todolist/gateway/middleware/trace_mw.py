"""TraceMiddleware

为单个任务的操作绑定 trace_id，贯穿该任务的读写日志。
trace_id 从 /api/tasks/{task_id}[/...] 路径中提取。
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# ULID 字符串长度
_TASK_ID_LENGTH = 26


def extract_trace_id(path: str) -> str | None:
    """从请求路径提取 trace_id，非单任务路径返回 None"""
    parts = [part for part in path.split("/") if part]
    for i, part in enumerate(parts):
        if part == "tasks" and i + 1 < len(parts):
            task_id = parts[i + 1]
            if len(task_id) == _TASK_ID_LENGTH:
                return f"trace-{task_id}"
    return None


class TraceMiddleware(BaseHTTPMiddleware):
    """任务级追踪中间件 -- 为任务操作绑定 trace_id"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        trace_id = extract_trace_id(request.url.path)
        if trace_id:
            structlog.contextvars.bind_contextvars(trace_id=trace_id)

        return await call_next(request)
