"""任务路由

POST   /api/tasks                         创建任务（名称可含宏）
GET    /api/tasks                         任务列表，支持 priority/status/is_done/name 筛选
GET    /api/tasks/{task_id}               任务详情
DELETE /api/tasks/{task_id}               删除任务
PUT    /api/tasks/{task_id}/name          更新名称（宏同样生效）
PUT    /api/tasks/{task_id}/description   更新描述
PUT    /api/tasks/{task_id}/priority      更新优先级
PUT    /api/tasks/{task_id}/is_done       更新完成标记
PUT    /api/tasks/{task_id}/deadline      更新截止日期

错误响应统一为 {"error": {"code": ..., "message": ...}}：
宏错误 400，任务不存在 404。
"""

from fastapi import APIRouter, Depends, Query
from starlette.responses import JSONResponse, Response
from todolist.core.exceptions import MacroError, TaskNotFoundError, TodoListError
from todolist.core.models import (
    Priority,
    TaskCreateRequest,
    TaskFilter,
    TaskStatus,
    TaskView,
    UpdateTaskDeadlineRequest,
    UpdateTaskDescriptionRequest,
    UpdateTaskIsDoneRequest,
    UpdateTaskNameRequest,
    UpdateTaskPriorityRequest,
)

from ..deps import get_task_service
from ..services.task_service import TaskService

router = APIRouter()


def _error_response(status_code: int, error: TodoListError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": error.code,
                "message": error.message,
            }
        },
    )


def _not_found(task_id: str) -> JSONResponse:
    return _error_response(404, TaskNotFoundError(task_id))


@router.post("/api/tasks", response_model=TaskView, status_code=201)
async def create_task(
    body: TaskCreateRequest,
    service: TaskService = Depends(get_task_service),
):
    """创建任务 -- 宏不合法返回 400"""
    try:
        return await service.create_task(body)
    except MacroError as e:
        return _error_response(400, e)


@router.get("/api/tasks", response_model=list[TaskView])
async def list_tasks(
    priority: list[Priority] | None = Query(default=None, description="按优先级筛选（可重复）"),
    status: list[TaskStatus] | None = Query(default=None, description="按派生状态筛选（可重复）"),
    is_done: bool | None = Query(default=None, description="按完成标记筛选"),
    name: str | None = Query(default=None, description="名称子串，忽略大小写"),
    service: TaskService = Depends(get_task_service),
):
    """查询任务列表，按 created_at 倒序"""
    task_filter = TaskFilter(
        priorities=priority,
        statuses=status,
        is_done=is_done,
        name=name,
    )
    return await service.list_tasks(task_filter)


@router.get("/api/tasks/{task_id}", response_model=TaskView)
async def get_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """查询任务详情"""
    task = await service.get_task(task_id)
    if task is None:
        return _not_found(task_id)
    return task


@router.delete("/api/tasks/{task_id}", status_code=204)
async def delete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """删除任务 -- 不存在返回 404"""
    if not await service.delete_task(task_id):
        return _not_found(task_id)
    return Response(status_code=204)


@router.put("/api/tasks/{task_id}/name", response_model=TaskView)
async def update_task_name(
    task_id: str,
    body: UpdateTaskNameRequest,
    service: TaskService = Depends(get_task_service),
):
    """更新名称"""
    try:
        return await service.update_name(task_id, body.new_name)
    except MacroError as e:
        return _error_response(400, e)
    except TaskNotFoundError as e:
        return _error_response(404, e)


@router.put("/api/tasks/{task_id}/description", response_model=TaskView)
async def update_task_description(
    task_id: str,
    body: UpdateTaskDescriptionRequest,
    service: TaskService = Depends(get_task_service),
):
    """更新描述"""
    try:
        return await service.update_description(task_id, body.new_description)
    except TaskNotFoundError as e:
        return _error_response(404, e)


@router.put("/api/tasks/{task_id}/priority", response_model=TaskView)
async def update_task_priority(
    task_id: str,
    body: UpdateTaskPriorityRequest,
    service: TaskService = Depends(get_task_service),
):
    """更新优先级"""
    try:
        return await service.update_priority(task_id, body.new_priority)
    except TaskNotFoundError as e:
        return _error_response(404, e)


@router.put("/api/tasks/{task_id}/is_done", response_model=TaskView)
async def update_task_is_done(
    task_id: str,
    body: UpdateTaskIsDoneRequest,
    service: TaskService = Depends(get_task_service),
):
    """更新完成标记"""
    try:
        return await service.update_is_done(task_id, body.is_done)
    except TaskNotFoundError as e:
        return _error_response(404, e)


@router.put("/api/tasks/{task_id}/deadline", response_model=TaskView)
async def update_task_deadline(
    task_id: str,
    body: UpdateTaskDeadlineRequest,
    service: TaskService = Depends(get_task_service),
):
    """更新截止日期"""
    try:
        return await service.update_deadline(task_id, body.new_deadline)
    except TaskNotFoundError as e:
        return _error_response(404, e)
