"""todolist Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import DONE_STATES, PRIORITY_MACRO_DIGITS, Priority, TaskStatus
from .requests import (
    TaskCreateRequest,
    TaskFilter,
    UpdateTaskDeadlineRequest,
    UpdateTaskDescriptionRequest,
    UpdateTaskIsDoneRequest,
    UpdateTaskNameRequest,
    UpdateTaskPriorityRequest,
)
from .task import Task, TaskView

__all__ = [
    # 枚举
    "Priority",
    "TaskStatus",
    "PRIORITY_MACRO_DIGITS",
    "DONE_STATES",
    # Task
    "Task",
    "TaskView",
    # 请求
    "TaskCreateRequest",
    "TaskFilter",
    "UpdateTaskNameRequest",
    "UpdateTaskDescriptionRequest",
    "UpdateTaskPriorityRequest",
    "UpdateTaskIsDoneRequest",
    "UpdateTaskDeadlineRequest",
]
