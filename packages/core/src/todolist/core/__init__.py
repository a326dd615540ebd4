"""todolist Core -- 任务名称宏解析、字段合并与状态派生

packages/core 的公开接口导出。
"""

from .exceptions import (
    MacroError,
    NameTooShortAfterMacrosError,
    TaskNotFoundError,
    TodoListError,
    UnrecognizedPriorityDigitError,
    UnsupportedDateFormatError,
)
from .macros import ExtractedDirectives, extract_directives
from .models.enums import Priority, TaskStatus
from .resolution import DEFAULT_PRIORITY, ResolvedFields, resolve_fields
from .status import derive_status

__all__ = [
    # 宏解析
    "ExtractedDirectives",
    "extract_directives",
    # 合并策略
    "ResolvedFields",
    "resolve_fields",
    "DEFAULT_PRIORITY",
    # 状态
    "derive_status",
    # 枚举
    "Priority",
    "TaskStatus",
    # 异常
    "TodoListError",
    "MacroError",
    "UnsupportedDateFormatError",
    "NameTooShortAfterMacrosError",
    "UnrecognizedPriorityDigitError",
    "TaskNotFoundError",
]
