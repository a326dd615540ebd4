"""Core 异常体系

宏解析错误（任务名称中的 !before / !N 指令）与任务查找错误。
每个异常带稳定的 code，供 gateway 映射为错误响应。
"""


class TodoListError(Exception):
    """todolist 基础异常"""

    code: str = "TODOLIST_ERROR"

    def __init__(self, message: str, recoverable: bool = False) -> None:
        """
        Args:
            message: 错误描述
            recoverable: 调用方修正输入后是否可重试
        """
        super().__init__(message)
        self.message = message
        self.recoverable = recoverable


class MacroError(TodoListError, ValueError):
    """任务名称宏解析失败，整个名称被拒绝"""

    code = "MACRO_ERROR"


class UnsupportedDateFormatError(MacroError):
    """!before 关键字存在，但日期参数缺失、格式不支持或不是合法日历日期"""

    code = "UNSUPPORTED_DATE_FORMAT"

    def __init__(self, token: str | None = None) -> None:
        """
        Args:
            token: 无法解析的日期片段；关键字后没有日期时为 None
        """
        if token is None:
            message = "Unsupported date format: !before is present but no date follows it"
        else:
            message = f"Unsupported date format: {token}"
        super().__init__(message)
        self.token = token


class NameTooShortAfterMacrosError(MacroError):
    """移除宏之后剩余名称过短"""

    code = "NAME_TOO_SHORT_AFTER_MACROS"

    def __init__(self, clean_name: str, min_length: int) -> None:
        super().__init__(
            f"Task name must contain at least {min_length} characters "
            f"besides macros, got {clean_name!r}"
        )
        self.clean_name = clean_name
        self.min_length = min_length


class UnrecognizedPriorityDigitError(MacroError):
    """严格模式下 !N 的数字不在 1-4 范围内"""

    code = "UNRECOGNIZED_PRIORITY_DIGIT"

    def __init__(self, digit: str) -> None:
        super().__init__(
            f"Invalid priority !{digit}. Use !1 (Critical) to !4 (Low)"
        )
        self.digit = digit


class TaskNotFoundError(TodoListError):
    """任务不存在"""

    code = "TASK_NOT_FOUND"

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task with id {task_id} does not exist")
        self.task_id = task_id
