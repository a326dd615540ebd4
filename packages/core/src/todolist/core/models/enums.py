"""枚举定义

包含 Priority 优先级（附宏数字映射）与 TaskStatus 派生状态。
TaskStatus 不落库，每次读取时由 status.derive_status 计算。
"""

from enum import StrEnum


class Priority(StrEnum):
    """任务优先级 -- 按紧急程度排序 Critical < High < Medium < Low"""

    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """紧急程度序号，0 最紧急（仅用于排序）"""
        return _PRIORITY_ORDER.index(self)

    @classmethod
    def from_macro_digit(cls, digit: str) -> "Priority | None":
        """将 !N 宏中的数字映射为优先级，不在 1-4 内返回 None"""
        return PRIORITY_MACRO_DIGITS.get(digit)


_PRIORITY_ORDER: list[Priority] = [
    Priority.CRITICAL,
    Priority.HIGH,
    Priority.MEDIUM,
    Priority.LOW,
]

# 宏数字 -> 优先级（双射）
PRIORITY_MACRO_DIGITS: dict[str, Priority] = {
    str(index): priority for index, priority in enumerate(_PRIORITY_ORDER, start=1)
}


class TaskStatus(StrEnum):
    """任务派生状态"""

    ACTIVE = "Active"
    COMPLETED = "Completed"
    OVERDUE = "Overdue"
    LATE = "Late"


# 已完成的状态（无论是否逾期）
DONE_STATES: set[TaskStatus] = {
    TaskStatus.COMPLETED,
    TaskStatus.LATE,
}
