"""字段/宏合并策略

请求中显式给出的字段总是优先于名称里的宏；
两者都没有时，优先级回退到 DEFAULT_PRIORITY，截止日期为空。
"""

from datetime import date

from pydantic import BaseModel, ConfigDict

from .macros import ExtractedDirectives
from .models.enums import Priority

DEFAULT_PRIORITY: Priority = Priority.MEDIUM


class ResolvedFields(BaseModel):
    """合并后的最终取值"""

    model_config = ConfigDict(frozen=True)

    priority: Priority
    deadline: date | None = None


def resolve_fields(
    extracted: ExtractedDirectives,
    *,
    priority: Priority | None = None,
    deadline: date | None = None,
) -> ResolvedFields:
    """合并显式字段与宏提取值，不会失败"""
    if priority is None:
        priority = extracted.priority if extracted.priority is not None else DEFAULT_PRIORITY
    if deadline is None:
        deadline = extracted.deadline
    return ResolvedFields(priority=priority, deadline=deadline)
