"""请求模型 -- 任务创建、字段更新、列表筛选

名称的最小长度校验在宏解析之前进行（原始文本），
宏移除后的长度由 macros.extract_directives 再次校验。
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from ..config import MIN_NAME_LENGTH
from .enums import Priority, TaskStatus


class TaskCreateRequest(BaseModel):
    """任务创建请求体

    name 中可携带 !before <date> 与 !N 宏；
    显式的 priority / deadline 字段优先于宏。
    """

    name: str = Field(min_length=MIN_NAME_LENGTH, description="任务名称（可含宏）")
    description: str | None = Field(default="", description="任务描述，null 视为空字符串")
    priority: Priority | None = Field(default=None, description="显式优先级")
    deadline: date | None = Field(default=None, description="显式截止日期")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Task name must not be blank")
        return value

    @field_validator("description")
    @classmethod
    def description_none_to_empty(cls, value: str | None) -> str:
        return value or ""


class UpdateTaskNameRequest(BaseModel):
    """名称更新请求体（新名称同样经过宏解析）"""

    new_name: str = Field(min_length=MIN_NAME_LENGTH)

    @field_validator("new_name")
    @classmethod
    def new_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Task name must not be blank")
        return value


class UpdateTaskDescriptionRequest(BaseModel):
    """描述更新请求体"""

    new_description: str


class UpdateTaskPriorityRequest(BaseModel):
    """优先级更新请求体"""

    new_priority: Priority


class UpdateTaskIsDoneRequest(BaseModel):
    """完成标记更新请求体"""

    is_done: bool


class UpdateTaskDeadlineRequest(BaseModel):
    """截止日期更新请求体，None 表示清除截止日期"""

    new_deadline: date | None = None


class TaskFilter(BaseModel):
    """任务列表筛选条件，所有条件为 AND 关系，None 表示不筛选"""

    priorities: list[Priority] | None = Field(default=None, description="优先级（任一）")
    statuses: list[TaskStatus] | None = Field(default=None, description="派生状态（任一）")
    is_done: bool | None = Field(default=None, description="完成标记")
    name: str | None = Field(default=None, description="名称子串，忽略大小写")
