"""Task Domain Model

tasks 表只保存事实字段（名称、完成标记、优先级、截止日期），
status 是派生值，由 projection 在读取时计算，不作为独立数据源存储。
"""

from datetime import date

from pydantic import BaseModel, Field

from .enums import Priority, TaskStatus


class Task(BaseModel):
    """Task 数据模型（持久化形态，不含 status）"""

    task_id: str = Field(description="唯一标识，ULID 格式")
    name: str = Field(min_length=1, description="移除宏之后的任务名称")
    description: str = Field(default="", description="任务描述")
    is_done: bool = Field(default=False, description="完成标记")
    priority: Priority = Field(default=Priority.MEDIUM, description="优先级")
    created_at: date = Field(description="创建日期")
    updated_at: date | None = Field(default=None, description="最近修改日期")
    deadline: date | None = Field(default=None, description="截止日期（含当天）")


class TaskView(Task):
    """Task 读视图 -- 附带按当前日期派生的 status"""

    status: TaskStatus = Field(description="派生状态，每次读取重新计算")
