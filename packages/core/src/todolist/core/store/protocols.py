"""Store Protocol 接口定义

使用 Python Protocol 实现结构化子类型（duck typing），
service 层只依赖该接口，测试可替换为内存实现。
"""

from typing import Protocol

from ..models.task import Task


class TaskStore(Protocol):
    """Task 存储接口"""

    async def create_task(self, task: Task) -> None:
        """创建任务记录"""
        ...

    async def get_task(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务"""
        ...

    async def list_tasks(self) -> list[Task]:
        """查询全部任务（created_at 倒序）"""
        ...

    async def update_task(self, task: Task) -> bool:
        """整行覆盖更新，返回是否命中记录"""
        ...

    async def delete_task(self, task_id: str) -> bool:
        """删除任务，返回是否命中记录"""
        ...
