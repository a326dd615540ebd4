"""Task 读视图投影

tasks 表不保存 status；每次读取时按传入的 today 派生，
保证只经过时间推移（无任何写入）的任务也能得到正确状态。
列表筛选在投影之后进行，status 条件作用于新派生的状态。
"""

from collections.abc import Iterable
from datetime import date

from .models.requests import TaskFilter
from .models.task import Task, TaskView
from .status import derive_status


def project_task(task: Task, today: date) -> TaskView:
    """将持久化的 Task 投影为带 status 的 TaskView"""
    return TaskView(
        **task.model_dump(),
        status=derive_status(task.is_done, task.deadline, today),
    )


def project_tasks(tasks: Iterable[Task], today: date) -> list[TaskView]:
    """批量投影，保持输入顺序"""
    return [project_task(task, today) for task in tasks]


def matches_filter(view: TaskView, task_filter: TaskFilter) -> bool:
    """判断单个视图是否满足筛选条件（各条件 AND）"""
    if task_filter.priorities is not None and view.priority not in task_filter.priorities:
        return False
    if task_filter.statuses is not None and view.status not in task_filter.statuses:
        return False
    if task_filter.is_done is not None and view.is_done != task_filter.is_done:
        return False
    name = task_filter.name
    if name and name.strip() and name.casefold() not in view.name.casefold():
        return False
    return True


def filter_views(views: Iterable[TaskView], task_filter: TaskFilter) -> list[TaskView]:
    """按筛选条件过滤视图列表"""
    return [view for view in views if matches_filter(view, task_filter)]
