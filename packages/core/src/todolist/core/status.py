"""任务状态派生

status 是 (is_done, deadline, today) 的纯函数。today 由调用方传入，
本模块不读取系统时钟；时间推移本身就能让 Active 变为 Overdue，
所以每次观察状态都要重新计算。
"""

from datetime import date

from .models.enums import TaskStatus


def derive_status(is_done: bool, deadline: date | None, today: date) -> TaskStatus:
    """计算任务状态

    规则（按顺序，首个命中生效）：
        已完成，且无截止日期或 today <= deadline -> Completed
        已完成，且 today > deadline              -> Late
        未完成，且无截止日期                      -> Active
        未完成，且 today > deadline              -> Overdue
        未完成，且 today <= deadline             -> Active
    """
    if is_done:
        if deadline is None or today <= deadline:
            return TaskStatus.COMPLETED
        return TaskStatus.LATE

    if deadline is not None and today > deadline:
        return TaskStatus.OVERDUE
    return TaskStatus.ACTIVE
