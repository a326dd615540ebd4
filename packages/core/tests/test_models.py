"""Domain Models 单元测试

测试内容：
1. 枚举序列化/反序列化与优先级排序
2. 宏数字映射
3. Pydantic 请求模型校验
"""

from datetime import date

import pytest
from pydantic import ValidationError
from todolist.core.models import (
    PRIORITY_MACRO_DIGITS,
    Priority,
    Task,
    TaskCreateRequest,
    TaskFilter,
    TaskStatus,
    TaskView,
    UpdateTaskDeadlineRequest,
    UpdateTaskNameRequest,
)


class TestEnums:
    """枚举序列化/反序列化测试"""

    def test_priority_values(self):
        """Priority 枚举值正确"""
        assert Priority.CRITICAL == "Critical"
        assert Priority.HIGH == "High"
        assert Priority.MEDIUM == "Medium"
        assert Priority.LOW == "Low"

    def test_priority_from_string(self):
        """字符串可转换为 Priority"""
        assert Priority("High") == Priority.HIGH

    def test_priority_rank_order(self):
        """Critical 最紧急，Low 最不紧急"""
        ranked = sorted(Priority, key=lambda p: p.rank)
        assert ranked == [Priority.CRITICAL, Priority.HIGH, Priority.MEDIUM, Priority.LOW]

    def test_task_status_from_string(self):
        """字符串可转换为 TaskStatus"""
        assert TaskStatus("Overdue") == TaskStatus.OVERDUE


class TestMacroDigits:
    """宏数字映射"""

    def test_bijective_mapping(self):
        """1-4 与四个优先级一一对应"""
        assert PRIORITY_MACRO_DIGITS == {
            "1": Priority.CRITICAL,
            "2": Priority.HIGH,
            "3": Priority.MEDIUM,
            "4": Priority.LOW,
        }
        assert set(PRIORITY_MACRO_DIGITS.values()) == set(Priority)

    @pytest.mark.parametrize("digit", ["0", "5", "9", "12", ""])
    def test_unknown_digit(self, digit: str):
        assert Priority.from_macro_digit(digit) is None


class TestTaskModel:
    """Task / TaskView 模型"""

    def test_defaults(self):
        """未指定字段取默认值"""
        task = Task(task_id="01TESTTASK0000000000000001", name="Task", created_at=date(2025, 1, 1))
        assert task.is_done is False
        assert task.priority == Priority.MEDIUM
        assert task.description == ""
        assert task.deadline is None
        assert task.updated_at is None

    def test_json_roundtrip_of_dates(self):
        """日期以 ISO 字符串序列化"""
        view = TaskView(
            task_id="01TESTTASK0000000000000001",
            name="Task",
            created_at=date(2025, 1, 1),
            deadline=date(2025, 2, 1),
            status=TaskStatus.ACTIVE,
        )
        data = view.model_dump(mode="json")
        assert data["deadline"] == "2025-02-01"
        assert data["status"] == "Active"
        assert data["priority"] == "Medium"


class TestRequests:
    """请求模型校验"""

    def test_create_request_parses_date_string(self):
        """deadline 接受 ISO 日期字符串"""
        req = TaskCreateRequest.model_validate(
            {"name": "Valid Task Name", "priority": "High", "deadline": "2025-05-01"}
        )
        assert req.priority == Priority.HIGH
        assert req.deadline == date(2025, 5, 1)
        assert req.description == ""

    @pytest.mark.parametrize("name", ["", "a", "ab", "abc", "    "])
    def test_create_request_rejects_short_or_blank_name(self, name: str):
        """原始名称不足 4 个字符或全为空白时拒绝"""
        with pytest.raises(ValidationError):
            TaskCreateRequest(name=name)

    def test_create_request_null_description(self):
        """description 为 null 时视为空字符串"""
        req = TaskCreateRequest.model_validate({"name": "Valid Task Name", "description": None})
        assert req.description == ""

    def test_create_request_rejects_unknown_priority(self):
        with pytest.raises(ValidationError):
            TaskCreateRequest.model_validate({"name": "Task", "priority": "Urgent"})

    def test_update_name_rejects_empty(self):
        """更新名称不能为空"""
        with pytest.raises(ValidationError):
            UpdateTaskNameRequest(new_name="")

    def test_update_deadline_allows_clearing(self):
        """new_deadline 可为 None"""
        assert UpdateTaskDeadlineRequest().new_deadline is None

    def test_filter_defaults(self):
        """默认不筛选"""
        task_filter = TaskFilter()
        assert task_filter.priorities is None
        assert task_filter.statuses is None
        assert task_filter.is_done is None
        assert task_filter.name is None
