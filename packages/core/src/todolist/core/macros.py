"""任务名称宏解析

任务名称中可嵌入两类指令（宏）：
- 截止日期：!before <date>，date 支持 YYYY-MM-DD、DD.MM.YYYY、DD-MM-YYYY
- 优先级：!N，N 为单个数字 1-4（1=Critical, 2=High, 3=Medium, 4=Low）

每类宏只识别第一次出现；识别成功的宏从名称中整体移除，
移除处的空白合并为单个空格，首尾空白裁掉。
只要识别到任一宏，剩余名称必须至少 MIN_NAME_LENGTH 个字符。
"""

import re
from datetime import date, datetime

import structlog
from pydantic import BaseModel, ConfigDict

from .config import MIN_NAME_LENGTH
from .exceptions import (
    NameTooShortAfterMacrosError,
    UnrecognizedPriorityDigitError,
    UnsupportedDateFormatError,
)
from .models.enums import Priority

log = structlog.get_logger()

DEADLINE_KEYWORD = "!before"

# !before + 空白 + 日期；日期后不能紧跟数字（避免截断 01.01.20251 之类的输入）
_DEADLINE_PATTERN = re.compile(
    r"!before\s+(\d{4}-\d{2}-\d{2}|\d{2}\.\d{2}\.\d{4}|\d{2}-\d{2}-\d{4})(?!\d)",
    re.ASCII,
)

# 宽松模式只匹配 1-4；严格模式匹配任意单个数字，再由映射表拒绝越界值
_PRIORITY_PATTERN = re.compile(r"!([1-4])(?!\d)", re.ASCII)
_STRICT_PRIORITY_PATTERN = re.compile(r"!(\d)(?!\d)", re.ASCII)

# 按顺序尝试，取第一个能解析且格式化后与原文一致的格式
SUPPORTED_DATE_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d",
    "%d.%m.%Y",
    "%d-%m-%Y",
)


class ExtractedDirectives(BaseModel):
    """从名称中提取出的宏取值，未出现的为 None"""

    model_config = ConfigDict(frozen=True)

    priority: Priority | None = None
    deadline: date | None = None

    @property
    def found_any(self) -> bool:
        return self.priority is not None or self.deadline is not None


def parse_deadline_token(token: str) -> date:
    """按 SUPPORTED_DATE_FORMATS 顺序解析日期片段

    解析成功后再格式化回字符串与原文比较，不一致视为该格式不适用，
    由此拒绝 31.02.2025、01.13.2025 这类日历上不存在的日期。

    Raises:
        UnsupportedDateFormatError: 所有格式均不适用
    """
    for fmt in SUPPORTED_DATE_FORMATS:
        try:
            parsed = datetime.strptime(token, fmt).date()
        except ValueError:
            continue
        if _render_date(parsed, fmt) != token:
            continue
        return parsed
    raise UnsupportedDateFormatError(token)


def _render_date(value: date, fmt: str) -> str:
    """按 fmt 输出定宽日期；年份固定补零到 4 位，不依赖平台 strftime"""
    return (
        fmt.replace("%Y", f"{value.year:04d}")
        .replace("%m", f"{value.month:02d}")
        .replace("%d", f"{value.day:02d}")
    )


def _cut(text: str, start: int, end: int) -> str:
    """移除 [start, end) 片段，接缝处空白合并为一个空格"""
    left = text[:start].rstrip()
    right = text[end:].lstrip()
    if left and right:
        return f"{left} {right}"
    return left or right


def extract_directives(
    raw_name: str,
    *,
    strict_priority: bool = False,
) -> tuple[str, ExtractedDirectives]:
    """解析并移除名称中的 !before / !N 宏

    Args:
        raw_name: 用户输入的原始任务名称
        strict_priority: True 时 !0、!5-!9 抛出 UnrecognizedPriorityDigitError；
            False 时忽略，原样留在名称中

    Returns:
        (clean_name, directives)

    Raises:
        UnsupportedDateFormatError: 出现 !before 但日期缺失或不合法
        NameTooShortAfterMacrosError: 识别到宏后剩余名称不足 MIN_NAME_LENGTH
        UnrecognizedPriorityDigitError: 严格模式下优先级数字越界
    """
    clean_name = raw_name
    deadline: date | None = None
    priority: Priority | None = None

    # 1. 截止日期
    match = _DEADLINE_PATTERN.search(clean_name)
    if match:
        try:
            deadline = parse_deadline_token(match.group(1))
        except UnsupportedDateFormatError:
            log.debug("deadline_macro_rejected", token=match.group(1))
            raise
        clean_name = _cut(clean_name, match.start(), match.end())
    elif DEADLINE_KEYWORD in clean_name:
        log.debug("deadline_macro_without_date", raw_name=raw_name)
        raise UnsupportedDateFormatError()

    # 2. 优先级
    pattern = _STRICT_PRIORITY_PATTERN if strict_priority else _PRIORITY_PATTERN
    match = pattern.search(clean_name)
    if match:
        digit = match.group(1)
        priority = Priority.from_macro_digit(digit)
        if priority is None:
            log.debug("priority_macro_rejected", digit=digit)
            raise UnrecognizedPriorityDigitError(digit)
        clean_name = _cut(clean_name, match.start(), match.end())

    # 3. 首尾裁剪 + 长度校验
    clean_name = clean_name.strip()
    directives = ExtractedDirectives(priority=priority, deadline=deadline)
    if directives.found_any and len(clean_name) < MIN_NAME_LENGTH:
        log.debug("name_too_short_after_macros", clean_name=clean_name)
        raise NameTooShortAfterMacrosError(clean_name, MIN_NAME_LENGTH)

    if directives.found_any:
        log.debug(
            "macro_directives_extracted",
            clean_name=clean_name,
            priority=priority,
            deadline=deadline.isoformat() if deadline else None,
        )
    return clean_name, directives
