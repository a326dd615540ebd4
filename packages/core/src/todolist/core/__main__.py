"""CLI 入口模块 -- python -m todolist.core <command>

支持的命令：
  extract <name>                     解析任务名称中的宏，输出 JSON
  status <is_done> [deadline] [today]  计算任务状态
"""

import json
import sys
from datetime import date

from .config import load_macro_config
from .exceptions import MacroError
from .macros import extract_directives, parse_deadline_token
from .status import derive_status

_USAGE = """用法: python -m todolist.core <command>
命令:
  extract <name>                       解析任务名称中的宏
  status <is_done> [deadline] [today]  计算任务状态（日期支持宏中的三种格式）"""


def main(argv: list[str] | None = None) -> int:
    """CLI 主入口，返回进程退出码"""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(_USAGE)
        return 1

    command, rest = args[0], args[1:]
    try:
        if command == "extract" and len(rest) == 1:
            return _extract(rest[0])
        if command == "status" and 1 <= len(rest) <= 3:
            return _status(*rest)
    except MacroError as e:
        print(json.dumps({"error": {"code": e.code, "message": e.message}}))
        return 1

    print(f"未知命令: {' '.join(args)}")
    print(_USAGE)
    return 1


def _extract(raw_name: str) -> int:
    """解析名称并输出 clean_name + 宏取值"""
    config = load_macro_config()
    clean_name, directives = extract_directives(
        raw_name, strict_priority=config.strict_priority
    )
    print(
        json.dumps(
            {
                "name": clean_name,
                "priority": directives.priority,
                "deadline": directives.deadline.isoformat() if directives.deadline else None,
            },
            ensure_ascii=False,
        )
    )
    return 0


def _status(is_done: str, deadline: str | None = None, today: str | None = None) -> int:
    """计算并输出状态"""
    done = is_done.strip().lower() in {"1", "true", "yes", "done"}
    deadline_date = parse_deadline_token(deadline) if deadline else None
    today_date = parse_deadline_token(today) if today else date.today()
    print(derive_status(done, deadline_date, today_date).value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
